"""Render detected tables for listing: markdown, one-line summaries, JSON dumps."""

from collections.abc import Iterable

from pydantic import TypeAdapter

from ruled_tables.schema import DetectedTable

_TABLE_LIST = TypeAdapter(list[DetectedTable])


def _cell_markdown(text: str) -> str:
    """Escape a cell's text for a markdown table row."""
    return text.replace("|", "\\|").replace("\n", " ")


def render_markdown(table: DetectedTable) -> str:
    """Render a table as markdown, using the first grid row as the header row."""
    lines: list[str] = [f"**{table.id}** (page {table.page}, {table.rows} × {table.cols})", ""]

    rows = [[_cell_markdown(cell.text) for cell in row] for row in table.cells]
    lines.append("| " + " | ".join(rows[0]) + " |")
    lines.append("| " + " | ".join(["---"] * table.cols) + " |")
    for row in rows[1:]:
        lines.append("| " + " | ".join(row) + " |")

    return "\n".join(lines)


def table_summary(table: DetectedTable) -> str:
    """One-line description: id, grid size, and bounding box."""
    return (
        f"{table.id}: {table.rows} rows × {table.cols} cols "
        f"@ ({table.x:g}, {table.y:g}, {table.width:g}, {table.height:g})"
    )


def dump_tables(tables: Iterable[DetectedTable], indent: int | None = 2) -> str:
    """Raw structural dump of tables as a JSON array."""
    return _TABLE_LIST.dump_json(list(tables), indent=indent).decode("utf-8")
