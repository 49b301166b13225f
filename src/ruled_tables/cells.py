"""Map text runs into grid cells by centroid."""

from collections.abc import Iterable

from ruled_tables.config import DEFAULT_CONFIG, DetectionConfig
from ruled_tables.constants import CELL_TOLERANCE
from ruled_tables.schema import TableCell, TextPrimitive


def text_centroid(text: TextPrimitive) -> tuple[float, float]:
    """Return the centre of a text run's bounding box."""
    return text.x + text.width / 2, text.y + text.height / 2


def cell_contains(cell: TableCell, px: float, py: float, tolerance: float = CELL_TOLERANCE) -> bool:
    """Return True if (px, py) lies inside *cell*, inclusive, with *tolerance* slack.

    The y extent is normalised with min/max so cells built from bottom-up
    (PDF user space) and top-down coordinates both work.
    """
    in_x = cell.x - tolerance <= px <= cell.x + cell.width + tolerance
    y_min = min(cell.y, cell.y + cell.height)
    y_max = max(cell.y, cell.y + cell.height)
    in_y = y_min - tolerance <= py <= y_max + tolerance
    return in_x and in_y


def assign_text(
    cells: list[list[TableCell]],
    texts: Iterable[TextPrimitive],
    config: DetectionConfig = DEFAULT_CONFIG,
) -> int:
    """Append each non-empty text run to every cell containing its centroid.

    Runs are visited in input order, so each cell's text reads in encounter
    order.  A run on a shared border lands in every matching cell.  Returns
    the number of (run, cell) matches.
    """
    matches = 0
    for text in texts:
        if not text.content:
            continue
        tx, ty = text_centroid(text)
        for row in cells:
            for cell in row:
                if not cell_contains(cell, tx, ty, config.cell_tolerance):
                    continue
                cell.text_ids.append(text.id)
                cell.text = f"{cell.text} {text.content}" if cell.text else text.content
                matches += 1
    return matches
