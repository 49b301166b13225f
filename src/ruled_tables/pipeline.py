"""Table detection entry point and primitive loading.

Runs per page: classify rulings -> intersection components -> grid ->
text assignment -> DetectedTable.  Pages are independent and processed in
ascending page order, so table ids are reproducible for a given input.

Detection never raises on degenerate input; pages and components that miss
the minimum grid requirements simply contribute no tables.
"""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import TypeAdapter

from ruled_tables.cells import assign_text
from ruled_tables.classifiers import classify_lines, split_by_orientation
from ruled_tables.config import DEFAULT_CONFIG, DetectionConfig
from ruled_tables.constants import TABLE_ID_TEMPLATE
from ruled_tables.grid import reconstruct_grid
from ruled_tables.grouping import group_lines
from ruled_tables.schema import DetectedTable, Primitive, TextPrimitive

logger = logging.getLogger(__name__)

_PRIMITIVE_LIST = TypeAdapter(list[Primitive])


class PrimitiveLoadError(ValueError):
    """Raised when a primitives file cannot be read or is not valid JSON."""


# ─── Input ────────────────────────────────────────────────────────────────────


def parse_primitives(data: object) -> list[Primitive]:
    """Validate decoded JSON (a list of primitive dicts) into primitive models.

    Raises pydantic.ValidationError on malformed entries (unknown type,
    page < 1, NaN coordinates, ...).
    """
    return _PRIMITIVE_LIST.validate_python(data)


def load_primitives(path: str | Path) -> list[Primitive]:
    """Read and validate a JSON array of primitives from *path*."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as fopen:
            data = json.load(fopen)
    except (OSError, json.JSONDecodeError) as exc:
        raise PrimitiveLoadError(f"Cannot load primitives from {path}: {exc}") from exc
    primitives = parse_primitives(data)
    logger.info("Loaded %d primitives from %s", len(primitives), path)
    return primitives


def group_by_page(primitives: Iterable[Primitive]) -> dict[int, list[Primitive]]:
    """Group primitives by page, keeping input order within a page; pages ascending."""
    by_page: dict[int, list[Primitive]] = {}
    for prim in primitives:
        by_page.setdefault(prim.page, []).append(prim)
    return {page: by_page[page] for page in sorted(by_page)}


# ─── Detection ────────────────────────────────────────────────────────────────


def detect_page_tables(
    page: int,
    primitives: list[Primitive],
    config: DetectionConfig = DEFAULT_CONFIG,
) -> list[DetectedTable]:
    """Detect the ruled tables on a single page.

    *primitives* must all belong to *page*.  Tables are numbered from 0 in
    component discovery order.
    """
    horizontals, verticals = split_by_orientation(classify_lines(primitives, config))

    # Fast path: not enough rulings on the page for any grid
    if len(horizontals) < config.min_grid_lines or len(verticals) < config.min_grid_lines:
        logger.debug("Page %d: %d H / %d V rulings, skipping", page, len(horizontals), len(verticals))
        return []

    texts = [p for p in primitives if isinstance(p, TextPrimitive) and p.content]

    tables: list[DetectedTable] = []
    for component in group_lines(horizontals, verticals, config):
        grid = reconstruct_grid(component, config)
        if grid is None:
            logger.debug("Page %d: component collapsed to fewer than %d grid lines", page, config.min_grid_lines)
            continue

        matches = assign_text(grid.cells, texts, config)
        table_id = TABLE_ID_TEMPLATE.format(page=page, index=len(tables))
        logger.debug("Page %d: %s is %d x %d with %d text matches", page, table_id, grid.rows, grid.cols, matches)

        tables.append(
            DetectedTable(
                id=table_id,
                page=page,
                x=grid.xs[0],
                y=grid.ys[0],
                width=grid.xs[-1] - grid.xs[0],
                height=grid.ys[-1] - grid.ys[0],
                rows=grid.rows,
                cols=grid.cols,
                cells=grid.cells,
                line_ids=[line.source_id for line in component.horizontals + component.verticals],
            )
        )
    return tables


def detect_tables(primitives: Iterable[Primitive], config: DetectionConfig | None = None) -> list[DetectedTable]:
    """Detect ruled tables across all pages.

    Returns tables ordered by ascending page, then detection order within the
    page.  The input primitives are only read, never modified.
    """
    config = config or DEFAULT_CONFIG
    pages = group_by_page(primitives)

    tables: list[DetectedTable] = []
    for page, page_primitives in pages.items():
        tables.extend(detect_page_tables(page, page_primitives, config))

    logger.info("Detected %d tables across %d pages", len(tables), len(pages))
    return tables
