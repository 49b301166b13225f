"""Builders that normalise raw extractor geometry into primitives.

A PDF extractor sees segments as endpoint pairs and rectangles as a corner
plus signed extents, and usually gets them from path-construction operator
streams.  These helpers produce the min-corner, non-negative boxes the
classifier expects.  Document decoding itself stays with the extractor.
"""

import logging
from collections.abc import Iterable, Sequence

from ruled_tables.constants import DOT_SIZE
from ruled_tables.schema import LinePrimitive, Primitive, RectPrimitive

logger = logging.getLogger(__name__)

# Path operators and the number of coordinates each consumes
PATH_OPERATORS = {
    "move_to": 2,
    "line_to": 2,
    "curve_to": 6,  # two control points + end point
    "curve_to_short": 4,  # one control point + end point (PDF v / y)
    "rect": 4,
    "close": 0,
}


def line_from_endpoints(
    id: str,  # pylint: disable=redefined-builtin
    page: int,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
) -> LinePrimitive | None:
    """Return the bounding box of segment (x1, y1)-(x2, y2), or None if it has no length."""
    width = abs(x2 - x1)
    height = abs(y2 - y1)
    if width < DOT_SIZE and height < DOT_SIZE:
        return None
    return LinePrimitive(id=id, page=page, x=min(x1, x2), y=min(y1, y2), width=width, height=height)


def rect_from_corner(
    id: str,  # pylint: disable=redefined-builtin
    page: int,
    x: float,
    y: float,
    width: float,
    height: float,
) -> RectPrimitive:
    """Return a rect primitive with non-negative extents anchored at (x, y)."""
    return RectPrimitive(id=id, page=page, x=x, y=y, width=abs(width), height=abs(height))


def primitives_from_path(
    page: int,
    ops: Iterable[tuple[str, Sequence[float]]],
    prefix: str = "path",
) -> list[Primitive]:
    """Turn a decoded path (``(operator, coords)`` pairs) into line and rect primitives.

    ``line_to`` emits a segment from the current point, ``rect`` emits a
    rectangle.  Only ``move_to`` and ``line_to`` move the current point;
    curves and ``close`` consume their values and leave it where it was.
    Ids are ``{prefix}-{k}`` with *k* the operator's position in the path.
    Unknown operators are skipped with a warning.
    """
    out: list[Primitive] = []
    cx, cy = 0.0, 0.0

    for k, (op, coords) in enumerate(ops):
        expected = PATH_OPERATORS.get(op)
        if expected is None:
            logger.warning("Skipping unknown path operator %r at %s-%d", op, prefix, k)
            continue
        if len(coords) < expected:
            logger.warning("Path operator %r at %s-%d has %d coords, expected %d", op, prefix, k, len(coords), expected)
            continue

        if op == "move_to":
            cx, cy = coords[0], coords[1]
        elif op == "line_to":
            line = line_from_endpoints(f"{prefix}-{k}", page, cx, cy, coords[0], coords[1])
            if line is not None:
                out.append(line)
            cx, cy = coords[0], coords[1]
        elif op == "rect":
            out.append(rect_from_corner(f"{prefix}-{k}", page, *coords[:4]))

    return out
