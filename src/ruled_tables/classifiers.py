"""Tolerance bucketing and ruling classification.

snap() and dedup_sorted() are the single place where coordinates are
bucketed; the classifier uses the first, the grid reconstructor the second,
both with DetectionConfig.snap_tolerance.
"""

import math
from collections.abc import Iterable

from ruled_tables.config import DEFAULT_CONFIG, DetectionConfig
from ruled_tables.constants import SNAP_TOLERANCE
from ruled_tables.schema import ClassifiedLine, LinePrimitive, Orientation, RectPrimitive

# ─── Tolerance Bucketing ──────────────────────────────────────────────────────


def snap(value: float, tolerance: float = SNAP_TOLERANCE) -> float:
    """Round *value* to the nearest multiple of *tolerance* (halves round up)."""
    return math.floor(value / tolerance + 0.5) * tolerance


def dedup_sorted(values: Iterable[float], tolerance: float = SNAP_TOLERANCE) -> list[float]:
    """Collapse sorted values lying within *tolerance* of the last kept value.

    The first value of each run is kept, so the result is strictly increasing.
    """
    out: list[float] = []
    for value in values:
        if not out or value - out[-1] > tolerance:
            out.append(value)
    return out


# ─── Line Classification ──────────────────────────────────────────────────────


def classify_line(prim: object, config: DetectionConfig = DEFAULT_CONFIG) -> ClassifiedLine | None:
    """Classify a line/rect primitive as a horizontal or vertical ruling.

    Returns None for text runs, dots, and shapes that are neither thin nor
    elongated enough on either axis (diagonals, boxes).
    """
    if not isinstance(prim, (LinePrimitive, RectPrimitive)):
        return None

    w = abs(prim.width)
    h = abs(prim.height)

    # Dot / noise
    if w < config.dot_size and h < config.dot_size:
        return None

    if h < config.thin_size or (w > config.min_long_side and w / h > config.min_aspect_ratio):
        return ClassifiedLine(
            source_id=prim.id,
            orientation=Orientation.HORIZONTAL,
            position=snap(prim.y + h / 2, config.snap_tolerance),
            start=prim.x,
            end=prim.x + w,
        )

    if w < config.thin_size or (h > config.min_long_side and h / w > config.min_aspect_ratio):
        return ClassifiedLine(
            source_id=prim.id,
            orientation=Orientation.VERTICAL,
            position=snap(prim.x + w / 2, config.snap_tolerance),
            start=prim.y,
            end=prim.y + h,
        )

    return None


def classify_lines(primitives: Iterable[object], config: DetectionConfig = DEFAULT_CONFIG) -> list[ClassifiedLine]:
    """Classify every primitive on a page, keeping input order and dropping non-rulings."""
    out: list[ClassifiedLine] = []
    for prim in primitives:
        line = classify_line(prim, config)
        if line is not None:
            out.append(line)
    return out


def split_by_orientation(lines: Iterable[ClassifiedLine]) -> tuple[list[ClassifiedLine], list[ClassifiedLine]]:
    """Return (horizontals, verticals), each in input order."""
    horizontals: list[ClassifiedLine] = []
    verticals: list[ClassifiedLine] = []
    for line in lines:
        if line.orientation is Orientation.HORIZONTAL:
            horizontals.append(line)
        else:
            verticals.append(line)
    return horizontals, verticals
