"""Intersection graph between horizontal and vertical rulings.

Rulings that touch (within INTERSECT_TOLERANCE) are unioned; every connected
component with enough rulings on both axes is a candidate table.  The pair
test is O(H*V), which is fine because the search is bounded by one page.
"""

import logging
from typing import NamedTuple

from ruled_tables.config import DEFAULT_CONFIG, DetectionConfig
from ruled_tables.constants import INTERSECT_TOLERANCE
from ruled_tables.schema import ClassifiedLine
from ruled_tables.union_find import UnionFind

logger = logging.getLogger(__name__)


class Component(NamedTuple):
    """A connected group of rulings (a candidate table)."""

    horizontals: list[ClassifiedLine]
    verticals: list[ClassifiedLine]


def intersects(h: ClassifiedLine, v: ClassifiedLine, tolerance: float = INTERSECT_TOLERANCE) -> bool:
    """Return True if horizontal *h* and vertical *v* cross or nearly touch."""
    x_ok = h.start - tolerance <= v.position <= h.end + tolerance
    y_ok = min(v.start, v.end) - tolerance <= h.position <= max(v.start, v.end) + tolerance
    return x_ok and y_ok


def group_lines(
    horizontals: list[ClassifiedLine],
    verticals: list[ClassifiedLine],
    config: DetectionConfig = DEFAULT_CONFIG,
) -> list[Component]:
    """Union intersecting rulings and return the components that can form a grid.

    Flat index space: horizontals are ``0..H-1``, verticals ``H..H+V-1``.
    Components come back in union-find discovery order (ascending lowest
    member index), which keeps table numbering reproducible.
    """
    offset = len(horizontals)
    uf = UnionFind(offset + len(verticals))

    n_pairs = 0
    for hi, h in enumerate(horizontals):
        for vi, v in enumerate(verticals):
            if intersects(h, v, config.intersect_tolerance):
                uf.union(hi, offset + vi)
                n_pairs += 1

    components: list[Component] = []
    for members in uf.groups():
        comp_h = [horizontals[i] for i in members if i < offset]
        comp_v = [verticals[i - offset] for i in members if i >= offset]
        # Isolated rulings, underlines, and single crosses are not grids
        if len(comp_h) < config.min_grid_lines or len(comp_v) < config.min_grid_lines:
            continue
        components.append(Component(comp_h, comp_v))

    logger.debug(
        "Intersection graph: %d H, %d V, %d crossing pairs -> %d candidate components",
        len(horizontals),
        len(verticals),
        n_pairs,
        len(components),
    )
    return components
