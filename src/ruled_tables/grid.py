"""Grid reconstruction: distinct grid coordinates and the dense cell matrix."""

from typing import NamedTuple

from ruled_tables.classifiers import dedup_sorted
from ruled_tables.config import DEFAULT_CONFIG, DetectionConfig
from ruled_tables.grouping import Component
from ruled_tables.schema import TableCell


class Grid(NamedTuple):
    """Sorted distinct grid coordinates and the rows x cols cells between them."""

    xs: list[float]
    ys: list[float]
    cells: list[list[TableCell]]

    @property
    def rows(self) -> int:
        return len(self.ys) - 1

    @property
    def cols(self) -> int:
        return len(self.xs) - 1


def grid_coordinates(component: Component, config: DetectionConfig = DEFAULT_CONFIG) -> tuple[list[float], list[float]]:
    """Return (xs, ys): the component's ruling positions, sorted and deduplicated."""
    xs = dedup_sorted(sorted(v.position for v in component.verticals), config.snap_tolerance)
    ys = dedup_sorted(sorted(h.position for h in component.horizontals), config.snap_tolerance)
    return xs, ys


def build_cells(xs: list[float], ys: list[float]) -> list[list[TableCell]]:
    """Materialise the cells between consecutive coordinates, row-major."""
    return [
        [
            TableCell(
                row=r,
                col=c,
                x=xs[c],
                y=ys[r],
                width=xs[c + 1] - xs[c],
                height=ys[r + 1] - ys[r],
            )
            for c in range(len(xs) - 1)
        ]
        for r in range(len(ys) - 1)
    ]


def reconstruct_grid(component: Component, config: DetectionConfig = DEFAULT_CONFIG) -> Grid | None:
    """Build the grid for a component, or None if an axis collapses below the minimum.

    Several rulings can snap onto the same coordinate (double borders, a rect
    outline plus its stroke), so the distinct count is checked again here.
    """
    xs, ys = grid_coordinates(component, config)
    if len(xs) < config.min_grid_lines or len(ys) < config.min_grid_lines:
        return None
    return Grid(xs, ys, build_cells(xs, ys))
