"""Unit tests for the intersection graph and component grouping."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from ruled_tables.config import DetectionConfig
from ruled_tables.grouping import group_lines, intersects
from ruled_tables.schema import ClassifiedLine, Orientation


def hline(pos: float, start: float, end: float, id: str = "h") -> ClassifiedLine:  # pylint: disable=redefined-builtin
    return ClassifiedLine(source_id=id, orientation=Orientation.HORIZONTAL, position=pos, start=start, end=end)


def vline(pos: float, start: float, end: float, id: str = "v") -> ClassifiedLine:  # pylint: disable=redefined-builtin
    return ClassifiedLine(source_id=id, orientation=Orientation.VERTICAL, position=pos, start=start, end=end)


def square(x0: float, y0: float, size: float, tag: str) -> tuple[list[ClassifiedLine], list[ClassifiedLine]]:
    """Two horizontals and two verticals outlining one box."""
    hs = [hline(y0, x0, x0 + size, f"{tag}-h0"), hline(y0 + size, x0, x0 + size, f"{tag}-h1")]
    vs = [vline(x0, y0, y0 + size, f"{tag}-v0"), vline(x0 + size, y0, y0 + size, f"{tag}-v1")]
    return hs, vs


# ===========================================================================
# intersects tests
# ===========================================================================


class TestIntersects:

    def test_crossing(self):
        assert intersects(hline(50, 0, 100), vline(50, 0, 100)) is True

    def test_corner_touch(self):
        assert intersects(hline(0, 0, 100), vline(100, 0, 100)) is True

    def test_within_tolerance_inclusive(self):
        assert intersects(hline(0, 0, 100), vline(103, 0, 100)) is True
        assert intersects(hline(0, 0, 100), vline(103.5, 0, 100)) is False

    def test_vertical_range_tolerance(self):
        v = vline(50, 10, 50)
        assert intersects(hline(7, 0, 100), v) is True
        assert intersects(hline(6, 0, 100), v) is False

    def test_reversed_vertical_extent(self):
        assert intersects(hline(30, 0, 100), vline(50, 50, 10)) is True

    def test_custom_tolerance(self):
        assert intersects(hline(0, 0, 98), vline(100, 0, 50), tolerance=3) is True
        assert intersects(hline(0, 0, 98), vline(100, 0, 50), tolerance=0) is False


# ===========================================================================
# group_lines tests
# ===========================================================================


class TestGroupLines:

    def test_single_box(self):
        hs, vs = square(0, 0, 100, "a")
        components = group_lines(hs, vs)
        assert len(components) == 1
        assert [l.source_id for l in components[0].horizontals] == ["a-h0", "a-h1"]
        assert [l.source_id for l in components[0].verticals] == ["a-v0", "a-v1"]

    def test_two_separate_boxes_in_discovery_order(self):
        ha, va = square(0, 0, 100, "a")
        hb, vb = square(500, 500, 100, "b")
        components = group_lines(hb + ha, vb + va)
        assert len(components) == 2
        # First horizontal belongs to box b, so b is discovered first
        assert components[0].horizontals[0].source_id == "b-h0"
        assert components[1].horizontals[0].source_id == "a-h0"

    def test_single_cross_dropped(self):
        assert not group_lines([hline(50, 0, 100)], [vline(50, 0, 100)])

    def test_needs_two_verticals(self):
        hs = [hline(0, 0, 100, "h0"), hline(50, 0, 100, "h1"), hline(100, 0, 100, "h2")]
        vs = [vline(0, 0, 100, "v0")]
        assert not group_lines(hs, vs)

    def test_isolated_ruling_excluded_from_component(self):
        hs, vs = square(0, 0, 100, "a")
        hs.append(hline(400, 0, 100, "underline"))
        components = group_lines(hs, vs)
        assert len(components) == 1
        assert "underline" not in [l.source_id for l in components[0].horizontals]

    def test_tolerance_from_config(self):
        hs = [hline(0, 0, 98, "h0"), hline(50, 0, 98, "h1")]
        vs = [vline(0, 0, 50, "v0"), vline(100, 0, 50, "v1")]
        assert len(group_lines(hs, vs)) == 1
        # Without slack the right-hand vertical is detached, leaving one V
        assert not group_lines(hs, vs, DetectionConfig(intersect_tolerance=0))

    def test_empty(self):
        assert not group_lines([], [])
