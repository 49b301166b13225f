"""Unit tests for text-to-cell assignment."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from ruled_tables.cells import assign_text, cell_contains, text_centroid
from ruled_tables.config import DetectionConfig
from ruled_tables.grid import build_cells
from ruled_tables.schema import TableCell, TextPrimitive


def text(id: str, x: float, y: float, content: str, width: float = 10, height: float = 10) -> TextPrimitive:  # pylint: disable=redefined-builtin
    return TextPrimitive(id=id, page=1, x=x, y=y, width=width, height=height, content=content)


def cell(x: float, y: float, width: float, height: float) -> TableCell:
    return TableCell(row=0, col=0, x=x, y=y, width=width, height=height)


class TestTextCentroid:

    def test_centre_of_box(self):
        assert text_centroid(text("t", 10, 20, "x", width=30, height=4)) == (25, 22)

    def test_zero_size_run(self):
        assert text_centroid(text("t", 10, 20, "x", width=0, height=0)) == (10, 20)


class TestCellContains:

    def test_inside(self):
        assert cell_contains(cell(0, 0, 10, 10), 5, 5) is True

    def test_tolerance_inclusive(self):
        c = cell(0, 0, 10, 10)
        assert cell_contains(c, 11, 5) is True
        assert cell_contains(c, -1, -1) is True
        assert cell_contains(c, 11.01, 5) is False
        assert cell_contains(c, 5, -1.01) is False

    def test_bottom_up_cell(self):
        # Negative height: the cell extends downward from y=100
        c = cell(0, 100, 10, -50)
        assert cell_contains(c, 5, 75) is True
        assert cell_contains(c, 5, 120) is False

    def test_custom_tolerance(self):
        assert cell_contains(cell(0, 0, 10, 10), 13, 5, tolerance=3) is True
        assert cell_contains(cell(0, 0, 10, 10), 10.5, 5, tolerance=0) is False


class TestAssignText:

    def test_encounter_order_joined_by_space(self):
        cells = build_cells([0, 100], [0, 100])
        runs = [text("t1", 20, 40, "Hello"), text("t2", 60, 40, "world")]
        assert assign_text(cells, runs) == 2
        assert cells[0][0].text == "Hello world"
        assert cells[0][0].text_ids == ["t1", "t2"]

    def test_empty_content_skipped(self):
        cells = build_cells([0, 100], [0, 100])
        assert assign_text(cells, [text("blank", 45, 45, "")]) == 0
        assert cells[0][0].text == ""
        assert not cells[0][0].text_ids

    def test_only_enclosing_cell(self):
        cells = build_cells([0, 50, 100], [0, 50, 100])
        assign_text(cells, [text("t", 70, 10, "B")])  # centroid (75, 15)
        assert cells[0][1].text == "B"
        assert [c.text for row in cells for c in row].count("") == 3

    def test_border_run_lands_in_both_cells(self):
        cells = build_cells([0, 10, 20], [0, 10])
        assert assign_text(cells, [text("edge", 5, 0, "E")]) == 2  # centroid (10, 5)
        assert cells[0][0].text_ids == ["edge"]
        assert cells[0][1].text_ids == ["edge"]

    def test_outside_run_ignored(self):
        cells = build_cells([0, 10], [0, 10])
        assert assign_text(cells, [text("far", 500, 500, "x")]) == 0

    def test_cell_tolerance_from_config(self):
        cells = build_cells([0, 10], [0, 10])
        run = text("near", 7, 0, "n")  # centroid (12, 5)
        assert assign_text(cells, [run]) == 0
        assert assign_text(cells, [run], DetectionConfig(cell_tolerance=2)) == 1
