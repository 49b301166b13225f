"""Pydantic models for the detection pipeline.

Primitives are the input contract: what an upstream document extractor
produces for one page (text runs, stroked segments, rectangles).  Everything
else is derived per detection pass and references primitives by id only;
the detector never mutates its input.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator


# ─── Input Primitives ─────────────────────────────────────────────────────────


class _PrimitiveBase(BaseModel):
    """Fields shared by every primitive: id, 1-based page, and bounding box."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str
    page: PositiveInt
    x: float
    y: float
    width: float
    height: float


class TextPrimitive(_PrimitiveBase):
    """A text run.  (x, y) is the run origin; width/height its bounding box."""

    type: Literal["text"] = "text"
    content: str = ""


class LinePrimitive(_PrimitiveBase):
    """Bounding box of a stroked segment."""

    type: Literal["line"] = "line"


class RectPrimitive(_PrimitiveBase):
    """Bounding box of a stroked or filled rectangle (thin ones act as rulings)."""

    type: Literal["rect"] = "rect"


Primitive = Annotated[Union[TextPrimitive, LinePrimitive, RectPrimitive], Field(discriminator="type")]


# ─── Derived Geometry ─────────────────────────────────────────────────────────


class Orientation(str, Enum):
    """Axis a ruling runs along."""

    HORIZONTAL = "h"
    VERTICAL = "v"


class ClassifiedLine(BaseModel):
    """A ruling reduced to one snapped coordinate plus its extent.

    ``position`` is the thin-axis coordinate (y for horizontals, x for
    verticals); ``start``/``end`` span the long axis.
    """

    model_config = ConfigDict(frozen=True)

    source_id: str
    orientation: Orientation
    position: float
    start: float
    end: float


# ─── Output ───────────────────────────────────────────────────────────────────


class TableCell(BaseModel):
    """One grid cell.  Text and text_ids are filled by the cell-text assigner."""

    row: int
    col: int
    x: float
    y: float
    width: float
    height: float
    text: str = ""
    text_ids: list[str] = Field(default_factory=list)


class DetectedTable(BaseModel):
    """A reconstructed table: bounding box, dense cell grid, and its rulings.

    ``id`` is ``table-p{page}-{index}`` and is stable for a given input.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    page: int
    x: float
    y: float
    width: float
    height: float
    rows: int
    cols: int
    cells: list[list[TableCell]]
    line_ids: list[str]

    @model_validator(mode="after")
    def validate_grid_shape(self) -> "DetectedTable":
        """Ensure the cell grid is exactly rows x cols."""
        if len(self.cells) != self.rows:
            raise ValueError(f"Table {self.id} has {len(self.cells)} cell rows, expected {self.rows}")
        for i, row in enumerate(self.cells):
            if len(row) != self.cols:
                raise ValueError(f"Row {i} of {self.id} has {len(row)} cells, expected {self.cols}")
        return self
