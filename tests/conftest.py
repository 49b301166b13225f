"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from ruled_tables.schema import LinePrimitive, TextPrimitive

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


def _ruling_grid(xs: list[float], ys: list[float], page: int = 1, prefix: str = "g") -> list[LinePrimitive]:
    """Zero-thickness rulings: one horizontal per y spanning xs, one vertical per x spanning ys."""
    prims = []
    for i, y in enumerate(ys):
        prims.append(LinePrimitive(id=f"{prefix}-h{i}", page=page, x=xs[0], y=y, width=xs[-1] - xs[0], height=0))
    for i, x in enumerate(xs):
        prims.append(LinePrimitive(id=f"{prefix}-v{i}", page=page, x=x, y=ys[0], width=0, height=ys[-1] - ys[0]))
    return prims


def _text(id: str, cx: float, cy: float, content: str, page: int = 1) -> TextPrimitive:  # pylint: disable=redefined-builtin
    """A 10x10 text run centred on (cx, cy)."""
    return TextPrimitive(id=id, page=page, x=cx - 5, y=cy - 5, width=10, height=10, content=content)


@pytest.fixture
def ruling_grid():
    """Factory for a ruled grid of line primitives."""
    return _ruling_grid


@pytest.fixture
def text_at():
    """Factory for a text run centred on a point."""
    return _text
