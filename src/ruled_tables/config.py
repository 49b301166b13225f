"""Detection settings and environment overrides.

DetectionConfig carries every tolerance the pipeline uses.  load_config()
reads overrides from ``RULED_TABLES_*`` environment variables (and the
project's ``.env`` file), e.g. ``RULED_TABLES_SNAP_TOLERANCE=2``.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from ruled_tables.constants import (
    CELL_TOLERANCE,
    DOT_SIZE,
    ENV_PREFIX,
    INTERSECT_TOLERANCE,
    MIN_ASPECT_RATIO,
    MIN_GRID_LINES,
    MIN_LONG_SIDE,
    SNAP_TOLERANCE,
    THIN_SIZE,
)

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent.parent.resolve()


class DetectionConfig(BaseModel):
    """Tolerances and thresholds for one detection pass."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    snap_tolerance: float = Field(default=SNAP_TOLERANCE, gt=0)
    intersect_tolerance: float = Field(default=INTERSECT_TOLERANCE, ge=0)
    dot_size: float = Field(default=DOT_SIZE, ge=0)
    thin_size: float = Field(default=THIN_SIZE, gt=0)
    min_long_side: float = Field(default=MIN_LONG_SIDE, ge=0)
    min_aspect_ratio: float = Field(default=MIN_ASPECT_RATIO, gt=0)
    cell_tolerance: float = Field(default=CELL_TOLERANCE, ge=0)
    min_grid_lines: int = Field(default=MIN_GRID_LINES, ge=2)


DEFAULT_CONFIG = DetectionConfig()


def env_key(field_name: str) -> str:
    """Return the environment variable that overrides *field_name*."""
    return ENV_PREFIX + field_name.upper()


def load_config(env: Mapping[str, str] | None = None) -> DetectionConfig:
    """Build a DetectionConfig from defaults plus ``RULED_TABLES_*`` overrides.

    When *env* is None the project ``.env`` is loaded first and
    ``os.environ`` is used.  Values are validated by pydantic, so a bad
    override raises ValidationError instead of silently falling back.
    """
    if env is None:
        load_dotenv(ROOT / ".env")
        env = os.environ

    overrides: dict[str, str] = {}
    for name in DetectionConfig.model_fields:
        key = env_key(name)
        if key in env:
            overrides[name] = env[key]

    if overrides:
        logger.info("Detection config overrides from environment: %s", overrides)
    return DetectionConfig(**overrides)
