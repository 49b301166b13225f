"""Default tolerances and thresholds for ruled-table detection.

All values are in the extractor's page units (PDF points for pdf.js output).
They were tuned empirically against ruled tables in typical office PDFs;
DetectionConfig exposes each one so a corpus can override it.
"""

# ─── Snapping ─────────────────────────────────────────────────────────────────

# Grid step for snapping the thin-axis position of a ruling, and the maximum
# gap between two grid coordinates that are considered the same line
SNAP_TOLERANCE = 1.5


# ─── Line Classification ──────────────────────────────────────────────────────

# A shape smaller than this on both axes is a dot, not a ruling
DOT_SIZE = 0.5

# A shape thinner than this on one axis is a ruling along the other axis
THIN_SIZE = 3.0

# Thick rulings (filled bars) must be at least this long...
MIN_LONG_SIDE = 5.0

# ...and at least this many times longer than they are thick
MIN_ASPECT_RATIO = 4.0


# ─── Grouping / Grid ──────────────────────────────────────────────────────────

# Slack allowed when testing whether a horizontal and a vertical ruling touch
INTERSECT_TOLERANCE = 3.0

# Minimum number of rulings (and distinct grid coordinates) per axis
MIN_GRID_LINES = 2


# ─── Text Assignment ──────────────────────────────────────────────────────────

# Inclusive slack on every side of a cell when testing a text centroid
CELL_TOLERANCE = 1.0


# ─── Identifiers ──────────────────────────────────────────────────────────────

# Table id template; index restarts at 0 on every page
TABLE_ID_TEMPLATE = "table-p{page}-{index}"

# Environment variable prefix for DetectionConfig overrides
ENV_PREFIX = "RULED_TABLES_"
