"""Ruled-table detection from page-description primitives.

Submodules:
  constants    -- default tolerances and thresholds
  schema       -- Pydantic models for primitives, classified lines, cells, tables
  config       -- DetectionConfig and environment overrides
  primitives   -- builders that normalise extractor output into primitives
  classifiers  -- snapping / dedup helpers and horizontal-vertical line classification
  union_find   -- disjoint-set over flat line indices
  grouping     -- intersection graph and connected components
  grid         -- grid coordinates and cell reconstruction
  cells        -- text-to-cell assignment
  pipeline     -- detect_tables() entry point and primitive loading
  formatting   -- markdown, summary, and JSON rendering of detected tables
  cli          -- command-line entry point
"""
