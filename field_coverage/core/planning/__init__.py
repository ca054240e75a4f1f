"""Planning utilities for coverage preview paths."""

from .corners import normalize
from .coverage_planner import (
    assemble,
    field_polygon,
    plan_chords,
    preview_path,
)
from .intersect import boundary_crossings, clip
from .scan_lines import build_scan_lines, line_count

__all__ = [
    "assemble",
    "boundary_crossings",
    "build_scan_lines",
    "clip",
    "field_polygon",
    "line_count",
    "normalize",
    "plan_chords",
    "preview_path",
]
