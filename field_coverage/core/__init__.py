"""Core coverage preview logic (ROS-agnostic)."""

from .geometry import AxisBounds, BoundingBox, Chord, Point, Polygon, ScanLine, Segment
from .planning import (
    assemble,
    build_scan_lines,
    clip,
    normalize,
    preview_path,
)
from .request import (
    PreviewRequest,
    RequestFormatError,
    cached_preview_path,
    load_request,
    parse_preview,
)
from .stats import PathStats, export_path_csv, path_length, path_stats
from .styles import Diagonal, Ladder, StyleError, StyleParameters, Zigzag, style_from_mapping

__all__ = [
    "AxisBounds",
    "BoundingBox",
    "Chord",
    "Diagonal",
    "Ladder",
    "PathStats",
    "Point",
    "Polygon",
    "PreviewRequest",
    "RequestFormatError",
    "ScanLine",
    "Segment",
    "StyleError",
    "StyleParameters",
    "Zigzag",
    "assemble",
    "build_scan_lines",
    "cached_preview_path",
    "clip",
    "export_path_csv",
    "load_request",
    "normalize",
    "parse_preview",
    "path_length",
    "path_stats",
    "preview_path",
    "style_from_mapping",
]
