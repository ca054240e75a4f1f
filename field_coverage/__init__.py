"""Field coverage preview package exposing the planner core and ROS payload helpers."""

from .core import (
    Diagonal,
    Ladder,
    Point,
    Polygon,
    PreviewRequest,
    RequestFormatError,
    StyleError,
    StyleParameters,
    Zigzag,
    cached_preview_path,
    load_request,
    preview_path,
)

__all__ = [
    "Diagonal",
    "Ladder",
    "Point",
    "Polygon",
    "PreviewRequest",
    "RequestFormatError",
    "StyleError",
    "StyleParameters",
    "Zigzag",
    "cached_preview_path",
    "load_request",
    "preview_path",
]
