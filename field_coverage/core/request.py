"""Preview request parser for the v1 declarative field preview format."""

from __future__ import annotations

import functools
import math
import pathlib
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

import yaml

from .geometry import Point, PointLike
from .planning import preview_path
from .styles import StyleError, StyleParameters, style_from_mapping


class RequestFormatError(RuntimeError):
    """Raised when the preview request file is invalid."""


@dataclass
class PreviewRequest:
    name: str
    points: Tuple[Point, Point, Point, Point]
    style: StyleParameters
    start_corner: int = 0
    raw: Dict[str, object] = field(default_factory=dict)

    def path(self) -> List[Point]:
        return list(cached_preview_path(self.points, self.style, self.start_corner))


def load_request(path: pathlib.Path) -> PreviewRequest:
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise RequestFormatError(f"Preview request {path} is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise RequestFormatError("Preview request must be a mapping")
    if data.get("api_version") != 1:
        raise RequestFormatError("Preview request 'api_version' must be 1")

    preview = data.get("preview")
    if not isinstance(preview, dict):
        raise RequestFormatError("Preview request must contain a 'preview' mapping")

    return parse_preview(preview, default_name=path.stem, raw=data)


def parse_preview(
    preview: Dict[str, object],
    *,
    default_name: str = "preview",
    raw: Dict[str, object] | None = None,
) -> PreviewRequest:
    name = str(preview.get("name", default_name))
    points = _parse_points(preview.get("points"))
    try:
        style = style_from_mapping(preview)
    except StyleError as exc:
        raise RequestFormatError(str(exc)) from exc
    start_corner = _parse_start_corner(preview.get("start_corner", 0))
    return PreviewRequest(
        name=name,
        points=points,
        style=style,
        start_corner=start_corner,
        raw=raw if raw is not None else dict(preview),
    )


def _parse_points(value: object) -> Tuple[Point, Point, Point, Point]:
    if not isinstance(value, list) or len(value) != 4:
        raise RequestFormatError("Preview 'points' must be a list of exactly 4 [x, y] pairs")
    points: List[Point] = []
    for idx, raw_point in enumerate(value):
        if not isinstance(raw_point, (list, tuple)) or len(raw_point) != 2:
            raise RequestFormatError(f"Preview point #{idx} must be an [x, y] pair")
        try:
            points.append(Point(float(raw_point[0]), float(raw_point[1])))
        except (TypeError, ValueError) as exc:
            raise RequestFormatError(f"Preview point #{idx} has invalid coordinates") from exc
        if not (math.isfinite(points[-1].x) and math.isfinite(points[-1].y)):
            raise RequestFormatError(f"Preview point #{idx} coordinates must be finite")
    return (points[0], points[1], points[2], points[3])


def _parse_start_corner(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RequestFormatError("Preview 'start_corner' must be an integer")
    if not 0 <= value <= 3:
        raise RequestFormatError(f"Preview 'start_corner' must be within 0..3, got {value}")
    return value


@functools.lru_cache(maxsize=128)
def _cached_preview(
    points: Tuple[Point, ...],
    style: StyleParameters,
    start_corner: int,
) -> Tuple[Point, ...]:
    return tuple(preview_path(points, style, start_corner))


def cached_preview_path(
    points: Sequence[PointLike],
    style: StyleParameters,
    start_corner: int = 0,
) -> Tuple[Point, ...]:
    """Memoized preview path keyed on the full input tuple.

    Dashboards recompute on every slider change; repeated requests for the
    same field, style and start corner share one result.
    """

    key = tuple(Point.of(p) for p in points)
    return _cached_preview(key, style, start_corner)


__all__ = [
    "PreviewRequest",
    "RequestFormatError",
    "cached_preview_path",
    "load_request",
    "parse_preview",
]
