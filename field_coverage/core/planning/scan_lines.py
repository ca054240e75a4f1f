"""Scan-line construction for the zigzag, ladder and diagonal sweep styles."""

from __future__ import annotations

import logging
import math
from typing import List

from ..geometry import Point, Polygon, ScanLine
from ..styles import Diagonal, Ladder, StyleParameters, Zigzag

logger = logging.getLogger(__name__)

# Overshoot past the bounding box for axis-aligned sweeps (meters).
AXIS_OVERSHOOT_M = 1.0

MIN_LINE_COUNT = 2


def line_count(extent: float, spacing: float) -> int:
    """Number of spacing intervals across ``extent``, never fewer than two."""

    return max(MIN_LINE_COUNT, math.floor(extent / spacing))


def build_scan_lines(polygon: Polygon, style: StyleParameters) -> List[ScanLine]:
    """Return the style's scan lines in sweep order.

    The result holds ``line_count + 1`` lines: both bounding edges of the
    swept extent are included.
    """

    if isinstance(style, Zigzag):
        lines = _horizontal_lines(polygon, style.line_spacing)
    elif isinstance(style, Ladder):
        lines = _vertical_lines(polygon, style.line_spacing)
    elif isinstance(style, Diagonal):
        lines = _diagonal_lines(polygon, style.line_spacing, style.sweep_angle_deg)
    else:
        raise TypeError(f"Unsupported style {type(style).__name__}")

    logger.debug("Built %d %s scan lines", len(lines), style.name)
    return lines


def _horizontal_lines(polygon: Polygon, spacing: float) -> List[ScanLine]:
    box = polygon.bounds()
    count = line_count(box.height, spacing)
    step = box.height / count
    x_start = box.x.minimum - AXIS_OVERSHOOT_M
    x_end = box.x.maximum + AXIS_OVERSHOOT_M

    lines: List[ScanLine] = []
    for i in range(count + 1):
        y = box.y.minimum + i * step
        lines.append(ScanLine(Point(x_start, y), Point(x_end, y)))
    return lines


def _vertical_lines(polygon: Polygon, spacing: float) -> List[ScanLine]:
    box = polygon.bounds()
    count = line_count(box.width, spacing)
    step = box.width / count
    y_start = box.y.minimum - AXIS_OVERSHOOT_M
    y_end = box.y.maximum + AXIS_OVERSHOOT_M

    lines: List[ScanLine] = []
    for i in range(count + 1):
        x = box.x.minimum + i * step
        lines.append(ScanLine(Point(x, y_start), Point(x, y_end)))
    return lines


def _diagonal_lines(polygon: Polygon, spacing: float, sweep_angle_deg: float) -> List[ScanLine]:
    diagonal = polygon.bounds().diagonal
    count = line_count(diagonal, spacing)
    angle = math.radians(sweep_angle_deg)
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    center = polygon.centroid()

    # Lines are offset along (cos, sin) and run along (-sin, cos); a half
    # length of one full diagonal always spans the polygon.
    lines: List[ScanLine] = []
    for i in range(count + 1):
        offset = (i / count) * diagonal - diagonal / 2.0
        base_x = center.x + offset * cos_a
        base_y = center.y + offset * sin_a
        start = Point(base_x - diagonal * sin_a, base_y + diagonal * cos_a)
        end = Point(base_x + diagonal * sin_a, base_y - diagonal * cos_a)
        lines.append(ScanLine(start, end))
    return lines


__all__ = ["AXIS_OVERSHOOT_M", "MIN_LINE_COUNT", "build_scan_lines", "line_count"]
