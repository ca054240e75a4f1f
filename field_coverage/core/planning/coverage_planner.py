"""Coverage planning (lawnmower / boustrophedon) preview paths for field polygons."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Sequence

from ..geometry import Chord, Point, PointLike, Polygon
from ..styles import StyleParameters
from .corners import normalize
from .intersect import clip
from .scan_lines import build_scan_lines

logger = logging.getLogger(__name__)

FIELD_CORNERS = 4


def assemble(chords: Iterable[Chord]) -> List[Point]:
    """Concatenate chord endpoints, reversing every odd chord.

    Even chords are travelled start to end and odd chords end to start, so
    each pass begins on the side where the previous one finished.
    """

    path: List[Point] = []
    for index, chord in enumerate(chords):
        if index % 2 == 0:
            path.extend([chord.start, chord.end])
        else:
            path.extend([chord.end, chord.start])
    return path


def plan_chords(polygon: Polygon, style: StyleParameters) -> List[Chord]:
    """Clip every scan line of ``style`` against ``polygon``, dropping misses."""

    chords: List[Chord] = []
    for scan_line in build_scan_lines(polygon, style):
        chord = clip(scan_line, polygon)
        if chord is None:
            logger.debug("Scan line %s misses the field boundary; skipped", scan_line)
            continue
        chords.append(chord)
    return chords


def field_polygon(points: Sequence[PointLike], start_corner: int = 0) -> Optional[Polygon]:
    """Normalized field polygon, or ``None`` when the corners cannot bound an area."""

    if len(points) != FIELD_CORNERS:
        logger.debug("Expected %d field corners, got %d", FIELD_CORNERS, len(points))
        return None
    corners = [Point.of(p) for p in points]
    if not all(math.isfinite(c) for p in corners for c in p.as_tuple()):
        logger.debug("Field corners must be finite: %s", corners)
        return None
    if len(set(corners)) < FIELD_CORNERS:
        logger.debug("Field corners are not distinct: %s", corners)
        return None

    polygon = normalize(corners, start_corner)
    if not math.isfinite(polygon.bounds().diagonal):
        logger.debug("Field extent overflows: %s", polygon)
        return None
    if polygon.is_degenerate:
        logger.debug("Field polygon has no area: %s", polygon)
        return None
    return polygon


def preview_path(
    points: Sequence[PointLike],
    style: StyleParameters,
    start_corner: int = 0,
) -> List[Point]:
    """Generate the boustrophedon preview path for an operator-selected field.

    ``points`` are the four field corners in any order (world frame, meters).
    The path approximates the robot-side planner's output for preview only.
    Invalid geometry (wrong corner count, duplicate or non-finite corners, zero
    area, an extent that overflows the line count) yields an empty path rather
    than an error.
    """

    polygon = field_polygon(points, start_corner)
    if polygon is None:
        return []
    if not math.isfinite(polygon.bounds().diagonal / style.line_spacing):
        logger.debug("Spacing %s is too fine for field %s", style.line_spacing, polygon)
        return []

    chords = plan_chords(polygon, style)
    path = assemble(chords)
    logger.debug("Preview path: %d chords, %d waypoints (%s)", len(chords), len(path), style.name)
    return path


__all__ = [
    "FIELD_CORNERS",
    "assemble",
    "field_polygon",
    "plan_chords",
    "preview_path",
]
