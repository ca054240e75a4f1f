"""Clipping of scan lines against the field polygon boundary."""

from __future__ import annotations

from typing import List, Optional

from ..geometry import Chord, Point, Polygon, ScanLine, segment_intersection


def boundary_crossings(scan_line: ScanLine, polygon: Polygon) -> List[Point]:
    """Crossings of ``scan_line`` with every polygon edge, sorted along the line.

    Sorting uses x when the line is more horizontal than vertical, y otherwise.
    A line passing exactly through a vertex reports that vertex once per edge.
    """

    crossings: List[Point] = []
    for edge in polygon.edges():
        hit = segment_intersection(scan_line, edge)
        if hit is not None:
            crossings.append(hit)

    if scan_line.is_mostly_horizontal:
        crossings.sort(key=lambda p: p.x)
    else:
        crossings.sort(key=lambda p: p.y)
    return crossings


def clip(scan_line: ScanLine, polygon: Polygon) -> Optional[Chord]:
    crossings = boundary_crossings(scan_line, polygon)
    if len(crossings) < 2:
        return None
    return Chord(crossings[0], crossings[-1])


__all__ = ["boundary_crossings", "clip"]
