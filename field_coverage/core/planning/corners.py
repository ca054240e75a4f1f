"""Corner ordering for operator-selected field quadrilaterals."""

from __future__ import annotations

import math
from typing import Sequence

from ..geometry import Point, PointLike, Polygon, centroid


def normalize(points: Sequence[PointLike], start_corner: int = 0) -> Polygon:
    """Order four points into a ring that begins at ``start_corner``.

    Points are sorted by their angle around the centroid, so the winding does
    not depend on click order. ``start_corner`` indexes the sorted order and is
    taken modulo 4. Coincident points keep their input order (stable sort);
    degenerate layouts are passed through unchanged.
    """

    pts = [Point.of(p) for p in points]
    center = centroid(pts)
    ordered = sorted(pts, key=lambda p: math.atan2(p.y - center.y, p.x - center.x))
    count = len(ordered)
    ring = tuple(ordered[(i + start_corner) % count] for i in range(count))
    return Polygon(ring)


__all__ = ["normalize"]
