"""Planar geometry primitives shared by the coverage pipeline (world frame, meters)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple, Union

# Determinant magnitude below which two segments are treated as parallel.
PARALLEL_EPSILON = 1e-10

# Polygons with an absolute area below this are considered degenerate.
AREA_EPSILON = 1e-12

PointLike = Union["Point", Sequence[float]]


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @classmethod
    def of(cls, value: PointLike) -> "Point":
        if isinstance(value, Point):
            return value
        if len(value) != 2:
            raise ValueError(f"Point needs exactly 2 coordinates, got {len(value)}")
        return cls(float(value[0]), float(value[1]))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class AxisBounds:
    minimum: float
    maximum: float

    @property
    def span(self) -> float:
        return self.maximum - self.minimum


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned extent of a polygon."""

    x: AxisBounds
    y: AxisBounds

    @property
    def width(self) -> float:
        return self.x.span

    @property
    def height(self) -> float:
        return self.y.span

    @property
    def diagonal(self) -> float:
        return math.hypot(self.width, self.height)


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def is_mostly_horizontal(self) -> bool:
        return abs(self.end.x - self.start.x) > abs(self.end.y - self.start.y)

    def distance_to_point(self, point: Point) -> float:
        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        length_sq = dx * dx + dy * dy
        if length_sq == 0.0:
            return self.start.distance_to(point)
        t = ((point.x - self.start.x) * dx + (point.y - self.start.y) * dy) / length_sq
        t = min(1.0, max(0.0, t))
        return point.distance_to(Point(self.start.x + t * dx, self.start.y + t * dy))


class ScanLine(Segment):
    """Sweep line long enough to cross the whole polygon extent."""


class Chord(Segment):
    """Portion of a scan line bounded by its first and last boundary crossing."""


@dataclass(frozen=True)
class Polygon:
    """Closed ring of four vertices; the last edge joins vertex 3 back to vertex 0."""

    vertices: Tuple[Point, Point, Point, Point]

    def __post_init__(self) -> None:
        if len(self.vertices) != 4:
            raise ValueError(f"Polygon needs exactly 4 vertices, got {len(self.vertices)}")

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def __getitem__(self, index: int) -> Point:
        return self.vertices[index]

    def edges(self) -> List[Segment]:
        count = len(self.vertices)
        return [Segment(self.vertices[k], self.vertices[(k + 1) % count]) for k in range(count)]

    def bounds(self) -> BoundingBox:
        xs = [p.x for p in self.vertices]
        ys = [p.y for p in self.vertices]
        return BoundingBox(AxisBounds(min(xs), max(xs)), AxisBounds(min(ys), max(ys)))

    def centroid(self) -> Point:
        return centroid(self.vertices)

    def area(self) -> float:
        """Unsigned shoelace area of the ring."""

        total = 0.0
        for edge in self.edges():
            total += edge.start.x * edge.end.y - edge.end.x * edge.start.y
        return abs(total) / 2.0

    @property
    def is_degenerate(self) -> bool:
        return self.area() < AREA_EPSILON

    def distance_to_boundary(self, point: Point) -> float:
        return min(edge.distance_to_point(point) for edge in self.edges())


def centroid(points: Sequence[Point]) -> Point:
    count = len(points)
    return Point(sum(p.x for p in points) / count, sum(p.y for p in points) / count)


def segment_intersection(first: Segment, second: Segment) -> Optional[Point]:
    """Return the crossing point of two segments, or ``None``.

    Solves ``first.start + t * (first.end - first.start) ==
    second.start + u * (second.end - second.start)`` and accepts the crossing
    only when both ``t`` and ``u`` lie in ``[0, 1]``.
    """

    x1, y1 = first.start.x, first.start.y
    x2, y2 = first.end.x, first.end.y
    x3, y3 = second.start.x, second.start.y
    x4, y4 = second.end.x, second.end.y

    det = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(det) < PARALLEL_EPSILON:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / det
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / det
    if 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0:
        return Point(x1 + t * (x2 - x1), y1 + t * (y2 - y1))
    return None


__all__ = [
    "AREA_EPSILON",
    "PARALLEL_EPSILON",
    "AxisBounds",
    "BoundingBox",
    "Chord",
    "Point",
    "PointLike",
    "Polygon",
    "ScanLine",
    "Segment",
    "centroid",
    "segment_intersection",
]
