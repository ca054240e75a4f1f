"""Small helpers to summarise and export preview paths."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

from .geometry import Point


@dataclass(frozen=True)
class PathStats:
    waypoints: int
    passes: int
    length_m: float
    start: Optional[Point]
    end: Optional[Point]

    def as_dict(self) -> dict:
        return {
            "waypoints": self.waypoints,
            "passes": self.passes,
            "length_m": round(self.length_m, 3),
            "start": list(self.start.as_tuple()) if self.start is not None else None,
            "end": list(self.end.as_tuple()) if self.end is not None else None,
        }


def path_length(path: Sequence[Point]) -> float:
    """Total travel distance (m) along consecutive waypoints."""

    return sum(a.distance_to(b) for a, b in zip(path, path[1:]))


def path_stats(path: Sequence[Point]) -> PathStats:
    if not path:
        return PathStats(waypoints=0, passes=0, length_m=0.0, start=None, end=None)
    return PathStats(
        waypoints=len(path),
        passes=len(path) // 2,
        length_m=path_length(path),
        start=path[0],
        end=path[-1],
    )


def export_path_csv(path: Sequence[Point], directory: Path, stem: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    output = directory / f"{stem}_{timestamp}.csv"
    with output.open("w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(["index", "x", "y"])
        for idx, point in enumerate(path):
            writer.writerow([idx, f"{point.x:.4f}", f"{point.y:.4f}"])
    return output


__all__ = [
    "PathStats",
    "export_path_csv",
    "path_length",
    "path_stats",
]
