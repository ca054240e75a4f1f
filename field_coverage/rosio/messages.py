"""JSON-ready payloads for the robot-side coverage planner.

Only the mappings are built here; publishing them (rosbridge, rclpy, ...) is
left to the host application.
"""

from __future__ import annotations

import time
from typing import Dict, List, Optional, Sequence

from ..core.geometry import Point, PointLike
from ..core.styles import StyleParameters
from .topics import FIELD_POLYGON_TOPIC, FIELD_POLYGON_TYPE, PLANNER_NODE, namespaced


def param_commands(
    style: StyleParameters,
    start_corner: int,
    *,
    node: str = PLANNER_NODE,
    namespace: Optional[str] = None,
) -> List[str]:
    """``ros2 param set`` lines that configure the planner node for ``style``."""

    node_name = namespaced(node, namespace=namespace)
    params: Dict[str, object] = dict(style.as_params())
    params["start_corner"] = int(start_corner)
    return [f"ros2 param set {node_name} {key} {value}" for key, value in params.items()]


def field_polygon_message(
    points: Sequence[PointLike],
    *,
    frame_id: str = "map",
    stamp: Optional[float] = None,
) -> Dict[str, object]:
    """``geometry_msgs/msg/PolygonStamped`` mapping for the selected field corners.

    Corners are kept in selection order; the planner does its own ordering.
    """

    now = time.time() if stamp is None else float(stamp)
    sec = int(now)
    nanosec = int(round((now - sec) * 1e9))
    if nanosec >= 1_000_000_000:
        sec += 1
        nanosec -= 1_000_000_000
    return {
        "header": {
            "frame_id": frame_id,
            "stamp": {"sec": sec, "nanosec": nanosec},
        },
        "polygon": {
            "points": [
                {"x": p.x, "y": p.y, "z": 0.0} for p in (Point.of(raw) for raw in points)
            ],
        },
    }


def field_polygon_ops(
    message: Dict[str, object],
    *,
    namespace: Optional[str] = None,
) -> List[Dict[str, object]]:
    """rosbridge ``advertise`` + ``publish`` operations carrying ``message``.

    This is the pair roslib sends when the dashboard publishes the field.
    """

    topic = namespaced(FIELD_POLYGON_TOPIC, namespace=namespace)
    return [
        {"op": "advertise", "topic": topic, "type": FIELD_POLYGON_TYPE},
        {"op": "publish", "topic": topic, "msg": message},
    ]


__all__ = ["field_polygon_message", "field_polygon_ops", "param_commands"]
