"""Topic and node names used by the robot-side coverage planner."""

from __future__ import annotations

from typing import Optional

FIELD_POLYGON_TOPIC = "coverage/field_polygon"
PLANNER_NODE = "coverage_planner_node"

FIELD_POLYGON_TYPE = "geometry_msgs/msg/PolygonStamped"


def namespaced(topic: str, *, namespace: Optional[str] = None, absolute: bool = True) -> str:
    """Return a topic (or node) name with an optional namespace prefix.

    - Removes leading slashes from ``topic``.
    - If ``namespace`` is provided, prefixes ``<namespace>/`` (namespace cleaned of leading/trailing slashes).
    - When ``absolute`` is True, prepends a leading slash to the final result.
    """

    clean_topic = (topic or "").lstrip("/")
    if not clean_topic:
        return "/" if absolute else ""

    if namespace:
        ns = namespace.strip("/")
        if ns:
            clean_topic = f"{ns}/{clean_topic}"

    return f"/{clean_topic}" if absolute else clean_topic


__all__ = [
    "FIELD_POLYGON_TOPIC",
    "FIELD_POLYGON_TYPE",
    "PLANNER_NODE",
    "namespaced",
]
