"""Payload and naming helpers for the robot-side coverage planner."""

from .messages import field_polygon_message, field_polygon_ops, param_commands
from .topics import (
    FIELD_POLYGON_TOPIC,
    FIELD_POLYGON_TYPE,
    PLANNER_NODE,
    namespaced,
)

__all__ = [
    "FIELD_POLYGON_TOPIC",
    "FIELD_POLYGON_TYPE",
    "PLANNER_NODE",
    "field_polygon_message",
    "field_polygon_ops",
    "namespaced",
    "param_commands",
]
