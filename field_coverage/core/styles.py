"""Sweep style variants accepted by the coverage planner."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Dict, Mapping, Type

DEFAULT_STYLE = "zigzag"
DEFAULT_LINE_SPACING_M = 0.6
DEFAULT_SWEEP_ANGLE_DEG = 90.0


class StyleError(ValueError):
    """Raised when style parameters are invalid."""


@dataclass(frozen=True)
class StyleParameters:
    line_spacing: float

    name: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if not math.isfinite(self.line_spacing) or self.line_spacing <= 0:
            raise StyleError(f"line_spacing must be a positive distance, got {self.line_spacing}")

    def as_params(self) -> Dict[str, object]:
        """Parameter mapping understood by the robot-side coverage planner node."""

        return {
            "style": self.name,
            "line_spacing": self.line_spacing,
            "sweep_angle_deg": DEFAULT_SWEEP_ANGLE_DEG,
        }


@dataclass(frozen=True)
class Zigzag(StyleParameters):
    """Horizontal sweep lines."""

    name: ClassVar[str] = "zigzag"


@dataclass(frozen=True)
class Ladder(StyleParameters):
    """Vertical sweep lines."""

    name: ClassVar[str] = "ladder"


@dataclass(frozen=True)
class Diagonal(StyleParameters):
    """Sweep lines rotated by ``sweep_angle_deg`` from horizontal."""

    sweep_angle_deg: float = DEFAULT_SWEEP_ANGLE_DEG

    name: ClassVar[str] = "diagonal"

    def __post_init__(self) -> None:
        super().__post_init__()
        if not 0.0 <= self.sweep_angle_deg <= 180.0:
            raise StyleError(f"sweep_angle_deg must be within [0, 180], got {self.sweep_angle_deg}")

    def as_params(self) -> Dict[str, object]:
        params = super().as_params()
        params["sweep_angle_deg"] = self.sweep_angle_deg
        return params


STYLES: Dict[str, Type[StyleParameters]] = {
    Zigzag.name: Zigzag,
    Ladder.name: Ladder,
    Diagonal.name: Diagonal,
}


def style_from_mapping(values: Mapping[str, object]) -> StyleParameters:
    """Build a style from loosely typed dashboard fields.

    Recognised keys are ``style``, ``line_spacing`` and ``sweep_angle_deg``;
    missing keys fall back to the dashboard defaults. A sweep angle is only
    accepted for the diagonal style.
    """

    name = str(values.get("style", DEFAULT_STYLE)).strip().lower()
    style_cls = STYLES.get(name)
    if style_cls is None:
        raise StyleError(f"Unknown style '{name}'; expected one of {sorted(STYLES)}")

    spacing = _as_float(values, "line_spacing", DEFAULT_LINE_SPACING_M)
    if style_cls is Diagonal:
        angle = _as_float(values, "sweep_angle_deg", DEFAULT_SWEEP_ANGLE_DEG)
        return Diagonal(spacing, angle)
    if values.get("sweep_angle_deg") is not None:
        raise StyleError(f"sweep_angle_deg only applies to the diagonal style, not '{name}'")
    return style_cls(spacing)


def _as_float(values: Mapping[str, object], key: str, default: float) -> float:
    value = values.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        raise StyleError(f"Style parameter '{key}' must be a number")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise StyleError(f"Style parameter '{key}' must be a number") from exc


__all__ = [
    "DEFAULT_LINE_SPACING_M",
    "DEFAULT_STYLE",
    "DEFAULT_SWEEP_ANGLE_DEG",
    "Diagonal",
    "Ladder",
    "STYLES",
    "StyleError",
    "StyleParameters",
    "Zigzag",
    "style_from_mapping",
]
