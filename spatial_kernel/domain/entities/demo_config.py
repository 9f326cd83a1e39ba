# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import os
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_ANGLE_DEG = "45"
DEFAULT_AXIS = "1,0,0"
DEFAULT_POINT = "0,0,1,1"


def _parse_floats(value: str, count: int, name: str) -> Tuple[float, ...]:
    parts = value.replace(" ", "").split(",")
    if len(parts) != count:
        raise ValueError(f"{name} expects {count} comma-separated values, got '{value}'")
    try:
        return tuple(float(part) for part in parts)
    except ValueError:
        raise ValueError(f"{name} contains a non-numeric value: '{value}'") from None


@dataclass
class DemoConfig:
    """Rotation demo configuration"""
    angle_deg: float
    axis: Tuple[float, float, float]
    point: Tuple[float, float, float, float]  # w, x, y, z

    @classmethod
    def from_params(cls, angle_deg: str, axis: str, point: str) -> 'DemoConfig':
        """Create configuration from string parameters"""
        (angle,) = _parse_floats(str(angle_deg), 1, "angle")
        return cls(
            angle_deg=angle,
            axis=_parse_floats(axis, 3, "axis"),
            point=_parse_floats(point, 4, "point"),
        )

    @classmethod
    def from_env(cls, angle_deg: Optional[str] = None, axis: Optional[str] = None,
                 point: Optional[str] = None) -> 'DemoConfig':
        """Create configuration from environment, explicit values take precedence"""
        return cls.from_params(
            angle_deg if angle_deg is not None else os.getenv('SPATIAL_DEMO_ANGLE', DEFAULT_ANGLE_DEG),
            axis if axis is not None else os.getenv('SPATIAL_DEMO_AXIS', DEFAULT_AXIS),
            point if point is not None else os.getenv('SPATIAL_DEMO_POINT', DEFAULT_POINT),
        )
