# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import logging
from typing import Tuple

from ...domain.entities import DemoConfig
from ...domain.math import Quaternion, Vector3f, deg_to_rad


logger = logging.getLogger(__name__)


class RotationService:
    """Service composing a quaternion with a pair of opposite rotations"""

    def __init__(self, config: DemoConfig):
        self.config = config

    def build_rotation_pair(self) -> Tuple[Quaternion, Quaternion]:
        """Rotations by +angle and -angle about the configured axis"""
        angle = deg_to_rad(self.config.angle_deg)
        axis = Vector3f(*self.config.axis).normalize()
        q1 = Quaternion.from_axis_angle(angle, axis)
        q2 = Quaternion.from_axis_angle(-angle, axis)
        logger.debug(f"Rotation pair built: q1={q1}, q2={q2}")
        return q1, q2

    def compose(self, p: Quaternion) -> Quaternion:
        """Compute q1 * p * q2"""
        q1, q2 = self.build_rotation_pair()
        return q1 * p * q2

    def run(self) -> Tuple[Quaternion, Quaternion]:
        """Compose the configured point and return (before, after)"""
        p = Quaternion(*self.config.point)
        result = self.compose(p)
        logger.info(f"{p} {self.config.angle_deg:g}deg > {result}")
        return p, result
