# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

"""
Angle unit conversion helpers.
Quaternion construction always expects radians; callers convert with these.
"""

import numpy as np

# Degrees per radian
RAD_MULTIPLIER = np.float32(180.0 / np.pi)


def rad_to_deg(rad: float) -> np.float32:
    return np.float32(rad) * RAD_MULTIPLIER


def deg_to_rad(deg: float) -> np.float32:
    return np.float32(deg) / RAD_MULTIPLIER
