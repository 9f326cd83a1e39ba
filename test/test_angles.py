# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import math

import numpy as np
import pytest

from spatial_kernel.domain.math import RAD_MULTIPLIER, deg_to_rad, rad_to_deg


def test_multiplier_is_degrees_per_radian():
    assert isinstance(RAD_MULTIPLIER, np.float32)
    assert RAD_MULTIPLIER == pytest.approx(180.0 / math.pi)


def test_deg_to_rad():
    assert deg_to_rad(180.0) == pytest.approx(math.pi)
    assert deg_to_rad(45.0) == pytest.approx(math.pi / 4)
    assert deg_to_rad(-90) == pytest.approx(-math.pi / 2)


def test_rad_to_deg():
    assert rad_to_deg(math.pi / 2) == pytest.approx(90.0)
    assert rad_to_deg(0.0) == 0.0


def test_conversions_are_inverse():
    assert rad_to_deg(deg_to_rad(33.0)) == pytest.approx(33.0)
