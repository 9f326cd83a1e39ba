"""
Domain math utilities - vector, quaternion and angle calculations
"""
from .geometry import Vector3f, Quaternion
from .angles import RAD_MULTIPLIER, deg_to_rad, rad_to_deg

__all__ = [
    'Vector3f', 'Quaternion',
    'RAD_MULTIPLIER', 'deg_to_rad', 'rad_to_deg'
]
