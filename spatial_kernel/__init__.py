"""
Minimal 3D spatial math kernel: vectors, quaternions and rotation composition.
"""
from .domain.math import Vector3f, Quaternion, deg_to_rad, rad_to_deg

__all__ = ['Vector3f', 'Quaternion', 'deg_to_rad', 'rad_to_deg']
