# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

"""
Geometric math primitives.
Contains the 3D vector and quaternion types used to build and compose rotations.

Components are kept as 32-bit floats. Nothing here raises on degenerate input:
division by zero, normalizing a zero vector or an out-of-range arc cosine
yield inf/nan the way IEEE-754 arithmetic does.
"""

from numbers import Real

import numpy as np


def _f32(value) -> np.float32:
    return np.float32(value)


class Vector3f:
    """3D vector with 32-bit float components"""

    def __init__(self, x: float, y: float, z: float):
        self.x = _f32(x)
        self.y = _f32(y)
        self.z = _f32(z)

    def copy(self) -> 'Vector3f':
        """Create a copy of this vector"""
        return Vector3f(self.x, self.y, self.z)

    def add(self, other: 'Vector3f') -> 'Vector3f':
        return Vector3f(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: 'Vector3f') -> 'Vector3f':
        return Vector3f(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, d: float) -> 'Vector3f':
        d = _f32(d)
        return Vector3f(self.x * d, self.y * d, self.z * d)

    def divide(self, d: float) -> 'Vector3f':
        """Divide every component by d. A zero divisor gives inf/nan components."""
        d = _f32(d)
        with np.errstate(divide='ignore', invalid='ignore'):
            return Vector3f(self.x / d, self.y / d, self.z / d)

    def add_in_place(self, other: 'Vector3f') -> 'Vector3f':
        """Accumulate another vector into this one"""
        self.x = self.x + other.x
        self.y = self.y + other.y
        self.z = self.z + other.z
        return self

    def add_in_place_reference(self, other: 'Vector3f') -> 'Vector3f':
        """
        Accumulate with the legacy z rule: z += other.x.

        Reproduces results of the historical += operator bit for bit.
        Use add_in_place (or +=) for ordinary accumulation.
        """
        self.x = self.x + other.x
        self.y = self.y + other.y
        self.z = self.z + other.x
        return self

    def scale_in_place(self, d: float) -> 'Vector3f':
        """Multiply every component of this vector by d"""
        d = _f32(d)
        self.x = self.x * d
        self.y = self.y * d
        self.z = self.z * d
        return self

    def cross(self, other: 'Vector3f') -> 'Vector3f':
        """Right-handed cross product"""
        return Vector3f(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: 'Vector3f') -> np.float32:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> np.float32:
        """Euclidean norm"""
        return np.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> 'Vector3f':
        """Unit vector in the same direction. A zero vector gives nan components."""
        return self / self.length()

    def angle_between(self, other: 'Vector3f') -> np.float32:
        """Angle to another vector in radians"""
        # (dot / |other|) / |self|, kept in this order
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.arccos((self.dot(other) / other.length()) / self.length())

    def __add__(self, other):
        if not isinstance(other, Vector3f):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector3f):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, d):
        if not isinstance(d, Real):
            return NotImplemented
        return self.scale(d)

    def __truediv__(self, d):
        if not isinstance(d, Real):
            return NotImplemented
        return self.divide(d)

    def __iadd__(self, other):
        if not isinstance(other, Vector3f):
            return NotImplemented
        return self.add_in_place(other)

    def __imul__(self, d):
        if not isinstance(d, Real):
            return NotImplemented
        return self.scale_in_place(d)

    def __str__(self) -> str:
        return f"[ {self.x}; {self.y}; {self.z} ]"

    def __repr__(self) -> str:
        return f"Vector3f(x={self.x}, y={self.y}, z={self.z})"


class Quaternion:
    """
    Quaternion w + xi + yj + zk.

    The vector part is stored once, as the Vector3f ``v``. The ``x``, ``y`` and
    ``z`` properties read and write through to it, so both views stay in sync.
    """

    def __init__(self, w: float, x: float, y: float, z: float):
        self.w = _f32(w)
        self.v = Vector3f(x, y, z)

    @classmethod
    def from_axis_angle(cls, rad: float, axis: Vector3f) -> 'Quaternion':
        """
        Build a quaternion from an axis and an angle in radians.

        Uses the full angle: w = cos(rad), vector part = axis * sin(rad).
        The axis must be unit length for the result to be a unit rotation;
        this is not checked. The caller's axis is left untouched.
        """
        rad = _f32(rad)
        vec = axis.copy()
        vec *= np.sin(rad)
        return cls(np.cos(rad), vec.x, vec.y, vec.z)

    @property
    def x(self) -> np.float32:
        return self.v.x

    @x.setter
    def x(self, value: float) -> None:
        self.v.x = _f32(value)

    @property
    def y(self) -> np.float32:
        return self.v.y

    @y.setter
    def y(self, value: float) -> None:
        self.v.y = _f32(value)

    @property
    def z(self) -> np.float32:
        return self.v.z

    @z.setter
    def z(self, value: float) -> None:
        self.v.z = _f32(value)

    def add(self, other: 'Quaternion') -> 'Quaternion':
        return Quaternion(self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: 'Quaternion') -> 'Quaternion':
        return Quaternion(self.w - other.w, self.x - other.x, self.y - other.y, self.z - other.z)

    def add_scalar(self, d: float) -> 'Quaternion':
        """Add a real number to the scalar part only"""
        return Quaternion(self.w + _f32(d), self.x, self.y, self.z)

    def subtract_scalar(self, d: float) -> 'Quaternion':
        """Subtract a real number from the scalar part only"""
        return Quaternion(self.w - _f32(d), self.x, self.y, self.z)

    def scale(self, d: float) -> 'Quaternion':
        d = _f32(d)
        return Quaternion(self.w * d, self.x * d, self.y * d, self.z * d)

    def divide(self, d: float) -> 'Quaternion':
        d = _f32(d)
        with np.errstate(divide='ignore', invalid='ignore'):
            return Quaternion(self.w / d, self.x / d, self.y / d, self.z / d)

    def multiply(self, other: 'Quaternion') -> 'Quaternion':
        """
        Hamilton product self * other.

        Not commutative. Composing rotations is done by chaining products,
        e.g. q1 * p * q2.
        """
        w, x, y, z = self.w, self.x, self.y, self.z
        ow, ox, oy, oz = other.w, other.x, other.y, other.z
        return Quaternion(
            w * ow - x * ox - y * oy - z * oz,
            w * ox + x * ow + y * oz - z * oy,
            w * oy - x * oz + y * ow + z * ox,
            w * oz + x * oy - y * ox + z * ow,
        )

    hamilton = multiply

    def get_scalar_part(self) -> np.float32:
        return self.w

    def get_vector_part(self) -> Vector3f:
        """Copy of the vector part; use ``v`` for the live view"""
        return self.v.copy()

    def __add__(self, other):
        if isinstance(other, Quaternion):
            return self.add(other)
        if isinstance(other, Real):
            return self.add_scalar(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Quaternion):
            return self.subtract(other)
        if isinstance(other, Real):
            return self.subtract_scalar(other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            return self.multiply(other)
        if isinstance(other, Real):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, d):
        if not isinstance(d, Real):
            return NotImplemented
        return self.divide(d)

    def __str__(self) -> str:
        return f"[ {self.w}; {self.x}i; {self.y}j; {self.z}k ]"

    def __repr__(self) -> str:
        return f"Quaternion(w={self.w}, x={self.x}, y={self.y}, z={self.z})"
