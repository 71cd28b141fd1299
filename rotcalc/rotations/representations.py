# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module defines the user facing rotation representations and the single place they are turned into a rotation.

Each representation is a small frozen dataclass holding the raw values a user entered.  The :data:`Representation`
union is the complete set of inputs understood by :func:`representation_to_quaternion`, which holds the one conversion
path for each of them.
"""

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from rotcalc._typing import ARRAY_LIKE, DOUBLE_ARRAY
from rotcalc.rotations.core.conversions import (axis_angle_vector_to_quaternion, degrees_to_radians,
                                                euler_to_quaternion, radians_to_degrees, rotmat_to_quaternion)
from rotcalc.rotations.core.quaternion_math import quaternion_normalize
from rotcalc.rotations.result import RotationResult


__all__ = ['AngleUnit', 'EulerRepresentation', 'QuaternionRepresentation', 'AxisAngleRepresentation',
           'MatrixRepresentation', 'Representation', 'representation_to_quaternion', 'representation_to_result']


class AngleUnit(Enum):
    """
    This enumeration provides the units angles can be entered and displayed in.

    Degrees are used for all computation.  Radians are only converted at the edges.
    """

    DEGREES = "deg"
    """
    Angles are in degrees (default)
    """

    RADIANS = "rad"
    """
    Angles are in radians
    """

    def to_degrees(self, angle: float) -> float:
        """
        Converts an angle given in this unit into degrees.

        :param angle: the angle in this unit
        :return: the angle in degrees
        """

        if self is AngleUnit.RADIANS:
            return radians_to_degrees(angle)

        return angle

    def from_degrees(self, angle: float) -> float:
        """
        Converts an angle given in degrees into this unit.

        :param angle: the angle in degrees
        :return: the angle in this unit
        """

        if self is AngleUnit.RADIANS:
            return degrees_to_radians(angle)

        return angle


@dataclass(frozen=True)
class EulerRepresentation:
    """
    XYZ Euler angles as entered by a user.
    """

    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0

    unit: AngleUnit = AngleUnit.DEGREES
    """
    The unit the angles are expressed in
    """


@dataclass(frozen=True)
class QuaternionRepresentation:
    """
    A quaternion as entered by a user in ``x, y, z, w`` order.

    The values do not need to be normalized.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns the values as an ``[x, y, z, w]`` array
        """

        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)


@dataclass(frozen=True)
class AxisAngleRepresentation:
    """
    A rotation axis (not necessarily unit length) and a rotation angle as entered by a user.
    """

    axis_x: float = 0.0
    axis_y: float = 0.0
    axis_z: float = 1.0

    angle: float = 0.0

    unit: AngleUnit = AngleUnit.DEGREES
    """
    The unit the angle is expressed in
    """


def _identity_rows() -> tuple[tuple[float, float, float], ...]:
    return ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


@dataclass(frozen=True)
class MatrixRepresentation:
    """
    A row major 3x3 rotation matrix as entered by a user.

    The rows are stored as tuples so that the representation stays immutable.  Use :meth:`from_array` to build one
    from any 3x3 array like.
    """

    rows: tuple[tuple[float, float, float], ...] = field(default_factory=_identity_rows)

    @classmethod
    def from_array(cls, matrix: ARRAY_LIKE) -> 'MatrixRepresentation':
        """
        Builds the representation from a 3x3 array like object.

        :param matrix: the row major matrix
        :return: the representation
        :raises ValueError: if the matrix is not 3x3
        """

        array = np.asarray(matrix, dtype=np.float64)

        if array.shape != (3, 3):
            raise ValueError(f'The matrix must be 3x3, not {array.shape}')

        return cls(tuple(tuple(float(value) for value in row) for row in array))  # type: ignore[arg-type]

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns the matrix as a 3x3 array
        """

        return np.array(self.rows, dtype=np.float64)


Representation = EulerRepresentation | QuaternionRepresentation | AxisAngleRepresentation | MatrixRepresentation
"""
Every rotation representation a user can enter
"""


def representation_to_quaternion(representation: Representation) -> DOUBLE_ARRAY:
    """
    Converts any of the user facing representations into a unit rotation quaternion.

    * Euler angles use :func:`.euler_to_quaternion`
    * quaternions are normalized with :func:`.quaternion_normalize` (a zero quaternion becomes the identity)
    * axis/angle uses :func:`.axis_angle_vector_to_quaternion` (a zero axis becomes the identity)
    * matrices use :func:`.rotmat_to_quaternion`.  The matrix is used as is, so it should be validated (and
      repaired if needed) first, see :func:`.validate_matrix`.

    :param representation: the representation to convert
    :return: the rotation quaternion as ``[x, y, z, w]``
    :raises TypeError: if the input is not one of the known representations
    """

    match representation:
        case EulerRepresentation(roll=roll, pitch=pitch, yaw=yaw, unit=unit):
            return euler_to_quaternion(unit.to_degrees(roll), unit.to_degrees(pitch), unit.to_degrees(yaw))

        case QuaternionRepresentation():
            return quaternion_normalize(representation.as_array())

        case AxisAngleRepresentation(axis_x=axis_x, axis_y=axis_y, axis_z=axis_z, angle=angle, unit=unit):
            return axis_angle_vector_to_quaternion(axis_x, axis_y, axis_z, unit.to_degrees(angle))

        case MatrixRepresentation():
            return rotmat_to_quaternion(representation.as_array())

        case _:
            raise TypeError('Unknown rotation representation {!r}'.format(representation))


def representation_to_result(representation: Representation) -> RotationResult:
    """
    Converts any of the user facing representations into a :class:`.RotationResult`.

    :param representation: the representation to convert
    :return: the quaternion, Euler, and matrix views of the rotation
    """

    return RotationResult.from_quaternion(representation_to_quaternion(representation))
