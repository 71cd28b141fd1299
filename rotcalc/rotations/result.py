# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`RotationResult` which bundles the three primary views of a single rotation.
"""

from typing import NamedTuple, Self

import numpy as np

from rotcalc._typing import ARRAY_LIKE, DOUBLE_ARRAY
from rotcalc.rotations.core.conversions import EulerAngles, quaternion_to_euler, quaternion_to_rotmat
from rotcalc.rotations.core.quaternion_math import identity_quaternion, quaternion_normalize


class RotationResult(NamedTuple):
    """
    The quaternion, Euler angle, and matrix views of one rotation.

    A :class:`RotationResult` is always derived from some other source of truth (a chain of rotation steps, an axis
    mapping, or user entered values) and is never updated in place.  Build one with :meth:`from_quaternion`, which
    normalizes the quaternion and derives the other two views from it, so that the three views always agree::

        >>> from rotcalc.rotations import RotationResult
        >>> result = RotationResult.from_quaternion([0, 0, 0, 2])
        >>> result.quaternion
        array([0., 0., 0., 1.])
        >>> result.euler
        EulerAngles(roll=0.0, pitch=0.0, yaw=0.0)

    The arrays stored in the result are read only.
    """

    quaternion: DOUBLE_ARRAY
    """
    The unit rotation quaternion as ``[x, y, z, w]``.  The sign is not canonicalized.
    """

    euler: EulerAngles
    """
    The XYZ Euler angles in degrees
    """

    matrix: DOUBLE_ARRAY
    """
    The 3x3 row major rotation matrix
    """

    @classmethod
    def from_quaternion(cls, quaternion: ARRAY_LIKE) -> Self:
        """
        Creates the result for a rotation quaternion.

        :param quaternion: the rotation quaternion as ``[x, y, z, w]``.  It is normalized first.
        :return: the result with all views filled in
        """

        normalized = quaternion_normalize(quaternion)

        matrix = quaternion_to_rotmat(normalized)

        normalized.setflags(write=False)
        matrix.setflags(write=False)

        return cls(normalized, quaternion_to_euler(normalized), matrix)

    @classmethod
    def identity(cls) -> Self:
        """
        Returns the result for no rotation.
        """

        return cls.from_quaternion(identity_quaternion())

    def is_close(self, other: 'RotationResult', atol: float = 1e-9) -> bool:
        """
        Checks whether two results represent the same rotation.

        The comparison is done on the rotation matrices so that quaternions which differ only by sign are considered
        the same rotation.

        :param other: the result to compare against
        :param atol: the absolute tolerance to use per matrix element
        :return: ``True`` if the rotations match
        """

        return bool(np.allclose(self.matrix, other.matrix, rtol=0, atol=atol))
