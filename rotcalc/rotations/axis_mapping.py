# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module resolves axis swaps (signed permutations of the basis axes) into rotations.

An :class:`AxisMapping` records, for each of the original x, y, and z axes, the signed axis it points along after the
swap.  For instance ``AxisMapping('-y', 'z', '-x')`` means the original x axis now points along -y, y along z, and
z along -x.

Mappings are changed with :func:`apply_ninety_degree_step`, which rotates by exactly 90 degrees about a world axis by
relabeling the signed axes.  Because no floating point math is involved, any sequence of steps that returns to a
previous orientation returns to exactly the same mapping.  Starting from :data:`IDENTITY_MAPPING` this also keeps
every mapping a proper (right handed) rotation.  Mappings built any other way are not checked for handedness.
"""

from dataclasses import dataclass
from typing import get_args

import numpy as np

from rotcalc._typing import AXIS, DOUBLE_ARRAY, SIGNED_AXIS
from rotcalc.rotations.core.conversions import rotmat_to_quaternion
from rotcalc.rotations.result import RotationResult


__all__ = ['SIGNED_AXES', 'AxisMapping', 'IDENTITY_MAPPING', 'signed_axis_to_vector', 'mapping_to_rotmat',
           'mapping_to_quaternion', 'mapping_result', 'apply_ninety_degree_step']


SIGNED_AXES: tuple[str, ...] = get_args(SIGNED_AXIS)
"""
All of the valid signed axis labels
"""


_POSITIVE_STEPS: dict[str, dict[str, str]] = {
    'x': {'y': 'z', 'z': '-y', '-y': '-z', '-z': 'y'},
    'y': {'z': 'x', 'x': '-z', '-z': '-x', '-x': 'z'},
    'z': {'x': 'y', 'y': '-x', '-x': '-y', '-y': 'x'},
}
"""
Where each signed axis label goes under a +90 degree rotation about a world axis.

Labels along the rotation axis are absent because they do not move.
"""

_NEGATIVE_STEPS: dict[str, dict[str, str]] = {axis: {after: before for before, after in table.items()}
                                              for axis, table in _POSITIVE_STEPS.items()}
"""
Where each signed axis label goes under a -90 degree rotation about a world axis (the inverse of the positive table)
"""


def _check_signed_axis(label: str) -> None:
    if label not in SIGNED_AXES:
        raise ValueError('Signed axes must be one of {}.  You entered {!r}'.format(', '.join(SIGNED_AXES), label))


@dataclass(frozen=True)
class AxisMapping:
    """
    Where each of the original basis axes points after an axis swap.
    """

    x: SIGNED_AXIS = 'x'
    """
    The signed axis the original x axis now points along
    """

    y: SIGNED_AXIS = 'y'
    """
    The signed axis the original y axis now points along
    """

    z: SIGNED_AXIS = 'z'
    """
    The signed axis the original z axis now points along
    """

    def __post_init__(self):

        for label in (self.x, self.y, self.z):
            _check_signed_axis(label)


IDENTITY_MAPPING: AxisMapping = AxisMapping('x', 'y', 'z')
"""
The mapping where every axis points along itself (no rotation)
"""


def signed_axis_to_vector(label: SIGNED_AXIS) -> DOUBLE_ARRAY:
    """
    Returns the signed unit vector for a signed axis label.

    For example ``'-y'`` gives ``[0, -1, 0]``.

    :param label: the signed axis label
    :return: the unit vector as a length 3 array
    :raises ValueError: if the label is not a valid signed axis
    """

    _check_signed_axis(label)

    vector = np.zeros(3)
    vector['xyz'.index(label[-1])] = -1.0 if label.startswith('-') else 1.0

    return vector


def mapping_to_rotmat(mapping: AxisMapping) -> DOUBLE_ARRAY:
    """
    Returns the rotation matrix for an axis mapping.

    The columns of the matrix are the unit vectors the original x, y, and z axes point along, so that multiplying the
    matrix by a basis vector gives that basis vector's image.

    :param mapping: the axis mapping
    :return: the 3x3 rotation matrix
    """

    return np.column_stack([signed_axis_to_vector(mapping.x),
                            signed_axis_to_vector(mapping.y),
                            signed_axis_to_vector(mapping.z)])


def mapping_to_quaternion(mapping: AxisMapping) -> DOUBLE_ARRAY:
    """
    Returns the rotation quaternion for an axis mapping.

    This is :func:`.rotmat_to_quaternion` applied to :func:`mapping_to_rotmat`, so the sign of the quaternion is not
    canonicalized.

    :param mapping: the axis mapping
    :return: the rotation quaternion as ``[x, y, z, w]``
    """

    return rotmat_to_quaternion(mapping_to_rotmat(mapping))


def mapping_result(mapping: AxisMapping) -> RotationResult:
    """
    Returns the quaternion, Euler, and matrix views of the rotation for an axis mapping.

    :param mapping: the axis mapping
    :return: the result for the mapping
    """

    return RotationResult.from_quaternion(mapping_to_quaternion(mapping))


def apply_ninety_degree_step(mapping: AxisMapping, axis: AXIS, positive: bool) -> AxisMapping:
    """
    Rotates an axis mapping by 90 degrees about a world axis.

    The rotation is done by relabeling.  For a +90 degree rotation about x, every ``y`` label becomes ``z``, ``z``
    becomes ``-y``, ``-y`` becomes ``-z``, and ``-z`` becomes ``y`` while ``x`` and ``-x`` are unchanged.  The tables
    for y and z follow the same right hand rule and a -90 degree rotation uses the inverse table.

    :param mapping: the mapping to rotate
    :param axis: the world axis to rotate about (x, y, or z)
    :param positive: ``True`` to rotate by +90 degrees, ``False`` to rotate by -90 degrees
    :return: the rotated mapping
    :raises ValueError: if the axis is not one of x, y, or z
    """

    if axis not in _POSITIVE_STEPS:
        raise ValueError('The axis must be one of x, y, or z.  You entered {!r}'.format(axis))

    table = _POSITIVE_STEPS[axis] if positive else _NEGATIVE_STEPS[axis]

    return AxisMapping(table.get(mapping.x, mapping.x),  # type: ignore[arg-type]
                       table.get(mapping.y, mapping.y),  # type: ignore[arg-type]
                       table.get(mapping.z, mapping.z))  # type: ignore[arg-type]
