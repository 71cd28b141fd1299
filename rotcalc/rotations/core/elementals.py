# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import numpy as np

from rotcalc._typing import AXIS, DOUBLE_ARRAY
from rotcalc.rotations.core._helpers import _check_scalars
from rotcalc.rotations.core.constants import DEG2RAD


__all__ = ["rot_x", "rot_y", "rot_z", "elemental_rotmat", "axis_angle_to_quaternion"]


def rot_x(angle_deg: float) -> DOUBLE_ARRAY:
    r"""
    This function returns the matrix for a right handed rotation about the x axis by ``angle_deg`` degrees.

    Mathematically this rotation is defined as:

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    For example::

        >>> from rotcalc.rotations import rot_x
        >>> rot_x(90).round(6)
        array([[ 1.,  0.,  0.],
               [ 0.,  0., -1.],
               [ 0.,  1.,  0.]])

    :param angle_deg: The angle to form the rotation matrix for in degrees
    :return: The rotation matrix corresponding to the rotation angle
    """

    theta = _check_scalars(angle_deg)[0] * DEG2RAD

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.array([[1, 0, 0],
                     [0, ctheta, -stheta],
                     [0, stheta, ctheta]])


def rot_y(angle_deg: float) -> DOUBLE_ARRAY:
    r"""
    This function returns the matrix for a right handed rotation about the y axis by ``angle_deg`` degrees.

    This rotation is defined as:

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]

    :param angle_deg: The angle to form the rotation matrix for in degrees
    :return: The rotation matrix corresponding to the rotation angle
    """

    theta = _check_scalars(angle_deg)[0] * DEG2RAD

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.array([[ctheta, 0, stheta],
                     [0, 1, 0],
                     [-stheta, 0, ctheta]])


def rot_z(angle_deg: float) -> DOUBLE_ARRAY:
    r"""
    This function returns the matrix for a right handed rotation about the z axis by ``angle_deg`` degrees.

    This rotation is defined as:

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    :param angle_deg: The angle to form the rotation matrix for in degrees
    :return: The rotation matrix corresponding to the rotation angle
    """

    theta = _check_scalars(angle_deg)[0] * DEG2RAD

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.array([[ctheta, -stheta, 0],
                     [stheta, ctheta, 0],
                     [0, 0, 1]])


def elemental_rotmat(axis: AXIS, angle_deg: float) -> DOUBLE_ARRAY:
    """
    Returns the rotation matrix about the named basis axis.

    :param axis: the axis to rotate about (x, y, or z)
    :param angle_deg: the angle to rotate by in degrees
    :return: the rotation matrix
    :raises ValueError: if the axis is not one of x, y, or z
    """

    match axis:
        case 'x':
            return rot_x(angle_deg)
        case 'y':
            return rot_y(angle_deg)
        case 'z':
            return rot_z(angle_deg)
        case _:
            raise ValueError('The axis must be one of x, y, or z.  You entered {!r}'.format(axis))


def axis_angle_to_quaternion(axis: AXIS, angle_deg: float) -> DOUBLE_ARRAY:
    r"""
    Returns the rotation quaternion for a rotation of ``angle_deg`` degrees about one of the basis axes.

    The sine of the half angle is placed on the component of the chosen axis and the cosine of the half angle on the
    scalar component:

    .. math::
        \mathbf{q}_x(\theta)=\left[\begin{array}{cccc}\text{sin}(\frac{\theta}{2}) & 0 & 0 &
        \text{cos}(\frac{\theta}{2})\end{array}\right]^T

    and similarly for y and z.

    :param axis: the axis to rotate about (x, y, or z)
    :param angle_deg: the angle to rotate by in degrees
    :return: the elemental rotation quaternion
    :raises ValueError: if the axis is not one of x, y, or z
    """

    half_angle = _check_scalars(angle_deg)[0] * DEG2RAD / 2

    quaternion = np.array([0, 0, 0, np.cos(half_angle)])

    match axis:
        case 'x':
            quaternion[0] = np.sin(half_angle)
        case 'y':
            quaternion[1] = np.sin(half_angle)
        case 'z':
            quaternion[2] = np.sin(half_angle)
        case _:
            raise ValueError('The axis must be one of x, y, or z.  You entered {!r}'.format(axis))

    return quaternion
