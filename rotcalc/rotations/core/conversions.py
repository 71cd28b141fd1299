# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines for rotation representations

This module contains the routines for converting between the different rotation representations described in
:ref:`Rotation Representations <rotation-representation-table>`.  All routines operate on a single rotation expressed
as numpy arrays (or array like objects) and all angles are in degrees.
"""

import logging

from typing import NamedTuple

import numpy as np

from rotcalc._typing import ARRAY_LIKE, DOUBLE_ARRAY

from rotcalc.rotations.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                             _check_scalars)
from rotcalc.rotations.core.constants import DEG2RAD, DEGENERACY_TOLERANCE, GIMBAL_LOCK_TOLERANCE, RAD2DEG
from rotcalc.rotations.core.elementals import rot_x, rot_y, rot_z
from rotcalc.rotations.core.quaternion_math import identity_quaternion, quaternion_normalize


__all__ = ['EulerAngles', 'AxisAngle',
           'euler_to_quaternion', 'euler_to_rotmat',
           'quaternion_to_euler', 'quaternion_to_rotmat', 'quaternion_to_axis_angle',
           'rotmat_to_quaternion', 'rotmat_to_euler',
           'axis_angle_vector_to_quaternion',
           'degrees_to_radians', 'radians_to_degrees']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting degenerate inputs that were replaced by a fallback.
"""


class EulerAngles(NamedTuple):
    """
    XYZ Euler angles in degrees.

    The rotation matrix these angles represent is :math:`\\mathbf{R}_z(yaw)\\mathbf{R}_y(pitch)\\mathbf{R}_x(roll)`.
    """

    roll: float
    """
    The rotation about the x axis in degrees
    """

    pitch: float
    """
    The rotation about the y axis in degrees.

    This is always in [-90, 90] when produced by :func:`quaternion_to_euler`.  At either end roll and yaw are coupled
    (gimbal lock), so :func:`quaternion_to_euler` reports a yaw of 0 and places their combination in the roll.
    """

    yaw: float
    """
    The rotation about the z axis in degrees
    """


class AxisAngle(NamedTuple):
    """
    A rotation expressed as a unit rotation axis and an angle in degrees.
    """

    axis: DOUBLE_ARRAY
    """
    The unit length rotation axis as a length 3 array
    """

    angle_deg: float
    """
    The right handed rotation angle about :attr:`axis` in degrees
    """


def degrees_to_radians(angle: float) -> float:
    """
    Converts an angle from degrees to radians.

    :param angle: the angle in degrees
    :returns: the angle in radians
    """

    return angle * DEG2RAD


def radians_to_degrees(angle: float) -> float:
    """
    Converts an angle from radians to degrees.

    :param angle: the angle in radians
    :returns: the angle in degrees
    """

    return angle * RAD2DEG


def euler_to_quaternion(roll: float, pitch: float, yaw: float) -> DOUBLE_ARRAY:
    r"""
    This function converts XYZ Euler angles in degrees into a rotation quaternion.

    The quaternion is formed from the half angle sines and cosines of each angle:

    .. math::
        q_s = c_r c_p c_y + s_r s_p s_y \\
        q_x = s_r c_p c_y - c_r s_p s_y \\
        q_y = c_r s_p c_y + s_r c_p s_y \\
        q_z = c_r c_p s_y - s_r s_p c_y

    where :math:`c_\bullet` and :math:`s_\bullet` are the cosine and sine of half of the roll (:math:`r`), pitch
    (:math:`p`), and yaw (:math:`y`) angles.  This is the same rotation as :func:`euler_to_rotmat`.  The result is
    normalized before being returned.

    :param roll: the rotation about the x axis in degrees
    :param pitch: the rotation about the y axis in degrees
    :param yaw: the rotation about the z axis in degrees
    :return: the rotation quaternion
    """

    roll, pitch, yaw = _check_scalars(roll, pitch, yaw)

    half_roll = roll * DEG2RAD / 2
    half_pitch = pitch * DEG2RAD / 2
    half_yaw = yaw * DEG2RAD / 2

    cr = np.cos(half_roll)
    sr = np.sin(half_roll)
    cp = np.cos(half_pitch)
    sp = np.sin(half_pitch)
    cy = np.cos(half_yaw)
    sy = np.sin(half_yaw)

    return quaternion_normalize([sr * cp * cy - cr * sp * sy,
                                 cr * sp * cy + sr * cp * sy,
                                 cr * cp * sy - sr * sp * cy,
                                 cr * cp * cy + sr * sp * sy])


def euler_to_rotmat(roll: float, pitch: float, yaw: float) -> DOUBLE_ARRAY:
    """
    This function converts XYZ Euler angles in degrees into a rotation matrix.

    The rotation about x is applied first, then about y, then about z, each about the fixed axes, so that the matrix is
    formed as ``rot_z(yaw) @ rot_y(pitch) @ rot_x(roll)`` using :func:`.rot_x`, :func:`.rot_y`, and :func:`.rot_z`.

    :param roll: the rotation about the x axis in degrees
    :param pitch: the rotation about the y axis in degrees
    :param yaw: the rotation about the z axis in degrees
    :return: the rotation matrix
    """

    rotation = np.eye(3)

    # loop through the angles and their axes and update the total rotation matrix
    for update in (rot_x(roll), rot_y(pitch), rot_z(yaw)):
        rotation = update @ rotation

    return rotation


def quaternion_to_euler(quaternion: ARRAY_LIKE) -> EulerAngles:
    r"""
    This function converts a rotation quaternion into XYZ Euler angles in degrees.

    The angles are computed as:

    .. math::
        roll = \text{atan2}(2(q_sq_x+q_yq_z), 1-2(q_x^2+q_y^2)) \\
        pitch = \text{asin}(2(q_sq_y-q_zq_x)) \\
        yaw = \text{atan2}(2(q_sq_z+q_xq_y), 1-2(q_y^2+q_z^2))

    When the argument of the arcsine reaches or exceeds 1 in magnitude (due to gimbal lock or rounding) the pitch is
    clamped to exactly :math:`\pm 90` degrees.

    At gimbal lock the roll and yaw angles are not unique.  Only :math:`roll-yaw` (at a pitch of 90 degrees) or
    :math:`roll+yaw` (at a pitch of -90 degrees) is determined, and the arguments of both arctangents above are pure
    rounding noise.  Therefore, when the arcsine argument is within :data:`.GIMBAL_LOCK_TOLERANCE` of :math:`\pm 1`,
    the yaw is set to 0 and the combined angle is recovered as the roll from the elements of the rotation matrix that
    remain well defined at the poles:

    .. math::
        roll = \text{atan2}(\pm 2(q_xq_y-q_sq_z), 1-2(q_x^2+q_z^2))

    where the sign matches the sign of the pitch.  The angles therefore always describe the same rotation as the
    quaternion.

    The input is assumed to be a unit quaternion.

    :param quaternion: The quaternion to be converted to euler angles
    :return: The euler angles corresponding to the rotation quaternion
    """

    x, y, z, w = _check_quaternion_array_and_shape(quaternion)

    sin_pitch = 2 * (w * y - z * x)
    if abs(sin_pitch) >= 1:
        pitch = np.sign(sin_pitch) * np.pi / 2
    else:
        pitch = np.arcsin(sin_pitch)

    if abs(sin_pitch) >= 1 - GIMBAL_LOCK_TOLERANCE:
        # gimbal lock
        roll = np.arctan2(np.sign(sin_pitch) * 2 * (x * y - w * z), 1 - 2 * (x * x + z * z))
        yaw = 0.0
    else:
        roll = np.arctan2(2 * (w * x + y * z), 1 - 2 * (x * x + y * y))
        yaw = np.arctan2(2 * (w * z + x * y), 1 - 2 * (y * y + z * z))

    return EulerAngles(float(roll * RAD2DEG), float(pitch * RAD2DEG), float(yaw * RAD2DEG))


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation quaternion into its equivalent rotation matrix.

    The closed form used is (row major):

    .. math::
        \mathbf{T}=\left[\begin{array}{ccc}1-2(q_y^2+q_z^2) & 2(q_xq_y-q_sq_z) & 2(q_xq_z+q_sq_y) \\
        2(q_xq_y+q_sq_z) & 1-2(q_x^2+q_z^2) & 2(q_yq_z-q_sq_x) \\
        2(q_xq_z-q_sq_y) & 2(q_yq_z+q_sq_x) & 1-2(q_x^2+q_y^2)\end{array}\right]

    The input is assumed to be a unit quaternion.  Note that :math:`\mathbf{q}` and :math:`-\mathbf{q}` produce the
    same matrix.  For example::

        >>> from rotcalc.rotations import quaternion_to_rotmat
        >>> from numpy import sqrt
        >>> quaternion_to_rotmat([sqrt(2)/2, 0, 0, sqrt(2)/2]).round(6)
        array([[ 1.,  0.,  0.],
               [ 0.,  0., -1.],
               [ 0.,  1.,  0.]])

    :param quaternion: The rotation quaternion to be converted to the rotation matrix
    :return: a numpy array containing the rotation matrix corresponding to the input quaternion
    """

    x, y, z, w = _check_quaternion_array_and_shape(quaternion)

    return np.array([[1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
                     [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
                     [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)]])


def quaternion_to_axis_angle(quaternion: ARRAY_LIKE) -> AxisAngle:
    r"""
    This function converts a rotation quaternion into a unit rotation axis and an angle in degrees.

    The quaternion is normalized first and then

    .. math::
        \theta = 2\text{cos}^{-1}(q_s) \\
        \hat{\mathbf{x}} = \frac{\mathbf{q}_v}{\left\|\mathbf{q}_v\right\|}

    so that the angle is in :math:`[0, 360)` degrees.  When the vector portion has (nearly) zero length there is no
    rotation and the z axis with an angle of 0 is returned.

    :param quaternion: the rotation quaternion to convert
    :return: the rotation axis and angle
    """

    quaternion = quaternion_normalize(quaternion)

    sin_half = float(np.linalg.norm(quaternion[:3]))

    if sin_half < DEGENERACY_TOLERANCE:
        _LOGGER.debug('quaternion %s has no rotation axis, using the z axis', quaternion)
        return AxisAngle(np.array([0, 0, 1.0]), 0.0)

    angle = 2 * np.arctan2(sin_half, quaternion[-1])

    return AxisAngle(quaternion[:3] / sin_half, float(angle * RAD2DEG))


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation matrix into a rotation quaternion using Shepperd's method.

    Shepperd's method picks the largest of :math:`\text{Tr}(\mathbf{T})`, :math:`t_{11}`, :math:`t_{22}`, and
    :math:`t_{33}` to compute the first quaternion component from a square root, which keeps the divisor used for the
    remaining components away from zero.  For the trace branch:

    .. math::
        s = \frac{1}{2\sqrt{\text{Tr}(\mathbf{T})+1}} \\
        q_s = \frac{1}{4s} \\
        \mathbf{q}_v = s\left[\begin{array}{c}t_{32}-t_{23}\\t_{13}-t_{31}\\t_{21}-t_{12}\end{array}\right]

    and the diagonal branches are formed analogously from the symmetric and antisymmetric element differences.

    The sign of the returned quaternion is whatever the selected branch produces.  It is **not** canonicalized, so two
    nearly identical matrices that select different branches may produce quaternions of opposite sign.  Both represent
    the same rotation.  The result is normalized before being returned.

    :param rotation_matrix: The rotation matrix to convert to a rotation quaternion
    :return: the rotation quaternion corresponding to the input rotation matrix
    """

    m = _check_matrix_array_and_shape(rotation_matrix)

    trace = m[0, 0] + m[1, 1] + m[2, 2]

    if trace > 0:
        s = 0.5 / np.sqrt(trace + 1)
        w = 0.25 / s
        x = (m[2, 1] - m[1, 2]) * s
        y = (m[0, 2] - m[2, 0]) * s
        z = (m[1, 0] - m[0, 1]) * s

    elif m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
        s = 2 * np.sqrt(1 + m[0, 0] - m[1, 1] - m[2, 2])
        w = (m[2, 1] - m[1, 2]) / s
        x = 0.25 * s
        y = (m[0, 1] + m[1, 0]) / s
        z = (m[0, 2] + m[2, 0]) / s

    elif m[1, 1] > m[2, 2]:
        s = 2 * np.sqrt(1 + m[1, 1] - m[0, 0] - m[2, 2])
        w = (m[0, 2] - m[2, 0]) / s
        x = (m[0, 1] + m[1, 0]) / s
        y = 0.25 * s
        z = (m[1, 2] + m[2, 1]) / s

    else:
        s = 2 * np.sqrt(1 + m[2, 2] - m[0, 0] - m[1, 1])
        w = (m[1, 0] - m[0, 1]) / s
        x = (m[0, 2] + m[2, 0]) / s
        y = (m[1, 2] + m[2, 1]) / s
        z = 0.25 * s

    return quaternion_normalize([x, y, z, w])


def rotmat_to_euler(matrix: ARRAY_LIKE) -> EulerAngles:
    """
    This function converts a rotation matrix to XYZ Euler angles in degrees.

    Currently this just calls :func:`.rotmat_to_quaternion` followed by :func:`.quaternion_to_euler`.

    :param matrix: The matrix to convert to euler angles
    :return: The euler angles corresponding to the rotation matrix
    """

    return quaternion_to_euler(rotmat_to_quaternion(matrix))


def axis_angle_vector_to_quaternion(axis_x: float, axis_y: float, axis_z: float, angle_deg: float) -> DOUBLE_ARRAY:
    r"""
    This function converts an arbitrary rotation axis and a rotation angle in degrees into a rotation quaternion.

    The axis does not need to be unit length as it is normalized first.  Then

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    If the axis has a length less than :data:`.DEGENERACY_TOLERANCE` the identity quaternion is returned.

    :param axis_x: the x component of the rotation axis
    :param axis_y: the y component of the rotation axis
    :param axis_z: the z component of the rotation axis
    :param angle_deg: the rotation angle in degrees
    :return: the rotation quaternion
    """

    axis_x, axis_y, axis_z, angle_deg = _check_scalars(axis_x, axis_y, axis_z, angle_deg)

    axis = np.array([axis_x, axis_y, axis_z])
    axis_length = np.linalg.norm(axis)

    if axis_length < DEGENERACY_TOLERANCE:
        _LOGGER.debug('rotation axis %s has a length of %g, using the identity quaternion', axis, axis_length)
        return identity_quaternion()

    half_angle = angle_deg * DEG2RAD / 2

    return np.hstack([axis / axis_length * np.sin(half_angle), np.cos(half_angle)])
