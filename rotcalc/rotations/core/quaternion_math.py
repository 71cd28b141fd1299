# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import logging

import numpy as np

from rotcalc._typing import ARRAY_LIKE, DOUBLE_ARRAY

from rotcalc.rotations.core._helpers import _check_quaternion_array_and_shape
from rotcalc.rotations.core.constants import DEGENERACY_TOLERANCE

__all__ = ["identity_quaternion", "quaternion_magnitude", "quaternion_normalize", "quaternion_inverse",
           "quaternion_multiplication", "relative_rotation"]


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting degenerate inputs that were replaced by a fallback.
"""


def identity_quaternion() -> DOUBLE_ARRAY:
    """
    Returns the identity rotation quaternion ``[0, 0, 0, 1]`` (no rotation).

    A new array is returned on each call so it is safe to modify the result.
    """

    return np.array([0, 0, 0, 1.0])


def quaternion_magnitude(quaternion: ARRAY_LIKE) -> float:
    """
    Returns the euclidean length of the 4 element quaternion.

    :param quaternion: the quaternion to get the length of
    :returns: the length as a float
    """

    return float(np.linalg.norm(_check_quaternion_array_and_shape(quaternion)))


def quaternion_normalize(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Normalizes the quaternion to unit length.

    Unlike a canonicalizing normalization, the sign of the quaternion is left alone so that :math:`\\mathbf{q}` and
    :math:`-\\mathbf{q}` both survive normalization unchanged in direction.

    If the length of the quaternion is less than :data:`.DEGENERACY_TOLERANCE` it has no meaningful direction and the
    identity quaternion is returned instead.  This is not treated as an error.

    :param quaternion: the quaternion to normalize
    :returns: The normalized quaternion
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    magnitude = np.linalg.norm(work_quaternion)

    if magnitude < DEGENERACY_TOLERANCE:
        _LOGGER.debug('quaternion %s has a magnitude of %g, using the identity quaternion', work_quaternion,
                      magnitude)
        return identity_quaternion()

    return work_quaternion / magnitude


def quaternion_inverse(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function provides the inverse of a unit rotation quaternion.

    The inverse of a rotation quaternion is defined such that
    :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I=\left[\begin{array}{cccc}0&0&0&1\end{array}\right]^T` is the identity quaternion.
    For a unit quaternion this corresponds to negating the vector portion of the quaternion:

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
        \text{cos}(\frac{\theta}{2})\end{array}\right]\\
        \mathbf{q}^{-1}=\left[\begin{array}{c}-\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    :param quaternion: The rotation quaternion to be inverted
    :return: a numpy array representing the inverse quaternion corresponding to the input quaternion
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    # negate the vector portion
    quaternion[:3] *= -1

    return quaternion


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE, quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the Hamilton quaternion product :math:`\mathbf{q}_1\otimes\mathbf{q}_2`.

    The product is defined such that the result applies the rotation of ``quaternion_2_in`` first, followed by the
    rotation of ``quaternion_1_in``.  That is the left operand is the newer (outer) rotation::

        q_from_A_to_C = quaternion_multiplication(q_from_B_to_C, q_from_A_to_B)

    Mathematically this is given by:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    The product is not commutative.  No normalization is performed.

    :param quaternion_1_in: The first (outer) quaternion to multiply
    :param quaternion_2_in: The second (inner) quaternion to multiply
    :return: The Hamilton product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[0:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[0:3]

    return np.concatenate([qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2),
                           [qs1 * qs2 - qv1 @ qv2]])


def relative_rotation(quaternion_from: ARRAY_LIKE, quaternion_to: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Returns the world frame rotation that takes the orientation ``quaternion_from`` to ``quaternion_to``.

    This is :math:`\mathbf{q}_{to}\otimes\mathbf{q}_{from}^{-1}`, so that pre-multiplying ``quaternion_from`` by the
    result gives back ``quaternion_to``.  Both inputs should be unit quaternions and the result is normalized.

    :param quaternion_from: the starting orientation
    :param quaternion_to: the ending orientation
    :returns: the rotation quaternion between the two orientations
    """

    return quaternion_normalize(quaternion_multiplication(quaternion_to, quaternion_inverse(quaternion_from)))
