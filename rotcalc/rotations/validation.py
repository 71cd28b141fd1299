# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module classifies user supplied quaternions and rotation matrices and repairs the ones that can be repaired.

Validation never raises for bad rotation data.  Instead a :class:`ValidationResult` is returned which is either valid
or carries a :class:`ValidationFailure` describing what is wrong and whether a deterministic repair exists.  Only
:attr:`~ValidationFailure.NOT_NORMALIZED` (repaired by :func:`repair_quaternion`) and
:attr:`~ValidationFailure.NOT_ORTHONORMAL` (repaired by :func:`repair_matrix`) can be repaired.

Non-finite numbers are not rotation data at all and raise :class:`.InvalidNumberError`.
"""

import logging

from enum import Enum
from typing import NamedTuple

import numpy as np

from rotcalc._typing import ARRAY_LIKE, DOUBLE_ARRAY
from rotcalc.rotations.core._helpers import _check_matrix_array_and_shape, _check_scalars
from rotcalc.rotations.core.constants import DEGENERACY_TOLERANCE, VALIDATION_TOLERANCE
from rotcalc.rotations.core.quaternion_math import quaternion_normalize


__all__ = ['ValidationFailure', 'ValidationResult', 'validate_quaternion', 'validate_matrix', 'matrix_determinant',
           'orthonormalize_matrix', 'repair_quaternion', 'repair_matrix']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting validation outcomes and degenerate repairs.
"""


class ValidationFailure(Enum):
    """
    This enumeration provides the ways user supplied rotation data can fail validation.
    """

    ZERO_MAGNITUDE = "zero_magnitude"
    """
    The quaternion has (nearly) zero length so it has no direction to normalize to.
    """

    NOT_NORMALIZED = "not_normalized"
    """
    The quaternion is not unit length.  Normalizing it repairs it.
    """

    SINGULAR = "singular"
    """
    The matrix has a (nearly) zero determinant.
    """

    IMPROPER_ROTATION = "improper_rotation"
    """
    The matrix has a negative determinant, meaning it includes a reflection.
    """

    NOT_ORTHONORMAL = "not_orthonormal"
    """
    The matrix is a proper rotation that has been skewed or scaled.  Orthonormalizing it repairs it.
    """

    @property
    def repairable(self) -> bool:
        """
        Whether a deterministic repair is available for this failure
        """

        return self in (ValidationFailure.NOT_NORMALIZED, ValidationFailure.NOT_ORTHONORMAL)


class ValidationResult(NamedTuple):
    """
    The outcome of validating a quaternion or rotation matrix.
    """

    failure: ValidationFailure | None
    """
    What is wrong with the data, or ``None`` if the data is valid
    """

    message: str
    """
    A human readable description of the outcome
    """

    measured: float
    """
    The value the decision was based on.

    This is the magnitude for quaternions, and for matrices the determinant (for determinant failures) or the largest
    element of :math:`|\\mathbf{R}\\mathbf{R}^T-\\mathbf{I}|` otherwise.
    """

    @property
    def valid(self) -> bool:
        """
        Whether the data passed validation
        """

        return self.failure is None

    @property
    def repairable(self) -> bool:
        """
        Whether the data failed validation in a way that can be repaired
        """

        return self.failure is not None and self.failure.repairable


def validate_quaternion(x: float, y: float, z: float, w: float) -> ValidationResult:
    """
    Checks whether the values form a unit rotation quaternion.

    A magnitude below :data:`.DEGENERACY_TOLERANCE` fails with :attr:`~ValidationFailure.ZERO_MAGNITUDE`.  A magnitude
    more than :data:`.VALIDATION_TOLERANCE` away from 1 fails with :attr:`~ValidationFailure.NOT_NORMALIZED`.
    Otherwise the quaternion is valid.

    :param x: the x component of the vector portion
    :param y: the y component of the vector portion
    :param z: the z component of the vector portion
    :param w: the scalar portion
    :return: the validation result
    :raises InvalidNumberError: if any value is not finite
    """

    magnitude = float(np.linalg.norm(_check_scalars(x, y, z, w)))

    if magnitude < DEGENERACY_TOLERANCE:
        result = ValidationResult(ValidationFailure.ZERO_MAGNITUDE, 'Quaternion magnitude is zero', magnitude)

    elif abs(magnitude - 1) > VALIDATION_TOLERANCE:
        result = ValidationResult(ValidationFailure.NOT_NORMALIZED,
                                  f'Quaternion is not normalized (magnitude: {magnitude:.4f})', magnitude)

    else:
        result = ValidationResult(None, 'Quaternion is valid', magnitude)

    _LOGGER.debug('validated quaternion %s: %s', (x, y, z, w), result.message)

    return result


def matrix_determinant(matrix: ARRAY_LIKE) -> float:
    """
    Computes the determinant of a 3x3 matrix by cofactor expansion along the first row.

    :param matrix: the matrix
    :return: the determinant
    """

    m = _check_matrix_array_and_shape(matrix)

    return float(m[0, 0] * (m[1, 1] * m[2, 2] - m[1, 2] * m[2, 1]) -
                 m[0, 1] * (m[1, 0] * m[2, 2] - m[1, 2] * m[2, 0]) +
                 m[0, 2] * (m[1, 0] * m[2, 1] - m[1, 1] * m[2, 0]))


def validate_matrix(matrix: ARRAY_LIKE) -> ValidationResult:
    """
    Checks whether a 3x3 matrix is a proper rotation matrix.

    The checks are done in order:

    #. a determinant magnitude below :data:`.DEGENERACY_TOLERANCE` fails with :attr:`~ValidationFailure.SINGULAR`
    #. a negative determinant fails with :attr:`~ValidationFailure.IMPROPER_ROTATION`
    #. if any element of :math:`\\mathbf{R}\\mathbf{R}^T` differs from the identity by more than
       :data:`.VALIDATION_TOLERANCE` it fails with :attr:`~ValidationFailure.NOT_ORTHONORMAL`

    Otherwise the matrix is valid.

    :param matrix: the row major matrix to check
    :return: the validation result
    :raises InvalidNumberError: if any value is not finite
    :raises ValueError: if the matrix is not 3x3
    """

    m = _check_matrix_array_and_shape(matrix)

    determinant = matrix_determinant(m)

    if abs(determinant) < DEGENERACY_TOLERANCE:
        result = ValidationResult(ValidationFailure.SINGULAR, 'Matrix is singular (det ≈ 0)', determinant)

    elif determinant < 0:
        result = ValidationResult(ValidationFailure.IMPROPER_ROTATION,
                                  f'Matrix has negative determinant ({determinant:.4f}), not a proper rotation',
                                  determinant)

    else:
        max_error = float(np.abs(m @ m.T - np.eye(3)).max())

        if max_error > VALIDATION_TOLERANCE:
            result = ValidationResult(ValidationFailure.NOT_ORTHONORMAL,
                                      f'Matrix is not orthonormal (max error: {max_error:.4f})', max_error)
        else:
            result = ValidationResult(None, 'Matrix is valid', max_error)

    _LOGGER.debug('validated matrix %s: %s', m.tolist(), result.message)

    return result


def _unit_or_x(vector: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    length = np.linalg.norm(vector)

    if length > DEGENERACY_TOLERANCE:
        return vector / length

    _LOGGER.debug('column %s has a length of %g, using the x axis', vector, length)

    return np.array([1.0, 0, 0])


def orthonormalize_matrix(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Returns the closest right handed orthonormal matrix found by Gram-Schmidt on the first two columns.

    .. math::
        \mathbf{u}_0 = \frac{\mathbf{c}_0}{\left\|\mathbf{c}_0\right\|} \\
        \mathbf{u}_1 = \frac{\mathbf{c}_1-(\mathbf{c}_1^T\mathbf{u}_0)\mathbf{u}_0}
        {\left\|\mathbf{c}_1-(\mathbf{c}_1^T\mathbf{u}_0)\mathbf{u}_0\right\|} \\
        \mathbf{u}_2 = \mathbf{u}_0\times\mathbf{u}_1

    The original third column is ignored, so any reflection or skew in it is removed.  A column with a length below
    :data:`.DEGENERACY_TOLERANCE` is replaced by the x axis.

    :param matrix: the row major matrix to orthonormalize
    :return: the orthonormalized matrix
    """

    m = _check_matrix_array_and_shape(matrix)

    u0 = _unit_or_x(m[:, 0])
    u1 = _unit_or_x(m[:, 1] - (m[:, 1] @ u0) * u0)
    u2 = np.cross(u0, u1)

    return np.column_stack([u0, u1, u2])


def repair_quaternion(x: float, y: float, z: float, w: float) -> DOUBLE_ARRAY:
    """
    Repairs a quaternion that is valid or failed with :attr:`~ValidationFailure.NOT_NORMALIZED` by normalizing it.

    :param x: the x component of the vector portion
    :param y: the y component of the vector portion
    :param z: the z component of the vector portion
    :param w: the scalar portion
    :return: the normalized quaternion as ``[x, y, z, w]``
    :raises ValueError: if the quaternion cannot be repaired
    """

    result = validate_quaternion(x, y, z, w)

    if result.failure is not None and not result.repairable:
        raise ValueError('The quaternion cannot be repaired: {}'.format(result.message))

    return quaternion_normalize([x, y, z, w])


def repair_matrix(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Repairs a matrix that is valid or failed with :attr:`~ValidationFailure.NOT_ORTHONORMAL` by orthonormalizing it.

    :param matrix: the row major matrix to repair
    :return: the orthonormalized matrix
    :raises ValueError: if the matrix cannot be repaired
    """

    result = validate_matrix(matrix)

    if result.failure is not None and not result.repairable:
        raise ValueError('The matrix cannot be repaired: {}'.format(result.message))

    return orthonormalize_matrix(matrix)
