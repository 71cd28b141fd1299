# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import numpy as np

from rotcalc._typing import ARRAY_LIKE, DOUBLE_ARRAY


class InvalidNumberError(ValueError):
    """
    Raised when a non-finite value (NaN or infinity) is given to one of the rotation routines.

    The rotation routines only operate on finite numbers.  Coercing text or missing values into numbers is the
    responsibility of the caller, so anything non-finite that makes it this far is treated as a programming error.
    """


def _check_finite(values: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    if not np.isfinite(values).all():
        raise InvalidNumberError(f'All values must be finite numbers, got {values.tolist()}')

    return values


def _check_array_and_shape(input: ARRAY_LIKE, shape: tuple[int, ...]) -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if in_shape != shape:
        raise ValueError(f'The input must have shape {shape}, not {in_shape}')

    # always copy so the caller's data can never be modified through the result
    return _check_finite(np.array(input, dtype=np.float64))


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, (4,))


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(matrix, (3, 3))


def _check_scalars(*values: float) -> tuple[float, ...]:
    checked = _check_finite(np.array(values, dtype=np.float64))

    return tuple(float(value) for value in checked)
