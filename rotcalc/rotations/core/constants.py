# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Numerical constants shared by the rotation routines.

Every tolerance used when deciding whether an input is degenerate or valid lives here so that the conversion,
composition, and validation routines all agree on the same thresholds.
"""

import numpy as np


__all__ = ['DEGENERACY_TOLERANCE', 'VALIDATION_TOLERANCE', 'GIMBAL_LOCK_TOLERANCE', 'DISPLAY_DECIMALS', 'DEG2RAD',
           'RAD2DEG']


DEGENERACY_TOLERANCE: float = 1e-10
"""
The length below which a quaternion, rotation axis, or matrix column is considered to be zero.

Such values have no meaningful direction, so normalizing them would amplify rounding noise into an arbitrary rotation.
Anything shorter than this is replaced by a documented fallback (the identity rotation or the x axis) and a matrix
whose determinant magnitude is smaller than this is considered singular.
"""

VALIDATION_TOLERANCE: float = 0.01
"""
The maximum deviation from a proper rotation accepted for user supplied data.

This applies both to the deviation of a quaternion's magnitude from 1 and to the largest element of
:math:`\\mathbf{R}\\mathbf{R}^T-\\mathbf{I}` for a rotation matrix.  It is loose enough to accept values typed in with
4 decimal places (see :data:`DISPLAY_DECIMALS`) while still catching data that is clearly not a rotation.
"""

GIMBAL_LOCK_TOLERANCE: float = 1e-12
"""
How close the sine of the pitch angle must be to :math:`\\pm 1` for a rotation to be treated as gimbal locked.

At gimbal lock the roll and yaw angles can only be recovered as a sum or difference, so within this distance of the
poles the yaw is set to 0 and the combined angle is reported as the roll.
"""

DISPLAY_DECIMALS: int = 4
"""
The number of decimal places used when rendering rotation components as text.

This only affects the text produced for display.  All computation is done at full double precision.
"""

DEG2RAD: float = np.pi / 180
"""
Multiply an angle in degrees by this to get radians
"""

RAD2DEG: float = 180 / np.pi
"""
Multiply an angle in radians by this to get degrees
"""
