# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
The quaternion algebra, elemental rotations, and pairwise representation conversions for a single rotation.

Nothing in this package imports the higher level rotation modules (chains, axis mappings, validation).  Every function
takes plain numbers or arrays (angles in degrees) and never modifies its inputs.
"""

import rotcalc.rotations.core.constants
import rotcalc.rotations.core.conversions
import rotcalc.rotations.core.elementals
import rotcalc.rotations.core.quaternion_math

from rotcalc.rotations.core._helpers import InvalidNumberError

from rotcalc.rotations.core.constants import (DEGENERACY_TOLERANCE, VALIDATION_TOLERANCE, GIMBAL_LOCK_TOLERANCE,
                                               DISPLAY_DECIMALS)

from rotcalc.rotations.core.conversions import (EulerAngles, AxisAngle,
                                                euler_to_quaternion, euler_to_rotmat,
                                                quaternion_to_euler, quaternion_to_rotmat, quaternion_to_axis_angle,
                                                rotmat_to_quaternion, rotmat_to_euler,
                                                axis_angle_vector_to_quaternion,
                                                degrees_to_radians, radians_to_degrees)

from rotcalc.rotations.core.elementals import rot_x, rot_y, rot_z, elemental_rotmat, axis_angle_to_quaternion

from rotcalc.rotations.core.quaternion_math import (identity_quaternion, quaternion_magnitude, quaternion_normalize,
                                                    quaternion_inverse, quaternion_multiplication, relative_rotation)

__all__ = ['InvalidNumberError', 'DEGENERACY_TOLERANCE', 'VALIDATION_TOLERANCE', 'GIMBAL_LOCK_TOLERANCE',
           'DISPLAY_DECIMALS',
           'EulerAngles', 'AxisAngle',
           'euler_to_quaternion', 'euler_to_rotmat',
           'quaternion_to_euler', 'quaternion_to_rotmat', 'quaternion_to_axis_angle',
           'rotmat_to_quaternion', 'rotmat_to_euler',
           'axis_angle_vector_to_quaternion', 'degrees_to_radians', 'radians_to_degrees',
           'rot_x', 'rot_y', 'rot_z', 'elemental_rotmat', 'axis_angle_to_quaternion',
           'identity_quaternion', 'quaternion_magnitude', 'quaternion_normalize', 'quaternion_inverse',
           'quaternion_multiplication', 'relative_rotation']
