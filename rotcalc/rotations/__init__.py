# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This package defines routines for converting between the various rotation representations, composing chains of
elemental rotations, resolving axis swaps, and validating user supplied rotation data.

There are a few different rotation representations that are used in this package and their format is described as
follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is a 3 element unit vector representing the axis of rotation and
                   :math:`\theta` is the total angle to rotate about that vector.  Note that quaternions are not unique
                   in that the rotation represented by :math:`\mathbf{q}` is the same rotation represented by
                   :math:`-\mathbf{q}`.  The sign is never canonicalized in this package.
axis/angle         A rotation axis :math:`\mathbf{x}` (any non-zero length) and a rotation angle :math:`\theta` in
                   degrees.
rotation matrix    A :math:`3\times 3` row major orthonormal matrix with a determinant of +1.  Multiplying the matrix by
                   a vector rotates the vector.  Rotation matrices uniquely represent a single rotation.
euler angles       The roll, pitch, and yaw angles in degrees for rotations about the x, y, and z axes.  They relate to
                   the rotation matrix as :math:`\mathbf{T}=\mathbf{R}_z(yaw)\mathbf{R}_y(pitch)\mathbf{R}_x(roll)`
                   where :math:`\mathbf{R}_i(\theta)` represents a rotation about axis :math:`i`.  The pitch is kept in
                   [-90, 90] degrees and at either end roll and yaw can no longer be separated (gimbal lock).
rotation chain     An ordered sequence of elemental rotations about the fixed world axes, see :mod:`.chain`.
axis mapping       A signed permutation of the basis axes (an axis swap), see :mod:`.axis_mapping`.
=================  =====================================================================================================

All of these are converted through the quaternion and presented as a :class:`.RotationResult` which holds the
quaternion, Euler angle, and matrix views of the same rotation.  Angles are always exchanged in degrees.
"""

import rotcalc.rotations.core
import rotcalc.rotations.axis_mapping
import rotcalc.rotations.chain
import rotcalc.rotations.representations
import rotcalc.rotations.result
import rotcalc.rotations.validation

from rotcalc.rotations.core import *
from rotcalc.rotations.axis_mapping import (SIGNED_AXES, AxisMapping, IDENTITY_MAPPING, signed_axis_to_vector,
                                            mapping_to_rotmat, mapping_to_quaternion, mapping_result,
                                            apply_ninety_degree_step)
from rotcalc.rotations.chain import (RotationStep, chain_to_quaternion, compute_chain, default_step, add_step,
                                     remove_step, update_step)
from rotcalc.rotations.representations import (AngleUnit, EulerRepresentation, QuaternionRepresentation,
                                               AxisAngleRepresentation, MatrixRepresentation, Representation,
                                               representation_to_quaternion, representation_to_result)
from rotcalc.rotations.result import RotationResult
from rotcalc.rotations.validation import (ValidationFailure, ValidationResult, validate_quaternion, validate_matrix,
                                          matrix_determinant, orthonormalize_matrix, repair_quaternion,
                                          repair_matrix)

__all__ = ['InvalidNumberError', 'DEGENERACY_TOLERANCE', 'VALIDATION_TOLERANCE', 'GIMBAL_LOCK_TOLERANCE',
           'DISPLAY_DECIMALS',
           'EulerAngles', 'AxisAngle',
           'euler_to_quaternion', 'euler_to_rotmat',
           'quaternion_to_euler', 'quaternion_to_rotmat', 'quaternion_to_axis_angle',
           'rotmat_to_quaternion', 'rotmat_to_euler',
           'axis_angle_vector_to_quaternion', 'degrees_to_radians', 'radians_to_degrees',
           'rot_x', 'rot_y', 'rot_z', 'elemental_rotmat', 'axis_angle_to_quaternion',
           'identity_quaternion', 'quaternion_magnitude', 'quaternion_normalize', 'quaternion_inverse',
           'quaternion_multiplication', 'relative_rotation',
           'SIGNED_AXES', 'AxisMapping', 'IDENTITY_MAPPING', 'signed_axis_to_vector', 'mapping_to_rotmat',
           'mapping_to_quaternion', 'mapping_result', 'apply_ninety_degree_step',
           'RotationStep', 'chain_to_quaternion', 'compute_chain', 'default_step', 'add_step', 'remove_step',
           'update_step',
           'AngleUnit', 'EulerRepresentation', 'QuaternionRepresentation', 'AxisAngleRepresentation',
           'MatrixRepresentation', 'Representation', 'representation_to_quaternion', 'representation_to_result',
           'RotationResult',
           'ValidationFailure', 'ValidationResult', 'validate_quaternion', 'validate_matrix', 'matrix_determinant',
           'orthonormalize_matrix', 'repair_quaternion', 'repair_matrix']
