# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Welcome to rotcalc

rotcalc converts a single 3D rotation between Euler angles, quaternions, axis/angle pairs, and rotation matrices.  It
also composes rotations from a chain of steps about the fixed world axes, resolves signed axis swaps into rotations,
and validates (and where possible repairs) quaternions and matrices typed in by a user.

The math lives in :mod:`rotcalc.rotations`, the text encodings and display formatting in :mod:`rotcalc.utilities`,
and :class:`.RotationConverter` in :mod:`rotcalc.converter` ties them to a set of user display options.  The
``rotcalc`` command line script (:mod:`rotcalc.scripts.rotcalc_cli`) exposes all of it from a terminal.
"""

from rotcalc.converter import RotationConverter, RotationConverterOptions

__all__ = ['RotationConverter', 'RotationConverterOptions']
