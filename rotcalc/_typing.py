from typing import Literal

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike

AXIS = Literal['x', 'y', 'z']
"""
An unsigned basis axis label
"""

SIGNED_AXIS = Literal['x', '-x', 'y', '-y', 'z', '-z']
"""
A signed basis axis label used to describe where an axis points after an axis swap
"""
