# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the text encodings used to share and display rotations.

Two compact encodings are used to store state in a link:

* a rotation chain is written as ``<axis>.<angle>`` segments joined by ``_``, for instance ``x.90_y.-45``
* an axis mapping is written as the three signed axis labels for x, y, and z joined by ``.``, for instance
  ``-y.z.-x`` (x now points along -y, y along z, and z along -x)

Decoding is forgiving: malformed chain segments are skipped and a malformed mapping decodes to ``None``, so that a
damaged link still loads whatever can be recovered.

Rotation components are displayed with a fixed number of decimal places (:data:`.DISPLAY_DECIMALS`).  This is only
used for display and never feeds back into computation.
"""

import logging
import math

from enum import Enum
from typing import Callable, Hashable, Iterable, NamedTuple, Sequence

from rotcalc._typing import ARRAY_LIKE
from rotcalc.rotations.axis_mapping import SIGNED_AXES, AxisMapping, mapping_to_rotmat
from rotcalc.rotations.chain import RotationStep
from rotcalc.rotations.core.constants import DISPLAY_DECIMALS
from rotcalc.rotations.representations import AngleUnit
from rotcalc.rotations.result import RotationResult
from rotcalc.rotations.validation import matrix_determinant


__all__ = ['OutputFormat', 'FormattedResult', 'encode_chain', 'decode_chain', 'encode_mapping', 'decode_mapping',
           'format_number', 'format_values', 'format_matrix', 'format_result']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting malformed encoded text.
"""


class OutputFormat(Enum):
    """
    This enumeration provides the ways a group of numbers can be rendered as text.
    """

    TUPLE = "tuple"
    """
    A python style tuple, ``(1.0000, 0.0000)`` (default)
    """

    LIST = "list"
    """
    A python style list, ``[1.0000, 0.0000]``
    """

    SPACE = "space"
    """
    Space separated values, ``1.0000 0.0000``.  Matrix rows are separated by new lines.
    """


class FormattedResult(NamedTuple):
    """
    The display text for each view of a :class:`.RotationResult`.
    """

    euler: str
    """
    The roll, pitch, and yaw angles in the requested unit
    """

    quaternion_xyzw: str
    """
    The quaternion with the scalar last
    """

    quaternion_wxyz: str
    """
    The quaternion with the scalar first
    """

    matrix: str
    """
    The rotation matrix, row by row
    """


def _format_angle(angle_deg: float) -> str:
    angle = float(angle_deg)

    # integral angles are written without a trailing .0 so links stay short
    if angle.is_integer():
        return str(int(angle))

    return repr(angle)


def encode_chain(steps: Iterable[RotationStep]) -> str:
    """
    Encodes a rotation chain as text.

    For example a rotation of 90 degrees about x followed by -45 degrees about y is encoded as ``x.90_y.-45``.  The
    step ids are not encoded.

    :param steps: the steps in the order they are applied
    :return: the encoded chain
    """

    return '_'.join('{}.{}'.format(step.axis, _format_angle(step.angle_deg)) for step in steps)


def _url_step_id(index: int) -> Hashable:
    return 'step-url-{}'.format(index)


def decode_chain(text: str, id_factory: Callable[[int], Hashable] | None = None) -> tuple[RotationStep, ...]:
    """
    Decodes a rotation chain from text produced by :func:`encode_chain`.

    Each ``_`` separated segment must be an axis (x, y, or z), a ``.``, and a finite angle in degrees.  Segments that do
    not match are skipped (and reported through the logger) rather than failing the whole chain.

    :param text: the encoded chain
    :param id_factory: called with the index of each segment to make the id for its step.  By default ids are
                       ``step-url-<index>``.
    :return: the decoded steps, which may be empty
    """

    if id_factory is None:
        id_factory = _url_step_id

    if not text:
        return ()

    steps = []

    for index, segment in enumerate(text.split('_')):

        axis, dot, angle_text = segment[:1], segment[1:2], segment[2:]

        if axis not in ('x', 'y', 'z') or dot != '.':
            _LOGGER.warning('skipping malformed chain segment %r', segment)
            continue

        try:
            angle = float(angle_text)
        except ValueError:
            _LOGGER.warning('skipping chain segment %r with an invalid angle', segment)
            continue

        if not math.isfinite(angle):
            _LOGGER.warning('skipping chain segment %r with a non-finite angle', segment)
            continue

        steps.append(RotationStep(id_factory(index), axis, angle))  # type: ignore[arg-type]

    return tuple(steps)


def encode_mapping(mapping: AxisMapping) -> str:
    """
    Encodes an axis mapping as text, for instance ``-y.z.-x``.

    :param mapping: the mapping to encode
    :return: the encoded mapping
    """

    return '{}.{}.{}'.format(mapping.x, mapping.y, mapping.z)


def decode_mapping(text: str) -> AxisMapping | None:
    """
    Decodes an axis mapping from text produced by :func:`encode_mapping`.

    Mappings are only ever built by 90 degree steps from the identity, so text whose labels do not describe a proper
    rotation (for instance ``x.x.z`` or the reflection ``x.y.-z``) is rejected as well.

    :param text: the encoded mapping
    :return: the mapping, or ``None`` if the text is not three valid signed axis labels forming a proper rotation
    """

    parts = text.split('.') if text else []

    if len(parts) != 3 or any(part not in SIGNED_AXES for part in parts):
        _LOGGER.warning('ignoring malformed axis mapping %r', text)
        return None

    mapping = AxisMapping(*parts)  # type: ignore[arg-type]

    if round(matrix_determinant(mapping_to_rotmat(mapping))) != 1:
        _LOGGER.warning('ignoring axis mapping %r which is not a proper rotation', text)
        return None

    return mapping


def format_number(value: float, decimals: int = DISPLAY_DECIMALS) -> str:
    """
    Renders a number with a fixed number of decimal places.

    :param value: the number to render
    :param decimals: the number of decimal places
    :return: the text
    """

    text = '{:.{}f}'.format(float(value), decimals)

    # small negative values round to zero and would otherwise be shown as -0.0000
    if text.startswith('-') and float(text) == 0:
        return text[1:]

    return text


def format_values(values: Iterable[float], output_format: OutputFormat = OutputFormat.TUPLE,
                  decimals: int = DISPLAY_DECIMALS) -> str:
    """
    Renders a group of numbers in the requested format.

    :param values: the numbers to render
    :param output_format: how to group the numbers
    :param decimals: the number of decimal places for each number
    :return: the text
    """

    formatted = [format_number(value, decimals) for value in values]

    match output_format:
        case OutputFormat.TUPLE:
            return '({})'.format(', '.join(formatted))
        case OutputFormat.LIST:
            return '[{}]'.format(', '.join(formatted))
        case OutputFormat.SPACE:
            return ' '.join(formatted)
        case _:
            raise ValueError('Unknown output format {!r}'.format(output_format))


def format_matrix(matrix: ARRAY_LIKE | Sequence[Sequence[float]], output_format: OutputFormat = OutputFormat.TUPLE,
                  decimals: int = DISPLAY_DECIMALS) -> str:
    """
    Renders a matrix row by row in the requested format.

    Each row is rendered with :func:`format_values`.  For :attr:`~OutputFormat.SPACE` the rows are separated by new
    lines, otherwise they are wrapped the same way the values of a row are.

    :param matrix: the matrix to render
    :param output_format: how to group the numbers
    :param decimals: the number of decimal places for each number
    :return: the text
    """

    rows = [format_values(row, output_format, decimals) for row in matrix]  # type: ignore[union-attr]

    match output_format:
        case OutputFormat.TUPLE:
            return '({})'.format(', '.join(rows))
        case OutputFormat.LIST:
            return '[{}]'.format(', '.join(rows))
        case _:
            return '\n'.join(rows)


def format_result(result: RotationResult, unit: AngleUnit = AngleUnit.DEGREES,
                  output_format: OutputFormat = OutputFormat.TUPLE,
                  decimals: int = DISPLAY_DECIMALS) -> FormattedResult:
    """
    Renders every view of a rotation result as text.

    :param result: the result to render
    :param unit: the unit to show the Euler angles in
    :param output_format: how to group the numbers
    :param decimals: the number of decimal places for each number
    :return: the text for each view
    """

    x, y, z, w = result.quaternion

    return FormattedResult(format_values([unit.from_degrees(angle) for angle in result.euler], output_format, decimals),
                           format_values([x, y, z, w], output_format, decimals),
                           format_values([w, x, y, z], output_format, decimals),
                           format_matrix(result.matrix, output_format, decimals))
