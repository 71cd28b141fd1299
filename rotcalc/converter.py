# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`RotationConverter`, the configured entry point used by front ends.

The converter ties the rotation routines together with the user's display preferences (angle unit, output format,
and number of decimal places) which are controlled through :class:`RotationConverterOptions`.  Every call recomputes
its result from the input it is given; the converter holds no rotation state of its own.

Example::

    >>> from rotcalc.converter import RotationConverter, RotationConverterOptions
    >>> from rotcalc.rotations import EulerRepresentation
    >>> converter = RotationConverter(RotationConverterOptions(decimals=2))
    >>> converter.format(converter.convert(EulerRepresentation(0, 0, 90))).quaternion_xyzw
    '(0.00, 0.00, 0.71, 0.71)'
"""

import logging

from dataclasses import dataclass, replace
from typing import Iterable

from rotcalc.rotations.axis_mapping import AxisMapping, mapping_result
from rotcalc.rotations.chain import RotationStep, compute_chain
from rotcalc.rotations.core.constants import DISPLAY_DECIMALS
from rotcalc.rotations.representations import (AngleUnit, AxisAngleRepresentation, EulerRepresentation,
                                               MatrixRepresentation, QuaternionRepresentation, Representation,
                                               representation_to_result)
from rotcalc.rotations.result import RotationResult
from rotcalc.rotations.validation import (ValidationResult, repair_matrix, repair_quaternion, validate_matrix,
                                          validate_quaternion)
from rotcalc.utilities.encoding import FormattedResult, OutputFormat, format_result
from rotcalc.utilities.mixin_classes import UserOptionConfigured
from rotcalc.utilities.options import UserOptions


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


@dataclass
class RotationConverterOptions(UserOptions):
    """
    This dataclass serves as one way to control the settings for the :class:`.RotationConverter` class.

    You can set any of the options on an instance of this dataclass and pass it to the :class:`.RotationConverter`
    class at initialization (or through the method :meth:`.RotationConverterOptions.apply_options`) to set the settings
    on the class.
    """

    angle_unit: AngleUnit = AngleUnit.DEGREES
    """
    The unit angles are entered and displayed in.

    Representations built through :meth:`.RotationConverter.euler` and :meth:`.RotationConverter.axis_angle` use this
    unit and :meth:`.RotationConverter.format` displays Euler angles in it.
    """

    output_format: OutputFormat = OutputFormat.TUPLE
    """
    How groups of numbers are rendered by :meth:`.RotationConverter.format`
    """

    decimals: int = DISPLAY_DECIMALS
    """
    The number of decimal places rendered by :meth:`.RotationConverter.format`
    """

    repair_on_convert: bool = False
    """
    A flag to repair repairable quaternions and matrices before converting them.

    When this is ``False`` matrices are converted exactly as entered, which for a matrix that is not orthonormal gives
    a result that only approximates the intended rotation.  Unrepairable input is never repaired.
    """


class RotationConverter(UserOptionConfigured[RotationConverterOptions], RotationConverterOptions):
    """
    Converts user entered rotations into :class:`.RotationResult` objects and renders them for display.

    The settings of the converter are controlled through :class:`.RotationConverterOptions` and can be restored to the
    values it was created with using :meth:`reset_settings`.
    """

    def __init__(self, options: RotationConverterOptions | None = None):
        """
        :param options: A dataclass specifying the options to set for this instance.
        """

        super().__init__(RotationConverterOptions, options=options)

    def euler(self, roll: float, pitch: float, yaw: float) -> EulerRepresentation:
        """
        Builds an Euler angle representation with angles in the configured :attr:`angle_unit`.
        """

        return EulerRepresentation(roll, pitch, yaw, self.angle_unit)

    def axis_angle(self, axis_x: float, axis_y: float, axis_z: float, angle: float) -> AxisAngleRepresentation:
        """
        Builds an axis/angle representation with the angle in the configured :attr:`angle_unit`.
        """

        return AxisAngleRepresentation(axis_x, axis_y, axis_z, angle, self.angle_unit)

    def validate(self, representation: Representation) -> ValidationResult:
        """
        Validates a representation.

        Quaternions and matrices are checked with :func:`.validate_quaternion` and :func:`.validate_matrix`.  Euler
        angles and axis/angle input are always valid (a zero axis simply means no rotation).

        :param representation: the representation to check
        :return: the validation result
        """

        match representation:
            case QuaternionRepresentation(x=x, y=y, z=z, w=w):
                return validate_quaternion(x, y, z, w)
            case MatrixRepresentation():
                return validate_matrix(representation.as_array())
            case EulerRepresentation() | AxisAngleRepresentation():
                return ValidationResult(None, 'Input is valid', 0.0)
            case _:
                raise TypeError('Unknown rotation representation {!r}'.format(representation))

    def repair(self, representation: Representation) -> Representation:
        """
        Returns the repaired version of a representation.

        Quaternions are normalized and matrices are orthonormalized.  Other representations are returned unchanged.

        :param representation: the representation to repair
        :return: the repaired representation
        :raises ValueError: if the representation failed validation in a way that cannot be repaired
        """

        match representation:
            case QuaternionRepresentation(x=x, y=y, z=z, w=w):
                rx, ry, rz, rw = repair_quaternion(x, y, z, w)
                return replace(representation, x=float(rx), y=float(ry), z=float(rz), w=float(rw))
            case MatrixRepresentation():
                return MatrixRepresentation.from_array(repair_matrix(representation.as_array()))
            case _:
                return representation

    def convert(self, representation: Representation) -> RotationResult:
        """
        Converts a representation into the quaternion, Euler, and matrix views of its rotation.

        If :attr:`repair_on_convert` is set, repairable input is repaired first.

        :param representation: the representation to convert
        :return: the result
        """

        if self.repair_on_convert:
            validation = self.validate(representation)
            if validation.repairable:
                _LOGGER.info('repairing input before converting: %s', validation.message)
                representation = self.repair(representation)

        return representation_to_result(representation)

    def convert_chain(self, steps: Iterable[RotationStep]) -> RotationResult:
        """
        Composes a chain of world frame rotation steps, see :func:`.compute_chain`.
        """

        return compute_chain(steps)

    def convert_mapping(self, mapping: AxisMapping) -> RotationResult:
        """
        Resolves an axis mapping into a rotation, see :func:`.mapping_result`.
        """

        return mapping_result(mapping)

    def format(self, result: RotationResult) -> FormattedResult:
        """
        Renders a result using the configured :attr:`angle_unit`, :attr:`output_format`, and :attr:`decimals`.

        :param result: the result to render
        :return: the text for each view of the result
        """

        return format_result(result, self.angle_unit, self.output_format, self.decimals)
