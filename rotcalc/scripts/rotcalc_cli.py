"""
Convert a rotation entered in one representation into every other representation and print the results.

The rotation can be given as Euler angles, a quaternion, an axis and angle, a rotation matrix, an encoded chain of
rotations about the world axes (``x.90_y.-45``), or an encoded axis mapping (``-y.z.-x``) which can be further rotated
in 90 degree steps.  For each input the Euler angles, the quaternion (both scalar last and scalar first), and the
rotation matrix are printed.

Quaternions and matrices are validated before they are converted.  Invalid input is reported along with whether it can
be repaired (pass ``--repair`` to normalize a quaternion or orthonormalize a matrix).  Input that cannot be repaired
causes the script to exit with a non-zero status.

For example::

    rotcalc euler 0 0 90
    rotcalc --format list chain x.90_y.-45
    rotcalc swap x.y.z --rotate z+ x-
    rotcalc quaternion 0 0 0 2 --repair
"""

import logging
import sys

from argparse import ArgumentParser, Namespace

from rotcalc.converter import RotationConverter, RotationConverterOptions
from rotcalc.rotations import (AngleUnit, IDENTITY_MAPPING, MatrixRepresentation, QuaternionRepresentation,
                               Representation, RotationResult, apply_ninety_degree_step)
from rotcalc.utilities.encoding import OutputFormat, decode_chain, decode_mapping, encode_chain, encode_mapping
from rotcalc.rotations.core.constants import DISPLAY_DECIMALS


_ROTATE_STEPS = ('x+', 'x-', 'y+', 'y-', 'z+', 'z-')
"""
The 90 degree steps accepted by the ``--rotate`` option of the swap command
"""


def _get_parser() -> ArgumentParser:
    """
    Helper function for the argparse extension

    :return: A setup argument parser
    """

    parser = ArgumentParser(description='Convert a rotation between Euler angles, quaternions, axis/angle, and '
                                        'rotation matrices')

    parser.add_argument('-u', '--unit', help='the unit angles are entered and displayed in',
                        choices=[unit.value for unit in AngleUnit], default=AngleUnit.DEGREES.value)
    parser.add_argument('-f', '--format', help='how groups of numbers are printed', dest='output_format',
                        choices=[output_format.value for output_format in OutputFormat],
                        default=OutputFormat.TUPLE.value)
    parser.add_argument('-d', '--decimals', help='the number of decimal places to print', type=int,
                        default=DISPLAY_DECIMALS)
    parser.add_argument('-v', '--verbose', help='print diagnostic messages (repeat for more detail)',
                        action='count', default=0)

    subparsers = parser.add_subparsers(dest='command', required=True)

    chain = subparsers.add_parser('chain', help='compose rotations about the world x, y, and z axes in order')
    chain.add_argument('encoded', help='the encoded chain, for instance x.90_y.-45 (angles always in degrees)')

    swap = subparsers.add_parser('swap', help='resolve a signed axis mapping into a rotation')
    swap.add_argument('encoded', help='the encoded mapping, for instance y.-x.z (put -- before a mapping that starts '
                                      'with -)', nargs='?',
                      default=encode_mapping(IDENTITY_MAPPING))
    swap.add_argument('-r', '--rotate', help='90 degree steps about the world axes to apply to the mapping in order',
                      nargs='+', choices=_ROTATE_STEPS, default=[])

    euler = subparsers.add_parser('euler', help='convert roll, pitch, and yaw angles')
    euler.add_argument('roll', type=float)
    euler.add_argument('pitch', type=float)
    euler.add_argument('yaw', type=float)

    quaternion = subparsers.add_parser('quaternion', help='convert a quaternion given scalar last')
    for component in 'xyzw':
        quaternion.add_argument(component, type=float)
    quaternion.add_argument('--repair', help='normalize the quaternion if it is not unit length',
                            action='store_true')

    axis_angle = subparsers.add_parser('axis-angle', help='convert a rotation axis and angle')
    for component in ('axis_x', 'axis_y', 'axis_z', 'angle'):
        axis_angle.add_argument(component, type=float)

    matrix = subparsers.add_parser('matrix', help='convert a rotation matrix given row by row')
    matrix.add_argument('elements', help='the 9 matrix elements in row major order', type=float, nargs=9)
    matrix.add_argument('--repair', help='orthonormalize the matrix if it is not a rotation', action='store_true')

    return parser


def print_result(converter: RotationConverter, result: RotationResult) -> None:
    """
    Print every view of a rotation result to stdout.

    :param converter: the converter configured with the display settings
    :param result: the result to print
    """

    formatted = converter.format(result)

    print('Euler (roll, pitch, yaw) [{}]: {}'.format(converter.angle_unit.value, formatted.euler))
    print('Quaternion (x, y, z, w): {}'.format(formatted.quaternion_xyzw))
    print('Quaternion (w, x, y, z): {}'.format(formatted.quaternion_wxyz))
    print('Rotation matrix:')
    print(formatted.matrix)


def _checked_representation(converter: RotationConverter, representation: Representation,
                            repair: bool) -> Representation | None:
    """
    Validate a representation, repairing it if requested.

    :return: the representation to convert, or ``None`` if it cannot be used
    """

    validation = converter.validate(representation)

    if validation.valid:
        return representation

    if not validation.repairable:
        print('Invalid input: {}'.format(validation.message), file=sys.stderr)
        return None

    if repair:
        print('Repaired input: {}'.format(validation.message))
        return converter.repair(representation)

    print('Warning: {} (pass --repair to fix it)'.format(validation.message), file=sys.stderr)
    return representation


def _build_representation(converter: RotationConverter, args: Namespace) -> Representation | None:
    match args.command:
        case 'euler':
            return converter.euler(args.roll, args.pitch, args.yaw)
        case 'axis-angle':
            return converter.axis_angle(args.axis_x, args.axis_y, args.axis_z, args.angle)
        case 'quaternion':
            return _checked_representation(converter, QuaternionRepresentation(args.x, args.y, args.z, args.w),
                                           args.repair)
        case 'matrix':
            elements = args.elements
            representation = MatrixRepresentation((tuple(elements[0:3]), tuple(elements[3:6]), tuple(elements[6:9])))
            return _checked_representation(converter, representation, args.repair)
        case _:
            raise ValueError('Unknown command {!r}'.format(args.command))


def main(argv: list[str] | None = None) -> int:

    parser = _get_parser()

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING - 10 * min(args.verbose, 2))

    options = RotationConverterOptions(angle_unit=AngleUnit(args.unit), output_format=OutputFormat(args.output_format),
                                       decimals=args.decimals)
    converter = RotationConverter(options)

    match args.command:
        case 'chain':
            steps = decode_chain(args.encoded)
            print('Chain: {}'.format(encode_chain(steps)))
            result = converter.convert_chain(steps)

        case 'swap':
            mapping = decode_mapping(args.encoded)
            if mapping is None:
                print('Invalid axis mapping {!r}'.format(args.encoded), file=sys.stderr)
                return 1

            for step in args.rotate:
                mapping = apply_ninety_degree_step(mapping, step[0], step[1] == '+')

            print('Mapping: {}'.format(encode_mapping(mapping)))
            result = converter.convert_mapping(mapping)

        case _:
            representation = _build_representation(converter, args)
            if representation is None:
                return 1
            result = converter.convert(representation)

    print_result(converter, result)

    return 0


if __name__ == "__main__":

    sys.exit(main())
