from unittest import TestCase

import numpy as np

from rotcalc.converter import RotationConverter, RotationConverterOptions
from rotcalc import rotations as rt
from rotcalc.utilities.encoding import OutputFormat


SQ2 = np.sqrt(2) / 2


class TestRotationConverterOptions(TestCase):

    def test_defaults(self):

        converter = RotationConverter()

        self.assertIs(converter.angle_unit, rt.AngleUnit.DEGREES)
        self.assertIs(converter.output_format, OutputFormat.TUPLE)
        self.assertEqual(converter.decimals, rt.DISPLAY_DECIMALS)
        self.assertFalse(converter.repair_on_convert)

    def test_reset_settings(self):

        converter = RotationConverter(RotationConverterOptions(decimals=2))

        converter.decimals = 7
        converter.output_format = OutputFormat.LIST

        converter.reset_settings()

        self.assertEqual(converter.decimals, 2)
        self.assertIs(converter.output_format, OutputFormat.TUPLE)


class TestRotationConverter(TestCase):

    def test_convert(self):

        converter = RotationConverter()

        result = converter.convert(converter.euler(0, 0, 90))

        np.testing.assert_array_almost_equal(result.quaternion, [0, 0, SQ2, SQ2])
        np.testing.assert_array_almost_equal(result.matrix, rt.rot_z(90))

        result = converter.convert(converter.axis_angle(0, 0, 1, 90))

        np.testing.assert_array_almost_equal(result.quaternion, [0, 0, SQ2, SQ2])

    def test_radians(self):

        converter = RotationConverter(RotationConverterOptions(angle_unit=rt.AngleUnit.RADIANS))

        result = converter.convert(converter.euler(0, 0, np.pi / 2))

        # results are always in degrees, only the display uses radians
        np.testing.assert_array_almost_equal(result.euler, [0, 0, 90])

        self.assertEqual(converter.format(result).euler, '(0.0000, 0.0000, 1.5708)')

        result = converter.convert(converter.axis_angle(1, 0, 0, np.pi))

        np.testing.assert_array_almost_equal(np.abs(result.quaternion), [1, 0, 0, 0])

    def test_validate(self):

        converter = RotationConverter()

        self.assertTrue(converter.validate(converter.euler(1000, -2000, 3)).valid)
        self.assertTrue(converter.validate(converter.axis_angle(0, 0, 0, 3)).valid)

        self.assertIs(converter.validate(rt.QuaternionRepresentation(0, 0, 0, 2)).failure,
                      rt.ValidationFailure.NOT_NORMALIZED)

        self.assertIs(converter.validate(rt.MatrixRepresentation.from_array(np.diag([1, 1, -1]))).failure,
                      rt.ValidationFailure.IMPROPER_ROTATION)

        with self.assertRaises(TypeError):
            converter.validate('x.90')  # type: ignore[arg-type]

    def test_repair(self):

        converter = RotationConverter()

        self.assertEqual(converter.repair(rt.QuaternionRepresentation(0, 0, 0, 2)),
                         rt.QuaternionRepresentation(0, 0, 0, 1))

        repaired = converter.repair(rt.MatrixRepresentation.from_array([[1, 0.3, 0], [0, 1, 0], [0, 0, 1]]))

        np.testing.assert_array_almost_equal(repaired.as_array(), np.eye(3))  # type: ignore[union-attr]

        euler = converter.euler(10, 20, 30)

        self.assertIs(converter.repair(euler), euler)

        with self.assertRaises(ValueError):
            converter.repair(rt.QuaternionRepresentation(0, 0, 0, 0))

        with self.assertRaises(ValueError):
            converter.repair(rt.MatrixRepresentation.from_array(np.diag([1, 1, -1])))

    def test_repair_on_convert(self):

        skewed = rt.MatrixRepresentation.from_array([[1, 0.3, 0], [0, 1, 0], [0, 0, 1]])

        as_entered = RotationConverter().convert(skewed)

        self.assertFalse(as_entered.is_close(rt.RotationResult.identity(), atol=1e-3))

        repaired = RotationConverter(RotationConverterOptions(repair_on_convert=True)).convert(skewed)

        self.assertTrue(repaired.is_close(rt.RotationResult.identity()))

        # unrepairable input is converted as entered
        improper = rt.MatrixRepresentation.from_array(np.diag([1, 1, -1]))

        RotationConverter(RotationConverterOptions(repair_on_convert=True)).convert(improper)

    def test_convert_chain(self):

        result = RotationConverter().convert_chain([rt.RotationStep(0, 'x', 90)])

        np.testing.assert_array_almost_equal(result.quaternion, [SQ2, 0, 0, SQ2])

    def test_convert_mapping(self):

        result = RotationConverter().convert_mapping(rt.AxisMapping('y', '-x', 'z'))

        np.testing.assert_array_almost_equal(result.matrix, rt.rot_z(90))

    def test_format(self):

        converter = RotationConverter(RotationConverterOptions(decimals=2, output_format=OutputFormat.LIST))

        formatted = converter.format(converter.convert(converter.euler(0, 0, 90)))

        self.assertEqual(formatted.quaternion_xyzw, '[0.00, 0.00, 0.71, 0.71]')
        self.assertEqual(formatted.quaternion_wxyz, '[0.71, 0.00, 0.00, 0.71]')
        self.assertEqual(formatted.euler, '[0.00, 0.00, 90.00]')
