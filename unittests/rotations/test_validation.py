from unittest import TestCase

import numpy as np

from rotcalc import rotations as rt


class TestValidationFailure(TestCase):

    def test_repairable(self):

        self.assertTrue(rt.ValidationFailure.NOT_NORMALIZED.repairable)
        self.assertTrue(rt.ValidationFailure.NOT_ORTHONORMAL.repairable)

        self.assertFalse(rt.ValidationFailure.ZERO_MAGNITUDE.repairable)
        self.assertFalse(rt.ValidationFailure.SINGULAR.repairable)
        self.assertFalse(rt.ValidationFailure.IMPROPER_ROTATION.repairable)


class TestValidateQuaternion(TestCase):

    def test_valid(self):

        result = rt.validate_quaternion(0, 0, 0, 1)

        self.assertTrue(result.valid)
        self.assertFalse(result.repairable)
        self.assertIsNone(result.failure)
        self.assertEqual(result.message, 'Quaternion is valid')

        # within the tolerance
        self.assertTrue(rt.validate_quaternion(0, 0, 0, 1.005).valid)

    def test_not_normalized(self):

        result = rt.validate_quaternion(0, 0, 0, 2)

        self.assertFalse(result.valid)
        self.assertTrue(result.repairable)
        self.assertIs(result.failure, rt.ValidationFailure.NOT_NORMALIZED)
        self.assertEqual(result.message, 'Quaternion is not normalized (magnitude: 2.0000)')
        self.assertAlmostEqual(result.measured, 2)

        self.assertIs(rt.validate_quaternion(0.5, 0.5, 0.5, 0.4).failure, rt.ValidationFailure.NOT_NORMALIZED)

    def test_zero_magnitude(self):

        result = rt.validate_quaternion(0, 0, 0, 0)

        self.assertFalse(result.valid)
        self.assertFalse(result.repairable)
        self.assertIs(result.failure, rt.ValidationFailure.ZERO_MAGNITUDE)
        self.assertEqual(result.message, 'Quaternion magnitude is zero')

    def test_invalid_number(self):

        with self.assertRaises(rt.InvalidNumberError):
            rt.validate_quaternion(np.nan, 0, 0, 1)


class TestMatrixDeterminant(TestCase):

    def test_matrix_determinant(self):

        self.assertAlmostEqual(rt.matrix_determinant(np.eye(3)), 1)

        self.assertAlmostEqual(rt.matrix_determinant(np.diag([2, 3, 4])), 24)

        matrix = [[2, -1, 0.5], [1, 3, 2], [0, 1, -4]]

        self.assertAlmostEqual(rt.matrix_determinant(matrix), np.linalg.det(matrix))


class TestValidateMatrix(TestCase):

    def test_valid(self):

        result = rt.validate_matrix(np.eye(3))

        self.assertTrue(result.valid)
        self.assertEqual(result.message, 'Matrix is valid')

        self.assertTrue(rt.validate_matrix(rt.euler_to_rotmat(10, 20, 30)).valid)

        # entries typed with a few decimal places are accepted
        self.assertTrue(rt.validate_matrix(rt.euler_to_rotmat(10, 20, 30).round(3)).valid)

    def test_improper(self):

        matrix = np.eye(3)
        matrix[:, 2] *= -1

        result = rt.validate_matrix(matrix)

        self.assertIs(result.failure, rt.ValidationFailure.IMPROPER_ROTATION)
        self.assertFalse(result.repairable)
        self.assertAlmostEqual(result.measured, -1)
        self.assertEqual(result.message, 'Matrix has negative determinant (-1.0000), not a proper rotation')

    def test_singular(self):

        result = rt.validate_matrix(np.zeros((3, 3)))

        self.assertIs(result.failure, rt.ValidationFailure.SINGULAR)
        self.assertFalse(result.repairable)
        self.assertEqual(result.message, 'Matrix is singular (det ≈ 0)')

        self.assertIs(rt.validate_matrix([[1, 0, 0], [0, 1, 0], [1, 0, 0]]).failure, rt.ValidationFailure.SINGULAR)

    def test_not_orthonormal(self):

        result = rt.validate_matrix(np.diag([2, 1, 1]))

        self.assertIs(result.failure, rt.ValidationFailure.NOT_ORTHONORMAL)
        self.assertTrue(result.repairable)
        self.assertAlmostEqual(result.measured, 3)
        self.assertEqual(result.message, 'Matrix is not orthonormal (max error: 3.0000)')

    def test_invalid(self):

        with self.assertRaises(ValueError):
            rt.validate_matrix(np.eye(2))

        with self.assertRaises(rt.InvalidNumberError):
            rt.validate_matrix([[1, 0, 0], [0, np.inf, 0], [0, 0, 1]])


class TestOrthonormalizeMatrix(TestCase):

    def test_orthonormalize_matrix(self):

        np.testing.assert_array_almost_equal(rt.orthonormalize_matrix(np.diag([2, 3, 4])), np.eye(3))

        rotation = rt.euler_to_rotmat(-30, 40, 75)

        np.testing.assert_array_almost_equal(rt.orthonormalize_matrix(rotation), rotation)

    def test_repairs_skew(self):

        rng = np.random.default_rng(31)

        for _ in range(10):

            skewed = rt.euler_to_rotmat(*rng.uniform(-80, 80, 3)) + rng.uniform(-0.2, 0.2, (3, 3))

            repaired = rt.orthonormalize_matrix(skewed)

            self.assertTrue(rt.validate_matrix(repaired).valid)
            np.testing.assert_array_almost_equal(repaired @ repaired.T, np.eye(3))
            self.assertAlmostEqual(np.linalg.det(repaired), 1)

    def test_removes_reflection(self):

        matrix = np.eye(3)
        matrix[:, 2] *= -1

        np.testing.assert_array_almost_equal(rt.orthonormalize_matrix(matrix), np.eye(3))

    def test_degenerate_columns(self):

        repaired = rt.orthonormalize_matrix(np.zeros((3, 3)))

        np.testing.assert_array_almost_equal(repaired[:, 0], [1, 0, 0])


class TestRepair(TestCase):

    def test_repair_quaternion(self):

        np.testing.assert_array_almost_equal(rt.repair_quaternion(0, 0, 0, 2), [0, 0, 0, 1])

        np.testing.assert_array_almost_equal(rt.repair_quaternion(0, 0, 0, 1), [0, 0, 0, 1])

        with self.assertRaises(ValueError):
            rt.repair_quaternion(0, 0, 0, 0)

    def test_repair_matrix(self):

        repaired = rt.repair_matrix(np.diag([1, 2, 0.5]))

        np.testing.assert_array_almost_equal(repaired, np.eye(3))
        self.assertTrue(rt.validate_matrix(repaired).valid)

        with self.assertRaises(ValueError):
            rt.repair_matrix(np.diag([1, 1, -1]))

        with self.assertRaises(ValueError):
            rt.repair_matrix(np.zeros((3, 3)))
