from unittest import TestCase

import numpy as np

from rotcalc import rotations as rt


SQ2 = np.sqrt(2) / 2


def same_rotation(quaternion, expected, decimal=8):

    quaternion = np.asarray(quaternion)
    expected = np.asarray(expected)

    return min(np.abs(quaternion - expected).max(), np.abs(quaternion + expected).max()) < 10 ** -decimal


class TestRotationStep(TestCase):

    def test_to_quaternion(self):

        step = rt.RotationStep(1, 'y', 90)

        np.testing.assert_array_almost_equal(step.to_quaternion(), [0, SQ2, 0, SQ2])

    def test_frozen(self):

        step = rt.RotationStep(1, 'y', 90)

        with self.assertRaises(AttributeError):
            step.angle_deg = 10  # type: ignore[misc]


class TestChainToQuaternion(TestCase):

    def test_empty(self):

        np.testing.assert_array_equal(rt.chain_to_quaternion([]), [0, 0, 0, 1])

        result = rt.compute_chain([])

        np.testing.assert_array_equal(result.quaternion, [0, 0, 0, 1])
        np.testing.assert_array_equal(result.euler, [0, 0, 0])
        np.testing.assert_array_equal(result.matrix, np.eye(3))

    def test_single_step(self):

        np.testing.assert_array_almost_equal(rt.chain_to_quaternion([rt.RotationStep('a', 'x', 90)]),
                                             [SQ2, 0, 0, SQ2])

    def test_world_frame_order(self):

        x90 = rt.RotationStep('a', 'x', 90)
        y90 = rt.RotationStep('b', 'y', 90)

        forward = rt.chain_to_quaternion([x90, y90])
        backward = rt.chain_to_quaternion([y90, x90])

        # later steps pre-multiply
        np.testing.assert_array_almost_equal(forward,
                                             rt.quaternion_multiplication(y90.to_quaternion(), x90.to_quaternion()))
        np.testing.assert_array_almost_equal(forward, [0.5, 0.5, -0.5, 0.5])

        np.testing.assert_array_almost_equal(backward,
                                             rt.quaternion_multiplication(x90.to_quaternion(), y90.to_quaternion()))

        self.assertFalse(same_rotation(forward, backward))

        np.testing.assert_array_almost_equal(rt.quaternion_to_rotmat(forward), rt.rot_y(90) @ rt.rot_x(90))

    def test_full_turn(self):

        steps = [rt.RotationStep(index, 'x', 90) for index in range(4)]

        self.assertTrue(same_rotation(rt.chain_to_quaternion(steps), [0, 0, 0, 1]))

        np.testing.assert_array_almost_equal(rt.compute_chain(steps).matrix, np.eye(3))

    def test_matches_euler(self):

        steps = [rt.RotationStep('roll', 'x', 25), rt.RotationStep('pitch', 'y', -40),
                 rt.RotationStep('yaw', 'z', 110)]

        self.assertTrue(same_rotation(rt.chain_to_quaternion(steps), rt.euler_to_quaternion(25, -40, 110)))

        np.testing.assert_array_almost_equal(rt.compute_chain(steps).euler, [25, -40, 110])

    def test_unit_length(self):

        steps = [rt.RotationStep(index, axis, angle)
                 for index, (axis, angle) in enumerate(zip('xyzxyzxyz', np.linspace(-170, 170, 9)))]

        self.assertAlmostEqual(np.linalg.norm(rt.chain_to_quaternion(steps)), 1)

    def test_ids_are_ignored(self):

        np.testing.assert_array_equal(rt.chain_to_quaternion([rt.RotationStep('first', 'z', 30)]),
                                      rt.chain_to_quaternion([rt.RotationStep(('other', 9), 'z', 30)]))


class TestComputeChain(TestCase):

    def test_compute_chain(self):

        result = rt.compute_chain([rt.RotationStep(0, 'z', 90)])

        self.assertIsInstance(result, rt.RotationResult)

        np.testing.assert_array_almost_equal(result.quaternion, [0, 0, SQ2, SQ2])
        np.testing.assert_array_almost_equal(result.euler, [0, 0, 90])
        np.testing.assert_array_almost_equal(result.matrix, rt.rot_z(90))

        with self.assertRaises(ValueError):
            result.quaternion[0] = 1

    def test_gimbal_locked_views_agree(self):

        result = rt.compute_chain([rt.RotationStep(0, 'x', 30), rt.RotationStep(1, 'y', 90),
                                   rt.RotationStep(2, 'z', 10)])

        np.testing.assert_array_almost_equal(result.euler, [20, 90, 0])
        np.testing.assert_array_almost_equal(rt.euler_to_rotmat(*result.euler), result.matrix)


class TestChainEditing(TestCase):

    def setUp(self):

        self.steps = (rt.RotationStep(0, 'x', 10), rt.RotationStep(1, 'y', 20))

    def test_default_step(self):

        self.assertEqual(rt.default_step(5), rt.RotationStep(5, 'x', 0.0))

    def test_add_step(self):

        steps = rt.add_step(self.steps, rt.default_step(2))

        self.assertEqual(len(steps), 3)
        self.assertEqual(steps[-1].id, 2)
        self.assertEqual(len(self.steps), 2)

        with self.assertRaises(ValueError):
            rt.add_step(self.steps, rt.default_step(1))

    def test_remove_step(self):

        steps = rt.remove_step(self.steps, 0)

        self.assertEqual(steps, (rt.RotationStep(1, 'y', 20),))

        # the last step is never removed
        self.assertEqual(rt.remove_step(steps, 1), steps)

        self.assertEqual(rt.remove_step(self.steps, 'missing'), self.steps)

    def test_update_step(self):

        steps = rt.update_step(self.steps, 0, 'z', -45)

        self.assertEqual(steps, (rt.RotationStep(0, 'z', -45), rt.RotationStep(1, 'y', 20)))

        self.assertEqual(self.steps[0], rt.RotationStep(0, 'x', 10))
