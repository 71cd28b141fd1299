from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from unittest import TestCase

from rotcalc.scripts import rotcalc_cli


def run(*argv: str) -> tuple[int, str, str]:

    stdout = StringIO()
    stderr = StringIO()

    with redirect_stdout(stdout), redirect_stderr(stderr):
        status = rotcalc_cli.main(list(argv))

    return status, stdout.getvalue(), stderr.getvalue()


class TestRotcalcCli(TestCase):

    def test_euler(self):

        status, out, _ = run('euler', '0', '0', '90')

        self.assertEqual(status, 0)
        self.assertIn('Euler (roll, pitch, yaw) [deg]: (0.0000, 0.0000, 90.0000)', out)
        self.assertIn('Quaternion (x, y, z, w): (0.0000, 0.0000, 0.7071, 0.7071)', out)
        self.assertIn('Quaternion (w, x, y, z): (0.7071, 0.0000, 0.0000, 0.7071)', out)
        self.assertIn('((0.0000, -1.0000, 0.0000), (1.0000, 0.0000, 0.0000), (0.0000, 0.0000, 1.0000))', out)

    def test_options(self):

        status, out, _ = run('--unit', 'rad', '--format', 'list', '--decimals', '2', 'euler', '0', '0', '1.5707963')

        self.assertEqual(status, 0)
        self.assertIn('Euler (roll, pitch, yaw) [rad]: [0.00, 0.00, 1.57]', out)
        self.assertIn('Quaternion (x, y, z, w): [0.00, 0.00, 0.71, 0.71]', out)

    def test_chain(self):

        status, out, _ = run('chain', 'x.90_bad_y.0')

        self.assertEqual(status, 0)
        self.assertIn('Chain: x.90_y.0', out)
        self.assertIn('Quaternion (x, y, z, w): (0.7071, 0.0000, 0.0000, 0.7071)', out)

    def test_swap(self):

        status, out, _ = run('swap', 'x.y.z', '--rotate', 'z+')

        self.assertEqual(status, 0)
        self.assertIn('Mapping: y.-x.z', out)
        self.assertIn('Euler (roll, pitch, yaw) [deg]: (0.0000, 0.0000, 90.0000)', out)

        status, out, _ = run('swap')

        self.assertEqual(status, 0)
        self.assertIn('Mapping: x.y.z', out)

    def test_swap_invalid(self):

        status, _, err = run('swap', 'x.x.z')

        self.assertEqual(status, 1)
        self.assertIn('Invalid axis mapping', err)

    def test_axis_angle(self):

        status, out, _ = run('axis-angle', '1', '0', '0', '90')

        self.assertEqual(status, 0)
        self.assertIn('Quaternion (x, y, z, w): (0.7071, 0.0000, 0.0000, 0.7071)', out)

    def test_quaternion(self):

        status, out, err = run('quaternion', '0', '0', '0', '2')

        self.assertEqual(status, 0)
        self.assertIn('pass --repair', err)
        self.assertIn('Quaternion (x, y, z, w): (0.0000, 0.0000, 0.0000, 1.0000)', out)

        status, out, _ = run('quaternion', '0', '0', '0', '2', '--repair')

        self.assertEqual(status, 0)
        self.assertIn('Repaired input: Quaternion is not normalized (magnitude: 2.0000)', out)

    def test_quaternion_zero(self):

        status, out, err = run('quaternion', '0', '0', '0', '0')

        self.assertEqual(status, 1)
        self.assertEqual(out, '')
        self.assertIn('Quaternion magnitude is zero', err)

    def test_matrix(self):

        status, out, _ = run('matrix', '1', '0.3', '0', '0', '1', '0', '0', '0', '1', '--repair')

        self.assertEqual(status, 0)
        self.assertIn('Repaired input: Matrix is not orthonormal', out)
        self.assertIn('Euler (roll, pitch, yaw) [deg]: (0.0000, 0.0000, 0.0000)', out)

    def test_matrix_improper(self):

        status, _, err = run('matrix', '1', '0', '0', '0', '1', '0', '0', '0', '-1', '--repair')

        self.assertEqual(status, 1)
        self.assertIn('not a proper rotation', err)
