#
# PROJECT: kanvas
# MODULE: kanvas/tests/test_matrix.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
import unittest

from kanvas.mat3 import Mat3
from kanvas.mat4 import Mat4
from kanvas.matrix import fdiv


class FdivTestCase(unittest.TestCase):
    def test_regular_division(self):
        self.assertEqual(fdiv(6.0, 3.0), 2.0)

    def test_division_by_zero_follows_ieee(self):
        self.assertEqual(fdiv(1.0, 0.0), math.inf)
        self.assertEqual(fdiv(-1.0, 0.0), -math.inf)
        self.assertEqual(fdiv(1.0, -0.0), -math.inf)
        self.assertTrue(math.isnan(fdiv(0.0, 0.0)))
        self.assertTrue(math.isnan(fdiv(math.nan, 0.0)))


class Mat3TestCase(unittest.TestCase):
    def setUp(self):
        self.m = Mat3([1.5, -2.0, 0.25,
                       3.0, 4.0, -1.0,
                       7.0, 0.5, 2.0])

    def test_default_is_identity(self):
        self.assertEqual(Mat3(), Mat3.identity())
        self.assertEqual(Mat3.identity().data, [1, 0, 0, 0, 1, 0, 0, 0, 1])

    def test_identity_law(self):
        self.assertTrue(self.m.copy().multiply(Mat3.identity()).isclose(self.m))
        self.assertTrue(Mat3.identity().multiply(self.m).isclose(self.m))

    def test_translation_in_last_row(self):
        self.assertEqual(Mat3.translation(3, 4).data, [1, 0, 0, 0, 1, 0, 3, 4, 1])
        self.assertEqual(Mat3.translation(3, 4).row(2), (3, 4, 1))

    def test_rotation_quarter_turn(self):
        x, y, w = Mat3.rotation(math.pi / 2).transform_row((1.0, 0.0, 1.0))
        self.assertAlmostEqual(x, 0.0)
        self.assertAlmostEqual(y, 1.0)
        self.assertEqual(w, 1.0)

    def test_scale(self):
        self.assertEqual(Mat3.scale(2, 3).transform_row((1.0, 1.0, 1.0)), (2.0, 3.0, 1.0))

    def test_multiply_is_in_place_and_ordered(self):
        m = Mat3.scale(2, 2)
        res = m.multiply(Mat3.translation(1, 0))
        self.assertIs(res, m)
        # scale first, then translate
        self.assertEqual(m.transform_row((1.0, 1.0, 1.0)), (3.0, 2.0, 1.0))

        other = Mat3.translation(1, 0).multiply(Mat3.scale(2, 2))
        self.assertEqual(other.transform_row((1.0, 1.0, 1.0)), (4.0, 2.0, 1.0))

    def test_matmul_does_not_mutate(self):
        a = Mat3.scale(2, 2)
        b = Mat3.translation(1, 0)
        c = a @ b
        self.assertEqual(a, Mat3.scale(2, 2))
        self.assertEqual(c, Mat3.scale(2, 2).multiply(b))

    def test_copy_independence(self):
        original = list(self.m.data)
        dup = self.m.copy()
        dup.multiply(Mat3.scale(2, 2))
        dup.data[0] = 99.0
        self.assertEqual(self.m.data, original)

    def test_set_copies_values(self):
        values = [float(i) for i in range(9)]
        m = Mat3().set(values)
        values[0] = 42.0
        self.assertEqual(m[0, 0], 0.0)
        self.assertEqual(m[2, 1], 7.0)

    def test_wrong_length_rejected(self):
        with self.assertRaises(ValueError):
            Mat3([1, 2, 3])
        with self.assertRaises(ValueError):
            Mat3().set([0] * 16)

    def test_transpose_and_index(self):
        t = self.m.transpose()
        self.assertEqual(t[0, 2], self.m[2, 0])
        self.assertEqual(t.transpose(), self.m)
        with self.assertRaises(IndexError):
            self.m[3, 0]

    def test_value_equality(self):
        self.assertEqual(Mat3.translation(1, 2), Mat3([1, 0, 0, 0, 1, 0, 1, 2, 1]))
        self.assertNotEqual(Mat3.translation(1, 2), Mat3.translation(2, 1))


class Mat4TestCase(unittest.TestCase):
    def test_identity_law(self):
        m = Mat4(*[float(i) * 0.5 - 3 for i in range(16)])
        self.assertTrue(m.copy().multiply(Mat4.identity()).isclose(m))
        self.assertTrue(Mat4.identity().multiply(m).isclose(m))

    def test_default_is_identity(self):
        self.assertEqual(Mat4(), Mat4.identity())

    def test_wrong_length_rejected(self):
        with self.assertRaises(ValueError):
            Mat4(1, 2, 3)

    def test_multiply_is_not_commutative(self):
        t = Mat4.translation(1, 0, 0)
        r = Mat4.rotation_z(math.pi / 2)
        tr = t.copy().multiply(r)
        rt = r.copy().multiply(t)
        self.assertFalse(tr.isclose(rt))

        # translate then rotate moves the origin to (0, 1, 0)
        x, y, z, w = tr.transform_row((0.0, 0.0, 0.0, 1.0))
        self.assertAlmostEqual(x, 0.0)
        self.assertAlmostEqual(y, 1.0)
        # rotate then translate moves it to (1, 0, 0)
        self.assertEqual(rt.transform_row((0.0, 0.0, 0.0, 1.0)), (1.0, 0.0, 0.0, 1.0))

    def test_copy_independence(self):
        m = Mat4.translation(1, 2, 3)
        dup = m.copy()
        dup.set(*range(16))
        self.assertEqual(m, Mat4.translation(1, 2, 3))

    def test_rotations_agree_with_mat3(self):
        theta = 0.3
        m3 = Mat3.rotation(theta)
        m4 = Mat4.rotation_z(theta)
        for r in range(2):
            for c in range(2):
                self.assertAlmostEqual(m3[r, c], m4[r, c])

    def test_rotation_round_trip(self):
        for rot in (Mat4.rotation_x, Mat4.rotation_y, Mat4.rotation_z):
            m = rot(0.7).multiply(rot(-0.7))
            self.assertTrue(m.isclose(Mat4.identity()), rot.__name__)

    def test_perspective_layout(self):
        p = Mat4.perspective(90, 2.0, 0.1, 1000)
        q = 1000 / (1000 - 0.1)
        self.assertAlmostEqual(p[0, 0], 0.5)
        self.assertAlmostEqual(p[1, 1], 1.0)
        self.assertAlmostEqual(p[2, 2], q)
        self.assertEqual(p[2, 3], 1.0)
        self.assertAlmostEqual(p[3, 2], -q * 0.1)
        self.assertEqual(p[3, 3], 0.0)

    def test_perspective_depth_range(self):
        p = Mat4.perspective(60, 1.0, 1.0, 100.0)
        for z, expected in ((1.0, 0.0), (100.0, 1.0)):
            x, y, zc, w = p.transform_row((0.0, 0.0, z, 1.0))
            self.assertAlmostEqual(zc / w, expected)

    def test_perspective_far_equals_near_propagates(self):
        p = Mat4.perspective(90, 1.0, 10.0, 10.0)
        self.assertEqual(p[2, 2], math.inf)
        self.assertEqual(p[3, 2], -math.inf)

        p = Mat4.perspective(90, 1.0, 0.0, 0.0)
        self.assertTrue(math.isnan(p[2, 2]))

    def test_perspective_zero_aspect_propagates(self):
        p = Mat4.perspective(90, 0.0, 0.1, 100.0)
        self.assertTrue(math.isinf(p[0, 0]))


if __name__ == '__main__':
    unittest.main()
