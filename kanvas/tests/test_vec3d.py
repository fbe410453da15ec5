#
# PROJECT: kanvas
# MODULE: kanvas/tests/test_vec3d.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
import unittest
from collections import namedtuple

from kanvas.mat4 import Mat4
from kanvas.vec2d import Vec2d
from kanvas.vec3d import Point3d, Vec3d

P3 = namedtuple('P3', 'x y z')


class Vec3dTestCase(unittest.TestCase):
    def assertVecAlmostEqual(self, v, expected, places=9):
        for got, want in zip(v, expected):
            self.assertAlmostEqual(got, want, places=places)

    def test_axis_rotations(self):
        self.assertVecAlmostEqual(Vec3d(0, 1, 0).rotate_x(math.pi / 2), (0, 0, 1))
        self.assertVecAlmostEqual(Vec3d(0, 0, 1).rotate_y(math.pi / 2), (1, 0, 0))
        self.assertVecAlmostEqual(Vec3d(1, 0, 0).rotate_z(math.pi / 2), (0, 1, 0))

    def test_rotation_round_trip(self):
        v = Vec3d(1, 2, 3).rotate_x(0.4).rotate_y(-1.1).rotate_z(2.0)
        v.rotate_z(-2.0).rotate_y(1.1).rotate_x(-0.4)
        self.assertVecAlmostEqual(v, (1, 2, 3))

    def test_rotation_keeps_length(self):
        v = Vec3d(1, 2, 3)
        self.assertAlmostEqual(Vec3d.rotate_y(v, 0.9).magnitude, v.magnitude)

    def test_translate_and_scale(self):
        v = Vec3d(1, 2, 3).translate(P3(1, 1, 1))
        self.assertEqual(tuple(v), (2.0, 3.0, 4.0))
        self.assertEqual(tuple(v.scale(P3(2, 0.5, -1))), (4.0, 1.5, -4.0))

    def test_transform_drops_w(self):
        v = Vec3d(1, 1, 1).transform(Mat4.translation(0, 0, 5))
        self.assertEqual(tuple(v), (1.0, 1.0, 6.0))

    def test_cross_and_dot(self):
        self.assertEqual(tuple(Vec3d.cross(P3(1, 0, 0), P3(0, 1, 0))), (0.0, 0.0, 1.0))
        self.assertEqual(Vec3d(1, 2, 3).dot(P3(4, 5, 6)), 32.0)

    def test_normalize(self):
        self.assertVecAlmostEqual(Vec3d(0, 3, 4).normalize(), (0, 0.6, 0.8))
        self.assertEqual(tuple(Vec3d().normalize()), (0.0, 0.0, 0.0))

    def test_class_level_calls_do_not_mutate(self):
        a = Vec3d(1, 0, 0)
        b = Vec3d.rotate_z(a, math.pi / 2)
        self.assertEqual(tuple(a), (1.0, 0.0, 0.0))
        self.assertVecAlmostEqual(b, (0, 1, 0))
        self.assertEqual(tuple(Vec3d.add(P3(1, 2, 3), a)), (2.0, 2.0, 3.0))

    def test_copy(self):
        v = Vec3d(1, 2, 3)
        c = v.copy(z=0)
        c.add(P3(1, 1, 1))
        self.assertEqual(tuple(v), (1.0, 2.0, 3.0))
        self.assertEqual(tuple(c), (2.0, 3.0, 1.0))

    def test_operators(self):
        a = Vec3d(1, 2, 3)
        self.assertEqual(a + Vec3d(1, 1, 1), Vec3d(2, 3, 4))
        self.assertEqual(a - Vec3d(1, 1, 1), Vec3d(0, 1, 2))
        self.assertEqual(a * 2, Vec3d(2, 4, 6))
        self.assertEqual(-a, Vec3d(-1, -2, -3))
        self.assertEqual(a[2], 3.0)
        self.assertIsInstance(P3(0, 0, 0), Point3d)

    def test_multiplying_by_a_vector_is_rejected(self):
        a = Vec3d(1, 2, 3)
        with self.assertRaises(TypeError):
            a * Vec3d(1, 1, 1)
        with self.assertRaises(TypeError):
            Vec2d(1, 2) * a
        with self.assertRaises(TypeError):
            a / "2"
        self.assertEqual(a, Vec3d(1, 2, 3))


class ProjectionTestCase(unittest.TestCase):
    args = (90, 1.0, 0.1, 1000, 600, 600)

    def test_centre_point_lands_in_viewport_centre(self):
        for z in (-100, 100, 500):
            p = Vec3d(0, 0, z).project(*self.args)
            self.assertIsInstance(p, Vec2d)
            self.assertAlmostEqual(p.x, 300.0, places=6)
            self.assertAlmostEqual(p.y, 300.0, places=6)

    def test_edges_of_the_frustum_map_to_viewport_edges(self):
        # with a 90 degree field of view x == z sits on the right edge
        p = Vec3d(100, 0, 100).project(*self.args)
        self.assertAlmostEqual(p.x, 600.0, places=6)
        self.assertAlmostEqual(p.y, 300.0, places=6)
        # +y is up on screen
        p = Vec3d(0, 100, 100).project(*self.args)
        self.assertAlmostEqual(p.y, 0.0, places=6)
        p = Vec3d(-50, -50, 100).project(*self.args)
        self.assertAlmostEqual(p.x, 150.0, places=6)
        self.assertAlmostEqual(p.y, 450.0, places=6)

    def test_aspect_ratio_squeezes_x(self):
        p = Vec3d(100, 0, 100).project(90, 2.0, 0.1, 1000, 800, 400)
        self.assertAlmostEqual(p.x, 600.0, places=6)

    def test_further_points_move_towards_centre(self):
        near = Vec3d(50, 0, 100).project(*self.args)
        far = Vec3d(50, 0, 400).project(*self.args)
        self.assertLess(far.x - 300, near.x - 300)

    def test_project_does_not_mutate(self):
        v = Vec3d(10, 20, 30)
        v.project(*self.args)
        self.assertEqual(tuple(v), (10.0, 20.0, 30.0))

    def test_to_ndc_keeps_depth(self):
        m = Mat4.perspective(90, 1.0, 1.0, 100.0)
        self.assertAlmostEqual(Vec3d(0, 0, 1).to_ndc(m).z, 0.0)
        self.assertAlmostEqual(Vec3d(0, 0, 100).to_ndc(m).z, 1.0)

    def test_zero_w_propagates(self):
        p = Vec3d(1, 1, 0).project(*self.args)
        self.assertTrue(math.isinf(p.x))
        p = Vec3d(0, 0, 0).project(*self.args)
        self.assertTrue(math.isnan(p.x))

    def test_far_equals_near_propagates(self):
        ndc = Vec3d(0, 0, 50).to_ndc(Mat4.perspective(90, 1.0, 10.0, 10.0))
        self.assertTrue(math.isnan(ndc.z))


if __name__ == '__main__':
    unittest.main()
