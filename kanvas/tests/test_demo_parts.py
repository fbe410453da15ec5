#
# PROJECT: kanvas
# MODULE: kanvas/tests/test_demo_parts.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
import tempfile
import unittest
from unittest import mock

from kanvas.camera import Camera
from kanvas.color import Palette, parse_hex_color, rgb_to_nearest_ansi8, rgb_to_nearest_xterm
from kanvas.config import KanvasConfig
from kanvas.mesh import Mesh
from kanvas.present import present
from kanvas.surface import Surface
from kanvas.vec3d import Vec3d


class MeshTestCase(unittest.TestCase):
    def test_demo_cube(self):
        m = Mesh.cube(2.0)
        self.assertEqual(len(m.vertices), 8)
        self.assertEqual(len(m.faces), 6)
        self.assertEqual(len(m.edges()), 12)
        self.assertEqual(tuple(m.vertices[0]), (-1.0, -1.0, -1.0))

    def test_obj_loading(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "tri.obj")
            with open(path, "w") as f:
                f.write("# triangle\nv 0 0 0\nv 1 0 0\nv 0 1 0\nvn 0 0 1\nf 1//1 2//1 3//1\n")
            m = Mesh.from_obj(path)
        self.assertEqual(len(m.vertices), 3)
        self.assertEqual(m.faces, [[0, 1, 2]])
        self.assertEqual(m.edges(), [(0, 1), (1, 2), (0, 2)])

    def test_missing_file_falls_back_to_cube(self):
        with self.assertLogs("kanvas.mesh", level="WARNING"):
            m = Mesh("/nonexistent/model.obj")
        self.assertEqual(len(m.vertices), 8)


class CameraTestCase(unittest.TestCase):
    def test_ranges_are_clamped(self):
        c = Camera(fov=10)
        self.assertEqual(c.fov, 60.0)
        c.adjust_fov(500)
        self.assertEqual(c.fov, 170.0)
        c.nudge(dx=1000, dy=-1000, dz=-1000)
        self.assertEqual(tuple(c.offset), (200.0, -200.0, 80.0))
        c.nudge(dz=1000)
        self.assertEqual(c.offset.z, 400.0)

    def test_project_origin_to_centre(self):
        c = Camera()
        p = c.project(Vec3d(0, 0, 0), 600, 400)
        self.assertAlmostEqual(p.x, 300.0)
        self.assertAlmostEqual(p.y, 200.0)

    def test_to_view_does_not_mutate(self):
        c = Camera()
        v = Vec3d(1, 2, 3)
        view = c.to_view(v)
        self.assertEqual(tuple(v), (1.0, 2.0, 3.0))
        self.assertEqual(tuple(view), (1.0, 2.0, 203.0))
        self.assertTrue(c.in_front(view))
        self.assertFalse(c.in_front(Vec3d(0, 0, -1)))


class ConfigTestCase(unittest.TestCase):
    def test_linux_console_disables_braille(self):
        with mock.patch.dict(os.environ, {"TERM": "linux", "LANG": "en_US.UTF-8"}):
            config = KanvasConfig.detect_terminal()
        self.assertTrue(config.use_color)
        self.assertFalse(config.use_braille)

    def test_dumb_terminal_disables_color(self):
        with mock.patch.dict(os.environ, {"TERM": "dumb", "LANG": "C.UTF-8"}):
            config = KanvasConfig.detect_terminal()
        self.assertFalse(config.use_color)
        self.assertTrue(config.use_braille)


class ColorTestCase(unittest.TestCase):
    def test_parse_hex_color(self):
        self.assertEqual(parse_hex_color("#fff"), (255, 255, 255))
        self.assertEqual(parse_hex_color("D0DD14"), (208, 221, 20))
        self.assertIsNone(parse_hex_color("#12345"))
        self.assertIsNone(parse_hex_color("#zzzzzz"))
        self.assertIsNone(parse_hex_color(None))

    def test_nearest_palette_entries(self):
        self.assertEqual(rgb_to_nearest_xterm(255, 0, 0), 196)
        self.assertEqual(rgb_to_nearest_xterm(128, 128, 128), 244)
        self.assertEqual(rgb_to_nearest_ansi8(0, 0, 0), 0)
        self.assertEqual(rgb_to_nearest_ansi8(200, 200, 200), 7)

    def test_palette_without_color(self):
        self.assertEqual(Palette(use_color=False).pair_for("#fff"), 0)


class PresentTestCase(unittest.TestCase):
    def test_cells_written_below_hud(self):
        s = Surface(8, 8)
        s.set_pixel(0, 0, "#fff")
        s.put_text(2, 1, "ab")
        screen = mock.Mock()
        screen.getmaxyx.return_value = (10, 20)
        with mock.patch("curses.color_pair", return_value=0):
            present(screen, s, KanvasConfig(use_braille=False),
                    Palette(use_color=False), top=1)
        screen.erase.assert_called_once_with()
        screen.addstr.assert_any_call(1, 0, ".", 0)
        screen.addstr.assert_any_call(2, 2, "a", 0)
        screen.addstr.assert_any_call(2, 3, "b", 0)
        screen.bkgd.assert_not_called()


if __name__ == '__main__':
    unittest.main()
