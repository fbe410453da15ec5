#
# PROJECT: kanvas
# MODULE: kanvas/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging
import time

from .camera import Camera
from .canvas import Kanvas
from .color import Palette
from .config import KanvasConfig
from .mesh import Mesh
from .present import present
from .surface import Surface, register_surface, unregister_surface
from .vec2d import Vec2d
from .vec3d import Vec3d

logger = logging.getLogger(__name__)

SURFACE_ID = "scene"
FRAME_TIME = 1.0 / 30


def surface_size(stdscr):
    """Pixel size of the drawing area: everything below the HUD line."""
    th, tw = stdscr.getmaxyx()
    return max(2, (tw - 1) * 2), max(4, (th - 1) * 4)


class DemoApp:
    """
    Spinning wireframe projected with Vec3d.project and drawn through Kanvas.

    Keys: arrows move the model in x/y, +/- move it nearer/further,
    [ and ] change the field of view, space pauses, r resets, q quits.
    """

    def __init__(self, stdscr, args):
        self.stdscr = stdscr
        self.running = True
        self.paused = False

        curses.curs_set(0)
        stdscr.nodelay(True)

        config = KanvasConfig.detect_terminal()
        if args.no_color:
            config.use_color = False
        if args.ascii:
            config.use_braille = False
        config.field_of_view = args.fov
        config.spin_speed = args.spin
        config.foreground = args.fg_color
        config.background = args.bg_color
        self.config = config

        self.palette = Palette(config.use_color)
        self.palette.setup()

        width, height = surface_size(stdscr)
        register_surface(SURFACE_ID, Surface(width, height, background=config.background))
        self.kanvas = Kanvas(SURFACE_ID, width, height)
        self.kanvas.stroke_style = config.foreground
        self.kanvas.fill_style = config.foreground

        self.mesh = Mesh(args.model, size=args.size)
        self.edges = self.mesh.edges()
        self.camera = Camera(fov=config.field_of_view, near=config.near, far=config.far)
        self.angle = 0.0

        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()
        logger.info("Demo started: %dx%d px, %d vertices, %d edges",
                    width, height, len(self.mesh.vertices), len(self.edges))

    def handle_input(self):
        key = self.stdscr.getch()
        if key == -1:
            return

        camera = self.camera
        if key == ord('q'):
            self.running = False
        elif key == curses.KEY_UP:
            camera.nudge(dy=10)
        elif key == curses.KEY_DOWN:
            camera.nudge(dy=-10)
        elif key == curses.KEY_RIGHT:
            camera.nudge(dx=10)
        elif key == curses.KEY_LEFT:
            camera.nudge(dx=-10)
        elif key in (ord('='), ord('+')):
            camera.nudge(dz=-10)
        elif key == ord('-'):
            camera.nudge(dz=10)
        elif key == ord('['):
            camera.adjust_fov(-5)
        elif key == ord(']'):
            camera.adjust_fov(5)
        elif key == ord(' '):
            self.paused = not self.paused
        elif key == ord('r'):
            self.camera = Camera(fov=self.config.field_of_view,
                                 near=self.config.near, far=self.config.far)
            self.angle = 0.0
        elif key == curses.KEY_RESIZE:
            width, height = surface_size(self.stdscr)
            self.kanvas.resize(width, height)

    def project_mesh(self):
        """Rotate, offset and project every vertex; None for points behind the eye."""
        k = self.kanvas
        a = self.angle
        points = []
        for v in self.mesh.vertices:
            view = self.camera.to_view(Vec3d.rotate_x(v, a).rotate_y(a * 0.7))
            if self.camera.in_front(view):
                points.append(view.project(self.camera.fov, k.aspect_ratio,
                                           self.camera.near, self.camera.far,
                                           k.width, k.height))
            else:
                points.append(None)
        return points

    def draw_mesh(self, points):
        k = self.kanvas
        k.begin_path()
        for i, j in self.edges:
            if points[i] is not None and points[j] is not None:
                k.line(points[i], points[j])
        k.stroke()

        k.begin_path()
        for p in points:
            if p is not None:
                k.move_to(Vec2d.add(p, Vec2d(1.5, 0))).circle(p, 1.5)
        k.fill()

    def draw_compass(self):
        """A needle spinning with the model, built from polar vectors."""
        k = self.kanvas
        radius = min(k.width, k.height) / 10
        if radius < 4:
            return
        origin = Vec2d(k.width - radius - 4, k.height - radius - 4)
        # screen y points down, so flip the needle to turn counter-clockwise
        needle = Vec2d.from_polar(self.angle, radius).scale(Vec2d(1, -1))

        k.begin_path().move_to(Vec2d.add(origin, Vec2d(radius, 0))).circle(origin, radius)
        k.stroke(dash=[2, 2])
        k.begin_path().line(origin, Vec2d.add(origin, needle)).stroke(width=2)

    def draw_frame(self):
        self.kanvas.clear()
        self.draw_mesh(self.project_mesh())
        self.draw_compass()

    def draw_hud(self, ms: float):
        th, tw = self.stdscr.getmaxyx()
        off = self.camera.offset
        hdr = (f" x:{off.x:.0f} y:{off.y:.0f} z:{off.z:.0f}"
               f" | fov:{self.camera.fov:.0f}"
               f" | FPS:{self.fps}"
               f" | {ms:.1f}ms"
               f"{' | PAUSED' if self.paused else ''} ")
        try:
            self.stdscr.addstr(0, 0, hdr.center(tw - 1, '='),
                               curses.color_pair(0) | curses.A_BOLD)
        except curses.error:
            pass

    def run(self):
        last = time.time()
        try:
            while self.running:
                start_time = time.time()
                self.handle_input()

                if not self.paused:
                    self.angle += (start_time - last) * self.config.spin_speed
                last = start_time

                self.draw_frame()
                present(self.stdscr, self.kanvas.surface, self.config, self.palette, top=1)

                self.frame_count += 1
                now = time.time()
                if now - self.last_fps_time >= 1.0:
                    self.fps = self.frame_count
                    self.frame_count = 0
                    self.last_fps_time = now

                self.draw_hud((now - start_time) * 1000)
                self.stdscr.refresh()
                time.sleep(max(0.0, FRAME_TIME - (time.time() - start_time)))
        finally:
            unregister_surface(SURFACE_ID)


def main(stdscr, args):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, args)
    app.run()
