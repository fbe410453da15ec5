#
# PROJECT: kanvas
# MODULE: kanvas/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .vec2d import Vec2d
from .vec3d import Vec3d

X_RANGE = (-200.0, 200.0)
Y_RANGE = (-200.0, 200.0)
Z_RANGE = (80.0, 400.0)
FOV_RANGE = (60.0, 170.0)


def _clamp(value, bounds):
    lo, hi = bounds
    return max(lo, min(hi, value))


class Camera:
    """
    Driving parameters for the projection demo.

    `offset` is added to every (already rotated) model vertex before
    projecting; `fov` is the vertical field of view in degrees.  Each is
    clamped to the demo's slider ranges.
    """
    __slots__ = ('offset', 'fov', 'near', 'far')

    def __init__(self, fov: float = 90.0, offset=None,
                 near: float = 0.1, far: float = 1000.0):
        self.offset = Vec3d(0.0, 0.0, 200.0) if offset is None else Vec3d.of(offset)
        self.fov = _clamp(fov, FOV_RANGE)
        self.near = near
        self.far = far

    def nudge(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0):
        """Move the offset by a delta, clamped per axis."""
        self.offset.x = _clamp(self.offset.x + dx, X_RANGE)
        self.offset.y = _clamp(self.offset.y + dy, Y_RANGE)
        self.offset.z = _clamp(self.offset.z + dz, Z_RANGE)

    def adjust_fov(self, delta: float):
        """Adjust field of view by delta degrees, clamped to [60, 170]."""
        self.fov = _clamp(self.fov + delta, FOV_RANGE)

    def to_view(self, vertex: Vec3d) -> Vec3d:
        return Vec3d.translate(vertex, self.offset)

    def in_front(self, view: Vec3d) -> bool:
        return view.z > self.near

    def project(self, vertex: Vec3d, width: float, height: float) -> Vec2d:
        """Offset a model-space vertex and project it onto a width x height viewport."""
        return self.to_view(vertex).project(
            self.fov, width / height, self.near, self.far, width, height)
