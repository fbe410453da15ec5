#
# PROJECT: kanvas
# MODULE: kanvas/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .matrix import SquareMatrix, fdiv
from .mat3 import Mat3
from .mat4 import Mat4
from .vec2d import Vec2d, Point2d
from .vec3d import Vec3d, Point3d
from .context import Context2D
from .surface import Surface, register_surface, get_surface, unregister_surface
from .canvas import Kanvas, ContextUnavailableError
from .config import KanvasConfig
from .mesh import Mesh
from .camera import Camera
