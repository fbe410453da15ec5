#
# PROJECT: kanvas
# MODULE: kanvas/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging

from .vec3d import Vec3d

logger = logging.getLogger(__name__)


class Mesh:
    """Vertices (Vec3d) and polygon faces (lists of vertex indices)."""

    def __init__(self, filename=None, size: float = 100.0):
        self.vertices = []
        self.faces = []
        if filename:
            self.load_from_obj(filename)
        if not self.vertices or not self.faces:
            self._make_cube(size)

    def load_from_obj(self, filename):
        """Read 'v' and 'f' records of a Wavefront OBJ file."""
        vertices, faces = [], []
        try:
            with open(filename, 'r') as f:
                for line in f:
                    if line.startswith('v '):
                        vertices.append(Vec3d(*[float(x) for x in line.split()[1:4]]))
                    elif line.startswith('f '):
                        # Handle v/vt/vn format by splitting by '/'
                        faces.append([int(x.split('/')[0]) - 1 for x in line.split()[1:]])
        except (OSError, ValueError) as e:
            logger.warning("Could not load %r, using the demo cube: %s", filename, e)
            return
        self.vertices, self.faces = vertices, faces
        logger.info("Loaded %r: %d vertices, %d faces", filename, len(vertices), len(faces))

    def _make_cube(self, size):
        """Cube of edge length `size` centred at the origin."""
        h = size / 2.0
        self.vertices = [
            Vec3d(-h, -h, -h), Vec3d(h, -h, -h), Vec3d(h, h, -h), Vec3d(-h, h, -h),
            Vec3d(-h, -h, h), Vec3d(h, -h, h), Vec3d(h, h, h), Vec3d(-h, h, h),
        ]
        self.faces = [
            [0, 1, 2, 3],  # front
            [5, 4, 7, 6],  # back
            [4, 0, 3, 7],  # left
            [1, 5, 6, 2],  # right
            [3, 2, 6, 7],  # top
            [4, 5, 1, 0],  # bottom
        ]

    def edges(self):
        """Unique undirected (i, j) index pairs, i < j, in face order."""
        seen = set()
        out = []
        for face in self.faces:
            for k in range(len(face)):
                a, b = face[k], face[(k + 1) % len(face)]
                key = (a, b) if a < b else (b, a)
                if key not in seen:
                    seen.add(key)
                    out.append(key)
        return out

    @classmethod
    def cube(cls, size: float = 100.0):
        return cls(size=size)

    @classmethod
    def from_obj(cls, filename):
        return cls(filename)
