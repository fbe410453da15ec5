#
# PROJECT: kanvas
# MODULE: kanvas/raster.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math


def _finite(*values) -> bool:
    return all(math.isfinite(v) for v in values)


def _dash_on(dash, phase: float) -> bool:
    for i, length in enumerate(dash):
        if phase < length:
            return i % 2 == 0
        phase -= length
    return True


def _clip_segment(x1, y1, dx, dy, x_min, y_min, x_max, y_max):
    """
    Liang-Barsky clip of the segment (x1, y1) + t * (dx, dy), t in [0, 1].
    Returns the visible (t0, t1) range, or None when nothing is left.
    """
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x1 - x_min), (dx, x_max - x1),
                 (-dy, y1 - y_min), (dy, y_max - y1)):
        if p == 0:
            if q < 0:
                return None
            continue
        r = q / p
        if p < 0:
            t0 = max(t0, r)
        else:
            t1 = min(t1, r)
        if t0 > t1:
            return None
    return t0, t1


def draw_line_dda(surface, p1, p2, color=None, width: float = 1.0,
                  dash=(), dash_offset: float = 0.0, travelled: float = 0.0) -> float:
    """
    Draws a line using the DDA algorithm.

    `dash` is an even-length on/off pattern in pixels, measured from
    `travelled` (the length already stroked along the current subpath) plus
    `dash_offset`.  Returns the travelled length after this segment so a
    polyline keeps its dash phase.  Non-finite endpoints draw nothing.

    The segment is clipped to the surface (widened by the brush) before
    stepping, so far off-screen endpoints cost no more than visible ones.
    """
    x1, y1 = p1
    x2, y2 = p2
    if not _finite(x1, y1, x2, y2):
        return travelled

    dx = x2 - x1
    dy = y2 - y1
    length = math.hypot(dx, dy)
    half = int(width // 2) if width > 1 else 0

    visible = _clip_segment(x1, y1, dx, dy,
                            -half - 1.0, -half - 1.0,
                            surface.width + half + 1.0, surface.height + half + 1.0)
    if visible is None:
        return travelled + length
    t0, t1 = visible
    start = travelled + t0 * length
    x1, y1 = x1 + t0 * dx, y1 + t0 * dy
    dx, dy = dx * (t1 - t0), dy * (t1 - t0)
    seg_length = length * (t1 - t0)

    step = max(abs(dx), abs(dy))
    if step < 1:
        step = 1.0

    steps = int(math.ceil(step))
    x_inc = dx / steps
    y_inc = dy / steps
    d_inc = seg_length / steps

    total = sum(dash)
    cx, cy = x1, y1
    for i in range(steps + 1):
        if not total or _dash_on(dash, (start + dash_offset + i * d_inc) % total):
            px, py = int(round(cx)), int(round(cy))
            if half:
                for oy in range(-half, half + 1):
                    for ox in range(-half, half + 1):
                        surface.set_pixel(px + ox, py + oy, color)
            else:
                surface.set_pixel(px, py, color)
        cx += x_inc
        cy += y_inc
    return travelled + length


def fill_polygons(surface, polygons, color=None):
    """
    Scanline fill of one or more closed polygons with the non-zero winding
    rule.  Pixel centres at (x + 0.5, y + 0.5) decide coverage.
    """
    edges = []
    for poly in polygons:
        pts = [p for p in poly if _finite(p[0], p[1])]
        if len(pts) < 3:
            continue
        for i in range(len(pts)):
            a = pts[i]
            b = pts[(i + 1) % len(pts)]
            if a[1] != b[1]:
                edges.append((a, b))
    if not edges:
        return

    y_min = min(min(a[1], b[1]) for a, b in edges)
    y_max = max(max(a[1], b[1]) for a, b in edges)
    start_y = max(0, int(math.floor(y_min)))
    end_y = min(surface.height, int(math.ceil(y_max)))

    for y in range(start_y, end_y):
        yc = y + 0.5
        crossings = []
        for (x0, y0), (x1, y1) in edges:
            if y0 <= yc < y1 or y1 <= yc < y0:
                x = x0 + (yc - y0) * (x1 - x0) / (y1 - y0)
                crossings.append((x, 1 if y1 > y0 else -1))
        crossings.sort(key=lambda c: c[0])

        winding = 0
        for i in range(len(crossings) - 1):
            winding += crossings[i][1]
            if winding == 0:
                continue
            xa = crossings[i][0]
            xb = crossings[i + 1][0]
            sx = max(0, int(math.ceil(xa - 0.5)))
            ex = min(surface.width, int(math.ceil(xb - 0.5)))
            for x in range(sx, ex):
                surface.set_pixel(x, y, color)
