"""
Project: Pitchboard
File Created: 2026-03-02 16:16:28
Author: Xingnan Zhu
File Name: geometry.py
Description:
    Coordinate helpers for the board. Maps viewport pointer positions to
    board percentages, clamps to the pitch, serialises strokes into path
    strings and provides the distance tests used for erasing and for
    telling a click from a drag.
"""

import math
from typing import Sequence, Tuple

import numpy as np

from pitchboard.core.types import BoardRect, PitchConfig, Point

# 坐标系: 原点 (0,0) 在左上角, X轴向右, Y轴向下, 单位: 百分比
MIN_PCT = 0.0
MAX_PCT = PitchConfig.SIZE


def clamp_pct(value: float) -> float:
    return min(MAX_PCT, max(MIN_PCT, value))


def clamp_point(point: Point) -> Point:
    return Point(clamp_pct(point.x), clamp_pct(point.y))


def to_board_coords(pointer_x: float, pointer_y: float, rect: BoardRect) -> Point:
    """
    Viewport pointer position -> board percentage, clamped to [0, 100].

    ``rect`` must be the board's bounding rectangle at the time of the
    event; nothing is cached so a resized board maps correctly.
    A zero-sized axis maps to 0.
    """
    x = (pointer_x - rect.left) / rect.width * 100 if rect.width > 0 else 0.0
    y = (pointer_y - rect.top) / rect.height * 100 if rect.height > 0 else 0.0
    return Point(clamp_pct(x), clamp_pct(y))


def to_pixels(point: Point, width: int, height: int) -> Tuple[int, int]:
    """Board percentage -> integer pixel on a canvas of the given size."""
    return int(round(point.x / 100 * width)), int(round(point.y / 100 * height))


def path_string(points: Sequence[Point]) -> str:
    """
    "M x0 y0 L x1 y1 L ...": straight segments, no smoothing, so a
    freehand stroke is reproduced exactly. Empty input gives "".
    """
    if not points:
        return ""
    first, rest = points[0], points[1:]
    d = f"M {_fmt(first.x)} {_fmt(first.y)}"
    for p in rest:
        d += f" L {_fmt(p.x)} {_fmt(p.y)}"
    return d


def _fmt(value: float) -> str:
    # 10.0 -> "10", 12.5 -> "12.5"
    return f"{value:g}"


def mirror_x(x: float) -> float:
    """Reflect across the halfway line."""
    return MAX_PCT - x


def pixel_distance(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def distance_to_polyline(point: Point, points: Sequence[Point]) -> float:
    """
    Shortest distance from ``point`` to any segment of the polyline.
    A single point degenerates to point distance; no points -> inf.
    """
    if not points:
        return math.inf
    pts = np.array([(p.x, p.y) for p in points], dtype=np.float64)
    q = np.array([point.x, point.y], dtype=np.float64)
    if len(pts) == 1:
        return float(np.linalg.norm(q - pts[0]))

    a = pts[:-1]
    b = pts[1:]
    ab = b - a
    seg_len_sq = np.einsum("ij,ij->i", ab, ab)
    # Zero-length segments project onto their start point
    t = np.divide(
        np.einsum("ij,ij->i", q - a, ab),
        seg_len_sq,
        out=np.zeros_like(seg_len_sq),
        where=seg_len_sq > 0,
    )
    t = np.clip(t, 0.0, 1.0)
    closest = a + ab * t[:, None]
    return float(np.min(np.linalg.norm(closest - q, axis=1)))


# ==========================================
# 📍 Board landmarks (percent)
# ==========================================
# Markings are drawn inset 5% from the board edge; the offside and
# annotation logic works on the full 0-100 board.
LANDMARKS = {
    "FIELD_TL": Point(5.0, 5.0),
    "FIELD_BR": Point(95.0, 95.0),
    "MID_TOP": Point(50.0, 5.0),
    "MID_BOTTOM": Point(50.0, 95.0),
    "CENTER_SPOT": Point(50.0, 50.0),

    # 禁区 (penalty areas)
    "L_PA_TL": Point(5.0, 25.0),
    "L_PA_BR": Point(20.0, 75.0),
    "R_PA_TL": Point(80.0, 25.0),
    "R_PA_BR": Point(95.0, 75.0),

    # 14区: the central strip just outside each penalty area
    "L_ZONE_14": Point(26.0, 50.0),
    "R_ZONE_14": Point(74.0, 50.0),
}

CENTER_CIRCLE_RADIUS = 10.0  # % of board width
