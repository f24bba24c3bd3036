"""
Project: Pitchboard
File Created: 2026-03-09 09:54:59
Author: Xingnan Zhu
File Name: board.py
Description:
    Renders the tactical board to a BGR image with OpenCV.
    Layers (bottom -> top): pitch & markings, zones, offside lines,
    tactical lines, the stroke being drawn, ball, players.

    Derived values (offside thresholds, pixel paths) are recomputed from
    the board passed to draw(); nothing is cached between frames.
"""

from typing import Optional, Sequence, Tuple

import cv2
import numpy as np

from pitchboard.config import Colors, Config, color_class
from pitchboard.core.geometry import CENTER_CIRCLE_RADIUS, LANDMARKS, to_pixels
from pitchboard.core.types import Board, Player, Point, Team
from pitchboard.tactics.annotations import tag_status_color
from pitchboard.tactics.offside import compute_offside_lines, is_offside_position

ZONE_ALPHA = 0.3
DASH_PX = 10
GAP_PX = 8


class BoardRenderer:
    def __init__(self, cfg: Optional[Config] = None, width: Optional[int] = None, height: Optional[int] = None):
        self.cfg = cfg or Config()
        self.w = width or self.cfg.CANVAS_WIDTH
        self.h = height or self.cfg.CANVAS_HEIGHT

        # 预定义的颜色表 (BGR)
        self.team_colors = {
            Team.RED: Colors.to_bgr(Colors.TEAM_RED),
            Team.BLUE: Colors.to_bgr(Colors.TEAM_BLUE),
        }
        self.background = self._draw_pitch()

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def draw(self, board: Board,
             show_offside_lines: Optional[bool] = None,
             selected_player_id: Optional[str] = None,
             current_stroke: Sequence[Point] = (),
             stroke_color: str = Colors.PEN_AMBER,
             stroke_dashed: bool = False) -> np.ndarray:
        canvas = self.background.copy()

        # 1. Zones
        if board.zones:
            overlay = canvas.copy()
            for zone in board.zones:
                x1, y1, x2, y2 = zone.bounds
                p1 = self._px(Point(x1, y1))
                p2 = self._px(Point(x2, y2))
                cv2.rectangle(overlay, p1, p2, self._pen(zone.color), -1)
            cv2.addWeighted(overlay, ZONE_ALPHA, canvas, 1 - ZONE_ALPHA, 0, canvas)

        # 2. Offside lines
        if show_offside_lines is None:
            show_offside_lines = self.cfg.SHOW_OFFSIDE_LINES
        offside = compute_offside_lines(board.players, board.ball)
        if show_offside_lines:
            if self.cfg.SHOW_RED_OFFSIDE and offside.left is not None:
                self._draw_offside(canvas, offside.left)
            if self.cfg.SHOW_BLUE_OFFSIDE and offside.right is not None:
                self._draw_offside(canvas, offside.right)

        # 3. Tactical lines
        for line in board.lines:
            self._draw_path(canvas, line.points, self._pen(line.color), line.dashed,
                            arrow=color_class(line.color) is not None)

        # 4. Stroke in progress
        if current_stroke:
            self._draw_path(canvas, current_stroke, self._pen(stroke_color), stroke_dashed, arrow=False)

        # 5. Ball
        if board.ball is not None:
            bx, by = self._px(board.ball.position)
            cv2.circle(canvas, (bx, by), 8, Colors.to_bgr(Colors.BALL), -1, cv2.LINE_AA)
            cv2.circle(canvas, (bx, by), 8, (0, 0, 0), 1, cv2.LINE_AA)

        # 6. Players
        for p in board.players:
            flagged = show_offside_lines and is_offside_position(p, offside)
            self._draw_player(canvas, p, selected=(p.id == selected_player_id), offside=flagged)

        return canvas

    # ------------------------------------------------------------------
    # Layers
    # ------------------------------------------------------------------

    def _draw_pitch(self) -> np.ndarray:
        canvas = np.zeros((self.h, self.w, 3), dtype=np.uint8)
        canvas[:] = Colors.to_bgr(Colors.PITCH)
        white = Colors.to_bgr(Colors.MARKING)

        cv2.rectangle(canvas, self._px(LANDMARKS["FIELD_TL"]), self._px(LANDMARKS["FIELD_BR"]), white, 2)
        cv2.line(canvas, self._px(LANDMARKS["MID_TOP"]), self._px(LANDMARKS["MID_BOTTOM"]), white, 2)
        radius = int(CENTER_CIRCLE_RADIUS / 100 * self.w)
        cv2.circle(canvas, self._px(LANDMARKS["CENTER_SPOT"]), radius, white, 2, cv2.LINE_AA)
        cv2.rectangle(canvas, self._px(LANDMARKS["L_PA_TL"]), self._px(LANDMARKS["L_PA_BR"]), white, 2)
        cv2.rectangle(canvas, self._px(LANDMARKS["R_PA_TL"]), self._px(LANDMARKS["R_PA_BR"]), white, 2)

        cv2.rectangle(canvas, (0, 0), (self.w - 1, self.h - 1), Colors.to_bgr(Colors.PITCH_BORDER), 2)
        return canvas

    def _draw_offside(self, canvas: np.ndarray, x: float) -> None:
        top = self._px(Point(x, 0))
        bottom = self._px(Point(x, 100))
        _dashed_segment(canvas, top, bottom, Colors.to_bgr(Colors.OFFSIDE), 1)

    def _draw_path(self, canvas: np.ndarray, points: Sequence[Point], color: Tuple[int, int, int],
                   dashed: bool, arrow: bool) -> None:
        pts = [self._px(p) for p in points]
        if len(pts) < 2:
            return
        for a, b in zip(pts[:-1], pts[1:]):
            if dashed:
                _dashed_segment(canvas, a, b, color, 2)
            else:
                cv2.line(canvas, a, b, color, 2, cv2.LINE_AA)
        if arrow and pts[-2] != pts[-1]:
            cv2.arrowedLine(canvas, pts[-2], pts[-1], color, 2, cv2.LINE_AA, tipLength=_tip_length(pts[-2], pts[-1]))

    def _draw_player(self, canvas: np.ndarray, p: Player, selected: bool, offside: bool) -> None:
        cx, cy = self._px(p.position)
        r = max(8, int(self.h * 0.022))

        if selected:
            cv2.circle(canvas, (cx, cy), r + 6, Colors.to_bgr(Colors.SELECTED), 2, cv2.LINE_AA)
        if offside:
            cv2.circle(canvas, (cx, cy), r + 3, Colors.to_bgr(Colors.OFFSIDE), 1, cv2.LINE_AA)

        border = Colors.to_bgr(Colors.TAGGED_RING) if p.tags else (255, 255, 255)
        cv2.circle(canvas, (cx, cy), r + 2, border, -1, cv2.LINE_AA)
        cv2.circle(canvas, (cx, cy), r, self.team_colors[p.team], -1, cv2.LINE_AA)

        text = str(p.number)
        font_scale = 0.45
        (tw, th), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, font_scale, 1)
        cv2.putText(canvas, text, (cx - tw // 2, cy + th // 2), cv2.FONT_HERSHEY_SIMPLEX,
                    font_scale, Colors.to_bgr(Colors.TEXT), 1, cv2.LINE_AA)

        # Status dot (top-right) for tagged players
        if self.cfg.SHOW_TAG_STATUS:
            status = tag_status_color(p.tags)
            if status is not None:
                dot = (cx + r, cy - r)
                cv2.circle(canvas, dot, 5, self._pen(status), -1, cv2.LINE_AA)
                cv2.circle(canvas, dot, 5, (0, 0, 0), 1, cv2.LINE_AA)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _px(self, point: Point) -> Tuple[int, int]:
        return to_pixels(point, self.w, self.h)

    @staticmethod
    def _pen(color: str) -> Tuple[int, int, int]:
        return Colors.to_bgr(Colors.hex_to_rgb(color))


def _tip_length(a: Tuple[int, int], b: Tuple[int, int]) -> float:
    # cv2 tip length is relative to the segment; keep the head ~12px
    length = float(np.hypot(b[0] - a[0], b[1] - a[1]))
    return min(0.5, 12.0 / length) if length > 0 else 0.3


def _dashed_segment(canvas: np.ndarray, a: Tuple[int, int], b: Tuple[int, int],
                    color: Tuple[int, int, int], thickness: int) -> None:
    """OpenCV has no dashed lines; draw DASH_PX strokes every DASH_PX + GAP_PX."""
    start = np.array(a, dtype=np.float64)
    vec = np.array(b, dtype=np.float64) - start
    length = float(np.hypot(*vec))
    if length == 0:
        return
    unit = vec / length
    pos = 0.0
    while pos < length:
        end = min(pos + DASH_PX, length)
        p1 = tuple(int(round(v)) for v in start + unit * pos)
        p2 = tuple(int(round(v)) for v in start + unit * end)
        cv2.line(canvas, p1, p2, color, thickness, cv2.LINE_AA)
        pos += DASH_PX + GAP_PX
