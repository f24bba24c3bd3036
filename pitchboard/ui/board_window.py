"""
Project: Pitchboard
File Created: 2026-03-11 14:54:47
Author: Xingnan Zhu
File Name: board_window.py
Description:
    Interactive OpenCV window for the tactical board.
    Mouse events are translated into pointer events for the interaction
    controller; tags are picked from a console menu after a player is
    selected, like the landmark prompt of the calibration tool.
"""

import time
from typing import List, Optional, Tuple

import cv2
import numpy as np

from pitchboard.config import Colors, Config, ToolMode
from pitchboard.core.geometry import to_pixels
from pitchboard.core.types import BoardRect, Point, Team
from pitchboard.engine.interaction import BallTarget, BoardTarget, LineTarget, PlayerTarget, Target, hit_test_line
from pitchboard.engine.system import TacticalBoard
from pitchboard.export.json_exporter import JsonExporter
from pitchboard.tactics.annotations import DEFAULT_TAGS, TagCategory
from pitchboard.tactics.formation import FORMATION_OPTIONS
from pitchboard.visualization.board import BoardRenderer

MOUSE_POINTER_ID = 0
CTRL_Z = 26

PEN_CYCLE = (Colors.PEN_AMBER, Colors.PEN_RED, Colors.PEN_BLUE, Colors.PEN_GREEN)

MODE_KEYS = {
    ord('m'): ToolMode.MOVE,
    ord('d'): ToolMode.DRAW,
    ord('e'): ToolMode.ERASE,
}


class BoardWindow:
    def __init__(self, session: TacticalBoard, cfg: Optional[Config] = None):
        self.session = session
        self.cfg = cfg or session.cfg
        self.renderer = BoardRenderer(self.cfg)
        self.window_name = self.cfg.WINDOW_NAME
        self._started = time.monotonic()
        # First press applies the default formation
        start = -1
        if self.cfg.DEFAULT_FORMATION in FORMATION_OPTIONS:
            start = FORMATION_OPTIONS.index(self.cfg.DEFAULT_FORMATION) - 1
        self._formation_index = {Team.RED: start, Team.BLUE: start}
        self._pending_select = False

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        cv2.namedWindow(self.window_name)
        cv2.setMouseCallback(self.window_name, self._mouse_callback)
        self._print_help()

        while True:
            cv2.imshow(self.window_name, self.render())

            key = cv2.waitKey(20) & 0xFF
            if key == 27 or key == ord('q'):  # Esc or q
                break
            self._handle_key(key)

            if self._pending_select:
                self._pending_select = False
                self._prompt_tag()

        cv2.destroyAllWindows()

    def render(self) -> np.ndarray:
        s = self.session
        frame = self.renderer.draw(
            s.board,
            show_offside_lines=s.show_offside_lines,
            selected_player_id=s.selected_player_id,
            current_stroke=s.controller.current_stroke,
            stroke_color=s.style.color,
            stroke_dashed=s.style.dashed,
        )
        status = f"{s.mode.value.upper()} | pen {s.style.color}{' dashed' if s.style.dashed else ''} | nodes {len(s.timeline)}"
        cv2.putText(frame, status, (12, self.renderer.h - 12), cv2.FONT_HERSHEY_SIMPLEX, 0.5,
                    Colors.to_bgr(Colors.TEXT), 1, cv2.LINE_AA)
        return frame

    # ------------------------------------------------------------------
    # Mouse -> pointer events
    # ------------------------------------------------------------------

    def _rect(self) -> BoardRect:
        # The canvas fills the window, so the board rect is the canvas itself
        return BoardRect(0, 0, self.renderer.w, self.renderer.h)

    def _mouse_callback(self, event, x, y, flags, param):
        controller = self.session.controller
        rect = self._rect()

        if event == cv2.EVENT_LBUTTONDOWN:
            controller.pointer_down(MOUSE_POINTER_ID, x, y, self._target_at(x, y), rect)
        elif event == cv2.EVENT_MOUSEMOVE:
            # Button released outside the window: the up event never arrives
            if controller.owner_of(MOUSE_POINTER_ID) is not None and not flags & cv2.EVENT_FLAG_LBUTTON:
                controller.pointer_leave(MOUSE_POINTER_ID)
                return
            controller.pointer_move(MOUSE_POINTER_ID, x, y, rect)
        elif event == cv2.EVENT_LBUTTONUP:
            before = self.session.selected_player_id
            controller.pointer_up(MOUSE_POINTER_ID, x, y, rect)
            if self.session.mode is ToolMode.ERASE:
                point = Point(x / rect.width * 100, y / rect.height * 100)
                line_id = hit_test_line(self.session.board.lines, point, self.cfg.ERASE_HIT_WIDTH)
                if line_id is not None:
                    controller.click(LineTarget(line_id))
            if self.session.selected_player_id is not None and self.session.selected_player_id != before:
                # Prompt after the frame is redrawn with the selection ring
                self._pending_select = True

    def _target_at(self, x: int, y: int) -> Target:
        board = self.session.board
        radius = max(8, int(self.renderer.h * 0.022)) + 4

        # Players are drawn on top of the ball: test them first, topmost last
        for p in reversed(board.players):
            if _within((x, y), to_pixels(p.position, self.renderer.w, self.renderer.h), radius):
                return PlayerTarget(p.id)
        if board.ball is not None:
            if _within((x, y), to_pixels(board.ball.position, self.renderer.w, self.renderer.h), 10):
                return BallTarget()
        return BoardTarget()

    # ------------------------------------------------------------------
    # Keyboard
    # ------------------------------------------------------------------

    def _handle_key(self, key: int) -> None:
        s = self.session
        if key == 255:
            return
        if key in MODE_KEYS:
            s.set_mode(MODE_KEYS[key])
        elif key == CTRL_Z:
            s.controller.key_chord("ctrl+z")
        elif key == ord('u'):
            s.controller.key_chord("undo")
        elif key == ord('r'):
            s.reset()
        elif key == ord('c'):
            s.clear_annotations()
        elif key == ord('o'):
            state = s.toggle_offside_lines()
            print(f"📏 Offside lines {'ON' if state else 'OFF'}")
        elif key == ord('p'):
            current = PEN_CYCLE.index(s.style.color) if s.style.color in PEN_CYCLE else -1
            s.set_style(color=PEN_CYCLE[(current + 1) % len(PEN_CYCLE)])
        elif key == ord('l'):
            s.set_style(dashed=not s.style.dashed)
        elif key == ord('f'):
            self._cycle_formation()
        elif key == ord('s'):
            node = s.commit_snapshot(timestamp=time.monotonic() - self._started)
            print(f"✅ Saved {node.label}")
        elif ord('1') <= key <= ord('9'):
            node = s.timeline.at(key - ord('1'))
            if node is not None:
                s.restore_snapshot(node.id)
                print(f"⏪ Restored {node.label}")
        elif key == ord('x'):
            self._export()

    def _cycle_formation(self) -> None:
        s = self.session
        team = s.selected_player.team if s.selected_player else Team.RED
        self._formation_index[team] = (self._formation_index[team] + 1) % len(FORMATION_OPTIONS)
        name = FORMATION_OPTIONS[self._formation_index[team]]
        s.apply_formation(team, name)
        print(f"🧩 {team.value.upper()} -> {name}")

    def _export(self) -> None:
        exporter = JsonExporter(self.cfg.OUTPUT_JSON)
        exporter.set_board(self.session.board)
        for node in self.session.timeline.nodes:
            exporter.add_node(node)
        exporter.save()

    # ------------------------------------------------------------------
    # Console tag menu
    # ------------------------------------------------------------------

    def _prompt_tag(self) -> None:
        player = self.session.selected_player
        if player is None:
            return

        options: List[Tuple[str, TagCategory]] = [
            (tag, category) for category, tags in DEFAULT_TAGS.items() for tag in tags
        ]
        print(f"\n🏷️  {player.team.value.upper()} #{player.number}: select a tag")
        for i, (tag, category) in enumerate(options, start=1):
            print(f"  [{i:>2}] {category.value:<10} {tag}")
        print("  or type a free tag, empty to cancel")

        user_input = input("Tag: ").strip()
        if not user_input:
            self.session.clear_selection()
            print("Cancelled.")
            return

        try:
            tag, category = options[int(user_input) - 1]
        except (ValueError, IndexError):
            tag, category = user_input, None

        annotation = self.session.add_tag(tag, category)
        if annotation.is_empty:
            print(f"✅ Tagged '{tag}' (no annotation)")
        else:
            print(f"✅ Tagged '{tag}'")

    @staticmethod
    def _print_help() -> None:
        print("\n" + "=" * 50)
        print("🎯 PITCHBOARD")
        print("=" * 50)
        print("m / d / e : move / draw / erase")
        print("u, Ctrl+Z : undo last drawn line")
        print("p / l     : cycle pen color / toggle dashed")
        print("f         : cycle formation (selected player's team, else Red)")
        print("o         : toggle offside lines")
        print("c / r     : clear annotations / reset board")
        print("s / 1-9   : save snapshot / restore snapshot")
        print("x         : export JSON")
        print("q, Esc    : quit")
        print("-" * 50)


def _within(a: Tuple[int, int], b: Tuple[int, int], radius: float) -> bool:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 <= radius ** 2
