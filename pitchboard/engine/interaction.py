"""
Project: Pitchboard
File Created: 2026-03-07
Author: Xingnan Zhu
File Name: interaction.py
Description:
    Pointer-driven state machine for the move / draw / erase tools.

    The controller never mutates the board. It reads the current props
    (board, tool mode, pen style) through a provider on every event and
    reports what the user did through BoardCallbacks; the host folds those
    into the board.

    Exclusive gesture ownership: the pointer that starts a gesture owns
    it until release. Events from any other pointer id are ignored while
    a gesture is active, and every exit path (up, leave, cancel, tool
    change) releases ownership.

    Gesture states: IDLE -> PRESSED -> DRAGGING -> IDLE. A move gesture
    stays PRESSED (and reports no moves) until the pointer has travelled
    DRAG_SELECT_THRESHOLD_PX from the press; released while still PRESSED
    it is a click.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple, Union

from pitchboard.config import Config, ToolMode
from pitchboard.core.geometry import distance_to_polyline, pixel_distance, to_board_coords
from pitchboard.core.types import Board, BoardRect, DrawingStyle, Player, Point, TacticalLine


# ==========================================
# 1. Targets & props
# ==========================================

@dataclass(frozen=True)
class PlayerTarget:
    player_id: str


@dataclass(frozen=True)
class BallTarget:
    pass


@dataclass(frozen=True)
class LineTarget:
    line_id: str


@dataclass(frozen=True)
class BoardTarget:
    """Empty pitch background."""
    pass


Target = Union[PlayerTarget, BallTarget, LineTarget, BoardTarget]


@dataclass(frozen=True)
class InteractionProps:
    board: Board
    mode: ToolMode
    style: DrawingStyle


def _noop(*args, **kwargs) -> None:
    return None


@dataclass
class BoardCallbacks:
    on_player_move: Callable[[str, float, float], None] = _noop
    on_ball_move: Callable[[float, float], None] = _noop
    on_player_select: Callable[[Player], None] = _noop
    on_line_create: Callable[[TacticalLine], None] = _noop
    on_line_remove: Callable[[str], None] = _noop
    on_undo: Callable[[], None] = _noop
    on_log: Callable[[str], None] = _noop


class GestureState(Enum):
    IDLE = "idle"
    PRESSED = "pressed"
    DRAGGING = "dragging"


class GestureKind(Enum):
    MOVE = "move"
    DRAW = "draw"


@dataclass
class Gesture:
    pointer_id: int
    kind: GestureKind
    target: Target
    down_px: Tuple[float, float]
    state: GestureState = GestureState.PRESSED
    points: List[Point] = field(default_factory=list)


# ==========================================
# 2. Keyboard chords
# ==========================================

UNDO = "undo"

_CHORD_ALIASES = {
    "ctrl+z": UNDO,
    "control+z": UNDO,
    "cmd+z": UNDO,
    "meta+z": UNDO,
    "undo": UNDO,
}


def normalize_chord(chord: str) -> Optional[str]:
    """'Ctrl + Z' / 'Meta+Z' -> 'undo'. Unknown chords -> None."""
    key = "".join(chord.lower().split())
    return _CHORD_ALIASES.get(key)


# ==========================================
# 3. Hit testing
# ==========================================

def hit_test_line(lines: Sequence[TacticalLine], point: Point, hit_width: float) -> Optional[str]:
    """
    Id of the topmost line whose invisible hit path (``hit_width`` board %
    around the stroke) contains ``point``; later lines are drawn on top.
    """
    for line in reversed(lines):
        if distance_to_polyline(point, line.points) <= hit_width:
            return line.id
    return None


def new_line_id() -> str:
    return uuid.uuid4().hex[:9]


# ==========================================
# 4. Controller
# ==========================================

class InteractionController:
    """
    Feed it pointer events in viewport pixels together with the live
    board rectangle; it answers through ``callbacks``.
    """

    def __init__(self, props: Callable[[], InteractionProps], callbacks: BoardCallbacks,
                 cfg: Optional[Config] = None):
        self._props = props
        self.callbacks = callbacks
        self.cfg = cfg or Config()
        self._gesture: Optional[Gesture] = None

    # ------------------------------------------------------------------
    # Introspection (used by the renderer)
    # ------------------------------------------------------------------

    @property
    def state(self) -> GestureState:
        return self._gesture.state if self._gesture else GestureState.IDLE

    @property
    def dragging_target(self) -> Optional[Target]:
        if self._gesture and self._gesture.kind is GestureKind.MOVE:
            return self._gesture.target
        return None

    @property
    def current_stroke(self) -> Tuple[Point, ...]:
        if self._gesture and self._gesture.kind is GestureKind.DRAW:
            return tuple(self._gesture.points)
        return ()

    def owner_of(self, pointer_id: int) -> Optional[Target]:
        if self._gesture and self._gesture.pointer_id == pointer_id:
            return self._gesture.target
        return None

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------

    def pointer_down(self, pointer_id: int, client_x: float, client_y: float,
                     target: Target, rect: BoardRect) -> None:
        if self._gesture is not None:
            # Another pointer already owns the board
            return

        mode = self._props().mode

        if mode is ToolMode.DRAW:
            # Entities and lines are click-through while drawing
            start = to_board_coords(client_x, client_y, rect)
            self._gesture = Gesture(pointer_id, GestureKind.DRAW, BoardTarget(),
                                    (client_x, client_y), points=[start])
            return

        if mode is ToolMode.MOVE and isinstance(target, (PlayerTarget, BallTarget)):
            self._gesture = Gesture(pointer_id, GestureKind.MOVE, target, (client_x, client_y))
            return

        # Erase mode, or empty board outside draw mode: inert

    def pointer_move(self, pointer_id: int, client_x: float, client_y: float, rect: BoardRect) -> None:
        gesture = self._owned(pointer_id)
        if gesture is None:
            return

        coords = to_board_coords(client_x, client_y, rect)

        if gesture.kind is GestureKind.DRAW:
            gesture.points.append(coords)
            gesture.state = GestureState.DRAGGING
            return

        if gesture.state is GestureState.PRESSED:
            # Jitter under the threshold is still a click: report nothing yet
            if pixel_distance(gesture.down_px, (client_x, client_y)) < self.cfg.DRAG_SELECT_THRESHOLD_PX:
                return
            gesture.state = GestureState.DRAGGING

        if isinstance(gesture.target, BallTarget):
            self.callbacks.on_ball_move(coords.x, coords.y)
        else:
            self.callbacks.on_player_move(gesture.target.player_id, coords.x, coords.y)

    def pointer_up(self, pointer_id: int, client_x: float, client_y: float, rect: BoardRect) -> None:
        gesture = self._owned(pointer_id)
        if gesture is None:
            return
        self._release()

        if gesture.kind is GestureKind.DRAW:
            self._finish_stroke(gesture)
            return

        if gesture.state is not GestureState.PRESSED or not isinstance(gesture.target, PlayerTarget):
            return
        # Below the threshold the press was a click, not a drag
        moved = pixel_distance(gesture.down_px, (client_x, client_y))
        if moved < self.cfg.DRAG_SELECT_THRESHOLD_PX:
            player = self._props().board.get_player_by_id(gesture.target.player_id)
            if player is not None:
                self.callbacks.on_player_select(player)

    def pointer_leave(self, pointer_id: int) -> None:
        """Pointer left the board or was cancelled: drop the gesture, fire nothing."""
        if self._owned(pointer_id) is not None:
            self._release()

    pointer_cancel = pointer_leave

    def click(self, target: Target) -> None:
        props = self._props()
        if props.mode is not ToolMode.ERASE or not isinstance(target, LineTarget):
            return
        if any(line.id == target.line_id for line in props.board.lines):
            self.callbacks.on_line_remove(target.line_id)

    def key_chord(self, chord: str) -> None:
        if normalize_chord(chord) == UNDO:
            self.callbacks.on_undo()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _owned(self, pointer_id: int) -> Optional[Gesture]:
        gesture = self._gesture
        if gesture is None or gesture.pointer_id != pointer_id:
            return None
        # A tool switch mid-gesture ends the gesture
        expected = ToolMode.DRAW if gesture.kind is GestureKind.DRAW else ToolMode.MOVE
        if self._props().mode is not expected:
            self._release()
            return None
        return gesture

    def _release(self) -> None:
        self._gesture = None

    def _finish_stroke(self, gesture: Gesture) -> None:
        if len(gesture.points) < self.cfg.MIN_STROKE_POINTS:
            # Too short to be intentional
            self.callbacks.on_log("STROKE_DISCARDED")
            return
        style = self._props().style
        line = TacticalLine(
            id=new_line_id(),
            points=tuple(gesture.points),
            color=style.color,
            dashed=style.dashed,
        )
        self.callbacks.on_line_create(line)
