from pitchboard.config import ToolMode
from pitchboard.core.roster import initial_board
from pitchboard.core.types import Board, BoardRect, DrawingStyle, Point, TacticalLine
from pitchboard.engine.interaction import (
    BallTarget,
    BoardCallbacks,
    BoardTarget,
    GestureState,
    InteractionController,
    InteractionProps,
    LineTarget,
    PlayerTarget,
    hit_test_line,
    normalize_chord,
)

# 1000px square board: 10px == 1%
RECT = BoardRect(0, 0, 1000, 1000)


class Host:
    def __init__(self, mode=ToolMode.MOVE):
        self.board = initial_board()
        self.mode = mode
        self.style = DrawingStyle(color="#ef4444", dashed=True)
        self.events = []
        self.controller = InteractionController(
            props=lambda: InteractionProps(self.board, self.mode, self.style),
            callbacks=BoardCallbacks(
                on_player_move=lambda pid, x, y: self.events.append(("move", pid, x, y)),
                on_ball_move=lambda x, y: self.events.append(("ball", x, y)),
                on_player_select=lambda p: self.events.append(("select", p.id)),
                on_line_create=lambda line: self.events.append(("line", line)),
                on_line_remove=lambda lid: self.events.append(("remove", lid)),
                on_undo=lambda: self.events.append(("undo",)),
            ),
        )

    def kinds(self):
        return [e[0] for e in self.events]


def test_two_point_stroke_is_discarded():
    host = Host(ToolMode.DRAW)
    c = host.controller
    c.pointer_down(1, 100, 100, BoardTarget(), RECT)
    c.pointer_move(1, 200, 100, RECT)
    c.pointer_up(1, 200, 100, RECT)
    assert host.events == []
    assert c.state is GestureState.IDLE


def test_three_point_stroke_is_committed_in_order():
    host = Host(ToolMode.DRAW)
    c = host.controller
    c.pointer_down(1, 100, 100, BoardTarget(), RECT)
    c.pointer_move(1, 200, 100, RECT)
    assert c.current_stroke == (Point(10, 10), Point(20, 10))
    c.pointer_move(1, 300, 150, RECT)
    c.pointer_up(1, 300, 150, RECT)

    assert host.kinds() == ["line"]
    line = host.events[0][1]
    assert line.points == (Point(10, 10), Point(20, 10), Point(30, 15))
    assert line.color == "#ef4444"
    assert line.dashed is True
    assert line.owner_id is None
    assert c.current_stroke == ()


def test_drawing_starts_over_players_too():
    host = Host(ToolMode.DRAW)
    c = host.controller
    c.pointer_down(1, 650, 500, PlayerTarget("r9"), RECT)
    c.pointer_move(1, 700, 500, RECT)
    c.pointer_move(1, 750, 500, RECT)
    c.pointer_up(1, 750, 500, RECT)
    assert host.kinds() == ["line"]


def test_small_displacement_selects():
    host = Host()
    c = host.controller
    c.pointer_down(1, 650, 500, PlayerTarget("r9"), RECT)
    c.pointer_up(1, 653, 503, RECT)
    assert host.events == [("select", "r9")]


def test_five_pixels_is_no_longer_a_click():
    host = Host()
    c = host.controller
    c.pointer_down(1, 650, 500, PlayerTarget("r9"), RECT)
    c.pointer_up(1, 653, 504, RECT)
    assert host.events == []


def test_drag_moves_without_selecting():
    host = Host()
    c = host.controller
    c.pointer_down(1, 650, 500, PlayerTarget("r9"), RECT)
    c.pointer_move(1, 700, 450, RECT)
    assert c.dragging_target == PlayerTarget("r9")
    c.pointer_up(1, 700, 450, RECT)
    assert host.events == [("move", "r9", 70.0, 45.0)]
    assert c.dragging_target is None


def test_ball_drag():
    host = Host()
    c = host.controller
    c.pointer_down(1, 500, 500, BallTarget(), RECT)
    c.pointer_move(1, 2000, 550, RECT)
    c.pointer_up(1, 2000, 550, RECT)
    assert host.events == [("ball", 100.0, 55.0)]


def test_press_on_empty_board_is_inert_in_move_mode():
    host = Host()
    c = host.controller
    c.pointer_down(1, 10, 10, BoardTarget(), RECT)
    assert c.state is GestureState.IDLE
    c.pointer_up(1, 10, 10, RECT)
    assert host.events == []


def test_second_pointer_is_ignored_while_gesture_is_owned():
    host = Host()
    c = host.controller
    c.pointer_down(1, 650, 500, PlayerTarget("r9"), RECT)
    c.pointer_down(2, 500, 500, BallTarget(), RECT)
    c.pointer_move(2, 100, 100, RECT)
    c.pointer_up(2, 100, 100, RECT)
    assert host.events == []
    assert c.owner_of(1) == PlayerTarget("r9")
    assert c.owner_of(2) is None


def test_leave_and_cancel_drop_the_gesture():
    host = Host(ToolMode.DRAW)
    c = host.controller
    c.pointer_down(1, 100, 100, BoardTarget(), RECT)
    c.pointer_move(1, 200, 100, RECT)
    c.pointer_move(1, 300, 100, RECT)
    c.pointer_leave(1)
    c.pointer_up(1, 300, 100, RECT)
    assert host.events == []

    c.pointer_down(1, 100, 100, BoardTarget(), RECT)
    c.pointer_cancel(1)
    assert c.state is GestureState.IDLE


def test_mode_switch_mid_gesture_ends_it():
    host = Host(ToolMode.DRAW)
    c = host.controller
    c.pointer_down(1, 100, 100, BoardTarget(), RECT)
    c.pointer_move(1, 200, 100, RECT)
    c.pointer_move(1, 300, 100, RECT)
    host.mode = ToolMode.MOVE
    c.pointer_up(1, 300, 100, RECT)
    assert host.events == []
    assert c.state is GestureState.IDLE


def test_erase_click():
    host = Host(ToolMode.ERASE)
    line = TacticalLine(id="a", points=(Point(10, 10), Point(20, 10)), color="#fff")
    host.board = Board(players=host.board.players, lines=(line,), ball=host.board.ball)
    c = host.controller

    c.click(LineTarget("missing"))
    c.click(BoardTarget())
    c.click(LineTarget("a"))
    assert host.events == [("remove", "a")]

    host.mode = ToolMode.MOVE
    c.click(LineTarget("a"))
    assert host.events == [("remove", "a")]


def test_undo_chord():
    host = Host()
    host.controller.key_chord("Ctrl + Z")
    host.controller.key_chord("meta+z")
    host.controller.key_chord("ctrl+y")
    assert host.kinds() == ["undo", "undo"]
    assert normalize_chord("shift+z") is None


def test_hit_test_prefers_topmost_line():
    lower = TacticalLine(id="lower", points=(Point(0, 50), Point(100, 50)), color="#fff")
    upper = TacticalLine(id="upper", points=(Point(50, 0), Point(50, 100)), color="#fff")
    lines = (lower, upper)
    assert hit_test_line(lines, Point(51, 51), 2.5) == "upper"
    assert hit_test_line(lines, Point(20, 52), 2.5) == "lower"
    assert hit_test_line(lines, Point(20, 20), 2.5) is None


def test_jitter_under_threshold_reports_no_move():
    host = Host()
    c = host.controller
    c.pointer_down(1, 650, 500, PlayerTarget("r9"), RECT)
    c.pointer_move(1, 652, 502, RECT)
    assert c.state is GestureState.PRESSED
    c.pointer_up(1, 652, 502, RECT)
    assert host.events == [("select", "r9")]
