import cv2

from pitchboard.core.types import Point
from pitchboard.engine.interaction import GestureState, PlayerTarget
from pitchboard.engine.system import TacticalBoard
from pitchboard.ui.board_window import BoardWindow

# Default canvas is 1280x720: r9 at (65, 50) sits on pixel (832, 360)
R9_PX = (832, 360)


def test_press_hits_the_player_under_the_cursor():
    window = BoardWindow(TacticalBoard())
    window._mouse_callback(cv2.EVENT_LBUTTONDOWN, *R9_PX, cv2.EVENT_FLAG_LBUTTON, None)
    assert window.session.controller.owner_of(0) == PlayerTarget("r9")


def test_move_with_button_held_drags():
    window = BoardWindow(TacticalBoard())
    window._mouse_callback(cv2.EVENT_LBUTTONDOWN, *R9_PX, cv2.EVENT_FLAG_LBUTTON, None)
    window._mouse_callback(cv2.EVENT_MOUSEMOVE, 896, 360, cv2.EVENT_FLAG_LBUTTON, None)
    assert window.session.controller.state is GestureState.DRAGGING
    window._mouse_callback(cv2.EVENT_LBUTTONUP, 896, 360, 0, None)
    assert window.session.board.get_player_by_id("r9").position == Point(70, 50)


def test_button_released_outside_the_window_drops_the_gesture():
    window = BoardWindow(TacticalBoard())
    controller = window.session.controller
    window._mouse_callback(cv2.EVENT_LBUTTONDOWN, *R9_PX, cv2.EVENT_FLAG_LBUTTON, None)
    window._mouse_callback(cv2.EVENT_MOUSEMOVE, 896, 360, cv2.EVENT_FLAG_LBUTTON, None)

    # Back over the window with no button held: the up event was lost
    window._mouse_callback(cv2.EVENT_MOUSEMOVE, 960, 360, 0, None)
    assert controller.state is GestureState.IDLE
    assert controller.owner_of(0) is None
    # The last drag position stands, the stray hover is not applied
    assert window.session.board.get_player_by_id("r9").position == Point(70, 50)


def test_hover_without_a_gesture_is_harmless():
    window = BoardWindow(TacticalBoard())
    window._mouse_callback(cv2.EVENT_MOUSEMOVE, 100, 100, 0, None)
    assert window.session.controller.state is GestureState.IDLE
