"""
Pitchboard — Interactive Tactical Football Board
================================================
Quick start::

    from pitchboard import TacticalBoard, Team

    board = TacticalBoard()
    board.apply_formation(Team.RED, "4-2-3-1")
    board.select_player("r9")
    board.add_tag("前插跑动")

    from pitchboard.ui.board_window import BoardWindow
    BoardWindow(board).run()
"""
from pitchboard.config import Config, ToolMode
from pitchboard.core.types import Team
from pitchboard.engine.system import TacticalBoard

__version__ = "0.1.0"
__all__ = ["TacticalBoard", "Config", "ToolMode", "Team", "__version__"]
