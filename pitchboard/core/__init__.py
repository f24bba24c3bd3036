"""
Core data contracts used throughout Pitchboard.

    from pitchboard.core import Board, Player, Ball, Point, Team
    from pitchboard.core import TacticalLine, TacticalZone, LogicNode
"""
from pitchboard.core.types import (
    Annotation,
    Ball,
    Board,
    BoardRect,
    DrawingStyle,
    LogicNode,
    PitchConfig,
    Player,
    Point,
    TacticalLine,
    TacticalZone,
    Team,
)

__all__ = [
    "Annotation",
    "Ball",
    "Board",
    "BoardRect",
    "DrawingStyle",
    "LogicNode",
    "PitchConfig",
    "Player",
    "Point",
    "TacticalLine",
    "TacticalZone",
    "Team",
]
