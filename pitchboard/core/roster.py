"""
Project: Pitchboard
File Created: 2026-03-03 10:02:11
Author: Xingnan Zhu
File Name: roster.py
Description:
    The fixed 11 v 11 starting roster. Red defends the left goal, Blue the
    right one. Every player carries a stable role tag which formation
    presets are keyed on, so applying a formation never depends on the
    order of the roster.
"""

from typing import Dict, Optional, Tuple

from pitchboard.core.types import Ball, Board, Player, PitchConfig, Team

GOALKEEPER_ROLE = "GK"

# Outfield roles by shirt number (2-11)
ROLE_BY_NUMBER: Dict[int, str] = {
    2: "LB",
    3: "RB",
    4: "CB1",
    5: "CB2",
    6: "DM",
    7: "LW",
    8: "CM1",
    9: "ST",
    10: "CM2",
    11: "RW",
}

OUTFIELD_ROLES: Tuple[str, ...] = tuple(ROLE_BY_NUMBER[n] for n in range(2, 12))

# 初始站位 (Horizontal pitch: Red LEFT, Blue RIGHT), number -> (x, y)
_RED_START: Dict[int, Tuple[float, float]] = {
    1: (5, 50),     # GK
    2: (20, 15),    # LB
    3: (20, 85),    # RB
    4: (18, 38),    # CB
    5: (18, 62),    # CB
    6: (35, 50),    # DM
    7: (60, 15),    # LW
    8: (45, 35),    # CM
    9: (65, 50),    # ST
    10: (45, 65),   # CM
    11: (60, 85),   # RW
}

_BLUE_START: Dict[int, Tuple[float, float]] = {
    1: (95, 50),    # GK
    2: (80, 85),    # LB
    3: (80, 15),    # RB
    4: (82, 62),    # CB
    5: (82, 38),    # CB
    6: (65, 50),    # DM
    7: (40, 85),    # LW
    8: (55, 65),    # CM
    9: (35, 50),    # ST
    10: (55, 35),   # CM
    11: (40, 15),   # RW
}


def role_for_number(number: int) -> str:
    if number == 1:
        return GOALKEEPER_ROLE
    return ROLE_BY_NUMBER.get(number, f"P{number}")


def _build_team(team: Team, start: Dict[int, Tuple[float, float]]) -> Tuple[Player, ...]:
    prefix = "r" if team is Team.RED else "b"
    return tuple(
        Player(
            id=f"{prefix}{number}",
            team=team,
            number=number,
            x=float(x),
            y=float(y),
            role=role_for_number(number),
        )
        for number, (x, y) in sorted(start.items())
    )


def initial_players() -> Tuple[Player, ...]:
    """Red 1-11 followed by Blue 1-11."""
    return _build_team(Team.RED, _RED_START) + _build_team(Team.BLUE, _BLUE_START)


def initial_ball(start: Optional[Tuple[float, float]] = None) -> Ball:
    if start is None:
        return Ball(PitchConfig.CENTER.x, PitchConfig.CENTER.y)
    return Ball(float(start[0]), float(start[1]))


def initial_board(ball_start: Optional[Tuple[float, float]] = None) -> Board:
    return Board(players=initial_players(), ball=initial_ball(ball_start))
