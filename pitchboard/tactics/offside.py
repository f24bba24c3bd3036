"""
Project: Pitchboard
File Created: 2026-03-04
Author: Xingnan Zhu
File Name: offside.py
Description:
    Offside thresholds from the live board. Pure function; the renderer
    calls it on every draw so the lines never lag behind the players.

    Rule: the line sits on the second-last defender of the defending team,
    but never further from that team's goal than the ball.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from pitchboard.core.types import Ball, Player, Team


@dataclass(frozen=True)
class OffsideLines:
    """
    x positions of the two vertical offside lines (None = undefined).
    ``left``:  set by Red, which defends the left goal; limits Blue attackers.
    ``right``: set by Blue, which defends the right goal; limits Red attackers.
    """
    left: Optional[float] = None
    right: Optional[float] = None

    def for_defending(self, team: Team) -> Optional[float]:
        return self.left if team is Team.RED else self.right


def _second_last_defender_x(players: Iterable[Player], team: Team) -> Optional[float]:
    xs = np.array([p.x for p in players if p.team == team], dtype=np.float64)
    if len(xs) < 2:
        return None
    xs = np.sort(xs)
    # Red defends x=0 -> second smallest; Blue defends x=100 -> second largest
    return float(xs[1]) if team is Team.RED else float(xs[-2])


def compute_offside_lines(players: Iterable[Player], ball: Optional[Ball] = None) -> OffsideLines:
    players = tuple(players)
    left = _second_last_defender_x(players, Team.RED)
    right = _second_last_defender_x(players, Team.BLUE)

    if ball is not None:
        if left is not None:
            left = min(left, ball.x)
        if right is not None:
            right = max(right, ball.x)

    return OffsideLines(left=left, right=right)


def is_offside_position(player: Player, lines: OffsideLines) -> bool:
    """True when an attacker is beyond the opponent's line (strictly)."""
    threshold = lines.for_defending(player.team.opponent)
    if threshold is None:
        return False
    if player.team is Team.RED:
        return player.x > threshold
    return player.x < threshold
