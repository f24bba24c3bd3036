"""
Project: Pitchboard
File Created: 2026-03-04
Author: Xingnan Zhu
File Name: formation.py
Description:
    Formation presets and the applicator that moves a team into them.

    Presets are written for the Red side (defending the left goal,
    attacking right) and are keyed by the stable role tags assigned in
    pitchboard.core.roster (LB, RB, CB1, ...). Blue positions are the
    mirror image across the halfway line: x -> 100 - x, y unchanged.
    The goalkeeper is never part of a preset.
"""

from typing import Dict, List, Tuple

from pitchboard.core.geometry import mirror_x
from pitchboard.core.roster import OUTFIELD_ROLES
from pitchboard.core.types import Player, Point, Team

# ------------------------------------------------------------------
# Canonical formation templates (Red orientation, board %)
# All positions are inside the own half (x < 50) for lineup display.
# Each list runs in shirt order 2 -> 11 (OUTFIELD_ROLES).
# ------------------------------------------------------------------

FORMATION_TEMPLATES: Dict[str, List[Tuple[float, float]]] = {
    "4-4-2 (Flat)": [
        # Defenders
        (15, 15), (12, 38), (12, 62), (15, 85),
        # Midfielders
        (32, 15), (32, 38), (32, 62), (32, 85),
        # Forwards
        (45, 38), (45, 62),
    ],
    "4-4-2 (Diamond)": [
        (15, 15), (12, 38), (12, 62), (15, 85),
        (25, 50),               # CDM
        (35, 20), (35, 80),     # LM, RM
        (42, 50),               # CAM
        (48, 40), (48, 60),
    ],
    "4-2-3-1": [
        (15, 15), (12, 38), (12, 62), (15, 85),
        (25, 35), (25, 65),
        (40, 15), (40, 50), (40, 85),
        (48, 50),
    ],
    "4-1-2-3": [
        (15, 15), (12, 38), (12, 62), (15, 85),
        (22, 50),
        (32, 35), (32, 65),
        (45, 15), (48, 50), (45, 85),
    ],
    "3-4-3": [
        (15, 25), (12, 50), (15, 75),
        (30, 10), (30, 40), (30, 60), (30, 90),
        (45, 20), (48, 50), (45, 80),
    ],
    "3-5-2": [
        (15, 25), (12, 50), (15, 75),
        # LWB, CDM, CM, CM, RWB
        (30, 10), (25, 50), (35, 35), (35, 65), (30, 90),
        (48, 40), (48, 60),
    ],
    "5-2-3": [
        (20, 10), (15, 30), (12, 50), (15, 70), (20, 90),
        (35, 40), (35, 60),
        (48, 20), (48, 50), (48, 80),
    ],
    "5-3-2": [
        (20, 10), (15, 30), (12, 50), (15, 70), (20, 90),
        (32, 30), (32, 50), (32, 70),
        (45, 40), (45, 60),
    ],
}

# role -> (x, y); lookups go through the role so the roster order never matters
FORMATIONS: Dict[str, Dict[str, Tuple[float, float]]] = {
    name: dict(zip(OUTFIELD_ROLES, positions))
    for name, positions in FORMATION_TEMPLATES.items()
}

FORMATION_OPTIONS: List[str] = list(FORMATIONS.keys())


def get_formation_roles(formation_name: str, team: Team) -> Dict[str, Point]:
    """role -> position for ``team``; empty dict for an unknown name."""
    base = FORMATIONS.get(formation_name)
    if base is None:
        return {}
    if team is Team.RED:
        return {role: Point(float(x), float(y)) for role, (x, y) in base.items()}
    return {role: Point(mirror_x(float(x)), float(y)) for role, (x, y) in base.items()}


def get_formation_positions(formation_name: str, team: Team) -> List[Point]:
    """
    The 10 outfield positions in roster role order (shirt 2 -> 11).
    Unknown formation -> [].
    """
    roles = get_formation_roles(formation_name, team)
    return [roles[role] for role in OUTFIELD_ROLES if role in roles]


def apply_formation(players: Tuple[Player, ...], team: Team, formation_name: str) -> Tuple[Player, ...]:
    """
    Move ``team``'s outfield players onto the preset by role.

    Unknown formation -> the same tuple is returned. Goalkeepers, the
    other team and players whose role the preset does not name keep their
    position. Tags are left alone.
    """
    roles = get_formation_roles(formation_name, team)
    if not roles:
        return players

    updated = []
    for p in players:
        target = roles.get(p.role)
        if p.team != team or p.is_goalkeeper or target is None:
            updated.append(p)
        else:
            updated.append(p.moved_to(target.x, target.y))
    return tuple(updated)
