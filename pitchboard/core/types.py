"""
Project: Pitchboard
File Created: 2026-03-02 16:16:34
Author: Xingnan Zhu
File Name: types.py
Description:
    Data contracts for the tactical board. Every record is a frozen
    dataclass: transitions build new values (copy-on-write) so consumers
    can diff collections by identity.

    Coordinates are board percentages: 0-100 on both axes, origin at the
    top-left corner, x towards the right goal, y towards the bottom touchline.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

# ==========================================
# 1. 基础定义与枚举
# ==========================================

class Team(Enum):
    RED = "red"     # 主队: defends the left goal, attacks right
    BLUE = "blue"   # 客队: defends the right goal, attacks left

    @property
    def direction(self) -> int:
        """+1 when attacking towards x=100, -1 when attacking towards x=0."""
        return 1 if self is Team.RED else -1

    @property
    def opponent(self) -> "Team":
        return Team.BLUE if self is Team.RED else Team.RED


@dataclass(frozen=True)
class Point:
    """A board coordinate in percent."""
    x: float
    y: float

    def to_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True)
class BoardRect:
    """Live bounding rectangle of the rendered board, in viewport pixels."""
    left: float
    top: float
    width: float
    height: float


# ==========================================
# 2. 核心实体 (Player & Ball)
# ==========================================

@dataclass(frozen=True)
class Player:
    """
    A roster entry. ``id``, ``team``, ``number`` and ``role`` never change;
    position moves by drag or formation, tags grow until the player moves.
    """
    id: str
    team: Team
    number: int
    x: float
    y: float
    tags: Tuple[str, ...] = ()
    role: str = ""   # Stable role tag ("GK", "LB", "CB1"...), see core.roster

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def is_goalkeeper(self) -> bool:
        return self.role == "GK"

    def moved_to(self, x: float, y: float) -> "Player":
        return replace(self, x=x, y=y)

    def with_tag(self, tag: str) -> "Player":
        """Append a tag; an already-present tag returns ``self`` unchanged."""
        if tag in self.tags:
            return self
        return replace(self, tags=self.tags + (tag,))

    def without_tags(self) -> "Player":
        if not self.tags:
            return self
        return replace(self, tags=())


@dataclass(frozen=True)
class Ball:
    x: float
    y: float

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)


# ==========================================
# 3. 战术标注 (Lines & Zones)
# ==========================================

@dataclass(frozen=True)
class DrawingStyle:
    """The pen currently selected in the toolbar."""
    color: str
    dashed: bool = False


@dataclass(frozen=True)
class TacticalLine:
    """
    A freehand stroke or a tag-derived arrow.
    ``owner_id`` set = derived from that player's tag and deleted with it.
    """
    id: str
    points: Tuple[Point, ...]
    color: str
    dashed: bool = False
    owner_id: Optional[str] = None

    @property
    def is_free(self) -> bool:
        return self.owner_id is None


@dataclass(frozen=True)
class TacticalZone:
    """Axis-aligned rectangle given by its center and extents (all in %)."""
    id: str
    x: float
    y: float
    width: float
    height: float
    color: str
    owner_id: Optional[str] = None

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(x1, y1, x2, y2)"""
        hw, hh = self.width / 2, self.height / 2
        return self.x - hw, self.y - hh, self.x + hw, self.y + hh


# ==========================================
# 4. 战术板 (The Bus)
# ==========================================

@dataclass(frozen=True)
class Board:
    """One logical document: everything the pitch shows."""
    players: Tuple[Player, ...] = ()
    lines: Tuple[TacticalLine, ...] = ()
    zones: Tuple[TacticalZone, ...] = ()
    ball: Optional[Ball] = None

    def get_team_players(self, team: Team) -> Tuple[Player, ...]:
        return tuple(p for p in self.players if p.team == team)

    def get_player_by_id(self, pid: str) -> Optional[Player]:
        for p in self.players:
            if p.id == pid: return p
        return None

    @property
    def free_lines(self) -> Tuple[TacticalLine, ...]:
        return tuple(line for line in self.lines if line.is_free)


# ==========================================
# 5. 时间轴快照 (Timeline)
# ==========================================

@dataclass(frozen=True)
class LogicNode:
    """
    Point-in-time capture of the board pinned to a match timestamp (seconds).
    ``line_state`` / ``zone_state`` are None for player-only captures.
    """
    id: str
    timestamp: float
    label: str
    board_state: Tuple[Player, ...]
    line_state: Optional[Tuple[TacticalLine, ...]] = None
    zone_state: Optional[Tuple[TacticalZone, ...]] = None
    ball_state: Optional[Ball] = None


@dataclass(frozen=True)
class Annotation:
    """Result of a tag application: at most one of ``line`` / ``zone``."""
    line: Optional[TacticalLine] = None
    zone: Optional[TacticalZone] = None

    @property
    def is_empty(self) -> bool:
        return self.line is None and self.zone is None


# ==========================================
# 6. 球场标准
# ==========================================
class PitchConfig:
    # Board space is percentage based; real pitch dimensions are kept for
    # rendering the markings in proportion.
    SIZE = 100.0
    LENGTH_M = 105.0
    WIDTH_M = 68.0

    CENTER = Point(50.0, 50.0)
