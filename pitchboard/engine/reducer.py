"""
Project: Pitchboard
File Created: 2026-03-06
Author: Xingnan Zhu
File Name: reducer.py
Description:
    Board transitions: reduce(board, action) -> board.

    Every action is a small frozen record; every handler returns a new
    Board and reuses the untouched collections by reference, so a caller
    can tell what changed with ``is``. Handlers never raise for
    well-typed input: unknown ids and degenerate requests return the
    board unchanged.
"""

from dataclasses import dataclass, replace
from typing import Callable, Dict, Optional, Tuple, Type

from pitchboard.core.geometry import clamp_pct
from pitchboard.core.roster import initial_board
from pitchboard.core.types import Ball, Board, LogicNode, Player, TacticalLine, Team
from pitchboard.tactics.annotations import apply_tag
from pitchboard.tactics.formation import apply_formation


# ==========================================
# 1. Actions
# ==========================================

@dataclass(frozen=True)
class MovePlayer:
    player_id: str
    x: float
    y: float


@dataclass(frozen=True)
class MoveBall:
    x: float
    y: float


@dataclass(frozen=True)
class AddTag:
    player_id: str
    tag: str


@dataclass(frozen=True)
class ResetTags:
    player_id: str


@dataclass(frozen=True)
class AddLine:
    line: TacticalLine


@dataclass(frozen=True)
class RemoveLine:
    line_id: str


@dataclass(frozen=True)
class UndoLine:
    """Drop the most recently committed free (hand-drawn) line."""


@dataclass(frozen=True)
class ClearAnnotations:
    """Remove every line and zone."""


@dataclass(frozen=True)
class ApplyFormation:
    team: Team
    formation_name: str


@dataclass(frozen=True)
class ResetBoard:
    ball_start: Optional[Tuple[float, float]] = None


@dataclass(frozen=True)
class RestoreNode:
    node: LogicNode


# ==========================================
# 2. Helpers
# ==========================================

def _replace_player(board: Board, player: Player) -> Board:
    players = tuple(player if p.id == player.id else p for p in board.players)
    return replace(board, players=players)


def _drop_owned(board: Board, owner_id: str) -> Board:
    """Remove lines/zones derived from ``owner_id``'s tags."""
    lines = tuple(l for l in board.lines if l.owner_id != owner_id)
    zones = tuple(z for z in board.zones if z.owner_id != owner_id)
    if len(lines) == len(board.lines):
        lines = board.lines
    if len(zones) == len(board.zones):
        zones = board.zones
    if lines is board.lines and zones is board.zones:
        return board
    return replace(board, lines=lines, zones=zones)


def _upsert(items: tuple, item) -> tuple:
    """Replace the entry with the same id in place, or append."""
    for i, existing in enumerate(items):
        if existing.id == item.id:
            return items[:i] + (item,) + items[i + 1:]
    return items + (item,)


# ==========================================
# 3. Handlers
# ==========================================

def _move_player(board: Board, action: MovePlayer) -> Board:
    player = board.get_player_by_id(action.player_id)
    if player is None:
        return board
    # Repositioning invalidates the tactical meaning of the tags
    moved = player.moved_to(clamp_pct(action.x), clamp_pct(action.y)).without_tags()
    return _drop_owned(_replace_player(board, moved), player.id)


def _move_ball(board: Board, action: MoveBall) -> Board:
    return replace(board, ball=Ball(clamp_pct(action.x), clamp_pct(action.y)))


def _add_tag(board: Board, action: AddTag) -> Board:
    player = board.get_player_by_id(action.player_id)
    if player is None or action.tag in player.tags:
        return board

    tagged = player.with_tag(action.tag)
    board = _replace_player(board, tagged)

    annotation = apply_tag(tagged, action.tag)
    if annotation.line is not None:
        board = replace(board, lines=_upsert(board.lines, annotation.line))
    elif annotation.zone is not None:
        board = replace(board, zones=_upsert(board.zones, annotation.zone))
    return board


def _reset_tags(board: Board, action: ResetTags) -> Board:
    player = board.get_player_by_id(action.player_id)
    if player is None:
        return board
    if player.tags:
        board = _replace_player(board, player.without_tags())
    return _drop_owned(board, player.id)


def _add_line(board: Board, action: AddLine) -> Board:
    if len(action.line.points) < 2:
        return board
    return replace(board, lines=board.lines + (action.line,))


def _remove_line(board: Board, action: RemoveLine) -> Board:
    lines = tuple(l for l in board.lines if l.id != action.line_id)
    if len(lines) == len(board.lines):
        return board
    return replace(board, lines=lines)


def _undo_line(board: Board, action: UndoLine) -> Board:
    for i in range(len(board.lines) - 1, -1, -1):
        if board.lines[i].is_free:
            return replace(board, lines=board.lines[:i] + board.lines[i + 1:])
    return board


def _clear_annotations(board: Board, action: ClearAnnotations) -> Board:
    if not board.lines and not board.zones:
        return board
    return replace(board, lines=(), zones=())


def _apply_formation(board: Board, action: ApplyFormation) -> Board:
    players = apply_formation(board.players, action.team, action.formation_name)
    if players is board.players:
        return board
    return replace(board, players=players)


def _reset_board(board: Board, action: ResetBoard) -> Board:
    return initial_board(action.ball_start)


def _restore_node(board: Board, action: RestoreNode) -> Board:
    node = action.node
    restored = replace(board, players=node.board_state)
    if node.line_state is not None:
        restored = replace(restored, lines=node.line_state)
    if node.zone_state is not None:
        restored = replace(restored, zones=node.zone_state)
    if node.ball_state is not None:
        restored = replace(restored, ball=node.ball_state)
    return restored


_HANDLERS: Dict[Type, Callable[[Board, object], Board]] = {
    MovePlayer: _move_player,
    MoveBall: _move_ball,
    AddTag: _add_tag,
    ResetTags: _reset_tags,
    AddLine: _add_line,
    RemoveLine: _remove_line,
    UndoLine: _undo_line,
    ClearAnnotations: _clear_annotations,
    ApplyFormation: _apply_formation,
    ResetBoard: _reset_board,
    RestoreNode: _restore_node,
}


def reduce(board: Board, action) -> Board:
    """Apply one action. Unknown action types raise TypeError."""
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unsupported board action: {type(action).__name__}")
    return handler(board, action)
