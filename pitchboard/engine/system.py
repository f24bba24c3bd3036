"""
Project: Pitchboard
File Created: 2026-03-08 16:07:03
Author: Xingnan Zhu
File Name: system.py
Description:
    The session object that owns the live board. It wires the interaction
    controller's callbacks to board transitions, hosts the tag workflow
    (select a player -> attach a tag -> inferred annotation), formations,
    the snapshot timeline and the activity feed.
"""

from typing import Callable, Optional, Union

from pitchboard.config import Config, ToolMode
from pitchboard.core.roster import initial_board
from pitchboard.core.types import Annotation, Board, DrawingStyle, LogicNode, Player, TacticalLine, Team
from pitchboard.engine import reducer as R
from pitchboard.engine.interaction import BoardCallbacks, InteractionController, InteractionProps
from pitchboard.engine.timeline import ActivityLog, Timeline, format_timestamp
from pitchboard.tactics.annotations import TagCategory, apply_tag, parse_category
from pitchboard.tactics.offside import OffsideLines, compute_offside_lines


class TacticalBoard:
    def __init__(self, cfg: Optional[Config] = None, on_log: Optional[Callable[[str], None]] = None):
        self.cfg = cfg or Config()

        # ==========================================
        # 1. Live state
        # ==========================================
        self.board: Board = initial_board(self.cfg.BALL_START)
        self.mode: ToolMode = self.cfg.DEFAULT_MODE
        self.style = DrawingStyle(color=self.cfg.DEFAULT_LINE_COLOR, dashed=self.cfg.DEFAULT_DASHED)
        self.show_offside_lines: bool = self.cfg.SHOW_OFFSIDE_LINES
        self.selected_player_id: Optional[str] = None

        # ==========================================
        # 2. Timeline & activity feed
        # ==========================================
        self.timeline = Timeline()
        self.log = ActivityLog(limit=self.cfg.LOG_FEED_LIMIT, sink=on_log)

        # ==========================================
        # 3. Input
        # ==========================================
        self.controller = InteractionController(
            props=self.props,
            callbacks=BoardCallbacks(
                on_player_move=self.move_player,
                on_ball_move=self.move_ball,
                on_player_select=self._on_player_select,
                on_line_create=self.add_line,
                on_line_remove=self.remove_line,
                on_undo=self.undo,
                on_log=self.log.add,
            ),
            cfg=self.cfg,
        )

        self.log.add("SYSTEM_INITIALIZED")

    # ------------------------------------------------------------------
    # Props / derived values
    # ------------------------------------------------------------------

    def props(self) -> InteractionProps:
        return InteractionProps(board=self.board, mode=self.mode, style=self.style)

    def offside_lines(self) -> OffsideLines:
        """Recomputed from the live board on every call."""
        return compute_offside_lines(self.board.players, self.board.ball)

    @property
    def selected_player(self) -> Optional[Player]:
        if self.selected_player_id is None:
            return None
        return self.board.get_player_by_id(self.selected_player_id)

    def dispatch(self, action) -> Board:
        self.board = R.reduce(self.board, action)
        return self.board

    # ------------------------------------------------------------------
    # Toolbar
    # ------------------------------------------------------------------

    def set_mode(self, mode: ToolMode) -> None:
        if mode is not self.mode:
            self.mode = mode
            self.log.add(f"TOOL_MODE: {mode.value.upper()}")

    def set_style(self, color: Optional[str] = None, dashed: Optional[bool] = None) -> None:
        self.style = DrawingStyle(
            color=self.style.color if color is None else color,
            dashed=self.style.dashed if dashed is None else dashed,
        )

    def toggle_offside_lines(self) -> bool:
        self.show_offside_lines = not self.show_offside_lines
        return self.show_offside_lines

    # ------------------------------------------------------------------
    # Entities
    # ------------------------------------------------------------------

    def move_player(self, player_id: str, x: float, y: float) -> None:
        self.dispatch(R.MovePlayer(player_id, x, y))

    def move_ball(self, x: float, y: float) -> None:
        self.dispatch(R.MoveBall(x, y))

    def select_player(self, player_id: str) -> Player:
        """Raises KeyError for an id that is not on the board."""
        player = self.board.get_player_by_id(player_id)
        if player is None:
            raise KeyError(player_id)
        self.selected_player_id = player.id
        self.log.add(f"ENTITY_SELECTED: {player.team.value.upper()} #{player.number}")
        return player

    def clear_selection(self) -> None:
        self.selected_player_id = None

    def _on_player_select(self, player: Player) -> None:
        self.select_player(player.id)

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    def add_tag(self, tag: str, category: Union[TagCategory, str, None] = None) -> Annotation:
        """
        Attach ``tag`` to the selected player and close the selection.
        Returns the inferred annotation (empty when nothing is selected,
        the tag is already present or the tag has no rule).
        """
        if isinstance(category, str):
            category = parse_category(category)

        player = self.selected_player
        self.clear_selection()
        if player is None:
            return Annotation()
        return self.tag_player(player.id, tag, category)

    def tag_player(self, player_id: str, tag: str, category: Optional[TagCategory] = None) -> Annotation:
        player = self.board.get_player_by_id(player_id)
        if player is None or tag in player.tags:
            return Annotation()

        self.dispatch(R.AddTag(player_id, tag))
        annotation = apply_tag(player, tag)

        kind = category.value.upper() if category else "TAG"
        self.log.add(f"{kind}_ATTACHED: {tag} -> {player_id}")
        return annotation

    def reset_tags(self, player_id: str) -> None:
        self.dispatch(R.ResetTags(player_id))

    # ------------------------------------------------------------------
    # Lines
    # ------------------------------------------------------------------

    def add_line(self, line: TacticalLine) -> None:
        self.dispatch(R.AddLine(line))
        self.log.add("FREEHAND_PATH_RECORDED")

    def remove_line(self, line_id: str) -> None:
        before = self.board
        self.dispatch(R.RemoveLine(line_id))
        if self.board is not before:
            self.log.add("PATH_ERASED")

    def undo(self) -> None:
        before = self.board
        self.dispatch(R.UndoLine())
        if self.board is not before:
            self.log.add("UNDO: LAST_PATH_REMOVED")

    def clear_annotations(self) -> None:
        self.dispatch(R.ClearAnnotations())
        self.log.add("CANVAS_WIPE")

    # ------------------------------------------------------------------
    # Board-wide
    # ------------------------------------------------------------------

    def apply_formation(self, team: Team, formation_name: str) -> bool:
        """True if the formation exists and was applied."""
        before = self.board
        self.dispatch(R.ApplyFormation(team, formation_name))
        if self.board is before:
            print(f"⚠️ Unknown formation '{formation_name}', {team.value.upper()} unchanged")
            return False
        self.log.add(f"FORMATION_APPLIED: {team.value.upper()} {formation_name}")
        return True

    def reset(self) -> None:
        self.dispatch(R.ResetBoard(self.cfg.BALL_START))
        self.clear_selection()
        self.log.add("PITCH_RESET")

    # ------------------------------------------------------------------
    # Timeline
    # ------------------------------------------------------------------

    def commit_snapshot(self, timestamp: float = 0.0, label: Optional[str] = None) -> LogicNode:
        node = self.timeline.commit(self.board, timestamp, label)
        self.log.add(f"LOGIC_COMMITTED: {node.id[:6]} @ {format_timestamp(node.timestamp)}")
        return node

    def restore_snapshot(self, node_id: str) -> Board:
        """Raises KeyError for an unknown node id."""
        node = self.timeline.get(node_id)
        self.dispatch(R.RestoreNode(node))
        self.clear_selection()
        self.log.add(f"TIMELINE_JUMP: {node.label}")
        return self.board
