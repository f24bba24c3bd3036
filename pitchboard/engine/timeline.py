"""
Project: Pitchboard
File Created: 2026-03-08
Author: Xingnan Zhu
File Name: timeline.py
Description:
    Snapshot store for board states pinned to match time ("logic nodes"),
    plus the activity feed shown next to it.

    Records are frozen, so a snapshot taken from the live board is already
    an independent copy: later transitions build new tuples and never
    touch the captured ones.
"""

import uuid
from collections import deque
from datetime import datetime
from typing import Callable, Deque, Dict, List, Optional

from pitchboard.core.types import Board, LogicNode


def format_timestamp(seconds: float) -> str:
    """Match clock label: 754 -> '12:34'. Minutes are not wrapped at 60."""
    total = max(0, int(seconds))
    return f"{total // 60:02d}:{total % 60:02d}"


class Timeline:
    """
    Ordered LogicNode store.

    ``include_annotations`` decides whether lines and zones are captured
    with the players (player-only captures restore players and ball only).
    """

    def __init__(self, include_annotations: bool = True) -> None:
        self.include_annotations = include_annotations
        self._nodes: Dict[str, LogicNode] = {}
        self._committed = 0  # never decreases, so default labels stay unique

    @property
    def nodes(self) -> List[LogicNode]:
        return list(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def commit(self, board: Board, timestamp: float, label: Optional[str] = None) -> LogicNode:
        self._committed += 1
        node = LogicNode(
            id=str(uuid.uuid4()),
            timestamp=float(timestamp),
            label=label or f"LOGIC_NODE_{self._committed}",
            board_state=board.players,
            line_state=board.lines if self.include_annotations else None,
            zone_state=board.zones if self.include_annotations else None,
            ball_state=board.ball,
        )
        self._nodes[node.id] = node
        return node

    def get(self, node_id: str) -> LogicNode:
        """Raises KeyError for an unknown id."""
        return self._nodes[node_id]

    def at(self, index: int) -> Optional[LogicNode]:
        nodes = self.nodes
        if 0 <= index < len(nodes):
            return nodes[index]
        return None

    def remove(self, node_id: str) -> None:
        self._nodes.pop(node_id, None)

    def clear(self) -> None:
        self._nodes.clear()


class ActivityLog:
    """
    Newest-first feed of "> message [HH:MM:SS]" lines, bounded to ``limit``.
    Advisory only; every entry is also handed to ``sink`` (the host's
    on_log callback).
    """

    def __init__(self, limit: int = 50, sink: Optional[Callable[[str], None]] = None,
                 clock: Callable[[], datetime] = datetime.now) -> None:
        self._entries: Deque[str] = deque(maxlen=limit)
        self._sink = sink
        self._clock = clock

    def add(self, message: str) -> str:
        entry = f"> {message} [{self._clock().strftime('%H:%M:%S')}]"
        self._entries.appendleft(entry)
        if self._sink is not None:
            self._sink(entry)
        return entry

    @property
    def entries(self) -> List[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
