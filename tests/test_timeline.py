from datetime import datetime

import pytest

from pitchboard.core.roster import initial_board
from pitchboard.core.types import Point, TacticalLine
from pitchboard.engine.reducer import AddLine, MovePlayer, reduce
from pitchboard.engine.timeline import ActivityLog, Timeline, format_timestamp


def test_format_timestamp():
    assert format_timestamp(0) == "00:00"
    assert format_timestamp(754) == "12:34"
    assert format_timestamp(65.9) == "01:05"
    assert format_timestamp(3600) == "60:00"
    assert format_timestamp(-3) == "00:00"


def test_commit_labels_and_lookup():
    timeline = Timeline()
    board = initial_board()
    first = timeline.commit(board, 10)
    second = timeline.commit(board, 20, label="Press trigger")

    assert first.label == "LOGIC_NODE_1"
    assert second.label == "Press trigger"
    assert timeline.nodes == [first, second]
    assert timeline.at(1) is second
    assert timeline.at(2) is None
    assert timeline.get(first.id) is first
    assert len(timeline) == 2

    with pytest.raises(KeyError):
        timeline.get("nope")

    timeline.remove(first.id)
    timeline.remove("nope")
    assert timeline.nodes == [second]
    timeline.clear()
    assert len(timeline) == 0


def test_snapshot_is_independent_of_later_edits():
    timeline = Timeline()
    board = initial_board()
    node = timeline.commit(board, 0)

    board = reduce(board, MovePlayer("r9", 90, 90))
    assert node.board_state == initial_board().players
    assert node.ball_state == initial_board().ball


def test_player_only_capture():
    board = reduce(initial_board(), AddLine(
        TacticalLine(id="a", points=(Point(0, 0), Point(5, 5)), color="#fff")))
    node = Timeline(include_annotations=False).commit(board, 0)
    assert node.line_state is None
    assert node.zone_state is None

    node = Timeline().commit(board, 0)
    assert [l.id for l in node.line_state] == ["a"]
    assert node.zone_state == ()


def test_activity_log():
    sink = []
    clock = lambda: datetime(2026, 3, 8, 12, 34, 56)
    log = ActivityLog(limit=2, sink=sink.append, clock=clock)

    assert log.add("ONE") == "> ONE [12:34:56]"
    log.add("TWO")
    log.add("THREE")

    assert log.entries == ["> THREE [12:34:56]", "> TWO [12:34:56]"]
    assert len(log) == 2
    assert sink == ["> ONE [12:34:56]", "> TWO [12:34:56]", "> THREE [12:34:56]"]


def test_default_labels_do_not_repeat_after_removal():
    timeline = Timeline()
    board = initial_board()
    first = timeline.commit(board, 1)
    second = timeline.commit(board, 2)
    timeline.remove(first.id)
    third = timeline.commit(board, 3)
    assert third.label == "LOGIC_NODE_3"
    assert [n.label for n in timeline.nodes] == [second.label, "LOGIC_NODE_3"]
