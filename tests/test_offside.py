from pitchboard.core.roster import initial_board
from pitchboard.core.types import Ball, Player, Team
from pitchboard.tactics.offside import OffsideLines, compute_offside_lines, is_offside_position


def team(t, xs):
    prefix = "r" if t is Team.RED else "b"
    return [Player(id=f"{prefix}{i}", team=t, number=i, x=x, y=50) for i, x in enumerate(xs, start=1)]


def test_line_is_clamped_by_the_ball():
    reds = team(Team.RED, [10, 20, 30])
    assert compute_offside_lines(reds, Ball(15, 50)).left == 15
    assert compute_offside_lines(reds, Ball(25, 50)).left == 20
    assert compute_offside_lines(reds).left == 20


def test_blue_uses_second_largest_x():
    blues = team(Team.BLUE, [70, 80, 90])
    assert compute_offside_lines(blues).right == 80
    assert compute_offside_lines(blues, Ball(85, 50)).right == 85
    assert compute_offside_lines(blues, Ball(60, 50)).right == 80


def test_fewer_than_two_players_has_no_line():
    lines = compute_offside_lines(team(Team.RED, [10]) + team(Team.BLUE, []), Ball(50, 50))
    assert lines == OffsideLines(left=None, right=None)


def test_initial_board_lines():
    board = initial_board()
    lines = compute_offside_lines(board.players, board.ball)
    assert lines.left == 18
    assert lines.right == 82
    assert lines.for_defending(Team.RED) == 18
    assert lines.for_defending(Team.BLUE) == 82


def test_offside_position_is_strict():
    lines = OffsideLines(left=20, right=80)
    attacker = Player(id="r9", team=Team.RED, number=9, x=85, y=50)
    assert is_offside_position(attacker, lines)
    assert not is_offside_position(attacker.moved_to(80, 50), lines)

    blue_attacker = Player(id="b9", team=Team.BLUE, number=9, x=15, y=50)
    assert is_offside_position(blue_attacker, lines)
    assert not is_offside_position(blue_attacker, OffsideLines(left=None, right=80))
