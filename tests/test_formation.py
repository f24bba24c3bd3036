from pitchboard.core.geometry import mirror_x
from pitchboard.core.roster import GOALKEEPER_ROLE, OUTFIELD_ROLES, initial_players
from pitchboard.core.types import Point, Team
from pitchboard.tactics.formation import (
    FORMATION_OPTIONS,
    FORMATIONS,
    apply_formation,
    get_formation_positions,
)


def by_id(players):
    return {p.id: p for p in players}


def test_flat_442_on_red():
    players = initial_players()
    moved = by_id(apply_formation(players, Team.RED, "4-4-2 (Flat)"))
    before = by_id(players)

    assert moved["r1"].position == before["r1"].position == Point(5, 50)

    positions = get_formation_positions("4-4-2 (Flat)", Team.RED)
    assert len(positions) == 10
    for number, expected in zip(range(2, 12), positions):
        assert moved[f"r{number}"].position == expected

    preset = {Point(float(x), float(y)) for x, y in FORMATIONS["4-4-2 (Flat)"].values()}
    assert {moved[f"r{n}"].position for n in range(2, 12)} == preset


def test_other_team_is_untouched():
    players = initial_players()
    moved = by_id(apply_formation(players, Team.RED, "3-5-2"))
    for p in players:
        if p.team is Team.BLUE:
            assert moved[p.id] is p


def test_blue_presets_are_mirrored():
    moved = by_id(apply_formation(initial_players(), Team.BLUE, "4-4-2 (Flat)"))
    lb_x, lb_y = FORMATIONS["4-4-2 (Flat)"]["LB"]
    assert moved["b2"].position == Point(100 - lb_x, lb_y)
    assert moved["b1"].position == Point(95, 50)


def test_unknown_formation_returns_same_players():
    players = initial_players()
    assert apply_formation(players, Team.RED, "2-3-5 (Pyramid)") is players
    assert get_formation_positions("2-3-5 (Pyramid)", Team.RED) == []


def test_tags_survive_a_formation_change():
    players = tuple(p.with_tag("支援") if p.id == "r6" else p for p in initial_players())
    moved = by_id(apply_formation(players, Team.RED, "4-2-3-1"))
    assert moved["r6"].tags == ("支援",)


def test_every_preset_covers_all_outfield_roles():
    assert len(FORMATION_OPTIONS) == 8
    for name, roles in FORMATIONS.items():
        assert set(roles) == set(OUTFIELD_ROLES), name
        assert GOALKEEPER_ROLE not in roles


def test_flat_442_follows_shirt_order():
    expected = [Point(15, 15), Point(12, 38), Point(12, 62), Point(15, 85), Point(32, 15),
                Point(32, 38), Point(32, 62), Point(32, 85), Point(45, 38), Point(45, 62)]
    assert get_formation_positions("4-4-2 (Flat)", Team.RED) == expected

    moved = by_id(apply_formation(initial_players(), Team.RED, "4-4-2 (Flat)"))
    assert [moved[f"r{n}"].position for n in range(2, 12)] == expected


def test_every_preset_mirrors_for_blue():
    for name in FORMATION_OPTIONS:
        red = get_formation_positions(name, Team.RED)
        blue = get_formation_positions(name, Team.BLUE)
        assert [Point(mirror_x(p.x), p.y) for p in blue] == red, name
