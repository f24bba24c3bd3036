import pytest

from pitchboard.config import Colors
from pitchboard.core.types import Player, Point, Team
from pitchboard.tactics.annotations import (
    DEFAULT_STATUS_COLOR,
    DEFAULT_TAGS,
    TagCategory,
    TagKind,
    apply_tag,
    parse_category,
    resolve_tag,
    tag_status_color,
)


def red(x, y, pid="r9"):
    return Player(id=pid, team=Team.RED, number=9, x=x, y=y, role="ST")


def blue(x, y, pid="b9"):
    return Player(id=pid, team=Team.BLUE, number=9, x=x, y=y, role="ST")


def test_forward_run_is_deterministic():
    player = red(65, 50)
    first = apply_tag(player, "前插")
    second = apply_tag(player, "前插")

    assert first == second
    line = first.line
    assert first.zone is None
    assert line.id == "r9:forward_run"
    assert line.points == (Point(65, 50), Point(80, 50))
    assert line.color == Colors.PEN_RED
    assert line.dashed is False
    assert line.owner_id == "r9"


def test_arrow_points_towards_the_attacked_goal():
    line = apply_tag(blue(35, 50), "前插跑动").line
    assert line.points == (Point(35, 50), Point(20, 50))

    drop = apply_tag(red(40, 50), "回撤接应").line
    assert drop.points[-1] == Point(30, 50)
    assert drop.dashed is True


def test_arrow_end_is_clamped_to_the_board():
    line = apply_tag(red(95, 3), "佯攻").line
    assert line.points[-1] == Point(100.0, 0.0)


def test_aliases_match_after_normalisation_only():
    assert resolve_tag("  Forward   RUN ").kind is TagKind.FORWARD_RUN
    assert resolve_tag("High Press").kind is TagKind.HIGH_PRESS
    # No substring matching
    assert resolve_tag("前插跑动快") is None
    assert resolve_tag("pressing") is None


def test_unmatched_tags_give_no_annotation():
    for tag in ("关键传球", "拦截", "1v1对抗", "something else"):
        assert apply_tag(red(50, 50), tag).is_empty


def test_every_library_tag_in_spatial_category_builds_a_zone():
    for tag in DEFAULT_TAGS[TagCategory.SPATIAL]:
        annotation = apply_tag(red(45, 35), tag)
        assert annotation.zone is not None, tag
        assert annotation.line is None


def test_half_space_snaps_to_the_lane_on_the_players_side():
    zone = apply_tag(red(45, 35), "肋部空间").zone
    assert (zone.x, zone.y) == (55, 30)
    assert (zone.width, zone.height) == (14, 18)

    zone = apply_tag(blue(60, 80), "half space").zone
    assert (zone.x, zone.y) == (50, 70)


def test_landmark_zones_sit_on_the_attacked_side():
    assert (apply_tag(red(30, 30), "14区").zone.x, apply_tag(red(30, 30), "14区").zone.y) == (74, 50)
    assert apply_tag(blue(70, 30), "zone 14").zone.x == 26

    box = apply_tag(red(30, 30), "禁区").zone
    assert (box.x, box.y) == (87.5, 50)
    assert (box.width, box.height) == (15, 50)


def test_zone_center_is_clamped():
    zone = apply_tag(red(96, 50), "口袋").zone
    assert zone.x == 100


def test_tag_status_color():
    assert tag_status_color([]) is None
    assert tag_status_color(["关键传球"]) == DEFAULT_STATUS_COLOR
    # Earliest group wins regardless of tag order
    assert tag_status_color(["支援", "前插"]) == Colors.PEN_RED
    assert tag_status_color(["压迫"]) == Colors.PEN_ORANGE
    assert tag_status_color(["区域"]) == Colors.PEN_PURPLE


def test_parse_category():
    assert parse_category("Spatial") is TagCategory.SPATIAL
    assert parse_category(" action ") is TagCategory.ACTION
    with pytest.raises(ValueError):
        parse_category("tactical")
