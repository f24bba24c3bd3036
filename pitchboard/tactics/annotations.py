"""
Project: Pitchboard
File Created: 2026-03-05
Author: Xingnan Zhu
File Name: annotations.py
Description:
    Tag -> annotation inference.

    Tags are resolved against an explicit taxonomy (TagKind). Each kind has
    a list of bilingual aliases matched exactly after normalisation (strip
    + lowercase), and an annotation template:

      * movement kinds  -> a two-point arrow from the player, pointing
                           towards the half the player's team attacks
      * spatial kinds   -> a rectangle zone near the player or on a fixed
                           pitch landmark

    Rules are ordered (movement groups before spatial groups). The order
    only matters as a tie-break if two rules ever claim the same alias.
    Everything here is a pure function of (team, x, y, tag).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from pitchboard.config import Colors
from pitchboard.core.geometry import LANDMARKS, clamp_pct
from pitchboard.core.types import Annotation, Player, Point, TacticalLine, TacticalZone, Team

# ==========================================
# 1. Taxonomy
# ==========================================

class TagCategory(Enum):
    STRATEGIC = "strategic"
    SPATIAL = "spatial"
    ACTION = "action"


class TagGroup(Enum):
    """Rule groups in match order. Also drives the tagged-player status dot."""
    RUN = "run"           # 跑动 / 进攻
    PRESS = "press"       # 逼抢 / 压迫
    DROP = "drop"         # 回撤 / 防守
    SUPPORT = "support"   # 支援 / 接应
    SPACE = "space"       # 空间 / 区域

    @property
    def is_spatial(self) -> bool:
        return self is TagGroup.SPACE


GROUP_COLORS: Dict[TagGroup, str] = {
    TagGroup.RUN: Colors.PEN_RED,
    TagGroup.PRESS: Colors.PEN_ORANGE,
    TagGroup.DROP: Colors.PEN_BLUE,
    TagGroup.SUPPORT: Colors.PEN_YELLOW,
    TagGroup.SPACE: Colors.PEN_PURPLE,
}

# Status dot for a tagged player whose tags match no rule
DEFAULT_STATUS_COLOR = Colors.PEN_NEON


class TagKind(Enum):
    # Movement
    FORWARD_RUN = "forward_run"
    DECOY_RUN = "decoy_run"
    COUNTER_ATTACK = "counter_attack"
    HIGH_PRESS = "high_press"
    PRESSURE = "pressure"
    DROP_SUPPORT = "drop_support"
    LOW_BLOCK = "low_block"
    SUPPORT = "support"
    LINK_UP = "link_up"
    BUILD_UP = "build_up"
    # Spatial
    HALF_SPACE = "half_space"
    OVERLOAD = "overload"
    POCKET = "pocket"
    WIDE_CHANNEL = "wide_channel"
    ZONE_14 = "zone_14"
    PENALTY_BOX = "penalty_box"
    SPACE = "space"


# Tag library offered by the tag-selection surface
DEFAULT_TAGS: Dict[TagCategory, Tuple[str, ...]] = {
    TagCategory.STRATEGIC: ("高位逼抢", "低位防守", "快速反击", "组织进攻"),
    TagCategory.SPATIAL: ("肋部空间", "局部过载", "接球口袋", "边路通道"),
    TagCategory.ACTION: ("关键传球", "拦截", "佯攻跑位", "1v1对抗", "前插跑动", "回撤接应", "压迫", "支援"),
}


# ==========================================
# 2. Annotation templates
# ==========================================

@dataclass(frozen=True)
class LineTemplate:
    """Arrow from the player to (x + dx * dir, y + dy)."""
    dx: float
    dy: float
    color: str
    dashed: bool = False


@dataclass(frozen=True)
class ZoneTemplate:
    """
    Zone of a fixed size. Centre is the player position shifted by
    (dx * dir, dy), unless:
      * ``landmark`` names a LANDMARKS key prefix ("ZONE_14") resolved on the
        side the team attacks, or
      * ``lane_y`` is set: y snaps to the lane on the player's side of the
        pitch (lane_y for the top half, 100 - lane_y for the bottom half).
    """
    width: float
    height: float
    color: str
    dx: float = 0.0
    dy: float = 0.0
    landmark: Optional[str] = None
    lane_y: Optional[float] = None


@dataclass(frozen=True)
class TagRule:
    kind: TagKind
    group: TagGroup
    aliases: Tuple[str, ...]
    template: object  # LineTemplate | ZoneTemplate


RULES: Tuple[TagRule, ...] = (
    # --- RUN ---
    TagRule(TagKind.FORWARD_RUN, TagGroup.RUN,
            ("前插跑动", "前插", "跑位", "forward run", "run", "sprint", "run in behind"),
            LineTemplate(dx=15, dy=0, color=Colors.PEN_RED)),
    TagRule(TagKind.DECOY_RUN, TagGroup.RUN,
            ("佯攻跑位", "佯攻", "decoy run", "dummy run", "feint"),
            LineTemplate(dx=10, dy=-8, color=Colors.PEN_RED, dashed=True)),
    TagRule(TagKind.COUNTER_ATTACK, TagGroup.RUN,
            ("快速反击", "反击", "counter attack", "counter-attack", "counter", "attack"),
            LineTemplate(dx=25, dy=0, color=Colors.PEN_RED)),
    # --- PRESS ---
    TagRule(TagKind.HIGH_PRESS, TagGroup.PRESS,
            ("高位逼抢", "逼抢", "high press", "press"),
            LineTemplate(dx=10, dy=0, color=Colors.PEN_ORANGE)),
    TagRule(TagKind.PRESSURE, TagGroup.PRESS,
            ("压迫", "pressure", "mark", "man mark"),
            LineTemplate(dx=6, dy=0, color=Colors.PEN_ORANGE, dashed=True)),
    # --- DROP ---
    TagRule(TagKind.DROP_SUPPORT, TagGroup.DROP,
            ("回撤接应", "回撤", "drop", "drop deep"),
            LineTemplate(dx=-10, dy=0, color=Colors.PEN_BLUE, dashed=True)),
    TagRule(TagKind.LOW_BLOCK, TagGroup.DROP,
            ("低位防守", "防守", "low block", "defend", "cover"),
            LineTemplate(dx=-15, dy=0, color=Colors.PEN_BLUE)),
    # --- SUPPORT ---
    TagRule(TagKind.SUPPORT, TagGroup.SUPPORT,
            ("支援", "support"),
            LineTemplate(dx=6, dy=6, color=Colors.PEN_YELLOW, dashed=True)),
    TagRule(TagKind.LINK_UP, TagGroup.SUPPORT,
            ("接应", "hold", "link up", "hold up"),
            LineTemplate(dx=-5, dy=-6, color=Colors.PEN_YELLOW, dashed=True)),
    TagRule(TagKind.BUILD_UP, TagGroup.SUPPORT,
            ("组织进攻", "build up", "build-up"),
            LineTemplate(dx=8, dy=0, color=Colors.PEN_YELLOW, dashed=True)),
    # --- SPACE ---
    TagRule(TagKind.HALF_SPACE, TagGroup.SPACE,
            ("肋部空间", "肋部", "half space", "half-space"),
            ZoneTemplate(width=14, height=18, color=Colors.PEN_PURPLE, dx=10, lane_y=30)),
    TagRule(TagKind.OVERLOAD, TagGroup.SPACE,
            ("局部过载", "过载", "overload"),
            ZoneTemplate(width=20, height=24, color=Colors.PEN_ORANGE)),
    TagRule(TagKind.POCKET, TagGroup.SPACE,
            ("接球口袋", "口袋", "pocket"),
            ZoneTemplate(width=10, height=12, color=Colors.PEN_PURPLE, dx=8)),
    TagRule(TagKind.WIDE_CHANNEL, TagGroup.SPACE,
            ("边路通道", "边路", "wide channel", "channel", "wing"),
            ZoneTemplate(width=24, height=16, color=Colors.PEN_PURPLE, dx=10, lane_y=10)),
    TagRule(TagKind.ZONE_14, TagGroup.SPACE,
            ("14区", "zone 14", "zone14"),
            ZoneTemplate(width=12, height=20, color=Colors.PEN_PURPLE, landmark="ZONE_14")),
    TagRule(TagKind.PENALTY_BOX, TagGroup.SPACE,
            ("禁区", "box", "penalty box"),
            ZoneTemplate(width=15, height=50, color=Colors.PEN_PURPLE, landmark="PA")),
    TagRule(TagKind.SPACE, TagGroup.SPACE,
            ("区域", "空间", "space", "zone"),
            ZoneTemplate(width=15, height=15, color=Colors.PEN_PURPLE)),
)


def normalize_tag(tag: str) -> str:
    return " ".join(tag.strip().lower().split())


def _build_alias_index(rules: Iterable[TagRule]) -> Dict[str, TagRule]:
    index: Dict[str, TagRule] = {}
    for rule in rules:
        for alias in rule.aliases:
            # First rule to claim an alias keeps it
            index.setdefault(normalize_tag(alias), rule)
    return index


_ALIAS_INDEX = _build_alias_index(RULES)
RULES_BY_KIND: Dict[TagKind, TagRule] = {rule.kind: rule for rule in RULES}


def resolve_tag(tag: str) -> Optional[TagRule]:
    """Tag string -> rule, or None if the tag is not in the taxonomy."""
    return _ALIAS_INDEX.get(normalize_tag(tag))


# ==========================================
# 3. Inference
# ==========================================

def annotation_id(player_id: str, kind: TagKind) -> str:
    return f"{player_id}:{kind.value}"


def _build_line(player: Player, rule: TagRule, template: LineTemplate) -> TacticalLine:
    direction = player.team.direction
    end = Point(clamp_pct(player.x + template.dx * direction), clamp_pct(player.y + template.dy))
    return TacticalLine(
        id=annotation_id(player.id, rule.kind),
        points=(Point(player.x, player.y), end),
        color=template.color,
        dashed=template.dashed,
        owner_id=player.id,
    )


def _landmark_center(name: str, team: Team) -> Point:
    # Landmark on the side the team attacks: Red -> right, Blue -> left
    side = "R" if team is Team.RED else "L"
    if name == "PA":
        tl, br = LANDMARKS[f"{side}_PA_TL"], LANDMARKS[f"{side}_PA_BR"]
        return Point((tl.x + br.x) / 2, (tl.y + br.y) / 2)
    return LANDMARKS[f"{side}_{name}"]


def _build_zone(player: Player, rule: TagRule, template: ZoneTemplate) -> TacticalZone:
    if template.landmark is not None:
        center = _landmark_center(template.landmark, player.team)
    else:
        cx = player.x + template.dx * player.team.direction
        if template.lane_y is not None:
            cy = template.lane_y if player.y < 50 else 100 - template.lane_y
        else:
            cy = player.y + template.dy
        center = Point(cx, cy)

    return TacticalZone(
        id=annotation_id(player.id, rule.kind),
        x=clamp_pct(center.x),
        y=clamp_pct(center.y),
        width=template.width,
        height=template.height,
        color=template.color,
        owner_id=player.id,
    )


def apply_tag(player: Player, tag: str) -> Annotation:
    """
    Infer the annotation a tag implies for ``player``.
    Unknown tags give an empty Annotation (the tag itself is still kept
    on the player by the caller).
    """
    rule = resolve_tag(tag)
    if rule is None:
        return Annotation()
    if isinstance(rule.template, LineTemplate):
        return Annotation(line=_build_line(player, rule, rule.template))
    return Annotation(zone=_build_zone(player, rule, rule.template))


def tag_status_color(tags: Iterable[str]) -> Optional[str]:
    """
    Colour of the status dot on a tagged player: the earliest rule group
    any of its tags belongs to. No tags -> None; no matching tag -> neon green.
    """
    tags = list(tags)
    if not tags:
        return None
    order: List[TagGroup] = list(TagGroup)
    groups = [rule.group for rule in (resolve_tag(t) for t in tags) if rule is not None]
    if not groups:
        return DEFAULT_STATUS_COLOR
    return GROUP_COLORS[min(groups, key=order.index)]


def parse_category(value: str) -> TagCategory:
    """'spatial' -> TagCategory.SPATIAL; raises ValueError on unknown names."""
    try:
        return TagCategory(value.strip().lower())
    except ValueError:
        raise ValueError(f"❌ Unknown tag category '{value}'. Choose from: "
                         f"{', '.join(c.value for c in TagCategory)}") from None
