"""
Project: Pitchboard
File Created: 2026-03-09
Author: Xingnan Zhu
File Name: svg.py
Description:
    Vector rendering of the drawing layer in a 0-100 viewBox, the same
    space the board stores coordinates in. Lines become <path> elements
    built with path_string(), so strokes are reproduced segment for
    segment.
"""

from typing import List, Optional
from xml.sax.saxutils import quoteattr

from pitchboard.config import Colors, color_class
from pitchboard.core.geometry import path_string
from pitchboard.core.types import Board, Team
from pitchboard.tactics.offside import compute_offside_lines

ARROW_COLORS = {
    "red": Colors.PEN_RED,
    "blue": Colors.PEN_BLUE,
    "yellow": Colors.PEN_AMBER,
    "green": Colors.PEN_GREEN,
}


def _hex(rgb) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def render_svg(board: Board, show_offside_lines: bool = True,
               selected_player_id: Optional[str] = None) -> str:
    out: List[str] = [
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100" preserveAspectRatio="none">',
        "<defs>",
    ]
    for name, color in ARROW_COLORS.items():
        out.append(
            f'<marker id="arrowhead-{name}" markerWidth="6" markerHeight="6" refX="5" refY="3" orient="auto">'
            f'<polygon points="0 0, 6 3, 0 6" fill="{color}"/></marker>'
        )
    out.append("</defs>")
    out.append(f'<rect x="0" y="0" width="100" height="100" fill="{_hex(Colors.PITCH)}"/>')

    for zone in board.zones:
        out.append(
            f'<rect x="{zone.x - zone.width / 2:g}" y="{zone.y - zone.height / 2:g}" '
            f'width="{zone.width:g}" height="{zone.height:g}" fill={quoteattr(zone.color)} '
            f'fill-opacity="0.3" rx="2" ry="2"/>'
        )

    if show_offside_lines:
        lines = compute_offside_lines(board.players, board.ball)
        for x in (lines.left, lines.right):
            if x is not None:
                out.append(
                    f'<line x1="{x:g}" y1="0" x2="{x:g}" y2="100" stroke="white" '
                    f'stroke-width="0.3" stroke-dasharray="2,2" opacity="0.6"/>'
                )

    for line in board.lines:
        marker = color_class(line.color)
        attrs = [
            f'd="{path_string(line.points)}"',
            f"stroke={quoteattr(line.color)}",
            'fill="none"',
            'vector-effect="non-scaling-stroke"',
            'stroke-width="2"',
        ]
        if line.dashed:
            attrs.append('stroke-dasharray="2,2"')
        if marker is not None:
            attrs.append(f'marker-end="url(#arrowhead-{marker})"')
        out.append(f'<path id={quoteattr(line.id)} {" ".join(attrs)}/>')

    if board.ball is not None:
        out.append(f'<circle cx="{board.ball.x:g}" cy="{board.ball.y:g}" r="0.8" fill="white" stroke="black" stroke-width="0.1"/>')

    for p in board.players:
        fill = _hex(Colors.TEAM_RED if p.team is Team.RED else Colors.TEAM_BLUE)
        stroke = "white" if p.id == selected_player_id else _hex(Colors.TAGGED_RING) if p.tags else "none"
        out.append(
            f'<circle id={quoteattr(p.id)} cx="{p.x:g}" cy="{p.y:g}" r="1.5" fill="{fill}" '
            f'stroke="{stroke}" stroke-width="0.3"/>'
        )

    out.append("</svg>")
    return "\n".join(out)
