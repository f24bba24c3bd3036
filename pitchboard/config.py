"""
Project: Pitchboard
File Created: 2026-03-02 11:56:08
Author: Xingnan Zhu
File Name: config.py
Description: Central configuration file for colors, interaction thresholds and display toggles.
"""


from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ToolMode(Enum):
    MOVE = "move"     # Drag players / ball, click to select
    DRAW = "draw"     # Freehand tactical lines
    ERASE = "erase"   # Click a line to delete it


@dataclass
class Colors:
    """
    Centralized color palette for the application.
    Entity colors are (R, G, B) tuples; pen colors are hex strings
    because they travel with TacticalLine / TacticalZone records.
    """
    # Entities
    TEAM_RED: Tuple[int, int, int] = (220, 38, 38)     # #DC2626
    TEAM_BLUE: Tuple[int, int, int] = (37, 99, 235)    # #2563EB
    BALL: Tuple[int, int, int] = (255, 255, 255)
    SELECTED: Tuple[int, int, int] = (255, 255, 255)
    TAGGED_RING: Tuple[int, int, int] = (250, 204, 21) # Yellow #FACC15

    # Pitch
    PITCH: Tuple[int, int, int] = (10, 32, 10)          # #0A200A
    PITCH_BORDER: Tuple[int, int, int] = (0, 255, 65)   # Neon #00FF41
    MARKING: Tuple[int, int, int] = (255, 255, 255)
    OFFSIDE: Tuple[int, int, int] = (255, 255, 255)
    TEXT: Tuple[int, int, int] = (255, 255, 255)

    # Pens (lines / zones / status dots)
    PEN_RED: str = "#ef4444"
    PEN_ORANGE: str = "#f97316"
    PEN_BLUE: str = "#3b82f6"
    PEN_YELLOW: str = "#eab308"
    PEN_AMBER: str = "#fbbf24"
    PEN_GREEN: str = "#22c55e"
    PEN_NEON: str = "#00ff41"
    PEN_PURPLE: str = "#a855f7"

    @staticmethod
    def to_bgr(rgb: Tuple[int, int, int]) -> Tuple[int, int, int]:
        """Convert RGB to BGR for OpenCV"""
        return (rgb[2], rgb[1], rgb[0])

    @staticmethod
    def hex_to_rgb(value: str) -> Tuple[int, int, int]:
        """'#ef4444' -> (239, 68, 68). Unparseable input falls back to white."""
        text = value.strip().lstrip("#")
        if len(text) == 3:
            text = "".join(ch * 2 for ch in text)
        if len(text) < 6:
            return (255, 255, 255)
        try:
            return int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16)
        except ValueError:
            return (255, 255, 255)


# Arrowhead marker classes for drawn lines (red / blue / yellow / green)
COLOR_CLASSES = {
    Colors.PEN_RED: "red",
    Colors.PEN_BLUE: "blue",
    Colors.PEN_AMBER: "yellow",
    Colors.PEN_YELLOW: "yellow",
    Colors.PEN_GREEN: "green",
}


def color_class(color: str) -> Optional[str]:
    """Arrowhead class for a pen color; named colors ('red', 'darkblue'...) match by substring."""
    key = color.strip().lower()
    if key in COLOR_CLASSES:
        return COLOR_CLASSES[key]
    for name in ("red", "blue", "yellow", "green"):
        if name in key:
            return name
    return None


@dataclass
class Config:
    # === Interaction Thresholds ===
    DRAG_SELECT_THRESHOLD_PX: float = 5.0   # Below this displacement a press is a click (select)
    MIN_STROKE_POINTS: int = 3              # Strokes with fewer points are discarded
    ERASE_HIT_WIDTH: float = 2.5            # Board % around a line that counts as a hit

    # === Board Defaults ===
    BALL_START: Tuple[float, float] = (50.0, 50.0)
    DEFAULT_LINE_COLOR: str = Colors.PEN_AMBER
    DEFAULT_DASHED: bool = False
    DEFAULT_MODE: ToolMode = ToolMode.MOVE
    DEFAULT_FORMATION: str = "4-4-2 (Flat)"

    # === Visualization Settings (Default State) ===
    SHOW_OFFSIDE_LINES: bool = True     # Master switch
    SHOW_RED_OFFSIDE: bool = True       # Line set by the team defending the left goal
    SHOW_BLUE_OFFSIDE: bool = True      # Line set by the team defending the right goal
    SHOW_TAG_STATUS: bool = True

    # === Canvas / Window ===
    CANVAS_WIDTH: int = 1280
    CANVAS_HEIGHT: int = 720
    WINDOW_NAME: str = "Pitchboard"

    # === Activity Feed ===
    LOG_FEED_LIMIT: int = 50

    # === Export ===
    OUTPUT_JSON: str = "assets/output/board.json"
    OUTPUT_IMAGE: str = "assets/output/board.png"
