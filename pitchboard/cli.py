"""
Project: Pitchboard
File Created: 2026-03-11
Author: Xingnan Zhu
File Name: cli.py
Description:
    CLI entry point for the Pitchboard package.
    Installed as the `pitchboard` console command via pyproject.toml.
"""

from __future__ import annotations

import argparse
import os
from typing import List, Optional


def build_parser() -> argparse.ArgumentParser:
    from pitchboard.tactics.formation import FORMATION_OPTIONS

    parser = argparse.ArgumentParser(prog="pitchboard", description="Interactive tactical football board")
    parser.add_argument("--formation-red", choices=FORMATION_OPTIONS, default=None,
                        help="Formation applied to Red at start-up")
    parser.add_argument("--formation-blue", choices=FORMATION_OPTIONS, default=None,
                        help="Formation applied to Blue at start-up")
    parser.add_argument("--output", default=None,
                        help="JSON export path (headless: PNG path)")
    parser.add_argument("--no-offside", action="store_true", help="Hide offside lines")
    parser.add_argument("--headless", action="store_true",
                        help="Render the board to a PNG and exit without opening a window")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``pitchboard`` console command."""
    from pitchboard.config import Config
    from pitchboard.core.types import Team
    from pitchboard.engine.system import TacticalBoard

    args = build_parser().parse_args(argv)

    cfg = Config()
    if args.no_offside:
        cfg.SHOW_OFFSIDE_LINES = False
    if args.output and not args.headless:
        cfg.OUTPUT_JSON = args.output

    session = TacticalBoard(cfg)
    for team, name in ((Team.RED, args.formation_red), (Team.BLUE, args.formation_blue)):
        if name:
            session.apply_formation(team, name)
            print(f"🧩 {team.value.upper()} lined up in {name}")

    if args.headless:
        import cv2
        from pitchboard.visualization.board import BoardRenderer

        output = args.output or cfg.OUTPUT_IMAGE
        frame = BoardRenderer(cfg).draw(session.board, show_offside_lines=session.show_offside_lines)
        directory = os.path.dirname(output)
        if directory:
            os.makedirs(directory, exist_ok=True)
        if not cv2.imwrite(output, frame):
            print(f"❌ Could not write image: {output}")
            return 1
        print(f"✅ Board rendered to {output}")
        return 0

    from pitchboard.ui.board_window import BoardWindow

    print("🚀 Launching Pitchboard...")
    BoardWindow(session, cfg).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
