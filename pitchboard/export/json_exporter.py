"""
Project: Pitchboard
File Created: 2026-03-10 18:37:42
Author: Xingnan Zhu
File Name: json_exporter.py
Description:
    Exports the board and its timeline snapshots to a JSON file.
    The structure includes metadata, the current board and a list of
    logic nodes, each with its own players / lines / zones.
"""

import json
import os
from typing import Any, Dict, List, Optional

from pitchboard.core.types import Ball, Board, LogicNode, Player, TacticalLine, TacticalZone
from pitchboard.engine.timeline import format_timestamp
from pitchboard.export.base import BaseExporter


def player_to_dict(p: Player) -> Dict[str, Any]:
    return {
        "id": p.id,
        "team": p.team.value,
        "number": p.number,
        "role": p.role,
        "x": round(p.x, 2),
        "y": round(p.y, 2),
        "tags": list(p.tags),
    }


def line_to_dict(line: TacticalLine) -> Dict[str, Any]:
    data = {
        "id": line.id,
        "points": [{"x": round(pt.x, 2), "y": round(pt.y, 2)} for pt in line.points],
        "color": line.color,
        "dashed": line.dashed,
    }
    if line.owner_id is not None:
        data["owner_id"] = line.owner_id
    return data


def zone_to_dict(zone: TacticalZone) -> Dict[str, Any]:
    data = {
        "id": zone.id,
        "x": round(zone.x, 2),
        "y": round(zone.y, 2),
        "width": zone.width,
        "height": zone.height,
        "color": zone.color,
    }
    if zone.owner_id is not None:
        data["owner_id"] = zone.owner_id
    return data


def ball_to_dict(ball: Optional[Ball]) -> Optional[Dict[str, float]]:
    if ball is None:
        return None
    return {"x": round(ball.x, 2), "y": round(ball.y, 2)}


def board_to_dict(board: Board) -> Dict[str, Any]:
    return {
        "players": [player_to_dict(p) for p in board.players],
        "lines": [line_to_dict(l) for l in board.lines],
        "zones": [zone_to_dict(z) for z in board.zones],
        "ball": ball_to_dict(board.ball),
    }


class JsonExporter(BaseExporter):
    def __init__(self, output_path: str):
        self.output_path = output_path
        self.board: Optional[Board] = None
        self.nodes_data: List[Dict[str, Any]] = []

    def set_board(self, board: Board):
        self.board = board

    def add_node(self, node: LogicNode):
        """
        Convert a LogicNode to a dictionary and append to buffer.
        """
        node_dict = {
            "id": node.id,
            "label": node.label,
            "timestamp": node.timestamp,
            "clock": format_timestamp(node.timestamp),
            "players": [player_to_dict(p) for p in node.board_state],
            "ball": ball_to_dict(node.ball_state),
        }
        # Player-only captures carry no annotation state
        if node.line_state is not None:
            node_dict["lines"] = [line_to_dict(l) for l in node.line_state]
        if node.zone_state is not None:
            node_dict["zones"] = [zone_to_dict(z) for z in node.zone_state]

        self.nodes_data.append(node_dict)

    def save(self) -> str:
        """
        Write the buffered data to a JSON file.
        """
        output_data = {
            "meta": {
                "version": "1.0",
                "board_size": [100, 100],
                "total_nodes": len(self.nodes_data),
            },
            "board": board_to_dict(self.board) if self.board is not None else None,
            "nodes": self.nodes_data,
        }

        directory = os.path.dirname(self.output_path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.output_path, 'w', encoding='utf-8') as f:
                json.dump(output_data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            print(f"❌ Failed to export JSON: {e}")
            raise
        print(f"✅ Data exported to {self.output_path}")
        return self.output_path
