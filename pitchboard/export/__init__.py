"""
Project: Pitchboard
File Created: 2026-03-10 18:37:22
Author: Xingnan Zhu
File Name: __init__.py
Description: Export module — JSON exporter for the board and its timeline.
"""

from pitchboard.export.json_exporter import JsonExporter

__all__ = ["JsonExporter"]
