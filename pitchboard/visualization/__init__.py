"""
Pitchboard visualization layer.

    from pitchboard.visualization import BoardRenderer
    from pitchboard.visualization.svg import render_svg
"""
from pitchboard.visualization.board import BoardRenderer

__all__ = ["BoardRenderer"]
