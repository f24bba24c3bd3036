"""
Project: Pitchboard
File Created: 2026-03-10 18:37:28
Author: Xingnan Zhu
File Name: base.py
Description:
    Defines the abstract base class for board exporters.
    Ensures a consistent interface for exporting the live board and its
    timeline snapshots to various formats.
"""

from abc import ABC, abstractmethod

from pitchboard.core.types import Board, LogicNode


class BaseExporter(ABC):
    """
    Abstract base class for board export.
    """

    @abstractmethod
    def set_board(self, board: Board):
        """
        Record the board state that is current at export time.
        """
        pass

    @abstractmethod
    def add_node(self, node: LogicNode):
        """
        Buffer one timeline snapshot for export.
        """
        pass

    @abstractmethod
    def save(self) -> str:
        """
        Write the buffered data to the output destination and return its path.
        """
        pass
