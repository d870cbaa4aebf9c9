"""
A single move on the board

(placed in its own module as both the game state and the engine need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from src.core.exceptions import InvalidMoveError
from src.core.shared_types import GamePiece

# Tic-Tac-Toe is always played on 3x3. Rows and columns are indexed 0 - 2
BOARD_SIZE = 3


class BoardPosition(Protocol):
    """Anything that names a cell: a recorded move, or the move payload of a command."""

    row: int
    col: int


@dataclass(frozen=True)
class TicTacToeMove:
    piece: GamePiece
    row: int
    col: int

    def __post_init__(self) -> None:
        if not self.is_within_bounds():
            raise InvalidMoveError(
                f"Position ({self.row}, {self.col}) is not on the board."
            )

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)

    def same_position(self, other: TicTacToeMove) -> bool:
        return self.row == other.row and self.col == other.col

    def on_main_diagonal(self) -> bool:
        return self.row == self.col

    def on_anti_diagonal(self) -> bool:
        return self.row + self.col == BOARD_SIZE - 1
