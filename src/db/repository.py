"""Protocol repository for finished games (in-memory for now, other backends can implement the same methods)"""

from typing import Protocol

from src.core.models import GameResult


class HistoryRepository(Protocol):
    """Record keeping of finished games"""

    def add_result(self, result: GameResult) -> None:
        """Append the outcome of one finished game."""
        ...

    def list_results(self) -> list[GameResult]:
        """All recorded outcomes, oldest first."""
        ...
