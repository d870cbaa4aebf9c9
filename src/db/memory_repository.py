"""Implementation of HistoryRepository keeping results in a list"""

from src.core.models import GameResult


class InMemoryHistoryRepository:
    """Append-only, lives as long as the game area does."""

    def __init__(self) -> None:
        self._results: list[GameResult] = []

    def add_result(self, result: GameResult) -> None:
        self._results.append(result)

    def list_results(self) -> list[GameResult]:
        # copy so callers cannot rewrite history
        return list(self._results)

    def __len__(self) -> int:
        return len(self._results)
