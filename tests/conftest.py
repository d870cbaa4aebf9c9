"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import logging
from typing import Callable, Iterator
from unittest.mock import Mock

import pytest

from src.core.models import Player
from src.core.shared_types import GamePiece
from src.services.game_area import TicTacToeGameArea
from src.tictactoe.game import TicTacToeGame
from src.tictactoe.move import TicTacToeMove

Cell = tuple[int, int]


@pytest.fixture
def alice() -> Player:
    return Player(id="player-alice", user_name="Alice")


@pytest.fixture
def bob() -> Player:
    return Player(id="player-bob", user_name="Bob")


@pytest.fixture
def carol() -> Player:
    return Player(id="player-carol", user_name="Carol")


@pytest.fixture
def game() -> TicTacToeGame:
    return TicTacToeGame()


@pytest.fixture
def game_in_progress(game: TicTacToeGame, alice: Player, bob: Player) -> TicTacToeGame:
    """Alice joined first (X), Bob second (O)."""
    game.join(alice)
    game.join(bob)
    return game


@pytest.fixture
def play_cells() -> Callable[[TicTacToeGame, list[Cell]], None]:
    """Call the inner function with a game in progress and the cells to play, X and O alternating (X first)."""

    def _play(game: TicTacToeGame, cells: list[Cell]) -> None:
        x, o = game.state.x, game.state.o
        for idx, (row, col) in enumerate(cells):
            mover = x if idx % 2 == 0 else o
            assert mover is not None
            game.apply_move(mover, TicTacToeMove(GamePiece.X, row, col))

    return _play


@pytest.fixture
def area() -> TicTacToeGameArea:
    return TicTacToeGameArea("test-area")


@pytest.fixture
def listener(area: TicTacToeGameArea) -> Mock:
    """Listener registered on the area, records every change notification."""
    mock = Mock()
    area.add_listener(mock)
    return mock


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """configure_logging replaces the root handlers, put the original ones back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        yield
    finally:
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)
