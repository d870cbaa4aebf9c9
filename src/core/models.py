"""
Boundary data model(s) for one game area.

Plain dataclasses handed from the game engine and the area to the wire responses and the history repository,
so neither side depends on the other's internal types.
"""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

# Type aliases to make the models easier to read
PlayerID = str


@dataclass(frozen=True)
class Player:
    """A connected player as handed to us by the session layer."""

    id: PlayerID
    user_name: str = ""


@dataclass(frozen=True)
class MoveModel:
    piece: str
    row: int
    col: int


@dataclass
class GameModel:
    """Transport-safe representation of a single Tic-Tac-Toe game."""

    game_id: UUID
    status: str
    x: Optional[PlayerID]
    o: Optional[PlayerID]
    players: list[PlayerID]
    moves: list[MoveModel]
    winner: Optional[PlayerID]


@dataclass(frozen=True)
class GameResult:
    """One finished game, as recorded in the area's history."""

    game_id: UUID
    x: Optional[PlayerID]
    o: Optional[PlayerID]
    winner: Optional[PlayerID]
    scores: dict[PlayerID, int] = field(default_factory=dict)

    @property
    def outcome(self) -> str:
        return "tie" if self.winner is None else "win"


@dataclass
class GameAreaModel:
    id: str
    game: Optional[GameModel]
    history: list[GameResult]
