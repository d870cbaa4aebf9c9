"""
Immutable snapshot of one game.

The engine never mutates a GameState: every transition builds a complete new snapshot and swaps it in.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.models import Player, PlayerID
from src.core.shared_types import GamePiece, GameStatus
from src.tictactoe.move import TicTacToeMove


@dataclass(frozen=True)
class GameState:
    status: GameStatus = GameStatus.WAITING_TO_START
    x: Optional[PlayerID] = None
    o: Optional[PlayerID] = None
    players: tuple[Player, ...] = ()
    moves: tuple[TicTacToeMove, ...] = ()
    winner: Optional[PlayerID] = None

    @property
    def player_ids(self) -> tuple[PlayerID, ...]:
        return tuple(player.id for player in self.players)

    def has_player(self, player_id: PlayerID) -> bool:
        return player_id in self.player_ids

    def piece_of(self, player_id: PlayerID) -> Optional[GamePiece]:
        """Which piece a player plays with, derived from the slot they were assigned on join."""
        if player_id == self.x:
            return GamePiece.X
        if player_id == self.o:
            return GamePiece.O
        return None

    @property
    def piece_to_move(self) -> GamePiece:
        # X always opens, then the two alternate
        return GamePiece.X if len(self.moves) % 2 == 0 else GamePiece.O

    def is_occupied(self, move: TicTacToeMove) -> bool:
        return any(move.same_position(played) for played in self.moves)
