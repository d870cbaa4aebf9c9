"""
The TicTacToeGame is the entrypoint into the domain layer for the service layer.
It is responsible for enforcing all the rules of one game of Tic-Tac-Toe: who may join, whose turn it is, and when the game ends.
It knows nothing about commands, listeners or history; that is the game area's job.
"""

import logging
from dataclasses import replace
from typing import Optional
from uuid import UUID, uuid4

from src.core.exceptions import (
    BoardPositionNotEmptyError,
    GameFullError,
    GameNotInProgressError,
    MoveNotYourTurnError,
    PlayerAlreadyInGameError,
    PlayerNotInGameError,
)
from src.core.models import GameModel, MoveModel, Player, PlayerID
from src.core.shared_types import GameStatus
from src.tictactoe.game_state import GameState
from src.tictactoe.move import BOARD_SIZE, BoardPosition, TicTacToeMove

logger = logging.getLogger(__name__)

MAX_PLAYERS = 2
BOARD_CELLS = BOARD_SIZE * BOARD_SIZE


class TicTacToeGame:
    """Rules of Tic-Tac-Toe for exactly two players on a 3x3 board."""

    def __init__(self, game_id: Optional[UUID] = None) -> None:
        self.id: UUID = game_id or uuid4()
        self._state = GameState()

    # --- DOMAIN LAYER API CALLED BY SERVICE---

    @property
    def state(self) -> GameState:
        """Current snapshot. Safe to hand out: it is never mutated, only replaced."""
        return self._state

    @property
    def players(self) -> tuple[Player, ...]:
        return self._state.players

    def join(self, player: Player) -> None:
        """
        Add a player to the roster.
        ----

        * first player to join plays X, second plays O (fill order, not by request)
        * status switches to IN_PROGRESS once both slots are taken
        """
        state = self._state
        if state.has_player(player.id):
            raise PlayerAlreadyInGameError()
        if len(state.players) >= MAX_PLAYERS:
            raise GameFullError()

        if state.x is None:
            next_state = replace(state, x=player.id)
        elif state.o is None:
            next_state = replace(state, o=player.id)
        else:
            # both slots were handed out already (game finished by forfeit): nobody can take them over
            raise GameFullError()

        next_state = replace(next_state, players=state.players + (player,))
        if next_state.x is not None and next_state.o is not None:
            next_state = replace(next_state, status=GameStatus.IN_PROGRESS)

        self._commit(next_state)
        logger.debug("Player %s joined game %s", player.id, self.id)

    def leave(self, player: Player) -> None:
        """
        Remove a player from the roster.
        ----

        * one player left behind --> they win by forfeit (whatever the status was)
        * nobody left --> back to a fresh, empty game waiting for players
        """
        state = self._state
        if not state.has_player(player.id):
            raise PlayerNotInGameError()

        remaining = tuple(p for p in state.players if p.id != player.id)
        if len(remaining) == 1:
            next_state = replace(
                state,
                players=remaining,
                status=GameStatus.OVER,
                winner=remaining[0].id,
            )
        else:
            # NOTE a lone player leaving must not be declared the winner of a game that never started
            next_state = GameState()

        self._commit(next_state)
        logger.debug("Player %s left game %s", player.id, self.id)

    def apply_move(self, player_id: PlayerID, move: BoardPosition) -> None:
        """
        Attempt to make a move
        -----

        1. game must be in progress
        2. mover must be on the roster
        3. mover's piece (from their slot, never from the request) must be the piece to move
        4. target cell must be empty
        5. record the move, then check for a win or a full board
        """
        state = self._state
        if state.status != GameStatus.IN_PROGRESS:
            raise GameNotInProgressError()
        if not state.has_player(player_id):
            raise PlayerNotInGameError()

        piece = state.piece_of(player_id)
        if piece is None or piece != state.piece_to_move:
            raise MoveNotYourTurnError()

        played = TicTacToeMove(piece=piece, row=move.row, col=move.col)
        if state.is_occupied(played):
            raise BoardPositionNotEmptyError()

        next_state = replace(state, moves=state.moves + (played,))
        if self._is_winning_move(next_state.moves, played):
            next_state = replace(next_state, status=GameStatus.OVER, winner=player_id)
        elif len(next_state.moves) == BOARD_CELLS:
            next_state = replace(next_state, status=GameStatus.OVER, winner=None)

        self._commit(next_state)

    def to_model(self) -> GameModel:
        """Encode into a format the Service layer uses"""
        state = self._state
        return GameModel(
            game_id=self.id,
            status=state.status.value,
            x=state.x,
            o=state.o,
            players=list(state.player_ids),
            moves=[
                MoveModel(piece=move.piece.value, row=move.row, col=move.col)
                for move in state.moves
            ],
            winner=state.winner,
        )

    # -- PRIVATE HELPERS ---
    def _commit(self, next_state: GameState) -> None:
        """Swap in the fully computed snapshot in one assignment."""
        self._state = next_state

    def _is_winning_move(
        self, moves: tuple[TicTacToeMove, ...], last_move: TicTacToeMove
    ) -> bool:
        """
        Only lines through the cell just played can have been completed by it:
        its row, its column, and the diagonal(s) it lies on.
        """
        own = [move for move in moves if move.piece == last_move.piece]

        def _full(in_line) -> bool:
            return sum(1 for move in own if in_line(move)) == BOARD_SIZE

        if _full(lambda move: move.row == last_move.row):
            return True
        if _full(lambda move: move.col == last_move.col):
            return True
        if last_move.on_main_diagonal() and _full(TicTacToeMove.on_main_diagonal):
            return True
        if last_move.on_anti_diagonal() and _full(TicTacToeMove.on_anti_diagonal):
            return True
        return False

