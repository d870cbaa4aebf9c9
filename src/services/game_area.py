"""Routing of player commands into the Tic-Tac-Toe game hosted by one area (and the notifications/history that follow)."""

import logging
import threading
from typing import Any, Callable, Optional

from src.api.models import GameAreaResponse, parse_command
from src.core.exceptions import (
    GameError,
    GameNotInProgressError,
    InvalidCommandError,
    PlayerNotInGameError,
    UnexpectedGameAreaError,
)
from src.core.models import GameAreaModel, GameResult, Player
from src.core.shared_types import CommandType, GameStatus
from src.db.memory_repository import InMemoryHistoryRepository
from src.db.repository import HistoryRepository
from src.tictactoe.game import TicTacToeGame
from src.tictactoe.game_state import GameState

logger = logging.getLogger(__name__)

AreaListener = Callable[[], None]


class TicTacToeGameArea:
    """
    Hosts at most one TicTacToeGame at a time.
    ----

    * JoinGame creates a new game when there is none, or the previous one is over
    * a command that ends the game records a GameResult
    * every successful command notifies the listeners exactly once
    * failed commands re-raise the original error, record nothing and notify nobody
    """

    def __init__(
        self,
        area_id: str,
        history: Optional[HistoryRepository] = None,
        game_factory: Callable[[], TicTacToeGame] = TicTacToeGame,
    ) -> None:
        self.id = area_id
        self._history: HistoryRepository = (
            history if history is not None else InMemoryHistoryRepository()
        )
        self._game_factory = game_factory
        self._game: Optional[TicTacToeGame] = None
        self._listeners: list[AreaListener] = []
        # check-then-act on the current game must not interleave between players
        self._lock = threading.RLock()
        self._handlers: dict[CommandType, Callable[[Any, Player], None]] = {
            CommandType.JOIN_GAME: self._join_game,
            CommandType.LEAVE_GAME: self._leave_game,
            CommandType.GAME_MOVE: self._game_move,
        }

    # -- READ-ONLY VIEWS ---
    @property
    def game(self) -> Optional[TicTacToeGame]:
        return self._game

    @property
    def game_state(self) -> Optional[GameState]:
        game = self._game
        return game.state if game else None

    @property
    def history(self) -> tuple[GameResult, ...]:
        return tuple(self._history.list_results())

    def to_model(self) -> GameAreaModel:
        with self._lock:
            return GameAreaModel(
                id=self.id,
                game=self._game.to_model() if self._game else None,
                history=list(self.history),
            )

    def to_response(self) -> GameAreaResponse:
        return GameAreaResponse.from_model(self.to_model())

    # -- LISTENERS ---
    def add_listener(self, listener: AreaListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: AreaListener) -> None:
        self._listeners.remove(listener)

    # -- COMMANDS ---
    def handle_payload(self, payload: Any, player: Player) -> None:
        """Parse a wire payload (decoded JSON) into a command and handle it."""
        self.handle_command(parse_command(payload), player)

    def handle_command(self, command: Any, player: Player) -> None:
        """
        Handle a command from a player in this area.
        ----

        Supported: JoinGame, LeaveGame, GameMove. Anything else raises InvalidCommandError.
        Rule violations propagate as the GameError subclass the game raised.
        """
        with self._lock:
            kind = getattr(command, "type", None)
            handler = self._handlers.get(kind) if isinstance(kind, str) else None
            if handler is None:
                logger.info(
                    "Area %s rejected command from %s: %s",
                    self.id,
                    player.id,
                    InvalidCommandError.message,
                )
                raise InvalidCommandError()

            status_before = self._current_status()
            try:
                handler(command, player)
            except GameError as err:
                logger.info(
                    "Area %s rejected %s from %s: %s", self.id, command.type, player.id, err
                )
                raise
            except Exception as err:
                logger.exception(
                    "Area %s failed handling %s from %s", self.id, command.type, player.id
                )
                raise UnexpectedGameAreaError() from err

            logger.info("Area %s accepted %s from %s", self.id, command.type, player.id)
            if status_before != GameStatus.OVER and self._current_status() == GameStatus.OVER:
                self._record_result()
            self._emit_area_changed()

    # -- Internal helpers --
    def _join_game(self, command: Any, player: Player) -> None:
        if self._game is None or self._game.state.status == GameStatus.OVER:
            self._game = self._game_factory()
            logger.info("Area %s started game %s", self.id, self._game.id)
        self._game.join(player)

    def _leave_game(self, command: Any, player: Player) -> None:
        if self._game is None or self._game.id != command.game_id:
            raise PlayerNotInGameError()
        was_over = self._game.state.status == GameStatus.OVER
        self._game.leave(player)
        if was_over and not self._game.players:
            # finished and abandoned: the next JoinGame gets a new game with a new id
            logger.info("Area %s retired game %s", self.id, self._game.id)
            self._game = None

    def _game_move(self, command: Any, player: Player) -> None:
        if self._game is None:
            raise GameNotInProgressError()
        if self._game.id != command.game_id:
            raise PlayerNotInGameError()
        if self._game.state.status != GameStatus.IN_PROGRESS:
            raise GameNotInProgressError()
        self._game.apply_move(player.id, command.move)

    def _current_status(self) -> Optional[GameStatus]:
        return self._game.state.status if self._game else None

    def _record_result(self) -> None:
        """The current game just ended: store who played and who (if anyone) won."""
        assert self._game is not None

        state = self._game.state
        scores = {
            player_id: int(player_id == state.winner)
            for player_id in (state.x, state.o)
            if player_id is not None
        }
        result = GameResult(
            game_id=self._game.id,
            x=state.x,
            o=state.o,
            winner=state.winner,
            scores=scores,
        )
        self._history.add_result(result)
        logger.info(
            "Area %s recorded game %s: %s (winner=%s)",
            self.id,
            result.game_id,
            result.outcome,
            result.winner,
        )

    def _emit_area_changed(self) -> None:
        for listener in list(self._listeners):
            listener()
