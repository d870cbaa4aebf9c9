"""Command (request) envelopes and Response models"""

from typing import Annotated, Any, Literal, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from src.core.exceptions import InvalidCommandError, InvalidRequestError
from src.core.models import GameAreaModel, GameModel, GameResult
from src.core.shared_types import CommandType, GameStatus
from src.tictactoe.move import BOARD_SIZE

PlayerID = str


# --- REQUEST MODELS ---
class MovePayload(BaseModel):
    row: int
    col: int

    @field_validator(*["row", "col"])
    @classmethod
    def validate_index(cls, value: int) -> int:
        if not 0 <= value < BOARD_SIZE:
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a row/column index. Must be between 0 and {BOARD_SIZE - 1}."
            )
        return value


class JoinGameCommand(BaseModel):
    type: Literal["JoinGame"] = "JoinGame"


class LeaveGameCommand(BaseModel):
    type: Literal["LeaveGame"] = "LeaveGame"
    game_id: UUID


class GameMoveCommand(BaseModel):
    type: Literal["GameMove"] = "GameMove"
    game_id: UUID
    move: MovePayload


GameCommand = Annotated[
    Union[JoinGameCommand, LeaveGameCommand, GameMoveCommand],
    Field(discriminator="type"),
]
_command_adapter = TypeAdapter(GameCommand)


def parse_command(payload: Any) -> GameCommand:
    """
    Turn a decoded wire payload (dict) into one of the command models.
    ----
    Unknown command types are an InvalidCommandError, a known type with a malformed body an InvalidRequestError.
    """
    if not isinstance(payload, dict) or payload.get("type") not in tuple(CommandType):
        raise InvalidCommandError()
    try:
        return _command_adapter.validate_python(payload)
    except ValidationError as err:
        raise InvalidRequestError(
            f"Malformed {payload['type']} command: {err.error_count()} validation error(s)."
        ) from err


# --- RESPONSE MODELS ---
class MoveResponse(BaseModel):
    piece: str
    row: int
    col: int


class GameStateResponse(BaseModel):
    game_id: UUID
    status: GameStatus
    x: Optional[PlayerID]
    o: Optional[PlayerID]
    players: list[PlayerID]
    moves: list[MoveResponse]
    winner: Optional[PlayerID]

    @classmethod
    def from_model(cls, model: GameModel) -> "GameStateResponse":
        return cls(
            game_id=model.game_id,
            status=GameStatus(model.status),
            x=model.x,
            o=model.o,
            players=model.players,
            moves=[
                MoveResponse(piece=move.piece, row=move.row, col=move.col)
                for move in model.moves
            ],
            winner=model.winner,
        )


class GameResultResponse(BaseModel):
    game_id: UUID
    x: Optional[PlayerID]
    o: Optional[PlayerID]
    winner: Optional[PlayerID]
    outcome: Literal["win", "tie"]
    scores: dict[PlayerID, int]

    @classmethod
    def from_result(cls, result: GameResult) -> "GameResultResponse":
        return cls(
            game_id=result.game_id,
            x=result.x,
            o=result.o,
            winner=result.winner,
            outcome=result.outcome,
            scores=dict(result.scores),
        )


class GameAreaResponse(BaseModel):
    id: str
    game: Optional[GameStateResponse]
    history: list[GameResultResponse]

    @classmethod
    def from_model(cls, model: GameAreaModel) -> "GameAreaResponse":
        return cls(
            id=model.id,
            game=GameStateResponse.from_model(model.game) if model.game else None,
            history=[GameResultResponse.from_result(result) for result in model.history],
        )
