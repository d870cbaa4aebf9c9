from uuid import UUID, uuid4

import pytest

from src.api.models import (
    GameAreaResponse,
    GameMoveCommand,
    GameStateResponse,
    JoinGameCommand,
    LeaveGameCommand,
    MovePayload,
    parse_command,
)
from src.core.exceptions import InvalidCommandError, InvalidRequestError
from src.core.models import GameAreaModel, GameModel, GameResult, MoveModel
from src.core.shared_types import GameStatus


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - MovePayload --
def test_valid_indices() -> None:
    payload = MovePayload(row=0, col=2)
    assert (payload.row, payload.col) == (0, 2)


@pytest.mark.parametrize(
    "row, col",
    [
        (-1, 0),  # above the board
        (0, 3),  # right of the board
        (3, 1),  # below the board
    ],
)
def test_invalid_indices(row: int, col: int) -> None:
    """Only 0, 1, and 2 name a row / column."""
    with pytest.raises(InvalidRequestError):
        _ = MovePayload(row=row, col=col)


# -- parse_command --
def test_parse_join() -> None:
    command = parse_command({"type": "JoinGame"})
    assert isinstance(command, JoinGameCommand)


def test_parse_leave(mock_id: UUID) -> None:
    command = parse_command({"type": "LeaveGame", "game_id": str(mock_id)})
    assert isinstance(command, LeaveGameCommand)
    assert command.game_id == mock_id


def test_parse_move(mock_id: UUID) -> None:
    command = parse_command(
        {"type": "GameMove", "game_id": str(mock_id), "move": {"row": 1, "col": 2}}
    )
    assert isinstance(command, GameMoveCommand)
    assert command.game_id == mock_id
    assert (command.move.row, command.move.col) == (1, 2)


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "ViewingAreaUpdate"},
        {"type": "joingame"},  # case matters
        {"type": ["JoinGame"]},
        {"move": {"row": 1, "col": 1}},
        "JoinGame",
        None,
    ],
)
def test_parse_unknown_command(payload: object) -> None:
    with pytest.raises(InvalidCommandError):
        parse_command(payload)


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "LeaveGame"},  # missing game id
        {"type": "LeaveGame", "game_id": "not-a-uuid"},
        {"type": "GameMove", "game_id": "e5a4a7c0-8a4f-4c9b-9d27-0a8f4f6b6c11"},  # missing move
        {"type": "GameMove", "game_id": "e5a4a7c0-8a4f-4c9b-9d27-0a8f4f6b6c11", "move": {"row": 1}},
    ],
)
def test_parse_malformed_command(payload: dict) -> None:
    with pytest.raises(InvalidRequestError):
        parse_command(payload)


def test_parse_off_board_move(mock_id: UUID) -> None:
    with pytest.raises(InvalidRequestError):
        parse_command({"type": "GameMove", "game_id": str(mock_id), "move": {"row": 1, "col": 9}})


# -- Responses --
def test_area_response_from_model(mock_id: UUID) -> None:
    model = GameAreaModel(
        id="area-1",
        game=GameModel(
            game_id=mock_id,
            status="OVER",
            x="p1",
            o="p2",
            players=["p1"],
            moves=[MoveModel(piece="X", row=0, col=0)],
            winner="p1",
        ),
        history=[GameResult(game_id=mock_id, x="p1", o="p2", winner="p1", scores={"p1": 1, "p2": 0})],
    )
    response = GameAreaResponse.from_model(model)

    assert response.id == "area-1"
    assert isinstance(response.game, GameStateResponse)
    assert response.game.status == GameStatus.OVER
    assert response.game.winner == "p1"
    assert response.history[0].outcome == "win"
    assert response.history[0].scores == {"p1": 1, "p2": 0}

    # field names and enum values are the wire contract
    dumped = response.model_dump(mode="json")
    assert dumped["game"]["status"] == "OVER"
    assert dumped["game"]["moves"] == [{"piece": "X", "row": 0, "col": 0}]
    assert dumped["game"]["game_id"] == str(mock_id)


def test_area_response_without_game() -> None:
    response = GameAreaResponse.from_model(GameAreaModel(id="area-2", game=None, history=[]))
    assert response.game is None
    assert response.history == []
