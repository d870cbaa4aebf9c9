"""
Type definitions used across layers
"""

from enum import StrEnum


class GameStatus(StrEnum):
    WAITING_TO_START = "WAITING_TO_START"
    IN_PROGRESS = "IN_PROGRESS"
    OVER = "OVER"


class GamePiece(StrEnum):
    X = "X"
    O = "O"


# --- NOTE values match the command envelope's `type` field, so a raw string compares equal to the member
class CommandType(StrEnum):
    JOIN_GAME = "JoinGame"
    LEAVE_GAME = "LeaveGame"
    GAME_MOVE = "GameMove"
