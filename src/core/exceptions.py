"""
Custom exceptions raised by the domain and service layers.

Every rule violation has its own class with a fixed, human-readable message.
Callers should match on the class; the message is only meant for display.
"""


class GameError(Exception):
    """Top-level exception for anything going wrong inside a game area."""

    message: str = "Game error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class PlayerAlreadyInGameError(GameError):
    message = "Player is already in this game"


class GameFullError(GameError):
    message = "Game is full"


class PlayerNotInGameError(GameError):
    message = "Player is not in this game"


class GameNotInProgressError(GameError):
    message = "Game is not in progress"


class MoveNotYourTurnError(GameError):
    message = "Not your turn"


class BoardPositionNotEmptyError(GameError):
    message = "Board position is not empty"


class InvalidCommandError(GameError):
    message = "Invalid command"


class InvalidMoveError(GameError):
    """Move refers to a position that is not on the board."""

    message = "Invalid move"


class InvalidRequestError(GameError):
    """Wire payload could not be interpreted as a command."""

    message = "Request payload could not be interpreted"


class UnexpectedGameAreaError(GameError):
    """A defect, not a rule violation. Wraps the original exception."""

    message = "An unexpected error occurred"
