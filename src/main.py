"""
Command line entrypoint: drive one Tic-Tac-Toe area with JSON lines.

Every input line looks like
    {"player": {"id": "p1", "user_name": "Alice"}, "command": {"type": "JoinGame"}}
and produces one output line: the area state after the command, or the error it raised.
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from src.core.config import LOG_LEVELS, get_settings
from src.core.exceptions import GameError, InvalidRequestError
from src.core.logging_config import configure_logging
from src.core.models import Player
from src.services.game_area import TicTacToeGameArea

logger = logging.getLogger(__name__)


def _parse_line(line: str) -> tuple[Player, object]:
    try:
        envelope = json.loads(line)
        player = Player(
            id=str(envelope["player"]["id"]),
            user_name=str(envelope["player"].get("user_name", "")),
        )
        return player, envelope["command"]
    except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as err:
        raise InvalidRequestError(f"Cannot interpret input line: {line!r}") from err


def _error_line(err: GameError) -> str:
    return json.dumps({"error": type(err).__name__, "message": str(err)})


def run(lines: Iterable[str], area: TicTacToeGameArea) -> Iterator[str]:
    """Handle every non-empty line in order, yielding one JSON response per line."""
    for line in lines:
        if not line.strip():
            continue
        try:
            player, payload = _parse_line(line)
            area.handle_payload(payload, player)
        except GameError as err:
            yield _error_line(err)
            continue
        yield area.to_response().model_dump_json()


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Play Tic-Tac-Toe in a single game area using JSON-lines commands."
    )
    parser.add_argument(
        "--area-id",
        default=settings.area_id,
        help=f"Identifier of the game area. Default: {settings.area_id}.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=LOG_LEVELS,
        help=f"Logging level (logs go to stderr). Default: {settings.log_level}.",
    )
    args = parser.parse_args(argv)

    configure_logging(replace(settings, area_id=args.area_id, log_level=args.log_level))
    area = TicTacToeGameArea(args.area_id)
    logger.info("Game area %s ready, reading commands", area.id)

    for response in run(stdin, area):
        stdout.write(response + "\n")
        stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
