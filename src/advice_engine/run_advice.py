"""Print draft advice for a player board.

Usage:
    python -m src.advice_engine.run_advice [players_csv] [teams] [position]

Examples:
    python -m src.advice_engine.run_advice
    python -m src.advice_engine.run_advice data/players_2025.csv 12 4
"""

import json
import logging
import sys
from pathlib import Path

from src.advice_engine.advisor import DraftAdvisor
from src.advice_engine.models import DraftAdvice
from src.draft_manager.config import (
    DEFAULT_NUMBER_OF_TEAMS,
    DEFAULT_USER_DRAFT_POSITION,
)
from src.draft_manager.draft_initializer import DraftInitializer
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def run_advice(
    players_file: Path | None = None,
    number_of_teams: int = DEFAULT_NUMBER_OF_TEAMS,
    user_draft_position: int = DEFAULT_USER_DRAFT_POSITION,
) -> DraftAdvice:
    """Build a session from a player board and compute advice for it.

    Args:
        players_file: Board CSV. Defaults to ``data/players_2025.csv``.
        number_of_teams: League size.
        user_draft_position: The user's slot in the draft order.

    Returns:
        Advice for the board's current pick.

    Raises:
        FileNotFoundError: If the board file doesn't exist.
    """
    initializer = DraftInitializer(players_file)
    session = initializer.create_session(number_of_teams, user_draft_position)

    advice = DraftAdvisor().advise_session(session)
    logger.info(
        "Round %d pick %d: %s",
        advice.round,
        advice.pick,
        "user on the clock"
        if advice.is_user_turn
        else f"{advice.picks_until_next} picks until user",
    )
    return advice


if __name__ == "__main__":
    setup_logging()

    players_file = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    teams = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_NUMBER_OF_TEAMS
    position = int(sys.argv[3]) if len(sys.argv) > 3 else DEFAULT_USER_DRAFT_POSITION

    try:
        advice = run_advice(players_file, teams, position)
        print(json.dumps(advice.to_dict(), indent=2))
    except Exception:
        logger.exception("Advice failed")
        sys.exit(1)
