"""Positional scarcity: how many good players survive to the user's next pick."""

import logging
from typing import Sequence

from src.advice_engine.models import PositionalScarcity
from src.draft_manager.draft_state import Player

logger = logging.getLogger(__name__)


def calculate_scarcity(
    players: Sequence[Player],
    position: str,
    tier: int,
    picks_until_next: int,
) -> PositionalScarcity:
    """Estimate scarcity for players at ``position`` in ``tier`` or better.

    Assumes, pessimistically, that every pick before the user's next turn
    takes one of these players.
    """
    available = sum(
        1
        for p in players
        if p.position == position and not p.is_drafted and p.tier <= tier
    )
    likely_taken = min(picks_until_next, available)
    remaining = max(0, available - likely_taken)

    logger.debug(
        "Scarcity %s tier<=%d: available=%d, likely_taken=%d, remaining=%d",
        position, tier, available, likely_taken, remaining,
    )
    return PositionalScarcity(
        available=available,
        likely_taken=likely_taken,
        remaining=remaining,
    )
