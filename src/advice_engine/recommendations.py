"""Ranked pick recommendations and draft strategy hints."""

import logging
from typing import List, Sequence

from src.advice_engine.config import (
    DEFAULT_TOP_BY_POSITION,
    DEFAULT_TOP_N,
    DEFAULT_TOTAL_ROUNDS,
    EARLY_ROUND_THRESHOLD,
    LATE_ROUND_THRESHOLD,
    RESERVED_FINAL_ROUNDS,
)
from src.advice_engine.models import PlayerWithValue
from src.advice_engine.roster_needs import calculate_roster_needs
from src.advice_engine.scarcity import calculate_scarcity
from src.advice_engine.value_scorer import calculate_player_value
from src.draft_manager.config import DEPTH_REQUIREMENTS, ROSTER_REQUIREMENTS
from src.draft_manager.draft_state import Player, Roster

logger = logging.getLogger(__name__)

# Strategy hints, in the order they are emitted
EARLY_ROUND_HINT = "Focus on top-tier RB/WR for reliable production"
QB_WINDOW_HINT = (
    "Consider drafting your QB if tier 1-2 available "
    "(huge drop-off after elite QBs)"
)
TE_WINDOW_HINT = "Elite TEs (tier 1-2) have massive value due to position scarcity"
QB_URGENT_HINT = "URGENT: Must draft QB soon! Final 2 rounds reserved for DEF/K"
RB_DEPTH_HINT = "Target 3rd RB for bye week coverage"
FLEX_HINT = "Look for RB/WR with upside for flex position"
WR_DEPTH_HINT = "Consider WR depth for bye weeks and potential breakouts"
LATE_ROUND_HINT = "Focus on handcuffs and high-upside players"


def get_recommendations(
    players: Sequence[Player],
    current_round: int,
    picks_until_next: int,
    roster: Roster,
    top_n: int = DEFAULT_TOP_N,
) -> List[PlayerWithValue]:
    """Rank undrafted players by value score and return the best ``top_n``.

    Ties keep the input order (overall rank when the board is pre-sorted).
    """
    if top_n <= 0:
        return []

    scored = [
        PlayerWithValue(
            player=player,
            value_score=calculate_player_value(
                player, current_round, players, picks_until_next, roster
            ),
            scarcity=calculate_scarcity(
                players, player.position, player.tier, picks_until_next
            ),
        )
        for player in players
        if not player.is_drafted
    ]

    # sorted() is stable
    ranked = sorted(scored, key=lambda p: p.value_score, reverse=True)

    logger.debug(
        "Scored %d undrafted players for round %d (%d picks until next)",
        len(scored), current_round, picks_until_next,
    )
    return ranked[:top_n]


def get_draft_strategy(
    current_round: int,
    roster: Roster,
    total_rounds: int = DEFAULT_TOTAL_ROUNDS,
) -> List[str]:
    """Free-text hints for the current round and roster, in a fixed order."""
    needs = calculate_roster_needs(roster)
    rb_count = roster.get_roster_count("RB")
    wr_count = roster.get_roster_count("WR")
    qb_deadline = total_rounds - RESERVED_FINAL_ROUNDS

    strategy = []

    if current_round <= EARLY_ROUND_THRESHOLD:
        strategy.append(EARLY_ROUND_HINT)

    if 3 <= current_round <= 5 and needs.qb > 0:
        strategy.append(QB_WINDOW_HINT)

    if 2 <= current_round <= 6 and needs.te > 0:
        strategy.append(TE_WINDOW_HINT)

    if needs.qb > 0 and current_round >= qb_deadline - 2:
        strategy.append(QB_URGENT_HINT)

    if (
        ROSTER_REQUIREMENTS["RB"] <= rb_count < DEPTH_REQUIREMENTS["RB"]
        and current_round >= 4
    ):
        strategy.append(RB_DEPTH_HINT)

    if needs.flex > 0:
        strategy.append(FLEX_HINT)

    if (
        ROSTER_REQUIREMENTS["WR"] <= wr_count < DEPTH_REQUIREMENTS["WR"]
        and current_round >= 5
    ):
        strategy.append(WR_DEPTH_HINT)

    if current_round >= LATE_ROUND_THRESHOLD:
        strategy.append(LATE_ROUND_HINT)

    return strategy


def get_players_by_position(
    players: Sequence[Player], position: str
) -> List[Player]:
    """Every player at ``position``, drafted or not, in board order."""
    return [p for p in players if p.position == position]


def get_top_available_by_position(
    players: Sequence[Player],
    position: str,
    limit: int = DEFAULT_TOP_BY_POSITION,
) -> List[Player]:
    """Best undrafted players at ``position`` by overall rank."""
    available = sorted(
        (p for p in players if p.position == position and not p.is_drafted),
        key=lambda p: p.overall_rank,
    )
    return available[:max(0, limit)]
