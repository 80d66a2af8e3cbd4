"""Player value scoring for the current pick.

The score rewards taking a player later than their tier usually goes,
scaled by positional scarcity, roster need and an early-round premium::

    score = baseline * scarcity * need * early_bonus + rank_bonus

``baseline`` is how many rounds past the tier's expected round the draft
currently is (never negative) and ``rank_bonus`` is a small additive edge
for elite overall ranks.
"""

import logging
from typing import Callable, Dict, Sequence

from src.advice_engine.config import (
    DEFAULT_SCARCITY_MULTIPLIER,
    EARLY_ROUND_BONUS,
    EARLY_ROUND_MAX_TIER,
    EARLY_ROUND_THRESHOLD,
    FLEX_NEED_MULTIPLIER,
    QB_ELITE_TIER,
    QB_NEED_MULTIPLIERS,
    RANK_BONUS_CEILING,
    RANK_BONUS_SCALE,
    RB_DEPTH_MAX_OVERALL_RANK,
    RB_DEPTH_MULTIPLIER,
    SCARCITY_THRESHOLDS,
    TE_ELITE_TIER,
    TE_NEED_MULTIPLIERS,
    TIER_EXPECTED_ROUNDS,
    UNKNOWN_TIER_ROUND,
    WR_DEPTH_MULTIPLIER,
)
from src.advice_engine.models import RosterNeeds, ValueBreakdown
from src.advice_engine.roster_needs import calculate_roster_needs
from src.advice_engine.scarcity import calculate_scarcity
from src.draft_manager.config import DEPTH_REQUIREMENTS
from src.draft_manager.draft_state import Player, Roster

logger = logging.getLogger(__name__)

NeedRule = Callable[[Player, RosterNeeds, Roster], float]


def get_expected_round(position: str, tier: int) -> float:
    """Round a player of this tier normally goes; unknown tiers go last."""
    return TIER_EXPECTED_ROUNDS.get(position, {}).get(tier, UNKNOWN_TIER_ROUND)


def get_scarcity_multiplier(remaining: int) -> float:
    for threshold, multiplier in SCARCITY_THRESHOLDS:
        if remaining <= threshold:
            return multiplier
    return DEFAULT_SCARCITY_MULTIPLIER


# ------------------------------------------------------------------
# Roster need rules, one per position
# ------------------------------------------------------------------

def _qb_need(player: Player, needs: RosterNeeds, roster: Roster) -> float:
    # Steep drop-off after the elite tiers
    if needs.qb > 0:
        if player.tier <= QB_ELITE_TIER:
            return QB_NEED_MULTIPLIERS["elite"]
        return QB_NEED_MULTIPLIERS["other"]
    return 1.0


def _te_need(player: Player, needs: RosterNeeds, roster: Roster) -> float:
    if needs.te > 0:
        if player.tier <= TE_ELITE_TIER:
            return TE_NEED_MULTIPLIERS["elite"]
        return TE_NEED_MULTIPLIERS["other"]
    return 1.0


def _rb_need(player: Player, needs: RosterNeeds, roster: Roster) -> float:
    if needs.rb > 0 or needs.flex > 0:
        return FLEX_NEED_MULTIPLIER
    if (
        roster.get_roster_count("RB") < DEPTH_REQUIREMENTS["RB"]
        and player.overall_rank <= RB_DEPTH_MAX_OVERALL_RANK
    ):
        return RB_DEPTH_MULTIPLIER
    return 1.0


def _wr_need(player: Player, needs: RosterNeeds, roster: Roster) -> float:
    if needs.wr > 0 or needs.flex > 0:
        return FLEX_NEED_MULTIPLIER
    if roster.get_roster_count("WR") < DEPTH_REQUIREMENTS["WR"]:
        return WR_DEPTH_MULTIPLIER
    return 1.0


NEED_RULES: Dict[str, NeedRule] = {
    "QB": _qb_need,
    "RB": _rb_need,
    "WR": _wr_need,
    "TE": _te_need,
}


def get_needs_multiplier(player: Player, needs: RosterNeeds, roster: Roster) -> float:
    rule = NEED_RULES.get(player.position)
    if rule is None:
        return 1.0
    return rule(player, needs, roster)


def get_early_round_bonus(current_round: int, tier: int) -> float:
    if current_round <= EARLY_ROUND_THRESHOLD and tier <= EARLY_ROUND_MAX_TIER:
        return EARLY_ROUND_BONUS
    return 1.0


def get_rank_bonus(overall_rank: int) -> float:
    return max(0.0, (RANK_BONUS_CEILING - overall_rank) / RANK_BONUS_SCALE)


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------

def score_breakdown(
    player: Player,
    current_round: int,
    players: Sequence[Player],
    picks_until_next: int,
    roster: Roster,
) -> ValueBreakdown:
    """Compute every factor of ``player``'s value at the current round."""
    expected_round = get_expected_round(player.position, player.tier)
    baseline = max(0, current_round - expected_round)

    scarcity = calculate_scarcity(
        players, player.position, player.tier, picks_until_next
    )
    needs = calculate_roster_needs(roster)

    breakdown = ValueBreakdown(
        expected_round=expected_round,
        baseline=baseline,
        scarcity_multiplier=get_scarcity_multiplier(scarcity.remaining),
        needs_multiplier=get_needs_multiplier(player, needs, roster),
        early_round_bonus=get_early_round_bonus(current_round, player.tier),
        rank_bonus=get_rank_bonus(player.overall_rank),
    )

    logger.debug(
        "Value %s (%s tier %d, rank %d) rd %d: base=%.2f x scarcity=%.1f "
        "x need=%.1f x early=%.1f + rank=%.2f -> %.2f",
        player.name, player.position, player.tier, player.overall_rank,
        current_round, breakdown.baseline, breakdown.scarcity_multiplier,
        breakdown.needs_multiplier, breakdown.early_round_bonus,
        breakdown.rank_bonus, breakdown.score,
    )
    return breakdown


def calculate_player_value(
    player: Player,
    current_round: int,
    players: Sequence[Player],
    picks_until_next: int,
    roster: Roster,
) -> float:
    """Value score for drafting ``player`` at ``current_round``."""
    return score_breakdown(
        player, current_round, players, picks_until_next, roster
    ).score
