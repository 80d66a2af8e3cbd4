"""Draft advice orchestration.

Combines pick tracking, roster needs, recommendations and strategy into a
single :class:`DraftAdvice`. Nothing is cached; every call recomputes from
the snapshot it is given.
"""

import logging
from typing import Sequence

from src.advice_engine.config import DEFAULT_TOP_N, DEFAULT_TOTAL_ROUNDS
from src.advice_engine.models import DraftAdvice
from src.advice_engine.recommendations import get_draft_strategy, get_recommendations
from src.advice_engine.roster_needs import calculate_roster_needs
from src.draft_manager.draft_state import DraftSession, Player, Roster
from src.draft_manager.pick_tracker import (
    get_round_and_pick,
    is_user_turn,
    picks_until_next_turn,
)

logger = logging.getLogger(__name__)


class DraftAdvisor:
    """Build draft advice for the user's current situation.

    The advisor is stateless: all data is passed in via method arguments.
    """

    def __init__(
        self,
        top_n: int = DEFAULT_TOP_N,
        total_rounds: int = DEFAULT_TOTAL_ROUNDS,
    ):
        if top_n < 0:
            raise ValueError(f"top_n must be non-negative, got {top_n}")
        if total_rounds < 1:
            raise ValueError(f"total_rounds must be positive, got {total_rounds}")
        self.top_n = top_n
        self.total_rounds = total_rounds

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_draft_advice(
        self,
        players: Sequence[Player],
        roster: Roster,
        total_picks_made: int,
        num_teams: int,
        user_position: int,
    ) -> DraftAdvice:
        """Advice for the pick about to be made.

        Args:
            players: Full player board, drafted players included.
            roster: The user's roster.
            total_picks_made: Picks completed so far by all teams.
            num_teams: League size.
            user_position: The user's 1-based slot in the draft order.

        Returns:
            :class:`DraftAdvice` with recommendations and needs on the
            user's turn, or a waiting message otherwise.
        """
        current_round, current_pick = get_round_and_pick(total_picks_made, num_teams)
        user_turn = is_user_turn(current_round, current_pick, user_position, num_teams)
        picks_until_next = picks_until_next_turn(
            current_round, current_pick, user_position, num_teams
        )
        strategy = tuple(
            get_draft_strategy(current_round, roster, self.total_rounds)
        )

        if not user_turn:
            logger.debug(
                "Round %d pick %d: %d picks until user is up",
                current_round, current_pick, picks_until_next,
            )
            return DraftAdvice(
                is_user_turn=False,
                round=current_round,
                pick=current_pick,
                picks_until_next=picks_until_next,
                strategy=strategy,
                message=f"Not your turn. Pick {current_pick} of round {current_round}",
            )

        recommendations = tuple(
            get_recommendations(
                players, current_round, picks_until_next, roster, self.top_n
            )
        )
        needs = calculate_roster_needs(roster)

        logger.debug(
            "Round %d pick %d: user on the clock, top pick %s",
            current_round,
            current_pick,
            recommendations[0].name if recommendations else None,
        )
        return DraftAdvice(
            is_user_turn=True,
            round=current_round,
            pick=current_pick,
            picks_until_next=picks_until_next,
            strategy=strategy,
            recommendations=recommendations,
            needs=needs,
        )

    def advise_session(self, session: DraftSession) -> DraftAdvice:
        """Convenience wrapper that extracts data from a DraftSession.

        Args:
            session: A :class:`DraftSession` instance.

        Returns:
            :class:`DraftAdvice` for the session's current pick.
        """
        return self.get_draft_advice(
            players=list(session.players),
            roster=session.roster.copy(),
            total_picks_made=session.total_picks_made,
            num_teams=session.settings.number_of_teams,
            user_position=session.settings.user_draft_position,
        )


_default_advisor = DraftAdvisor()


def get_draft_advice(
    players: Sequence[Player],
    roster: Roster,
    total_picks_made: int,
    num_teams: int,
    user_position: int,
) -> DraftAdvice:
    """Module-level shortcut using the default advisor settings."""
    return _default_advisor.get_draft_advice(
        players, roster, total_picks_made, num_teams, user_position
    )
