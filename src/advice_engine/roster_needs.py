"""Remaining starting-lineup needs for the user's roster."""

from src.advice_engine.models import RosterNeeds
from src.draft_manager.config import ROSTER_REQUIREMENTS
from src.draft_manager.draft_state import Roster

FLEX_ELIGIBLE_POSITIONS = ("RB", "WR", "TE")


def calculate_roster_needs(roster: Roster) -> RosterNeeds:
    """Count starters still needed at each position.

    The FLEX need compares the combined RB/WR/TE count against the combined
    requirement including the FLEX slot, so it can stay open after every
    positional minimum is met.
    """
    counts = {pos: roster.get_roster_count(pos) for pos in ("QB", "RB", "WR", "TE")}

    flex_required = ROSTER_REQUIREMENTS["FLEX"] + sum(
        ROSTER_REQUIREMENTS[pos] for pos in FLEX_ELIGIBLE_POSITIONS
    )
    flex_filled = sum(counts[pos] for pos in FLEX_ELIGIBLE_POSITIONS)

    return RosterNeeds(
        qb=max(0, ROSTER_REQUIREMENTS["QB"] - counts["QB"]),
        rb=max(0, ROSTER_REQUIREMENTS["RB"] - counts["RB"]),
        wr=max(0, ROSTER_REQUIREMENTS["WR"] - counts["WR"]),
        te=max(0, ROSTER_REQUIREMENTS["TE"] - counts["TE"]),
        flex=max(0, flex_required - flex_filled),
    )
