"""Roster slot assignment and summary logic."""

from typing import Dict, Optional

from src.draft_manager.config import BENCH_SLOT, POSITIONS, ROSTER_REQUIREMENTS
from src.draft_manager.draft_state import Roster


class RosterValidator:
    """Decides where a user pick lands on the roster."""

    def __init__(self, requirements: Optional[Dict[str, int]] = None):
        self.requirements = requirements or ROSTER_REQUIREMENTS

    def determine_roster_slot(self, roster: Roster, player_position: str) -> str:
        """
        Determine which roster slot a player should fill.

        Priority: specific position (until its requirement is met) -> BENCH.
        """
        current_count = roster.get_roster_count(player_position)
        position_limit = self.requirements.get(player_position, 0)

        if current_count < position_limit:
            return player_position

        return BENCH_SLOT

    def get_roster_summary(self, roster: Roster) -> Dict[str, Dict]:
        """Generate summary of the roster's fill status per slot."""
        summary = {}

        for slot in POSITIONS + (BENCH_SLOT,):
            required = self.requirements.get(slot, 0)
            filled = roster.get_roster_count(slot)
            summary[slot] = {
                "filled": filled,
                "required": required,
                "remaining": max(0, required - filled),
            }

        return summary
