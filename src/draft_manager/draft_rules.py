"""Draft rule enforcement for settings changes and draft toggles."""

from typing import Optional, Tuple

from src.draft_manager.config import MAX_TEAMS, MIN_TEAMS, POSITIONS
from src.draft_manager.draft_state import DraftSession


class ValidationError(Exception):
    """Raised when a draft action or settings change violates draft rules."""

    pass


class DraftRules:
    """Enforces the rules that guard the two session entry points."""

    def __init__(self, session: DraftSession):
        self.session = session

    @staticmethod
    def validate_settings(
        number_of_teams: int, user_draft_position: int
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate a league size / draft position pair.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        if not isinstance(number_of_teams, int) or isinstance(number_of_teams, bool):
            return False, f"Number of teams must be an integer, got {number_of_teams!r}"

        if not MIN_TEAMS <= number_of_teams <= MAX_TEAMS:
            return False, (
                f"Number of teams ({number_of_teams}) must be between "
                f"{MIN_TEAMS} and {MAX_TEAMS}"
            )

        if not isinstance(user_draft_position, int) or isinstance(
            user_draft_position, bool
        ):
            return False, (
                f"Draft position must be an integer, got {user_draft_position!r}"
            )

        if not 1 <= user_draft_position <= number_of_teams:
            return False, (
                f"Draft position ({user_draft_position}) must be between "
                f"1 and {number_of_teams}"
            )

        return True, None

    def validate_toggle(self, overall_rank: int) -> Tuple[bool, Optional[str]]:
        """
        Validate that a player can have its draft state toggled.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        player = self.session.find_player(overall_rank)
        if player is None:
            return False, f"Player with overall rank {overall_rank} not found on the board"

        if player.position not in POSITIONS:
            return False, f"{player.name} has unsupported position {player.position!r}"

        return True, None
