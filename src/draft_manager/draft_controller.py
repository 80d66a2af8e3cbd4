"""Draft controller - the session's mutation entry points."""

import logging
from typing import Dict, List, Optional

from src.draft_manager.draft_rules import DraftRules, ValidationError
from src.draft_manager.draft_state import DraftSession, DraftSettings, Player
from src.draft_manager.pick_tracker import get_round_and_pick, is_user_turn
from src.draft_manager.roster_validator import RosterValidator

logger = logging.getLogger(__name__)


class DraftController:
    """Main controller for draft session updates.

    Coordinates between DraftRules (validation), RosterValidator (slot
    assignment), and DraftSession (state mutation). It is the only code that
    mutates the session; advice is computed separately from snapshots.
    """

    def __init__(self, session: DraftSession):
        self.session = session
        self.rules = DraftRules(session)
        self.validator = RosterValidator()

    def toggle_draft(
        self, overall_rank: int, is_user_pick: Optional[bool] = None
    ) -> Player:
        """Flip a player's drafted state.

        Args:
            overall_rank: Overall rank identifying the player.
            is_user_pick: Whether a new pick belongs to the user. When None,
                the pick is the user's if the user is currently on the clock.

        Returns:
            The updated Player record.

        Raises:
            ValidationError: If no player on the board has this rank.
        """
        is_valid, error_msg = self.rules.validate_toggle(overall_rank)
        if not is_valid:
            logger.warning("Invalid draft toggle attempted: %s", error_msg)
            raise ValidationError(error_msg)

        player = self.session.find_player(overall_rank)

        if player.is_drafted:
            updated = player.with_drafted(False)
            self.session.replace_player(updated)
            removed = self.session.roster.remove_player(overall_rank)
            logger.info(
                "Undrafted %s (%s, rank %d); removed %d roster entries",
                player.name, player.position, overall_rank, removed,
            )
            return updated

        if is_user_pick is None:
            is_user_pick = self.is_user_on_clock()

        current_round, current_pick = get_round_and_pick(
            self.session.total_picks_made, self.session.settings.number_of_teams
        )
        updated = player.with_drafted(True)
        self.session.replace_player(updated)

        if is_user_pick:
            slot = self.validator.determine_roster_slot(
                self.session.roster, player.position
            )
            self.session.roster.add_player(updated, slot)
            logger.info(
                "Rd %d pick %d: user selects %s (%s) -> %s",
                current_round, current_pick, player.name, player.position, slot,
            )
        else:
            logger.info(
                "Rd %d pick %d: %s (%s) taken by another team",
                current_round, current_pick, player.name, player.position,
            )

        return updated

    def update_settings(
        self, number_of_teams: int, user_draft_position: int
    ) -> DraftSettings:
        """Replace the draft settings wholesale.

        Raises:
            ValidationError: If either value is out of range.
        """
        is_valid, error_msg = self.rules.validate_settings(
            number_of_teams, user_draft_position
        )
        if not is_valid:
            logger.warning("Invalid settings rejected: %s", error_msg)
            raise ValidationError(error_msg)

        settings = DraftSettings(
            number_of_teams=number_of_teams,
            user_draft_position=user_draft_position,
        )
        self.session.settings = settings
        logger.info(
            "Draft settings updated: %d teams, user picks at %d",
            settings.number_of_teams,
            settings.user_draft_position,
        )
        return settings

    def change_number_of_teams(self, number_of_teams: int) -> DraftSettings:
        """Change the league size, resetting the user's position if it no longer fits."""
        is_valid, error_msg = self.rules.validate_settings(number_of_teams, 1)
        if not is_valid:
            logger.warning("Invalid league size rejected: %s", error_msg)
            raise ValidationError(error_msg)

        clamped = self.session.settings.with_number_of_teams(number_of_teams)
        return self.update_settings(
            clamped.number_of_teams, clamped.user_draft_position
        )

    def is_user_on_clock(self) -> bool:
        """Whether the next pick belongs to the user."""
        settings = self.session.settings
        current_round, current_pick = get_round_and_pick(
            self.session.total_picks_made, settings.number_of_teams
        )
        return is_user_turn(
            current_round,
            current_pick,
            settings.user_draft_position,
            settings.number_of_teams,
        )

    def get_player(self, overall_rank: int) -> Optional[Player]:
        return self.session.find_player(overall_rank)

    def get_available_players(self, position: Optional[str] = None) -> List[Player]:
        """Get undrafted players in board order.

        Args:
            position: If provided, filter to this position only.
        """
        return [
            p
            for p in self.session.players
            if not p.is_drafted and (position is None or p.position == position)
        ]

    def get_roster_summary(self) -> Dict[str, Dict]:
        return self.validator.get_roster_summary(self.session.roster)
