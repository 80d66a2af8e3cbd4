"""Draft state data models - the caller-held snapshot the advice engine reads."""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from src.draft_manager.config import (
    BENCH_SLOT,
    DEFAULT_NUMBER_OF_TEAMS,
    DEFAULT_USER_DRAFT_POSITION,
    MAX_TEAMS,
    MIN_TEAMS,
    POSITIONS,
)

ROSTER_SLOTS = POSITIONS + (BENCH_SLOT,)


@dataclass(frozen=True)
class Player:
    """A single player on the draft board."""

    name: str
    position: str  # "QB", "RB", "WR" or "TE"
    tier: int
    overall_rank: int
    is_drafted: bool = False

    def with_drafted(self, is_drafted: bool) -> "Player":
        """Return a copy with the drafted flag set."""
        return replace(self, is_drafted=is_drafted)


@dataclass
class Roster:
    """The user's drafted players grouped into position buckets plus bench."""

    slots: Dict[str, List[Player]] = field(
        default_factory=lambda: {slot: [] for slot in ROSTER_SLOTS}
    )

    def get_roster_count(self, slot: str) -> int:
        """Get number of players in a slot."""
        return len(self.slots.get(slot, []))

    def add_player(self, player: Player, slot: str):
        """Add player to the roster at the given slot."""
        if slot not in self.slots:
            self.slots[slot] = []
        self.slots[slot].append(player)

    def remove_player(self, overall_rank: int) -> int:
        """Remove a player from every slot holding it.

        Returns:
            Number of entries removed.
        """
        removed = 0
        for slot, players in self.slots.items():
            kept = [p for p in players if p.overall_rank != overall_rank]
            removed += len(players) - len(kept)
            self.slots[slot] = kept
        return removed

    def contains(self, overall_rank: int) -> bool:
        return any(
            p.overall_rank == overall_rank
            for players in self.slots.values()
            for p in players
        )

    def all_players(self) -> List[Player]:
        """Every rostered player, starters before bench."""
        return [p for slot in self.slots for p in self.slots[slot]]

    def copy(self) -> "Roster":
        """Snapshot copy; Player records are immutable so a shallow copy per slot suffices."""
        return Roster(slots={slot: list(players) for slot, players in self.slots.items()})


@dataclass(frozen=True)
class DraftSettings:
    """League size and the user's slot in the draft order."""

    number_of_teams: int = DEFAULT_NUMBER_OF_TEAMS
    user_draft_position: int = DEFAULT_USER_DRAFT_POSITION

    def __post_init__(self):
        if not MIN_TEAMS <= self.number_of_teams <= MAX_TEAMS:
            raise ValueError(
                f"number_of_teams ({self.number_of_teams}) must be in range "
                f"[{MIN_TEAMS}, {MAX_TEAMS}]"
            )
        if not 1 <= self.user_draft_position <= self.number_of_teams:
            raise ValueError(
                f"user_draft_position ({self.user_draft_position}) must be in "
                f"range [1, {self.number_of_teams}]"
            )

    def with_number_of_teams(self, number_of_teams: int) -> "DraftSettings":
        """Change the league size, resetting the draft position if it no longer fits."""
        position = self.user_draft_position
        if position > number_of_teams:
            position = DEFAULT_USER_DRAFT_POSITION
        return DraftSettings(
            number_of_teams=number_of_teams, user_draft_position=position
        )


@dataclass
class DraftSession:
    """Complete draft session state - players, the user's roster and settings."""

    players: List[Player]
    roster: Roster = field(default_factory=Roster)
    settings: DraftSettings = field(default_factory=DraftSettings)

    @property
    def total_picks_made(self) -> int:
        """Number of players drafted so far by any team."""
        return sum(1 for p in self.players if p.is_drafted)

    def find_player(self, overall_rank: int) -> Optional[Player]:
        for player in self.players:
            if player.overall_rank == overall_rank:
                return player
        return None

    def replace_player(self, player: Player):
        """Swap in an updated record for the player with the same overall rank."""
        self.players = [
            player if p.overall_rank == player.overall_rank else p
            for p in self.players
        ]
