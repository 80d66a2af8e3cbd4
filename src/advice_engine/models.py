"""Data models for the advice engine.

Every record here is derived and recomputed on each advice request.
"""

from dataclasses import asdict, dataclass
from typing import Dict, Optional, Tuple

from src.draft_manager.draft_state import Player


@dataclass(frozen=True)
class RosterNeeds:
    """Starters still required at each position, plus the FLEX slot."""

    qb: int = 0
    rb: int = 0
    wr: int = 0
    te: int = 0
    flex: int = 0

    def for_position(self, position: str) -> int:
        return getattr(self, position.lower(), 0)


@dataclass(frozen=True)
class PositionalScarcity:
    """How many players at a position/tier survive until the user's next pick."""

    available: int
    likely_taken: int
    remaining: int


@dataclass(frozen=True)
class ValueBreakdown:
    """Every factor of a player's value score."""

    expected_round: float
    baseline: float
    scarcity_multiplier: float
    needs_multiplier: float
    early_round_bonus: float
    rank_bonus: float

    @property
    def score(self) -> float:
        return (
            self.baseline
            * self.scarcity_multiplier
            * self.needs_multiplier
            * self.early_round_bonus
            + self.rank_bonus
        )


@dataclass(frozen=True)
class PlayerWithValue:
    """An undrafted player scored for the current pick."""

    player: Player
    value_score: float
    scarcity: PositionalScarcity

    @property
    def name(self) -> str:
        return self.player.name

    @property
    def position(self) -> str:
        return self.player.position

    @property
    def tier(self) -> int:
        return self.player.tier

    @property
    def overall_rank(self) -> int:
        return self.player.overall_rank


@dataclass(frozen=True)
class DraftAdvice:
    """Advice for the current pick.

    On the user's turn ``recommendations`` and ``needs`` are set and
    ``message`` is None; otherwise only ``message`` is set.
    """

    is_user_turn: bool
    round: int
    pick: int
    picks_until_next: int
    strategy: Tuple[str, ...]
    recommendations: Optional[Tuple[PlayerWithValue, ...]] = None
    needs: Optional[RosterNeeds] = None
    message: Optional[str] = None

    def to_dict(self) -> Dict:
        """Plain-dict form for rendering or JSON output."""
        result = {
            "is_user_turn": self.is_user_turn,
            "round": self.round,
            "pick": self.pick,
            "picks_until_next": self.picks_until_next,
            "strategy": list(self.strategy),
        }
        if self.is_user_turn:
            result["recommendations"] = [
                {
                    **asdict(rec.player),
                    "value_score": round(rec.value_score, 2),
                    "scarcity": asdict(rec.scarcity),
                }
                for rec in self.recommendations or ()
            ]
            result["needs"] = asdict(self.needs) if self.needs else None
        else:
            result["message"] = self.message
        return result
