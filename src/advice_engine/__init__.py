from src.advice_engine.advisor import DraftAdvisor, get_draft_advice
from src.advice_engine.models import (
    DraftAdvice,
    PlayerWithValue,
    PositionalScarcity,
    RosterNeeds,
    ValueBreakdown,
)

__all__ = [
    "DraftAdvice",
    "DraftAdvisor",
    "PlayerWithValue",
    "PositionalScarcity",
    "RosterNeeds",
    "ValueBreakdown",
    "get_draft_advice",
]
