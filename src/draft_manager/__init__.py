from src.draft_manager.draft_controller import DraftController
from src.draft_manager.draft_initializer import DraftInitializer, PlayerBoardError
from src.draft_manager.draft_rules import DraftRules, ValidationError
from src.draft_manager.draft_state import (
    DraftSession,
    DraftSettings,
    Player,
    Roster,
)
from src.draft_manager.roster_validator import RosterValidator

__all__ = [
    "DraftController",
    "DraftInitializer",
    "DraftRules",
    "DraftSession",
    "DraftSettings",
    "Player",
    "PlayerBoardError",
    "Roster",
    "RosterValidator",
    "ValidationError",
]
