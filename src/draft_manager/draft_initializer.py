"""Draft initialization - builds draft sessions from a player board CSV.

The board CSV has one row per player with columns ``name``, ``position``,
``tier`` and ``overall_rank``. An optional ``drafted`` column marks players
already taken: ``user`` for the user's picks, ``other`` for anyone else's,
blank when still available.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from src.draft_manager.config import (
    DEFAULT_NUMBER_OF_TEAMS,
    DEFAULT_PLAYERS_FILE,
    DEFAULT_USER_DRAFT_POSITION,
    POSITIONS,
)
from src.draft_manager.draft_controller import DraftController
from src.draft_manager.draft_rules import DraftRules
from src.draft_manager.draft_state import DraftSession, DraftSettings, Player

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("name", "position", "tier", "overall_rank")
DRAFTED_MARKERS = {"", "user", "other"}


class PlayerBoardError(Exception):
    """Raised when a player board file is malformed."""


class DraftInitializer:
    """Handles creation of new draft sessions."""

    def __init__(self, players_file: Optional[Path] = None):
        self.players_file = Path(players_file) if players_file else DEFAULT_PLAYERS_FILE

    def create_session(
        self,
        number_of_teams: int = DEFAULT_NUMBER_OF_TEAMS,
        user_draft_position: int = DEFAULT_USER_DRAFT_POSITION,
    ) -> DraftSession:
        """
        Create a new draft session.

        Players marked as drafted on the board are replayed in overall-rank
        order so the user's roster matches what a live draft would produce.

        Args:
            number_of_teams: Number of teams (1-14)
            user_draft_position: User's slot in the draft order

        Returns:
            DraftSession ready for advice
        """
        is_valid, error_msg = DraftRules.validate_settings(
            number_of_teams, user_draft_position
        )
        if not is_valid:
            raise ValueError(error_msg)

        board = self._read_board(self.players_file)
        players = self._to_players(board, keep_drafted=False)

        session = DraftSession(
            players=players,
            settings=DraftSettings(
                number_of_teams=number_of_teams,
                user_draft_position=user_draft_position,
            ),
        )

        controller = DraftController(session)
        for rank, marker in self._drafted_markers(board):
            controller.toggle_draft(rank, is_user_pick=(marker == "user"))

        logger.info(
            "Created draft session: %d teams, user at %d, %d players (%d drafted)",
            number_of_teams,
            user_draft_position,
            len(session.players),
            session.total_picks_made,
        )
        return session

    def load_players(self) -> List[Player]:
        """Load the board as Player records, drafted flags included."""
        board = self._read_board(self.players_file)
        return self._to_players(board, keep_drafted=True)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_players(board: pd.DataFrame, keep_drafted: bool) -> List[Player]:
        return [
            Player(
                name=row.name,
                position=row.position,
                tier=int(row.tier),
                overall_rank=int(row.overall_rank),
                is_drafted=keep_drafted and row.drafted != "",
            )
            for row in board.itertuples(index=False)
        ]

    @staticmethod
    def _drafted_markers(board: pd.DataFrame) -> List[Tuple[int, str]]:
        drafted = board[board["drafted"] != ""]
        return [
            (int(row.overall_rank), row.drafted)
            for row in drafted.itertuples(index=False)
        ]

    def _read_board(self, path: Path) -> pd.DataFrame:
        """Read and validate a player board CSV, sorted by overall rank."""
        if not path.exists():
            raise FileNotFoundError(f"Player board not found: {path}")

        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        df.columns = [c.strip().lower() for c in df.columns]

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise PlayerBoardError(f"{path.name} is missing columns: {missing}")

        if "drafted" not in df.columns:
            df["drafted"] = ""

        for col in df.columns:
            df[col] = df[col].str.strip()

        # Drop blank rows
        df = df[df["name"] != ""].copy()

        df["position"] = df["position"].str.upper()
        df["drafted"] = df["drafted"].str.lower()
        df["tier"] = pd.to_numeric(df["tier"], errors="coerce")
        df["overall_rank"] = pd.to_numeric(df["overall_rank"], errors="coerce")

        self._validate_board(df, path)

        df = df.sort_values("overall_rank", kind="stable").reset_index(drop=True)
        logger.info("Loaded %d players from %s", len(df), path.name)
        return df

    @staticmethod
    def _validate_board(df: pd.DataFrame, path: Path):
        bad_position = df.loc[~df["position"].isin(POSITIONS), "name"].tolist()
        if bad_position:
            raise PlayerBoardError(
                f"{path.name}: unsupported position for {bad_position}"
            )

        for col in ("tier", "overall_rank"):
            values = df[col]
            invalid = df.loc[
                values.isna() | (values < 1) | (values % 1 != 0), "name"
            ].tolist()
            if invalid:
                raise PlayerBoardError(
                    f"{path.name}: {col} must be a positive integer for {invalid}"
                )

        dup_ranks = df.loc[df["overall_rank"].duplicated(), "overall_rank"]
        if not dup_ranks.empty:
            raise PlayerBoardError(
                f"{path.name}: duplicate overall_rank {sorted(dup_ranks.astype(int).tolist())}"
            )

        dup_names = df.loc[df["name"].duplicated(), "name"]
        if not dup_names.empty:
            raise PlayerBoardError(
                f"{path.name}: duplicate player names {dup_names.tolist()}"
            )

        bad_marker = df.loc[~df["drafted"].isin(DRAFTED_MARKERS), "name"].tolist()
        if bad_marker:
            raise PlayerBoardError(
                f"{path.name}: drafted must be blank, 'user' or 'other' for {bad_marker}"
            )
