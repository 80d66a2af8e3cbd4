"""Shared fixtures for the draft assistant test suite."""

import textwrap

import pytest

from src.draft_manager.draft_state import Player


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def small_board():
    """A 16-player board sorted by overall rank, nobody drafted."""
    specs = [
        # (rank, name, position, tier)
        (1, "Wr One", "WR", 1),
        (2, "Rb One", "RB", 1),
        (3, "Rb Two", "RB", 1),
        (4, "Wr Two", "WR", 2),
        (5, "Rb Three", "RB", 2),
        (6, "Wr Three", "WR", 3),
        (7, "Te One", "TE", 1),
        (8, "Qb One", "QB", 1),
        (9, "Rb Four", "RB", 4),
        (10, "Wr Four", "WR", 4),
        (11, "Qb Two", "QB", 2),
        (12, "Te Two", "TE", 2),
        (13, "Rb Five", "RB", 6),
        (14, "Wr Five", "WR", 7),
        (15, "Qb Three", "QB", 3),
        (16, "Te Three", "TE", 3),
    ]
    return [
        Player(name=name, position=pos, tier=tier, overall_rank=rank)
        for rank, name, pos, tier in specs
    ]


# ------------------------------------------------------------------
# File fixtures
# ------------------------------------------------------------------

@pytest.fixture
def board_csv(tmp_path):
    """Write a small board CSV (deliberately out of rank order)."""
    path = tmp_path / "board.csv"
    path.write_text(
        textwrap.dedent(
            """\
            overall_rank,name,position,tier,drafted
            3,Rb Two,rb,1,
            1,Wr One,WR,1,other
            2,Rb One,RB,1,user
            4,Wr Two,WR,2,
            5,Qb One,QB,1,
            6,Te One,TE,1,
            7,Rb Three,RB,2,
            8,Wr Three,WR,3,
            """
        ),
        encoding="utf-8",
    )
    return path
