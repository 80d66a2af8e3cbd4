"""Tests for draft state data models."""

import pytest

from src.draft_manager.draft_state import (
    DraftSession,
    DraftSettings,
    Player,
    Roster,
)


# ── Helpers ──────────────────────────────────────────────────────────

def _make_player(rank, position="RB", tier=1, drafted=False):
    return Player(
        name=f"Player {rank}",
        position=position,
        tier=tier,
        overall_rank=rank,
        is_drafted=drafted,
    )


# ── Player ───────────────────────────────────────────────────────────

class TestPlayer:
    def test_defaults_to_undrafted(self):
        assert _make_player(1).is_drafted is False

    def test_with_drafted_returns_copy(self):
        player = _make_player(1)
        drafted = player.with_drafted(True)
        assert drafted.is_drafted is True
        assert player.is_drafted is False
        assert drafted.overall_rank == player.overall_rank

    def test_is_immutable(self):
        player = _make_player(1)
        with pytest.raises(AttributeError):
            player.tier = 3


# ── Roster ───────────────────────────────────────────────────────────

class TestRoster:
    def test_starts_with_empty_buckets(self):
        roster = Roster()
        assert set(roster.slots) == {"QB", "RB", "WR", "TE", "BENCH"}
        assert all(roster.get_roster_count(s) == 0 for s in roster.slots)

    def test_add_player(self):
        roster = Roster()
        roster.add_player(_make_player(1), "RB")
        assert roster.get_roster_count("RB") == 1
        assert roster.contains(1)

    def test_unknown_slot_count_is_zero(self):
        assert Roster().get_roster_count("K") == 0

    def test_remove_scans_every_bucket(self):
        roster = Roster()
        player = _make_player(5)
        roster.add_player(player, "RB")
        roster.add_player(player, "BENCH")
        assert roster.remove_player(5) == 2
        assert not roster.contains(5)

    def test_remove_missing_player_is_noop(self):
        roster = Roster()
        roster.add_player(_make_player(1), "RB")
        assert roster.remove_player(99) == 0
        assert roster.get_roster_count("RB") == 1

    def test_all_players_lists_starters_before_bench(self):
        roster = Roster()
        roster.add_player(_make_player(9, "WR"), "BENCH")
        roster.add_player(_make_player(2, "QB"), "QB")
        assert [p.overall_rank for p in roster.all_players()] == [2, 9]

    def test_copy_is_independent(self):
        roster = Roster()
        roster.add_player(_make_player(1), "RB")
        snapshot = roster.copy()
        roster.add_player(_make_player(2), "RB")
        assert snapshot.get_roster_count("RB") == 1
        assert roster.get_roster_count("RB") == 2


# ── Settings ─────────────────────────────────────────────────────────

class TestDraftSettings:
    def test_defaults(self):
        settings = DraftSettings()
        assert settings.number_of_teams == 10
        assert settings.user_draft_position == 1

    @pytest.mark.parametrize("teams", [0, 15])
    def test_team_count_out_of_range(self, teams):
        with pytest.raises(ValueError, match="number_of_teams"):
            DraftSettings(number_of_teams=teams, user_draft_position=1)

    def test_position_beyond_league_size(self):
        with pytest.raises(ValueError, match="user_draft_position"):
            DraftSettings(number_of_teams=8, user_draft_position=9)

    def test_shrinking_league_resets_position(self):
        settings = DraftSettings(number_of_teams=12, user_draft_position=10)
        assert settings.with_number_of_teams(8) == DraftSettings(8, 1)

    def test_shrinking_league_keeps_fitting_position(self):
        settings = DraftSettings(number_of_teams=12, user_draft_position=4)
        assert settings.with_number_of_teams(8) == DraftSettings(8, 4)


# ── Session ──────────────────────────────────────────────────────────

class TestDraftSession:
    def test_total_picks_counts_drafted_players(self):
        session = DraftSession(
            players=[_make_player(1, drafted=True), _make_player(2), _make_player(3, drafted=True)]
        )
        assert session.total_picks_made == 2

    def test_find_player(self):
        session = DraftSession(players=[_make_player(1), _make_player(2)])
        assert session.find_player(2).overall_rank == 2
        assert session.find_player(3) is None

    def test_replace_player_keeps_order(self):
        session = DraftSession(players=[_make_player(1), _make_player(2), _make_player(3)])
        session.replace_player(_make_player(2, drafted=True))
        assert [p.overall_rank for p in session.players] == [1, 2, 3]
        assert session.players[1].is_drafted is True
