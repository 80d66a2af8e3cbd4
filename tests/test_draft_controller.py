"""Tests for the draft controller entry points."""

import logging

import pytest

from src.draft_manager.draft_controller import DraftController
from src.draft_manager.draft_rules import ValidationError
from src.draft_manager.draft_state import DraftSession, DraftSettings


# ── Helpers ──────────────────────────────────────────────────────────

def _make_controller(players, teams=10, position=1):
    session = DraftSession(
        players=list(players),
        settings=DraftSettings(number_of_teams=teams, user_draft_position=position),
    )
    return DraftController(session)


def _ranks(players):
    return [p.overall_rank for p in players]


# ── Drafting ─────────────────────────────────────────────────────────

class TestToggleDraft:
    def test_marks_player_drafted(self, small_board):
        ctrl = _make_controller(small_board)
        updated = ctrl.toggle_draft(2, is_user_pick=False)
        assert updated.is_drafted is True
        assert ctrl.get_player(2).is_drafted is True
        assert ctrl.session.total_picks_made == 1

    def test_other_team_pick_not_rostered(self, small_board):
        ctrl = _make_controller(small_board)
        ctrl.toggle_draft(2, is_user_pick=False)
        assert ctrl.session.roster.all_players() == []

    def test_user_pick_fills_position_then_bench(self, small_board):
        ctrl = _make_controller(small_board)
        for rank in (2, 3, 5):  # three RBs
            ctrl.toggle_draft(rank, is_user_pick=True)
        roster = ctrl.session.roster
        assert _ranks(roster.slots["RB"]) == [2, 3]
        assert _ranks(roster.slots["BENCH"]) == [5]

    def test_rostered_record_is_drafted(self, small_board):
        ctrl = _make_controller(small_board)
        ctrl.toggle_draft(8, is_user_pick=True)
        assert ctrl.session.roster.slots["QB"][0].is_drafted is True

    def test_does_not_mutate_input_records(self, small_board):
        ctrl = _make_controller(small_board)
        ctrl.toggle_draft(1, is_user_pick=True)
        assert small_board[0].is_drafted is False

    def test_unknown_rank_raises(self, small_board):
        ctrl = _make_controller(small_board)
        with pytest.raises(ValidationError, match="not found"):
            ctrl.toggle_draft(999)

    def test_invalid_toggle_logged(self, small_board, caplog):
        ctrl = _make_controller(small_board)
        with caplog.at_level(logging.WARNING):
            with pytest.raises(ValidationError):
                ctrl.toggle_draft(999)
        assert "Invalid draft toggle" in caplog.text


class TestPickAttribution:
    def test_infers_user_pick_from_snake_order(self, small_board):
        # 2 teams, user at slot 1: picks 1 and 4 are the user's
        ctrl = _make_controller(small_board, teams=2, position=1)
        for rank in (1, 2, 3, 4):
            ctrl.toggle_draft(rank)
        assert _ranks(ctrl.session.roster.all_players()) == [1, 4]

    def test_explicit_flag_overrides_turn(self, small_board):
        ctrl = _make_controller(small_board, teams=2, position=2)
        ctrl.toggle_draft(1, is_user_pick=True)
        assert ctrl.session.roster.contains(1)

    def test_is_user_on_clock(self, small_board):
        ctrl = _make_controller(small_board, teams=2, position=2)
        assert ctrl.is_user_on_clock() is False
        ctrl.toggle_draft(1)
        assert ctrl.is_user_on_clock() is True


# ── Undrafting ───────────────────────────────────────────────────────

class TestUndraft:
    def test_undraft_clears_flag_and_roster(self, small_board):
        ctrl = _make_controller(small_board)
        ctrl.toggle_draft(2, is_user_pick=True)
        updated = ctrl.toggle_draft(2)
        assert updated.is_drafted is False
        assert not ctrl.session.roster.contains(2)
        assert ctrl.session.total_picks_made == 0

    def test_undraft_from_bench(self, small_board):
        ctrl = _make_controller(small_board)
        for rank in (2, 3, 5):
            ctrl.toggle_draft(rank, is_user_pick=True)
        ctrl.toggle_draft(5)
        assert ctrl.session.roster.get_roster_count("BENCH") == 0
        assert ctrl.session.roster.get_roster_count("RB") == 2

    def test_undraft_other_teams_pick(self, small_board):
        ctrl = _make_controller(small_board)
        ctrl.toggle_draft(4, is_user_pick=False)
        ctrl.toggle_draft(4)
        assert ctrl.get_player(4).is_drafted is False

    def test_redraft_after_correction(self, small_board):
        ctrl = _make_controller(small_board)
        ctrl.toggle_draft(2, is_user_pick=True)
        ctrl.toggle_draft(2)
        ctrl.toggle_draft(2, is_user_pick=True)
        assert _ranks(ctrl.session.roster.slots["RB"]) == [2]


# ── Settings ─────────────────────────────────────────────────────────

class TestSettings:
    def test_update_settings(self, small_board):
        ctrl = _make_controller(small_board)
        settings = ctrl.update_settings(12, 7)
        assert ctrl.session.settings == DraftSettings(12, 7)
        assert settings == ctrl.session.settings

    def test_update_settings_rejects_position_past_league(self, small_board):
        ctrl = _make_controller(small_board)
        with pytest.raises(ValidationError, match="between 1 and 8"):
            ctrl.update_settings(8, 9)
        assert ctrl.session.settings == DraftSettings(10, 1)

    def test_update_settings_rejects_large_league(self, small_board):
        ctrl = _make_controller(small_board)
        with pytest.raises(ValidationError):
            ctrl.update_settings(16, 1)

    def test_change_number_of_teams_resets_position(self, small_board):
        ctrl = _make_controller(small_board, teams=12, position=10)
        assert ctrl.change_number_of_teams(8) == DraftSettings(8, 1)

    def test_change_number_of_teams_keeps_position(self, small_board):
        ctrl = _make_controller(small_board, teams=12, position=3)
        assert ctrl.change_number_of_teams(14) == DraftSettings(14, 3)

    def test_change_number_of_teams_out_of_range(self, small_board):
        ctrl = _make_controller(small_board)
        with pytest.raises(ValidationError):
            ctrl.change_number_of_teams(0)


# ── Queries ──────────────────────────────────────────────────────────

class TestQueries:
    def test_available_players(self, small_board):
        ctrl = _make_controller(small_board)
        ctrl.toggle_draft(1, is_user_pick=False)
        available = ctrl.get_available_players()
        assert len(available) == len(small_board) - 1
        assert 1 not in _ranks(available)

    def test_available_players_by_position(self, small_board):
        ctrl = _make_controller(small_board)
        assert _ranks(ctrl.get_available_players("QB")) == [8, 11, 15]

    def test_roster_summary(self, small_board):
        ctrl = _make_controller(small_board)
        ctrl.toggle_draft(8, is_user_pick=True)
        summary = ctrl.get_roster_summary()
        assert summary["QB"] == {"filled": 1, "required": 1, "remaining": 0}
