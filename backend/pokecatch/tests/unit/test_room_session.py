"""
Unit tests for RoomSession: notice logging and follow-up scheduling.
"""

import logging

import pytest

from pokecatch.logic.enums import RoomPhase
from pokecatch.logic.events import JoinsClosed
from pokecatch.logic.exceptions import InvalidRoomSettingsError, InvalidTransitionError


class TestOpen:
    def test_open_schedules_join_close(self, session, scheduler, leader, pikachu):
        state = session.open(leader, pikachu, 3)
        assert session.state is state
        assert session.is_open is True
        assert scheduler.pending_count == 1

    def test_open_twice_rejected(self, session, leader, pikachu):
        session.open(leader, pikachu, 3)
        with pytest.raises(InvalidTransitionError, match="already open"):
            session.open(leader, pikachu, 3)

    def test_invalid_max_players_leaves_session_unopened(self, session, leader, pikachu):
        with pytest.raises(InvalidRoomSettingsError):
            session.open(leader, pikachu, 0)
        assert session.is_open is False

    def test_state_before_open_raises(self, session):
        with pytest.raises(InvalidTransitionError, match="not opened"):
            _ = session.state

    def test_logs_leader_and_room_creation(self, session, leader, pikachu, caplog):
        with caplog.at_level(logging.INFO):
            session.open(leader, pikachu, 3)
        assert "room leader assigned" in caplog.text
        assert "room created" in caplog.text


class TestJoin:
    def test_join_returns_whether_admitted(self, session, leader, pikachu, make_player):
        session.open(leader, pikachu, 2)
        assert session.join(make_player("Ash")) is True
        assert session.join(make_player("Misty")) is False
        assert session.state.player_names == ["Oak", "Ash"]

    def test_rejection_logged_as_warning(self, session, leader, pikachu, make_player, caplog):
        session.open(leader, pikachu, 3)
        session.join(make_player("Ash"))
        with caplog.at_level(logging.INFO):
            session.join(make_player("Ash"))
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "join rejected" in caplog.text
        assert "duplicate_name" in caplog.text


class TestFullLifecycle:
    async def test_runs_to_ended(self, session, scheduler, clock, leader, pikachu, make_player, caplog):
        start = clock.now_ms()
        session.open(leader, pikachu, 3)
        session.join(make_player("Ash"))

        with caplog.at_level(logging.INFO):
            await scheduler.run(session.dispatch)

        assert session.is_ended is True
        state = session.state
        assert state.phase == RoomPhase.ENDED
        assert clock.now_ms() == start + 15000
        assert set(state.mission.results) == {p.id for p in state.players}
        for message in ("joins closed", "mission started", "catch result", "mission ended", "room ended"):
            assert message in caplog.text
        assert caplog.text.count("catch result") == 2

    async def test_mission_active_during_mission_only(self, session, scheduler, leader, pikachu):
        session.open(leader, pikachu, 1)
        observed = []

        def dispatch(event):
            session.dispatch(event)
            observed.append((session.state.phase, session.mission_active))

        await scheduler.run(dispatch)
        assert observed == [
            (RoomPhase.CLOSED, False),
            (RoomPhase.MISSION_RUNNING, True),
            (RoomPhase.MISSION_RUNNING, False),
            (RoomPhase.ENDED, False),
        ]

    def test_notices_carry_room_id_context(self, session, leader, pikachu, caplog):
        session.open(leader, pikachu, 3)
        with caplog.at_level(logging.INFO):
            session.dispatch(JoinsClosed())
        assert session.state.id in caplog.text
