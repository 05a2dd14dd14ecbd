import logging

import pytest

from pokecatch.app import main as main_module
from pokecatch.app.main import build_parser, main, run
from pokecatch.app.settings import SimulationSettings
from pokecatch.logic.enums import RoomPhase
from pokecatch.tests.helpers import FIXED_SEED


@pytest.fixture
def logging_calls(monkeypatch):
    """Record setup_logging calls instead of reconfiguring the root logger."""
    calls = []
    monkeypatch.setattr(main_module, "setup_logging", lambda **kwargs: calls.append(kwargs))
    return calls


class TestBuildParser:
    def test_defaults_leave_settings_untouched(self):
        args = build_parser().parse_args([])
        assert args.max_players is None
        assert args.seed is None
        assert args.virtual_time is None
        assert args.leader is None

    def test_parses_flags(self):
        args = build_parser().parse_args(["-n", "4", "--seed", FIXED_SEED, "--virtual-time", "--leader", "Ash"])
        assert args.max_players == 4
        assert args.seed == FIXED_SEED
        assert args.virtual_time is True
        assert args.leader == "Ash"


class TestMain:
    def test_successful_run_returns_zero(self, logging_calls, caplog):
        with caplog.at_level(logging.INFO):
            code = main(["--virtual-time", "--leader", "Ash", "-n", "3", "--seed", FIXED_SEED])

        assert code == 0
        assert logging_calls == [{"log_dir": None, "run_label": FIXED_SEED[:8]}]
        assert "room ended, game over" in caplog.text

    def test_invalid_seed_returns_two(self, logging_calls, capsys):
        code = main(["--seed", "not-hex"])

        assert code == 2
        assert "Invalid configuration" in capsys.readouterr().err
        assert logging_calls == []

    def test_blank_leader_returns_one(self, logging_calls, caplog):
        with caplog.at_level(logging.INFO):
            code = main(["--virtual-time", "--leader", " ", "--seed", FIXED_SEED])

        assert code == 1
        assert "error starting game" in caplog.text

    def test_zero_capacity_returns_one(self, logging_calls):
        assert main(["--virtual-time", "--leader", "Ash", "-n", "0"]) == 1

    def test_prompts_when_no_leader_given(self, logging_calls, monkeypatch, caplog):
        prompts = []

        def fake_input(message):
            prompts.append(message)
            return ""

        monkeypatch.setattr("builtins.input", fake_input)
        with caplog.at_level(logging.INFO):
            code = main(["--virtual-time", "-n", "1"])

        assert code == 0
        assert prompts == ["Host game: "]
        assert "DefaultLeader" in caplog.text

    def test_env_settings_apply(self, logging_calls, monkeypatch):
        monkeypatch.setenv("CATCH_VIRTUAL_TIME", "true")
        monkeypatch.setenv("CATCH_LOG_DIR", "/tmp/pokecatch-logs")
        assert main(["--leader", "Ash", "-n", "1", "--seed", FIXED_SEED]) == 0
        assert logging_calls[0]["log_dir"] == "/tmp/pokecatch-logs"


class TestRun:
    async def test_run_uses_seed_and_leader(self):
        settings = SimulationSettings(virtual_time=True, max_players=2)
        report = await run(settings, seed=FIXED_SEED, leader="Ash")

        assert report is not None
        assert report.room.phase == RoomPhase.ENDED
        assert report.room.player_names == ["Ash", "Player1"]

    async def test_same_seed_same_outcome(self):
        settings = SimulationSettings(virtual_time=True, max_players=3)
        first = await run(settings, seed=FIXED_SEED, leader="Ash")
        second = await run(settings, seed=FIXED_SEED, leader="Ash")
        assert first.room.mission.results == second.room.mission.results
