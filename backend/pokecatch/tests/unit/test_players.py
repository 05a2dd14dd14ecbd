"""
Unit tests for player and leader construction, catching and the played flag.
"""

import pytest

from pokecatch.logic.enums import PlayerRole
from pokecatch.logic.exceptions import CatchValidationError, InvalidPlayerNameError
from pokecatch.logic.notices import CatchResultNotice
from pokecatch.logic.players import catch_pokemon, create_leader, create_player, mark_as_played


class TestCreatePlayer:
    @pytest.mark.parametrize("name", ["Ash", "  Misty  ", "Brock\t"])
    def test_valid_names_are_trimmed(self, ctx, name):
        player = create_player(name, ctx=ctx)
        assert player.name == name.strip()
        assert player.has_played is False
        assert player.role == PlayerRole.PARTICIPANT
        assert player.is_leader is False

    @pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
    def test_empty_names_rejected(self, ctx, name):
        with pytest.raises(InvalidPlayerNameError, match="cannot be empty"):
            create_player(name, ctx=ctx)

    def test_ids_are_distinct(self, ctx):
        assert create_player("Ash", ctx=ctx).id != create_player("Ash", ctx=ctx).id


class TestCreateLeader:
    def test_leader_role(self, ctx):
        leader = create_leader(" Oak ", ctx=ctx)
        assert leader.name == "Oak"
        assert leader.is_leader is True
        assert leader.has_played is False

    @pytest.mark.parametrize("name", ["", "  "])
    def test_empty_leader_name_is_validation_error(self, ctx, name):
        with pytest.raises(CatchValidationError):
            create_leader(name, ctx=ctx)


class TestCatchPokemon:
    def test_reports_outcome_without_changing_player(self, ctx, rng):
        player = create_player("Ash", ctx=ctx)
        outcome = catch_pokemon(player, rng, mission_id="m1")
        assert isinstance(outcome.success, bool)
        assert isinstance(outcome.notice, CatchResultNotice)
        assert outcome.notice.player_name == "Ash"
        assert outcome.notice.success is outcome.success
        assert player.has_played is False

    def test_leader_can_catch(self, leader, rng):
        outcome = catch_pokemon(leader, rng, mission_id="m1")
        assert outcome.notice.player_name == "Oak"


class TestMarkAsPlayed:
    def test_sets_flag_on_copy(self, ctx):
        player = create_player("Ash", ctx=ctx)
        played = mark_as_played(player)
        assert played.has_played is True
        assert player.has_played is False
        assert played.id == player.id

    def test_idempotent(self, ctx):
        played = mark_as_played(create_player("Ash", ctx=ctx))
        assert mark_as_played(played) == played
