"""
Tests for MatchmakingService (pool scheduling, validation, Result wrapping).
"""

import random
from collections import Counter

import pytest

from domain.models.team import ROLES
from services import error_codes
from services.matchmaking_service import MatchmakingInputError, MatchmakingService
from shuffler import MatchShuffler
from tests.conftest import TEST_SEED, make_player


def _ids_in_result(result):
    ids = [p.player_id for match in result.matches for p in match.players]
    ids.extend(p.player_id for p in result.flex_queue)
    return ids


def _signature(result):
    return [
        [
            (m.team_a.get_assignment_by_role(r).player.player_id,
             m.team_b.get_assignment_by_role(r).player.player_id)
            for r in ROLES
        ]
        for m in result.matches
    ]


class TestSchedule:
    """Tests for MatchmakingService.schedule."""

    def test_empty_pool(self):
        result = MatchmakingService().schedule([], seed=TEST_SEED)
        assert result.matches == []
        assert result.flex_queue == []

    def test_nine_players_all_flex(self, make_pool):
        pool = make_pool(9)
        result = MatchmakingService().schedule(pool, seed=TEST_SEED)
        assert result.matches == []
        assert result.flex_queue == pool

    def test_twenty_three_players(self, make_pool):
        pool = make_pool(23)
        result = MatchmakingService().schedule(pool, seed=TEST_SEED)

        assert len(result.matches) == 2
        assert {p.player_id for p in result.matches[0].players} == {
            p.player_id for p in pool[:10]
        }
        assert {p.player_id for p in result.matches[1].players} == {
            p.player_id for p in pool[10:20]
        }
        assert result.flex_queue == pool[20:]

    @pytest.mark.parametrize("size", [0, 1, 9, 10, 11, 19, 20, 31, 45])
    def test_every_player_appears_exactly_once(self, make_pool, size):
        pool = make_pool(size)
        result = MatchmakingService().schedule(pool, seed=TEST_SEED)

        counts = Counter(_ids_in_result(result))
        assert set(counts) == {p.player_id for p in pool}
        assert all(count == 1 for count in counts.values())
        assert len(result.matches) == size // 10
        assert len(result.flex_queue) == size % 10

    def test_teams_cover_every_role(self, make_pool):
        result = MatchmakingService().schedule(make_pool(30), seed=TEST_SEED)

        for match in result.matches:
            assert sorted(a.assigned_role for a in match.team_a) == sorted(ROLES)
            assert sorted(a.assigned_role for a in match.team_b) == sorted(ROLES)
            ids_a = {p.player_id for p in match.team_a.players}
            ids_b = {p.player_id for p in match.team_b.players}
            assert not ids_a & ids_b

    def test_shape_is_stable_across_calls(self, make_pool):
        pool = make_pool(27)
        service = MatchmakingService()
        first = service.schedule(pool)
        second = service.schedule(pool)

        assert len(first.matches) == len(second.matches)
        assert [len(m.team_a) for m in first.matches] == [len(m.team_a) for m in second.matches]
        assert [len(m.team_b) for m in first.matches] == [len(m.team_b) for m in second.matches]
        assert first.flex_queue == second.flex_queue

    def test_seed_reproduces_assignments(self, make_pool):
        pool = make_pool(20)
        first = MatchmakingService().schedule(pool, seed=TEST_SEED)
        second = MatchmakingService().schedule(pool, rng=random.Random(TEST_SEED))
        assert _signature(first) == _signature(second)

    def test_parallel_batches_match_sequential(self, make_pool):
        pool = make_pool(40)
        sequential = MatchmakingService(max_workers=1).schedule(pool, seed=TEST_SEED)
        parallel = MatchmakingService(max_workers=4).schedule(pool, seed=TEST_SEED)
        assert _signature(sequential) == _signature(parallel)

    def test_tiny_time_budget_still_completes(self, make_pool):
        service = MatchmakingService(time_budget_seconds=1e-9)
        result = service.schedule(make_pool(30), seed=TEST_SEED)
        assert len(result.matches) == 3
        assert all(len(m.players) == 10 for m in result.matches)

    def test_skewed_batch_is_repaired(self, all_top_players):
        service = MatchmakingService(shuffler=MatchShuffler(trials=10))
        result = service.schedule(all_top_players, seed=TEST_SEED)
        assert len(result.matches) == 1
        assert len({p.player_id for p in result.matches[0].players}) == 10

    def test_does_not_mutate_pool(self, make_pool):
        pool = make_pool(15)
        before = list(pool)
        MatchmakingService().schedule(pool, seed=TEST_SEED)
        assert pool == before


class TestValidation:
    """Tests for malformed pools."""

    def test_duplicate_player_ids_rejected(self, make_pool):
        pool = make_pool(10) + [make_player(3)]
        with pytest.raises(MatchmakingInputError) as exc_info:
            MatchmakingService().schedule(pool)
        assert exc_info.value.code == error_codes.DUPLICATE_PLAYER
        assert "p3" in str(exc_info.value)

    def test_negative_rating_rejected(self, make_pool):
        pool = make_pool(9) + [make_player(99, rating=-1)]
        with pytest.raises(MatchmakingInputError) as exc_info:
            MatchmakingService().schedule(pool)
        assert exc_info.value.code == error_codes.INVALID_RATING

    def test_small_malformed_pool_still_rejected(self):
        with pytest.raises(ValueError):
            MatchmakingService().schedule([make_player(1), make_player(1)])

    def test_zero_rating_is_valid(self):
        pool = [make_player(i, rating=0) for i in range(10)]
        result = MatchmakingService().schedule(pool, seed=TEST_SEED)
        assert result.matches[0].badness_score == 0


class TestRun:
    """Tests for the Result-returning entry point."""

    def test_run_success(self, make_pool):
        result = MatchmakingService().run(make_pool(12), seed=TEST_SEED)
        assert result.success is True
        assert len(result.value.matches) == 1
        assert len(result.value.flex_queue) == 2

    def test_run_small_pool_is_success(self, make_pool):
        result = MatchmakingService().run(make_pool(4))
        assert result
        assert result.value.matches == []

    def test_run_duplicate_fails(self):
        result = MatchmakingService().run([make_player(1), make_player(1)])
        assert result.success is False
        assert result.error_code == error_codes.DUPLICATE_PLAYER
        assert result.value is None

    def test_run_negative_rating_fails(self):
        result = MatchmakingService().run([make_player(1, rating=-50)])
        assert result.error_code == error_codes.INVALID_RATING
