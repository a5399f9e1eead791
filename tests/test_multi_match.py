"""
Tests for splitting one pool into several simultaneous matches.
"""

import random

import pytest

from balancer import create_multiple_team_pairs
from domain.exceptions import InsufficientPlayersError
from tests.conftest import make_players


def pool(size: int) -> list:
    rng = random.Random(size)
    return make_players([rng.randint(30, 95) for _ in range(size)])


class TestCreateMultipleTeamPairs:
    def test_even_split(self, rng):
        players = pool(12)
        pairs = create_multiple_team_pairs(players, 3, rng=rng)

        assert len(pairs) == 3
        assert all(len(pair.all_players()) == 4 for pair in pairs)

    def test_every_player_placed_once(self, rng):
        players = pool(17)
        pairs = create_multiple_team_pairs(players, 4, rng=rng)

        placed = [p.id for pair in pairs for p in pair.all_players()]
        assert sorted(placed) == sorted(p.id for p in players)

    def test_last_match_absorbs_remainder(self, rng):
        players = pool(13)
        pairs = create_multiple_team_pairs(players, 3, rng=rng)

        assert [len(pair.all_players()) for pair in pairs] == [4, 4, 5]
        assert pairs[-1].substitute_info is not None
        assert all(pair.substitute_info is None for pair in pairs[:-1])

    def test_single_match_uses_whole_pool(self, rng):
        players = pool(9)
        pairs = create_multiple_team_pairs(players, 1, rng=rng)

        assert len(pairs) == 1
        assert len(pairs[0].all_players()) == 9

    def test_minimum_pool(self, rng):
        players = pool(6)
        pairs = create_multiple_team_pairs(players, 3, rng=rng)
        assert [len(pair.team1) + len(pair.team2) for pair in pairs] == [2, 2, 2]

    def test_undersized_pool_raises(self):
        with pytest.raises(InsufficientPlayersError) as exc_info:
            create_multiple_team_pairs(pool(5), 3)
        assert exc_info.value.required == 6
        assert exc_info.value.available == 5

    def test_non_positive_match_count_raises(self):
        with pytest.raises(ValueError) as exc_info:
            create_multiple_team_pairs(pool(6), 0)
        assert not isinstance(exc_info.value, InsufficientPlayersError)

    def test_seeded_rng_is_reproducible(self):
        players = pool(14)
        first = create_multiple_team_pairs(players, 2, rng=random.Random(8))
        second = create_multiple_team_pairs(players, 2, rng=random.Random(8))
        assert first == second

    def test_input_is_not_modified(self, rng):
        players = pool(10)
        snapshot = list(players)
        create_multiple_team_pairs(players, 2, rng=rng)
        assert players == snapshot
