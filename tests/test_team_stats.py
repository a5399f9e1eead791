"""
Tests for squad statistics.
"""

from domain.models.team import TeamStats
from domain.services.team_balancing_service import TeamBalancingService
from tests.conftest import make_players


class TestGetTeamStats:
    def test_empty_squad_is_all_zero(self):
        stats = TeamBalancingService().get_team_stats([])
        assert stats == TeamStats(0, 0, 0, 0, 0)
        assert stats.to_dict() == {
            "total_rating": 0,
            "average_rating": 0,
            "player_count": 0,
            "min_rating": 0,
            "max_rating": 0,
        }

    def test_basic_stats(self):
        stats = TeamBalancingService().get_team_stats(make_players([90, 60, 75]))
        assert stats.total_rating == 225
        assert stats.average_rating == 75
        assert stats.player_count == 3
        assert stats.min_rating == 60
        assert stats.max_rating == 90

    def test_average_rounds_half_up(self):
        service = TeamBalancingService()
        # 101 / 2 = 50.5 -> 51
        assert service.get_team_stats(make_players([50, 51])).average_rating == 51
        # 100 / 3 = 33.33 -> 33
        assert service.get_team_stats(make_players([33, 33, 34])).average_rating == 33
        # 101 / 3 = 33.67 -> 34
        assert service.get_team_stats(make_players([33, 34, 34])).average_rating == 34

    def test_single_player(self):
        stats = TeamBalancingService().get_team_stats(make_players([42]))
        assert stats == TeamStats(42, 42, 1, 42, 42)

    def test_average_value_empty(self):
        assert TeamBalancingService().calculate_average_value([]) == 0
