"""
Team balancing domain service.

Handles squad rating sums, balance scoring and descriptive stats.
"""

from collections.abc import Sequence

from domain.models.player import Player
from domain.models.team import TeamStats


class TeamBalancingService:
    """
    Pure domain service for team balancing logic.

    Responsibilities:
    - Calculate squad values
    - Score the balance between two squads
    - Pick the rotation partner for a substitute
    - Aggregate squad statistics

    Holds no state, so one instance can be shared freely.
    """

    def calculate_team_value(self, players: Sequence[Player]) -> int:
        """
        Calculate the cumulative rating of a squad.

        Args:
            players: Squad members

        Returns:
            Sum of all player ratings
        """
        return sum(p.rating for p in players)

    def calculate_rating_difference(
        self, team1: Sequence[Player], team2: Sequence[Player]
    ) -> int:
        """Absolute difference between the two squads' cumulative ratings."""
        return abs(self.calculate_team_value(team1) - self.calculate_team_value(team2))

    def find_rotation_player(
        self, substitute: Player, teammates: Sequence[Player]
    ) -> Player | None:
        """
        Find the squad-mate whose rating is closest to the substitute's.

        The first player in squad order wins ties.

        Args:
            substitute: The player sitting out first
            teammates: Squad-mates, excluding the substitute

        Returns:
            The closest-rated teammate, or None if there are no teammates
        """
        closest = None
        closest_diff = None
        for player in teammates:
            diff = abs(player.rating - substitute.rating)
            if closest_diff is None or diff < closest_diff:
                closest = player
                closest_diff = diff
        return closest

    def calculate_average_value(self, players: Sequence[Player]) -> int:
        """
        Calculate the average rating, rounded half up.

        Args:
            players: List of players

        Returns:
            Average rating as an integer (0 for an empty list)
        """
        if not players:
            return 0

        total = self.calculate_team_value(players)
        count = len(players)
        # floor(total / count + 1/2) without going through floats
        return (2 * total + count) // (2 * count)

    def get_team_stats(self, players: Sequence[Player]) -> TeamStats:
        """
        Get descriptive stats for a squad.

        An empty squad is a valid "nothing selected yet" state and yields
        all-zero stats.

        Args:
            players: Squad to analyze

        Returns:
            TeamStats with total, average, count, min and max rating
        """
        if not players:
            return TeamStats()

        ratings = [p.rating for p in players]
        return TeamStats(
            total_rating=sum(ratings),
            average_rating=self.calculate_average_value(players),
            player_count=len(ratings),
            min_rating=min(ratings),
            max_rating=max(ratings),
        )
