"""
Team pairing domain models.
"""

from dataclasses import dataclass

from domain.models.player import Player


@dataclass(frozen=True)
class SubstitutePair:
    """The held-out substitute and the squad-mate they rotate with."""

    substitute: Player
    rotation_player: Player


@dataclass(frozen=True)
class SubstituteInfo:
    """Which squad holds the substitute (1 or 2) and who they rotate with."""

    team_with_sub: int
    substitute_pair: SubstitutePair


@dataclass
class TeamPair:
    """
    Two squads generated for one match.

    Squads keep assignment order, not rating order. substitute_info is only
    set when the input pool had an odd number of players.
    """

    team1: list[Player]
    team2: list[Player]
    rating_difference: int
    substitute_info: SubstituteInfo | None = None

    def get_team(self, number: int) -> list[Player]:
        """Return squad 1 or 2."""
        if number == 1:
            return self.team1
        if number == 2:
            return self.team2
        raise ValueError(f"Team number must be 1 or 2, got {number}")

    def all_players(self) -> list[Player]:
        return self.team1 + self.team2

    @property
    def substitute(self) -> Player | None:
        if self.substitute_info is None:
            return None
        return self.substitute_info.substitute_pair.substitute

    def to_dict(self) -> dict:
        """Plain-dict form for callers that render or transmit the pairing."""
        substitute_info = None
        if self.substitute_info is not None:
            pair = self.substitute_info.substitute_pair
            substitute_info = {
                "team_with_sub": self.substitute_info.team_with_sub,
                "substitute": pair.substitute.to_dict(),
                "rotation_player": pair.rotation_player.to_dict(),
            }
        return {
            "team1": [p.to_dict() for p in self.team1],
            "team2": [p.to_dict() for p in self.team2],
            "rating_difference": self.rating_difference,
            "substitute_info": substitute_info,
        }

    def __str__(self) -> str:
        team1_names = ", ".join(p.name for p in self.team1)
        team2_names = ", ".join(p.name for p in self.team2)
        return f"Team 1: {team1_names} | Team 2: {team2_names} (diff {self.rating_difference})"


@dataclass(frozen=True)
class TeamStats:
    """Aggregate rating statistics for one squad."""

    total_rating: int = 0
    average_rating: int = 0
    player_count: int = 0
    min_rating: int = 0
    max_rating: int = 0

    def to_dict(self) -> dict:
        return {
            "total_rating": self.total_rating,
            "average_rating": self.average_rating,
            "player_count": self.player_count,
            "min_rating": self.min_rating,
            "max_rating": self.max_rating,
        }
