"""
Player domain model.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class Player:
    """
    A rated player handed to the balancer.

    This is a pure domain model with no infrastructure dependencies.
    Instances are immutable; rating-perturbed copies are made with with_rating().
    """

    id: int
    name: str
    rating: int

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Player":
        """
        Build a player from a caller-supplied {id, name, rating} record.

        Raises:
            ValueError: If the record is not a mapping, or a field is missing or has the wrong type
        """
        if not isinstance(record, Mapping):
            raise ValueError(f"Player record must be a mapping, got {record!r}")

        missing = [key for key in ("id", "name", "rating") if key not in record]
        if missing:
            raise ValueError(f"Player record is missing fields: {', '.join(missing)}")

        player_id = record["id"]
        name = record["name"]
        rating = record["rating"]

        # bool is an int subclass, reject it explicitly
        if not isinstance(player_id, int) or isinstance(player_id, bool):
            raise ValueError(f"Player id must be an integer, got {player_id!r}")
        if not isinstance(rating, int) or isinstance(rating, bool):
            raise ValueError(f"Rating for player {player_id} must be an integer, got {rating!r}")
        if not isinstance(name, str):
            raise ValueError(f"Name for player {player_id} must be a string, got {name!r}")

        return cls(id=player_id, name=name, rating=rating)

    def with_rating(self, rating: int) -> "Player":
        """Return a copy of this player with a different rating."""
        return replace(self, rating=rating)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "rating": self.rating}

    def __str__(self) -> str:
        return f"{self.name} ({self.rating})"
