"""
Domain-level exceptions.
"""


class InsufficientPlayersError(ValueError):
    """
    Raised when a pool is too small to form the requested squads.

    Subclasses ValueError so callers that already guard pool size with
    `except ValueError` keep working.
    """

    def __init__(self, required: int, available: int, message: str | None = None):
        self.required = required
        self.available = available
        super().__init__(
            message or f"Need at least {required} players, got {available}"
        )


class DuplicatePlayerError(ValueError):
    """Raised when the same player id appears more than once in a pool."""

    def __init__(self, player_id: int):
        self.player_id = player_id
        super().__init__(f"Duplicate player id {player_id}")
