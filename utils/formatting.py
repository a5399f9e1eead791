"""
Shared formatting helpers for pairing summaries.
"""

from collections.abc import Iterable

from domain.models.player import Player
from domain.models.team import TeamPair


def format_squad(players: Iterable[Player], substitute: Player | None = None) -> str:
    """Return 'Name (rating)' entries joined by commas, marking the substitute."""
    entries = []
    for player in players:
        label = f"{player.name} ({player.rating})"
        if substitute is not None and player is substitute:
            label += " [sub]"
        entries.append(label)
    return ", ".join(entries) if entries else "(empty)"


def format_team_pair(pair: TeamPair) -> str:
    """
    Format a pairing as a single log-friendly line.

    Example:
        Team 1 [150]: A (90), D (60) vs Team 2 [150]: B (80), C (70) | diff 0
    """
    substitute = pair.substitute
    team1_total = sum(p.rating for p in pair.team1)
    team2_total = sum(p.rating for p in pair.team2)
    line = (
        f"Team 1 [{team1_total}]: {format_squad(pair.team1, substitute)}"
        f" vs Team 2 [{team2_total}]: {format_squad(pair.team2, substitute)}"
        f" | diff {pair.rating_difference}"
    )
    if pair.substitute_info is not None:
        rotation = pair.substitute_info.substitute_pair.rotation_player
        line += f" | {substitute.name} rotates with {rotation.name}"
    return line
