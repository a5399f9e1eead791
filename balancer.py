"""
Balanced team pairing algorithms.

All entry points are plain functions over a list of Player records. Nothing is
cached or shared between calls; randomness comes from the `rng` argument or a
fresh generator created per call.
"""

import logging
import random
from collections.abc import Sequence

from domain.exceptions import InsufficientPlayersError
from domain.models.player import Player
from domain.models.team import SubstituteInfo, SubstitutePair, TeamPair
from domain.services.team_balancing_service import TeamBalancingService
from utils.debug_logging import debug_log

logger = logging.getLogger("squad_balancer.balancer")

MIN_PLAYERS = 2
MIN_RATING = 1
MAX_RATING = 100

_balancing_service = TeamBalancingService()


def _require_players(players: Sequence[Player], required: int = MIN_PLAYERS) -> None:
    if len(players) < required:
        raise InsufficientPlayersError(required=required, available=len(players))


def _resolve_rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def shuffle_players(players: Sequence[Player], rng: random.Random | None = None) -> list[Player]:
    """Return a shuffled copy of players; the input sequence is left untouched."""
    shuffled = list(players)
    _resolve_rng(rng).shuffle(shuffled)
    return shuffled


def randomize_player_ratings(
    players: Sequence[Player],
    variation: int = 5,
    rng: random.Random | None = None,
) -> list[Player]:
    """
    Return copies of players with each rating nudged by a random offset.

    Each offset is an independent uniform integer in [-variation, +variation];
    the result is clamped to [MIN_RATING, MAX_RATING].

    Args:
        players: Players to copy
        variation: Maximum absolute offset (negative values are treated as 0)
        rng: Random source

    Returns:
        New Player instances in the same order as the input
    """
    rng = _resolve_rng(rng)
    variation = max(0, variation)
    randomized = []
    for player in players:
        offset = rng.randint(-variation, variation)
        rating = max(MIN_RATING, min(MAX_RATING, player.rating + offset))
        randomized.append(player.with_rating(rating))
    return randomized


def balance_teams(players: Sequence[Player]) -> TeamPair:
    """
    Split players into two squads with the smallest rating gap the greedy pass finds.

    Players are taken highest rating first and each goes to whichever squad has
    the lower running total (team 1 on ties). With an odd pool the median-ranked
    player is held out as substitute, then appended to the weaker squad and
    paired with the closest-rated teammate for rotation.

    Deterministic for a given input order.

    Args:
        players: At least 2 players

    Returns:
        TeamPair with both squads in assignment order

    Raises:
        InsufficientPlayersError: If fewer than 2 players are given
    """
    _require_players(players)

    pool = list(players)
    substitute = None
    if len(pool) % 2 == 1:
        # Median-ranked player sits out
        by_rating = sorted(pool, key=lambda p: p.rating, reverse=True)
        substitute = by_rating[len(by_rating) // 2]
        pool = [p for p in pool if p is not substitute]

    team1: list[Player] = []
    team2: list[Player] = []
    team1_rating = 0
    team2_rating = 0

    for player in sorted(pool, key=lambda p: p.rating, reverse=True):
        if team1_rating <= team2_rating:
            team1.append(player)
            team1_rating += player.rating
        else:
            team2.append(player)
            team2_rating += player.rating

    substitute_info = None
    if substitute is not None:
        if team1_rating <= team2_rating:
            team_with_sub = 1
            teammates = list(team1)
            team1.append(substitute)
            team1_rating += substitute.rating
        else:
            team_with_sub = 2
            teammates = list(team2)
            team2.append(substitute)
            team2_rating += substitute.rating

        rotation_player = _balancing_service.find_rotation_player(substitute, teammates)
        # An odd pool has at least 3 players, so the sub always has a teammate
        substitute_info = SubstituteInfo(
            team_with_sub=team_with_sub,
            substitute_pair=SubstitutePair(
                substitute=substitute,
                rotation_player=rotation_player,
            ),
        )

    return TeamPair(
        team1=team1,
        team2=team2,
        rating_difference=abs(team1_rating - team2_rating),
        substitute_info=substitute_info,
    )


def find_best_team_balance(
    players: Sequence[Player],
    iterations: int = 100,
    rng: random.Random | None = None,
) -> TeamPair:
    """
    Run balance_teams over many shuffles of the same players and keep the best.

    The first trial uses the input order as given. Ratings are never modified;
    only the order changes, which decides how equal ratings break ties.

    Args:
        players: At least 2 players
        iterations: Number of extra shuffled trials (0 means a single split)
        rng: Random source for the shuffles

    Returns:
        The TeamPair with the lowest rating difference seen

    Raises:
        InsufficientPlayersError: If fewer than 2 players are given
    """
    _require_players(players)
    rng = _resolve_rng(rng)

    best = balance_teams(players)
    for trial in range(max(0, iterations)):
        if best.rating_difference == 0:
            # Nothing left to improve on
            break
        candidate = balance_teams(shuffle_players(players, rng))
        if candidate.rating_difference < best.rating_difference:
            logger.debug(
                f"Best-of-N improvement on trial {trial + 1}: "
                f"{best.rating_difference} -> {candidate.rating_difference}"
            )
            debug_log(
                "best_of_n_improvement",
                "balancer.py:find_best_team_balance",
                {
                    "trial": trial + 1,
                    "previous": best.rating_difference,
                    "current": candidate.rating_difference,
                },
            )
            best = candidate

    return best


def find_randomized_team_balance(
    players: Sequence[Player],
    rating_variation: int = 5,
    iterations: int = 150,
    rng: random.Random | None = None,
) -> TeamPair:
    """
    Generate teams from randomly perturbed ratings for more varied line-ups.

    Every trial perturbs each rating by up to ±rating_variation (clamped to
    1-100), shuffles, and splits. The best trial is judged on its own perturbed
    ratings, and the returned squads carry those perturbed ratings: the goal is
    visibly different groupings, not the minimal real-rating gap.

    Args:
        players: At least 2 players
        rating_variation: Maximum absolute rating offset per player
        iterations: Number of trials after the first one
        rng: Random source for offsets and shuffles

    Returns:
        The TeamPair with the lowest perturbed rating difference seen

    Raises:
        InsufficientPlayersError: If fewer than 2 players are given
    """
    _require_players(players)
    rng = _resolve_rng(rng)

    best = None
    for trial in range(max(0, iterations) + 1):
        randomized = randomize_player_ratings(players, rating_variation, rng)
        candidate = balance_teams(shuffle_players(randomized, rng))
        if best is None or candidate.rating_difference < best.rating_difference:
            if best is not None:
                debug_log(
                    "randomized_improvement",
                    "balancer.py:find_randomized_team_balance",
                    {
                        "trial": trial,
                        "previous": best.rating_difference,
                        "current": candidate.rating_difference,
                    },
                )
            best = candidate

    logger.debug(
        f"Randomized balance (variation={rating_variation}, trials={max(0, iterations) + 1}): "
        f"diff {best.rating_difference}"
    )
    return best


def create_multiple_team_pairs(
    players: Sequence[Player],
    match_count: int,
    iterations: int = 50,
    rng: random.Random | None = None,
) -> list[TeamPair]:
    """
    Split one pool into several simultaneous matches.

    The pool is shuffled once and cut into match_count contiguous chunks of
    len(players) // match_count players; the last chunk takes the remainder.
    Each chunk is balanced with find_best_team_balance. Chunks with fewer than
    2 players are skipped.

    Args:
        players: The whole pool
        match_count: Number of matches to create
        iterations: Best-of-N trials per match
        rng: Random source for the pool shuffle and per-match searches

    Returns:
        One TeamPair per chunk, in chunk order

    Raises:
        ValueError: If match_count is less than 1
        InsufficientPlayersError: If the pool has fewer than match_count * 2 players
    """
    if match_count < 1:
        raise ValueError(f"match_count must be at least 1, got {match_count}")
    _require_players(players, match_count * 2)
    rng = _resolve_rng(rng)

    shuffled = shuffle_players(players, rng)
    players_per_match = len(shuffled) // match_count

    pairs: list[TeamPair] = []
    for index in range(match_count):
        start = index * players_per_match
        end = len(shuffled) if index == match_count - 1 else start + players_per_match
        chunk = shuffled[start:end]
        if len(chunk) < MIN_PLAYERS:
            logger.debug(f"Skipping match {index + 1}: only {len(chunk)} player(s)")
            continue
        pairs.append(find_best_team_balance(chunk, iterations, rng))

    logger.debug(
        f"Created {len(pairs)} match(es) from {len(shuffled)} players "
        f"({players_per_match} per match, last takes remainder)"
    )
    return pairs
