"""
Team pairing orchestration for callers (UI handlers, API resolvers, scripts).
"""

import logging
import random
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

import balancer
from config import DEFAULT_BALANCE_MODE, LOG_PAIRINGS, PAIRING_SETTINGS
from domain.exceptions import DuplicatePlayerError, InsufficientPlayersError
from domain.models.player import Player
from domain.models.team import TeamPair, TeamStats
from domain.services.team_balancing_service import TeamBalancingService
from services import error_codes
from services.result import Result
from utils.formatting import format_team_pair

logger = logging.getLogger("squad_balancer.services.pairing")


class BalanceMode(Enum):
    """Team generation modes offered to callers."""

    BALANCED = "balanced"
    RANDOM = "random"
    # Accepted as a name only; generate_teams rejects it
    RATING_SPREAD = "rating-spread"


class PairingService:
    """
    Wraps the balancer with record parsing, mode selection and Result handling.

    Holds only immutable settings. Each call builds its own random generator,
    so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        iterations: int | None = None,
        randomized_iterations: int | None = None,
        rating_variation: int | None = None,
        multi_match_iterations: int | None = None,
        seed: int | None = None,
    ):
        """
        Initialize the service.

        Args:
            iterations: Best-of-N trials for balanced mode (default from PAIRING_SETTINGS)
            randomized_iterations: Trials for random mode
            rating_variation: Rating perturbation bound for random mode
            multi_match_iterations: Best-of-N trials per match in multi-match splits
            seed: If set, every call uses random.Random(seed) for reproducible output
        """
        settings = PAIRING_SETTINGS
        self.iterations = iterations if iterations is not None else settings["iterations"]
        self.randomized_iterations = (
            randomized_iterations
            if randomized_iterations is not None
            else settings["randomized_iterations"]
        )
        self.rating_variation = (
            rating_variation if rating_variation is not None else settings["rating_variation"]
        )
        self.multi_match_iterations = (
            multi_match_iterations
            if multi_match_iterations is not None
            else settings["multi_match_iterations"]
        )
        self.seed = seed
        self.balancing_service = TeamBalancingService()

    def _new_rng(self) -> random.Random:
        return random.Random(self.seed)

    @staticmethod
    def parse_players(records: Iterable[Player | Mapping[str, Any]]) -> list[Player]:
        """
        Convert caller records into Player instances.

        Raises:
            ValueError: On malformed records or duplicate ids
        """
        players: list[Player] = []
        seen_ids: set[int] = set()
        for record in records:
            player = record if isinstance(record, Player) else Player.from_dict(record)
            if player.id in seen_ids:
                raise DuplicatePlayerError(player.id)
            seen_ids.add(player.id)
            players.append(player)
        return players

    @staticmethod
    def _parse_mode(mode: "BalanceMode | str | None") -> BalanceMode:
        if mode is None:
            mode = DEFAULT_BALANCE_MODE
        if isinstance(mode, BalanceMode):
            return mode
        try:
            return BalanceMode(mode)
        except ValueError:
            raise ValueError(f"Unknown balance mode {mode!r}") from None

    def _fail_from_error(self, error: ValueError) -> Result:
        if isinstance(error, InsufficientPlayersError):
            return Result.fail(str(error), code=error_codes.INSUFFICIENT_PLAYERS)
        if isinstance(error, DuplicatePlayerError):
            return Result.fail(str(error), code=error_codes.DUPLICATE_PLAYER)
        return Result.fail(str(error), code=error_codes.VALIDATION_ERROR)

    def _log_pairing(self, label: str, pair: TeamPair) -> None:
        if LOG_PAIRINGS:
            logger.info(f"{label}: {format_team_pair(pair)}")

    def generate_teams(
        self,
        records: Iterable[Player | Mapping[str, Any]],
        mode: "BalanceMode | str | None" = None,
    ) -> Result[TeamPair]:
        """
        Generate one match from the given players.

        Args:
            records: Player instances or {id, name, rating} mappings
            mode: BALANCED (best-of-N), RANDOM (perturbed ratings) or a mode name

        Returns:
            Result.ok(TeamPair) on success
            Result.fail(error, code) on bad input, undersized pool or unsupported mode
        """
        try:
            players = self.parse_players(records)
            balance_mode = self._parse_mode(mode)
        except ValueError as e:
            return self._fail_from_error(e)

        if balance_mode is BalanceMode.RATING_SPREAD:
            return Result.fail(
                "Balance mode 'rating-spread' is not implemented",
                code=error_codes.UNSUPPORTED_MODE,
            )

        rng = self._new_rng()
        try:
            if balance_mode is BalanceMode.RANDOM:
                pair = balancer.find_randomized_team_balance(
                    players,
                    rating_variation=self.rating_variation,
                    iterations=self.randomized_iterations,
                    rng=rng,
                )
            else:
                pair = balancer.find_best_team_balance(
                    players, iterations=self.iterations, rng=rng
                )
        except InsufficientPlayersError as e:
            logger.warning(f"Cannot generate teams: {e}")
            return self._fail_from_error(e)

        self._log_pairing(f"Generated {balance_mode.value} teams", pair)
        return Result.ok(pair)

    def generate_matches(
        self,
        records: Iterable[Player | Mapping[str, Any]],
        match_count: int,
    ) -> Result[list[TeamPair]]:
        """
        Generate several simultaneous matches from one pool.

        Returns:
            Result.ok(list of TeamPair) on success
            Result.fail(error, code) on bad input or a pool smaller than match_count * 2
        """
        try:
            players = self.parse_players(records)
            # bool is an int subclass, reject it explicitly
            if not isinstance(match_count, int) or isinstance(match_count, bool):
                raise ValueError(f"match_count must be an integer, got {match_count!r}")
            if match_count < 1:
                raise ValueError(f"match_count must be at least 1, got {match_count}")
            pairs = balancer.create_multiple_team_pairs(
                players,
                match_count,
                iterations=self.multi_match_iterations,
                rng=self._new_rng(),
            )
        except InsufficientPlayersError as e:
            logger.warning(f"Cannot generate {match_count} matches: {e}")
            return self._fail_from_error(e)
        except ValueError as e:
            return self._fail_from_error(e)

        for number, pair in enumerate(pairs, 1):
            self._log_pairing(f"Match {number}/{len(pairs)}", pair)
        return Result.ok(pairs)

    def get_team_stats(self, records: Iterable[Player | Mapping[str, Any]]) -> Result[TeamStats]:
        """Aggregate rating stats for a selection; empty selections yield zeros."""
        try:
            players = self.parse_players(records)
        except ValueError as e:
            return self._fail_from_error(e)
        return Result.ok(self.balancing_service.get_team_stats(players))

    def summarize_pairing(self, pair: TeamPair) -> dict:
        """
        Build a render-ready summary of a pairing.

        Returns:
            Dict with the pairing itself plus per-squad stats
        """
        summary = pair.to_dict()
        summary["team1_stats"] = self.balancing_service.get_team_stats(pair.team1).to_dict()
        summary["team2_stats"] = self.balancing_service.get_team_stats(pair.team2).to_dict()
        return summary
