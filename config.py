"""
Centralized configuration for the squad balancer.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_bool(env_var: str, default: bool) -> bool:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _parse_choice(env_var: str, default: str, choices: set[str]) -> str:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in choices else default


BALANCE_MODES = {"balanced", "random", "rating-spread"}

# Search effort and perturbation defaults for the service layer.
# The balancer functions keep their own literal defaults.
PAIRING_SETTINGS: dict[str, Any] = {
    "iterations": max(0, _parse_int("PAIRING_ITERATIONS", 100)),
    "randomized_iterations": max(0, _parse_int("RANDOMIZED_ITERATIONS", 150)),
    "rating_variation": max(0, _parse_int("RATING_VARIATION", 5)),
    "multi_match_iterations": max(0, _parse_int("MULTI_MATCH_ITERATIONS", 50)),
}

DEFAULT_BALANCE_MODE = _parse_choice("DEFAULT_BALANCE_MODE", "balanced", BALANCE_MODES)

# Info-level summary line for every generated pairing
LOG_PAIRINGS = _parse_bool("LOG_PAIRINGS", True)
