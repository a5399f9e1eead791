"""
Application services layer.

Services orchestrate the balancer and domain services for callers.
"""

from services.pairing_service import BalanceMode, PairingService
from services.result import Result

__all__ = ["BalanceMode", "PairingService", "Result"]
