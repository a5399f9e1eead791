"""
Domain models - pure data structures representing balancing inputs and outputs.
"""

from domain.models.player import Player
from domain.models.team import SubstituteInfo, SubstitutePair, TeamPair, TeamStats

__all__ = ["Player", "SubstituteInfo", "SubstitutePair", "TeamPair", "TeamStats"]
