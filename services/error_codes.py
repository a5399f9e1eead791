"""
Standard error codes for the pairing service.

These error codes let callers react to specific failures without parsing
error message text.

Usage:
    from services import error_codes
    from services.result import Result

    if len(players) < 2:
        return Result.fail("Need at least 2 players", code=error_codes.INSUFFICIENT_PLAYERS)
"""

# General errors
VALIDATION_ERROR = "validation_error"

# Pool errors
INSUFFICIENT_PLAYERS = "insufficient_players"
DUPLICATE_PLAYER = "duplicate_player"

# Mode errors
UNSUPPORTED_MODE = "unsupported_mode"
