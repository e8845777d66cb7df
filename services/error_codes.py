"""
Standard error codes for the service layer.

These let callers (command handlers, the CLI) react to specific failures
without parsing error message text.

Usage:
    from services.error_codes import DUPLICATE_PLAYER
    from services.result import Result

    return Result.fail("Player listed twice", code=DUPLICATE_PLAYER)
"""

# General errors
NOT_FOUND = "not_found"

# Pool validation errors
DUPLICATE_PLAYER = "duplicate_player"
INVALID_RATING = "invalid_rating"
