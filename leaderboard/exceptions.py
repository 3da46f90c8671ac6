"""
Exceptions raised by the leaderboard pipeline.

Every recoverable failure derives from StandingsError so callers can hold
the last good standings behind a single except clause.
"""


class StandingsError(Exception):
    """Base exception for standings recomputation errors"""
    pass


class EmptyInputError(StandingsError):
    """Raised when no player lines remain to rank"""
    pass


class NumberFormatError(StandingsError, ValueError):
    """Raised when a score token cannot be read as a number"""
    pass


class InputTooLargeError(StandingsError, ValueError):
    """Raised when the pasted text exceeds the accepted size"""
    pass


class EditError(StandingsError):
    """Raised when an inline edit addresses a field that does not exist"""
    pass
