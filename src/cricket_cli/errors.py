"""Exceptions raised by the cricket CLI."""


class CricketCLIError(Exception):
    """Base exception for the cricket CLI."""
    pass


class CricketAPIError(CricketCLIError):
    """Raised when the CricketData API cannot be reached or reports a failure."""
    pass


class AbortError(CricketCLIError):
    """Raised to stop the current view with a message for the user."""
    pass


class NoMatchesError(AbortError):
    """Raised when a view has no matches to show."""
    pass
