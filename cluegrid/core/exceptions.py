"""Exception hierarchy for the puzzle engine and its adapters."""


class CluegridError(Exception):
    """Base exception for puzzle engine failures."""


class PuzzleFormatError(CluegridError):
    """Raised when a puzzle definition cannot be parsed."""


class ValidationError(CluegridError):
    """Raised when a parsed puzzle breaks a structural rule."""


class BlockedCellError(CluegridError):
    """Raised when code tries to write into a blocked cell."""


class SessionFormatError(CluegridError):
    """Raised when a stored session or preference payload is malformed."""


class PuzzleSourceError(CluegridError):
    """Raised when a third-party puzzle source cannot be fetched or converted."""
