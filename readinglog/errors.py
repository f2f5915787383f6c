"""
Exception hierarchy for the reading log core.
"""


class ReadingLogError(Exception):
    """Base class for all reading log errors"""


class ParseError(ReadingLogError):
    """Raised when an import file has no usable header row"""


class BookValidationError(ReadingLogError, ValueError):
    """Raised when a Book violates one of its field invariants"""


class PersistenceError(ReadingLogError):
    """Raised when a Collection Store fails to persist or load a batch"""


class ConfigError(ReadingLogError, ValueError):
    """Raised for invalid goal thresholds or environment settings"""
