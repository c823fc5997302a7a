"""Custom exceptions for timegrid."""


class TimegridError(Exception):
    """Base exception for all timegrid errors."""

    pass


class ConfigError(TimegridError):
    """Raised when a configuration file is invalid."""

    pass


class ParseError(TimegridError):
    """Raised when a work interval file cannot be parsed."""

    pass
