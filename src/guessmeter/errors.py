"""Custom exceptions for guessmeter."""


class GuessmeterError(Exception):
    """Base exception for guessmeter."""


class BundledDataError(GuessmeterError):
    """Bundled frequency lists or keyboard layouts are missing or malformed."""


class UnknownPatternError(GuessmeterError):
    """No guess estimator exists for the requested pattern kind."""
