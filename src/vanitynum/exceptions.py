"""Custom exceptions for vanitynum."""

class VanityNumError(Exception):
    """Base exception for vanitynum."""
    pass

class WordListError(VanityNumError):
    """Word corpus missing, unreadable or empty."""
    pass

class ValidationError(VanityNumError):
    """Invalid input parameters."""
    pass

class ConfigError(VanityNumError):
    """Invalid configuration values."""
    pass
