class NestFormError(Exception):
    """Base exception for nestform errors."""
    pass

class ConfigError(NestFormError):
    """Configuration loading specific errors."""
    pass

class UnknownIndexingError(NestFormError, ValueError):
    """Raised when a decoder is asked for an indexing mode it does not know."""
    pass

class MalformedPathError(NestFormError, ValueError):
    """A submitted key does not match any recognised field path shape."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Malformed field path {key!r}: {reason}")
        self.key = key
        self.reason = reason

class AmbiguousGroupError(NestFormError):
    """Children that would not decode back into the same records once flattened."""
    pass
