"""Exceptions raised by the galaxy generator."""


class SeedverseError(Exception):
    """Base exception for all seedverse errors."""

    def __init__(self, message, context=None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self):
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigurationError(SeedverseError):
    """Invalid galaxy configuration, seed value, or reference table."""

    pass


class ClassificationOutOfRange(SeedverseError):
    """A computed index falls outside one of the reference tables."""

    pass


class DegenerateSeedCollision(SeedverseError):
    """Two distinct entities derived the same seed within one collection."""

    pass
