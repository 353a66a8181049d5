"""
Exception classes for the typosquat checker.

All exceptions inherit from TyposquatCheckerError and provide structured
error information with codes, messages, and optional details.
"""

from typing import Optional


class TyposquatCheckerError(Exception):
    """Base exception for all typosquat checker errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InputError(TyposquatCheckerError):
    """Raised when the subject domain fails registry validation."""

    pass


class ResolutionError(TyposquatCheckerError):
    """Raised when a DNS lookup for a candidate fails."""

    pass


class ResolutionTimeout(ResolutionError):
    """Raised when a DNS lookup exceeds its per-query timeout."""

    pass


class ResourceMissingError(TyposquatCheckerError):
    """Raised when an optional word list or dictionary file is absent."""

    pass


class ConfigError(TyposquatCheckerError):
    """Raised when a configuration file cannot be read or parsed."""

    pass
