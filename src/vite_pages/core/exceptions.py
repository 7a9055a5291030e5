"""Exception hierarchy for vite-pages."""

from typing import Any


class ViteSetupError(Exception):
    """Base exception for all vite-pages errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ViteSetupError):
    """Invalid settings or a project file that cannot be understood."""


class ValidationError(ViteSetupError):
    """User-supplied input failed validation."""


class InvalidBasePathError(ValidationError):
    """The base path is empty or not of the form ``/name/``."""


class MalformedTemplateError(ViteSetupError):
    """The default config template cannot be rendered."""


class AnchorNotFoundError(ViteSetupError):
    """No insertion anchor was found in an existing config file."""


class CommandFailedError(ViteSetupError):
    """An external command exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        returncode: int = 1,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.returncode = returncode
