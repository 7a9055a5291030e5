"""Core domain models and exceptions for vite-pages.

Models live in :mod:`vite_pages.core.models`; they are not re-exported here
because they depend on the git helpers, which in turn raise core exceptions.
"""

from vite_pages.core.exceptions import (
    AnchorNotFoundError,
    CommandFailedError,
    ConfigurationError,
    InvalidBasePathError,
    MalformedTemplateError,
    ValidationError,
    ViteSetupError,
)

__all__ = [
    "ViteSetupError",
    "ConfigurationError",
    "ValidationError",
    "InvalidBasePathError",
    "MalformedTemplateError",
    "AnchorNotFoundError",
    "CommandFailedError",
]
