"""Custom exceptions for settings handling."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when settings files are missing or invalid."""

    pass
