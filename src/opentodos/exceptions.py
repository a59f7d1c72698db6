"""Custom exceptions for opentodos."""


class OpenTodosError(Exception):
    """Base exception for opentodos operations."""


class ConfigError(OpenTodosError):
    """Invalid configuration value."""


class SourceReadError(OpenTodosError):
    """Outline document could not be read."""
