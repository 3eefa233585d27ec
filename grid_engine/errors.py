"""
Error types raised by the style generation engine.
"""


class GridEngineError(Exception):
    """Base class for all engine errors."""


class DomainError(GridEngineError, ValueError):
    """Raised when a unit conversion receives a value outside its domain."""


class InvalidGridConfig(GridEngineError, ValueError):
    """Raised when a grid configuration or grid index is rejected."""


class ConfigError(GridEngineError):
    """Raised when a configuration file cannot be read or understood."""
