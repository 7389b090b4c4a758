"""
Exception types raised by GeoBridge.

Failures raised inside a user driver or inside geomeTRIC itself are not
wrapped; they propagate to the caller unchanged.
"""

class GeoBridgeError(Exception):
    """Base class for all errors raised by GeoBridge itself."""

class ConfigParseError(GeoBridgeError, ValueError):
    """Configuration text could not be parsed."""

    def __init__(self, message: str, diagnostic: str = ""):
        super().__init__(message)
        self.diagnostic = diagnostic

class ConfigTypeError(GeoBridgeError, TypeError):
    """Configuration has the wrong shape (e.g. root is not a table)."""

class MissingDriverError(GeoBridgeError, RuntimeError):
    """A gradient was requested but no driver has been attached."""

class CoordinateShapeError(GeoBridgeError, ValueError):
    """Coordinate vector is not a flat sequence of 3N values."""

class MarshalingError(GeoBridgeError, TypeError):
    """A value cannot be represented in the form geomeTRIC expects."""
