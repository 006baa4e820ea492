"""Custom exception hierarchy for osmgeom."""

from __future__ import annotations


class OsmGeomError(Exception):
    """Base exception for all osmgeom-specific errors."""
    
    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(OsmGeomError):
    """Raised when configuration is invalid or missing."""
    pass


class GeometryError(OsmGeomError):
    """Raised when geometry operations fail."""
    pass


class TypeMismatchError(GeometryError, TypeError):
    """Raised when a geometry is accessed as a variant it does not hold."""
    pass


class InvalidArgumentError(GeometryError, ValueError):
    """Raised when a geometry operation gets an argument outside its contract."""
    pass


class UnsupportedGeometryError(GeometryError):
    """Raised when a foreign geometry has no matching variant."""
    pass
