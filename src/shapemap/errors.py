"""Failure types raised by the shape map transform."""

from __future__ import annotations


class ShapeMapError(ValueError):
    """Base class for shape map transform failures."""


class InvalidFieldTypeError(ShapeMapError):
    """Raised when a field or cell kind cannot be encoded on a shape map."""


class InvalidInputShapeError(ShapeMapError):
    """Raised when the result is null, not an array of rows, or too narrow."""
