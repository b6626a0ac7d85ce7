"""
Errors raised by the conversion graph.

All graph failures are reported synchronously at the call that
triggered them; no partial conversion is ever returned.
"""

from __future__ import annotations


class ColorGraphError(Exception):
    """Base class for conversion graph errors."""


class UnknownColorSpaceError(ColorGraphError, KeyError):
    """
    A color space id was never registered as a graph node.

    Attributes:
        space_id: The id that could not be found
    """

    def __init__(self, space_id: str) -> None:
        super().__init__(space_id)
        self.space_id = space_id

    def __str__(self) -> str:
        return f"Unknown color space: {self.space_id!r}"


class NoConversionPathError(ColorGraphError, LookupError):
    """
    Both color spaces are known but no directed path connects them.

    Attributes:
        source: Id of the space being converted from
        target: Id of the space being converted to
    """

    def __init__(self, source: str, target: str) -> None:
        super().__init__(source, target)
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return f"No conversion path from {self.source!r} to {self.target!r}"


class DuplicateEdgeError(ColorGraphError, ValueError):
    """An edge for the same (source, target) pair already exists."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(source, target)
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return f"Edge {self.source!r} -> {self.target!r} is already registered"
