"""Core conversion graph components."""

from colorgraph.core.color import Color, ColorSpaceId, ColorSpaceInfo, space_id_of
from colorgraph.core.exceptions import (
    ColorGraphError,
    DuplicateEdgeError,
    NoConversionPathError,
    UnknownColorSpaceError,
)
from colorgraph.core.graph import (
    ComposedConverter,
    ConversionEdge,
    ConversionGraph,
    DuplicateEdgePolicy,
)
from colorgraph.core.registry import (
    ConversionProvider,
    build_graph,
    default_graph,
    reset_default_graph,
)
from colorgraph.core.vector import Vector3

__all__ = [
    "Color",
    "ColorSpaceId",
    "ColorSpaceInfo",
    "space_id_of",
    "ColorGraphError",
    "DuplicateEdgeError",
    "NoConversionPathError",
    "UnknownColorSpaceError",
    "ComposedConverter",
    "ConversionEdge",
    "ConversionGraph",
    "DuplicateEdgePolicy",
    "ConversionProvider",
    "build_graph",
    "default_graph",
    "reset_default_graph",
    "Vector3",
]
