"""
colorgraph: color spaces and a typed conversion graph.

Usage:
    from colorgraph import Srgb, CieLch

    lch = Srgb.from_hex("#3366cc").convert(CieLch)
"""

import logging

from colorgraph.core import (
    Color,
    ColorGraphError,
    ColorSpaceInfo,
    ComposedConverter,
    ConversionEdge,
    ConversionGraph,
    ConversionProvider,
    DuplicateEdgeError,
    DuplicateEdgePolicy,
    NoConversionPathError,
    UnknownColorSpaceError,
    Vector3,
    build_graph,
    default_graph,
    reset_default_graph,
)
from colorgraph.spaces import (
    DEFAULT_PROVIDERS,
    CieLab,
    CieLch,
    CieXyz,
    LinearSrgb,
    Oklab,
    Oklch,
    Srgb,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Color",
    "ColorGraphError",
    "ColorSpaceInfo",
    "ComposedConverter",
    "ConversionEdge",
    "ConversionGraph",
    "ConversionProvider",
    "DuplicateEdgeError",
    "DuplicateEdgePolicy",
    "NoConversionPathError",
    "UnknownColorSpaceError",
    "Vector3",
    "build_graph",
    "default_graph",
    "reset_default_graph",
    "DEFAULT_PROVIDERS",
    "CieLab",
    "CieLch",
    "CieXyz",
    "LinearSrgb",
    "Oklab",
    "Oklch",
    "Srgb",
    "__version__",
]
