"""
Oklab perceptual color space.

Björn Ottosson's uniform space, defined directly on linear sRGB:
https://bottosson.github.io/posts/oklab/
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from colorgraph.core.color import Color
from colorgraph.core.graph import ConversionGraph
from colorgraph.core.vector import Vector3
from colorgraph.spaces.rgb import LinearSrgb

# Linear sRGB -> LMS cone response
SRGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ],
    dtype=np.float64,
)

# Nonlinear LMS -> Lab
LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ],
    dtype=np.float64,
)

LMS_TO_SRGB = np.linalg.inv(SRGB_TO_LMS)
OKLAB_TO_LMS = np.linalg.inv(LMS_TO_OKLAB)


@dataclass(frozen=True)
class Oklab(Color):
    """
    A color in Oklab.

    Attributes:
        l: Perceived lightness, 0 to 1
        a: Green-red axis
        b: Blue-yellow axis
    """

    space_id = "oklab"
    name = "Oklab"

    l: float
    a: float
    b: float

    def to_linear_srgb(self) -> LinearSrgb:
        """Convert to linear sRGB."""
        return oklab_to_linear_srgb(self)

    @classmethod
    def register(cls, graph: ConversionGraph) -> None:
        super().register(graph)
        graph.add_edge(LinearSrgb, cls, linear_srgb_to_oklab)
        graph.add_edge(cls, LinearSrgb, oklab_to_linear_srgb)


def linear_srgb_to_oklab(color: LinearSrgb) -> Oklab:
    lms = SRGB_TO_LMS @ color.to_vector().to_array()
    return Oklab.from_vector(Vector3.from_array(LMS_TO_OKLAB @ np.cbrt(lms)))


def oklab_to_linear_srgb(color: Oklab) -> LinearSrgb:
    lms = (OKLAB_TO_LMS @ color.to_vector().to_array()) ** 3
    return LinearSrgb.from_vector(Vector3.from_array(LMS_TO_SRGB @ lms))
