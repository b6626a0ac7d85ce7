"""
CIE 1931 XYZ tristimulus space.

XYZ is the hub most other spaces convert through. It is not
perceptually uniform; see CieLab for that.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from colorgraph.core.color import Color
from colorgraph.core.graph import ConversionGraph
from colorgraph.core.vector import Vector3
from colorgraph.spaces.rgb import LinearSrgb

# Linear sRGB (D65) -> XYZ
SRGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ],
    dtype=np.float64,
)

# Exact inverse, so sRGB -> XYZ -> sRGB round-trips to double precision
XYZ_TO_SRGB = np.linalg.inv(SRGB_TO_XYZ)

# Reference white of linear sRGB (1, 1, 1)
D65 = Vector3.from_array(SRGB_TO_XYZ.sum(axis=1))


@dataclass(frozen=True)
class CieXyz(Color):
    """
    A color in CIE 1931 XYZ.

    Attributes:
        x: Mix of the non-negative CIE RGB curves
        y: Relative luminance
        z: Roughly the blue stimulus
    """

    space_id = "cie-xyz"
    name = "CIE XYZ"

    x: float
    y: float
    z: float

    def to_linear_srgb(self) -> LinearSrgb:
        """Convert to linear sRGB (D65)."""
        return cie_xyz_to_linear_srgb(self)

    @classmethod
    def register(cls, graph: ConversionGraph) -> None:
        super().register(graph)
        graph.add_edge(LinearSrgb, cls, linear_srgb_to_cie_xyz)
        graph.add_edge(cls, LinearSrgb, cie_xyz_to_linear_srgb)


def linear_srgb_to_cie_xyz(color: LinearSrgb) -> CieXyz:
    return CieXyz.from_vector(color.to_vector().transform(SRGB_TO_XYZ))


def cie_xyz_to_linear_srgb(color: CieXyz) -> LinearSrgb:
    return LinearSrgb.from_vector(color.to_vector().transform(XYZ_TO_SRGB))
