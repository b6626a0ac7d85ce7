"""CIE 1976 L*a*b*, relative to the D65 white point."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from colorgraph.core.color import Color
from colorgraph.core.graph import ConversionGraph
from colorgraph.core.vector import Vector3
from colorgraph.spaces.xyz import D65, CieXyz

CIE_EPSILON = 216.0 / 24389.0
CIE_KAPPA = 24389.0 / 27.0


@dataclass(frozen=True)
class CieLab(Color):
    """
    A color in CIE L*a*b*.

    Attributes:
        l: Lightness, 0 (black) to 100 (reference white)
        a: Green-red opponent axis
        b: Blue-yellow opponent axis
    """

    space_id = "cie-lab"
    name = "CIE L*a*b*"

    l: float
    a: float
    b: float

    def to_cie_xyz(self) -> CieXyz:
        """Convert to CIE XYZ (D65)."""
        return cie_lab_to_cie_xyz(self)

    @classmethod
    def register(cls, graph: ConversionGraph) -> None:
        super().register(graph)
        graph.add_edge(CieXyz, cls, cie_xyz_to_cie_lab)
        graph.add_edge(cls, CieXyz, cie_lab_to_cie_xyz)


def cie_xyz_to_cie_lab(color: CieXyz, white: Vector3 = D65) -> CieLab:
    ratio = color.to_vector().to_array() / white.to_array()
    f = np.where(ratio > CIE_EPSILON, np.cbrt(ratio), (CIE_KAPPA * ratio + 16.0) / 116.0)
    fx, fy, fz = f

    return CieLab(
        l=float(116.0 * fy - 16.0),
        a=float(500.0 * (fx - fy)),
        b=float(200.0 * (fy - fz)),
    )


def cie_lab_to_cie_xyz(color: CieLab, white: Vector3 = D65) -> CieXyz:
    fy = (color.l + 16.0) / 116.0
    fx = fy + color.a / 500.0
    fz = fy - color.b / 200.0

    fx3 = fx ** 3
    fz3 = fz ** 3
    xr = fx3 if fx3 > CIE_EPSILON else (116.0 * fx - 16.0) / CIE_KAPPA
    yr = fy ** 3 if color.l > CIE_KAPPA * CIE_EPSILON else color.l / CIE_KAPPA
    zr = fz3 if fz3 > CIE_EPSILON else (116.0 * fz - 16.0) / CIE_KAPPA

    return CieXyz(xr * white.x, yr * white.y, zr * white.z)
