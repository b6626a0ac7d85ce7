"""
Cylindrical (lightness, chroma, hue) forms of the Lab spaces.

Hue is in degrees, normalized to [0, 360). Achromatic colors get a
hue of 0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from colorgraph.core.color import Color
from colorgraph.core.graph import ConversionGraph
from colorgraph.spaces.lab import CieLab
from colorgraph.spaces.oklab import Oklab


def to_polar(a: float, b: float) -> tuple[float, float]:
    """Convert opponent axes to (chroma, hue in degrees)."""
    hue = math.degrees(math.atan2(b, a)) % 360.0
    # Tiny negative angles round up to exactly 360
    if hue >= 360.0:
        hue = 0.0
    return math.hypot(a, b), hue


def to_cartesian(chroma: float, hue: float) -> tuple[float, float]:
    """Convert (chroma, hue in degrees) to opponent axes."""
    radians = math.radians(hue)
    return chroma * math.cos(radians), chroma * math.sin(radians)


@dataclass(frozen=True)
class CieLch(Color):
    """CIE LCh(ab): polar form of CieLab."""

    space_id = "cie-lch"
    name = "CIE LCh"

    l: float
    c: float
    h: float

    def to_cie_lab(self) -> CieLab:
        a, b = to_cartesian(self.c, self.h)
        return CieLab(self.l, a, b)

    @classmethod
    def from_cie_lab(cls, lab: CieLab) -> CieLch:
        c, h = to_polar(lab.a, lab.b)
        return cls(lab.l, c, h)

    @classmethod
    def register(cls, graph: ConversionGraph) -> None:
        super().register(graph)
        graph.add_edge(CieLab, cls, cls.from_cie_lab)
        graph.add_edge(cls, CieLab, cls.to_cie_lab)


@dataclass(frozen=True)
class Oklch(Color):
    """Polar form of Oklab."""

    space_id = "oklch"
    name = "Oklch"

    l: float
    c: float
    h: float

    def to_oklab(self) -> Oklab:
        a, b = to_cartesian(self.c, self.h)
        return Oklab(self.l, a, b)

    @classmethod
    def from_oklab(cls, lab: Oklab) -> Oklch:
        c, h = to_polar(lab.a, lab.b)
        return cls(lab.l, c, h)

    @classmethod
    def register(cls, graph: ConversionGraph) -> None:
        super().register(graph)
        graph.add_edge(Oklab, cls, cls.from_oklab)
        graph.add_edge(cls, Oklab, cls.to_oklab)
