"""
RGB color spaces.

Linear sRGB holds light intensities; sRGB applies the IEC 61966-2-1
transfer curve on top. Both use the D65 white point and BT.709
primaries.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from colorgraph.core.color import Color
from colorgraph.core.graph import ConversionGraph

if TYPE_CHECKING:
    from colorgraph.spaces.oklab import Oklab
    from colorgraph.spaces.xyz import CieXyz

# Transfer curve breakpoints
ENCODE_THRESHOLD = 0.0031308
DECODE_THRESHOLD = 0.04045
LINEAR_SLOPE = 12.92
GAMMA = 2.4


def srgb_transfer(x: float) -> float:
    """Encode a linear channel value. Negative values are mirrored."""
    if abs(x) >= ENCODE_THRESHOLD:
        return math.copysign(1.055 * abs(x) ** (1.0 / GAMMA) - 0.055, x)
    return LINEAR_SLOPE * x


def srgb_inverse_transfer(x: float) -> float:
    """Decode an sRGB channel value to linear light. Negative values are mirrored."""
    if abs(x) >= DECODE_THRESHOLD:
        return math.copysign(((abs(x) + 0.055) / 1.055) ** GAMMA, x)
    return x / LINEAR_SLOPE


@dataclass(frozen=True)
class LinearSrgb(Color):
    """
    A color in the linear sRGB space.

    Components are linear light, typically in [0, 1] but not clamped;
    out-of-gamut values are kept as-is.
    """

    space_id = "linear-srgb"
    name = "Linear sRGB"

    r: float
    g: float
    b: float

    def to_srgb(self) -> Srgb:
        """Apply the sRGB transfer curve."""
        return Srgb(srgb_transfer(self.r), srgb_transfer(self.g), srgb_transfer(self.b))

    def to_cie_xyz(self) -> CieXyz:
        """Convert to CIE XYZ (D65)."""
        from colorgraph.spaces.xyz import linear_srgb_to_cie_xyz

        return linear_srgb_to_cie_xyz(self)

    def to_oklab(self) -> Oklab:
        """Convert to Oklab."""
        from colorgraph.spaces.oklab import linear_srgb_to_oklab

        return linear_srgb_to_oklab(self)


@dataclass(frozen=True)
class Srgb(Color):
    """
    A color in the gamma-encoded sRGB space.

    Components are nominally in [0, 1].
    """

    space_id = "srgb"
    name = "sRGB"

    r: float
    g: float
    b: float

    def to_linear(self) -> LinearSrgb:
        """Remove the sRGB transfer curve."""
        return LinearSrgb(
            srgb_inverse_transfer(self.r),
            srgb_inverse_transfer(self.g),
            srgb_inverse_transfer(self.b),
        )

    def to_hex(self) -> str:
        """
        Quantize to an 8-bit ``#rrggbb`` string.

        Components are clamped to [0, 1] first; NaN maps to 0.
        """
        channels = [
            0 if math.isnan(c) else round(min(max(c, 0.0), 1.0) * 255.0)
            for c in (self.r, self.g, self.b)
        ]
        return "#{:02x}{:02x}{:02x}".format(*channels)

    @classmethod
    def from_hex(cls, code: str) -> Srgb:
        """
        Parse a ``#rrggbb`` or ``#rgb`` string.

        Raises:
            ValueError: If the string is not a valid hex color
        """
        digits = code.strip().lstrip("#")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) != 6:
            raise ValueError(f"Invalid hex color: {code!r}")
        try:
            value = int(digits, 16)
        except ValueError:
            raise ValueError(f"Invalid hex color: {code!r}") from None

        return cls(
            ((value >> 16) & 0xFF) / 255.0,
            ((value >> 8) & 0xFF) / 255.0,
            (value & 0xFF) / 255.0,
        )

    @classmethod
    def register(cls, graph: ConversionGraph) -> None:
        super().register(graph)
        graph.add_edge(cls, LinearSrgb, Srgb.to_linear)
        graph.add_edge(LinearSrgb, cls, LinearSrgb.to_srgb)
