"""
Built-in color spaces.

DEFAULT_PROVIDERS fixes the registration order of the default graph.
"""

from colorgraph.spaces.rgb import LinearSrgb, Srgb
from colorgraph.spaces.xyz import CieXyz
from colorgraph.spaces.lab import CieLab
from colorgraph.spaces.oklab import Oklab
from colorgraph.spaces.lch import CieLch, Oklch

DEFAULT_PROVIDERS = (
    LinearSrgb,
    Srgb,
    CieXyz,
    CieLab,
    CieLch,
    Oklab,
    Oklch,
)

__all__ = [
    "LinearSrgb",
    "Srgb",
    "CieXyz",
    "CieLab",
    "CieLch",
    "Oklab",
    "Oklch",
    "DEFAULT_PROVIDERS",
]
