"""Neutral 3-component interchange vector."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Iterator, Sequence

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Vector3:
    """
    Plain 3-component float vector.

    Every 3-dimensional color space can convert to and from this type
    without going through the conversion graph.
    """

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def __getitem__(self, index: int) -> float:
        return astuple(self)[index]

    def __len__(self) -> int:
        return 3

    def to_array(self) -> NDArray[np.float64]:
        """Return the components as a float64 array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Sequence[float] | NDArray) -> Vector3:
        """
        Create a vector from any length-3 sequence or array.

        Raises:
            ValueError: If the input does not hold exactly 3 values
        """
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape[0] != 3:
            raise ValueError(f"Vector3 needs exactly 3 values, got {arr.shape[0]}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def transform(self, matrix: Sequence[Sequence[float]] | NDArray) -> Vector3:
        """Multiply a 3x3 matrix by this vector."""
        return Vector3.from_array(np.asarray(matrix, dtype=np.float64) @ self.to_array())
