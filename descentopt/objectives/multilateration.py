"""Least-absolute-deviation multilateration objective.

Locates a point from its measured distances to known anchors by minimizing
the mean absolute residual of the squared distances,

    f(x) = (1/m) sum_i | ||a_i - x||^2 - d_i^2 |.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

# Anchor layout and range measurements of the reference positioning scenario.
REFERENCE_ANCHORS = np.array(
    [
        [0.0, 0.0, 3000.0],
        [4000.0, 0.0, 3000.0],
        [4000.0, 4000.0, 3000.0],
        [0.0, 4000.0, 3000.0],
    ]
)
REFERENCE_DISTANCES = np.array(
    [
        2.940180186013095e03,
        4.864222396871262e03,
        6.017030789868371e03,
        4.603114111796926e03,
    ]
)


class Multilateration:
    """
    Mean absolute squared-range residual over a set of anchors.

    The gradient uses ``sign(0) = 0`` on exact residual zeros.

    Parameters
    ----------
    anchors:
        Anchor coordinates, shape (m, n).
    distances:
        Measured distance to each anchor, shape (m,).
    """

    def __init__(self, anchors: np.ndarray, distances: Sequence[float]) -> None:
        self.anchors = np.atleast_2d(np.asarray(anchors, dtype=float))
        self.distances = np.asarray(distances, dtype=float).reshape(-1)
        if self.anchors.shape[0] != self.distances.size:
            raise ValueError(
                f"Got {self.anchors.shape[0]} anchors but {self.distances.size} distances."
            )
        if self.distances.size == 0:
            raise ValueError("At least one anchor is required.")

    @classmethod
    def reference(cls) -> "Multilateration":
        """Four coplanar anchors at height 3000 with their measured ranges."""
        return cls(REFERENCE_ANCHORS, REFERENCE_DISTANCES)

    @property
    def dim(self) -> int:
        return self.anchors.shape[1]

    def residuals(self, x: np.ndarray) -> np.ndarray:
        diff = self.anchors - np.asarray(x, dtype=float)
        return np.sum(diff * diff, axis=1) - self.distances**2

    def value(self, x: np.ndarray) -> float:
        return float(np.mean(np.abs(self.residuals(x))))

    def gradient(self, x: np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=float)
        sign = np.sign(self.residuals(x))
        return 2.0 * (sign[:, None] * (x - self.anchors)).sum(axis=0) / self.distances.size


__all__ = ["Multilateration", "REFERENCE_ANCHORS", "REFERENCE_DISTANCES"]
