"""Ready-made objective functions implementing the value/gradient protocol."""

from .multilateration import REFERENCE_ANCHORS, REFERENCE_DISTANCES, Multilateration
from .standard import Quadratic, Rosenbrock

__all__ = [
    "Multilateration",
    "Quadratic",
    "REFERENCE_ANCHORS",
    "REFERENCE_DISTANCES",
    "Rosenbrock",
]
