"""
Distribution specifications understood by tensor backends.

Initializers never draw random numbers themselves. They describe *which*
distribution a backend should sample from, and the backend's ``random``
capability performs the draw. Keeping these as plain frozen value objects
lets the domain layer stay free of any numerical library.
"""

from __future__ import annotations

from dataclasses import dataclass


class Distribution:
    """Marker base class for distribution specifications."""

    __slots__ = ()


@dataclass(frozen=True)
class UniformDistribution(Distribution):
    """
    Continuous uniform distribution over ``[low, high)``.

    Attributes
    ----------
    low : float
        Lower bound of the support.
    high : float
        Upper bound of the support.
    """

    low: float
    high: float


@dataclass(frozen=True)
class NormalDistribution(Distribution):
    """
    Normal (Gaussian) distribution.

    Attributes
    ----------
    mean : float
        Mean of the distribution.
    std : float
        Standard deviation of the distribution.
    """

    mean: float
    std: float
