"""
Plain distribution initializers and shared draw helpers.

Provided initializers
---------------------
- ``uniform``:
    Values drawn from ``U(min, max)``.
- ``normal``:
    Values drawn from ``N(mean, std)``.

``uniform_draw`` / ``normal_draw`` are also used by the variance-scaling
initializers once they have derived their bound or standard deviation.
Parameters are passed through unvalidated; e.g. ``min > max`` or a negative
``std`` is handled (or rejected) by the backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ....domain._backend import IBackend
from ....domain._distribution import NormalDistribution, UniformDistribution
from ....domain.types._numpy import NDArrayLike
from ._base import Initializer


def uniform_draw(
    backend: IBackend, shape: tuple[int, ...], low: float, high: float
) -> NDArrayLike:
    """Draw a tensor of ``shape`` from ``U(low, high)``."""
    return backend.random(shape, UniformDistribution(low, high))


def normal_draw(
    backend: IBackend, shape: tuple[int, ...], mean: float, std: float
) -> NDArrayLike:
    """Draw a tensor of ``shape`` from ``N(mean, std)``."""
    return backend.random(shape, NormalDistribution(mean, std))


@Initializer.register_variant("uniform")
@dataclass(frozen=True)
class Uniform(Initializer):
    """
    Fills the tensor with values drawn uniformly between ``min`` and ``max``.

    Attributes
    ----------
    min : float
        The minimum value to draw from.
    max : float
        The maximum value to draw from.
    """

    min: float = 0.0
    max: float = 1.0


@Initializer.register_variant("normal")
@dataclass(frozen=True)
class Normal(Initializer):
    """
    Fills the tensor with values drawn from a normal distribution.

    Attributes
    ----------
    mean : float
        The mean of the normal distribution.
    std : float
        The standard deviation of the normal distribution.
    """

    mean: float = 0.0
    std: float = 1.0


@Initializer.register_initializer("uniform")
def uniform(
    initializer: Uniform,
    shape: tuple[int, ...],
    fan_in: Optional[int],
    fan_out: Optional[int],
    backend: IBackend,
) -> NDArrayLike:
    return uniform_draw(backend, shape, initializer.min, initializer.max)


@Initializer.register_initializer("normal")
def normal(
    initializer: Normal,
    shape: tuple[int, ...],
    fan_in: Optional[int],
    fan_out: Optional[int],
    backend: IBackend,
) -> NDArrayLike:
    return normal_draw(backend, shape, initializer.mean, initializer.std)
