"""
Constant initializers.

This module defines constant-valued initializers and registers them with the
`Initializer` registries.

Provided initializers
---------------------
- ``constant``:
    Every element set to a configured value.
- ``ones``:
    Every element set to one.
- ``zeros``:
    Every element set to zero.

These initializers are typically used for bias parameters, normalization
scales, testing, or deterministic model setups. They never consume entropy
from the backend's random source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ....domain._backend import IBackend
from ....domain.types._numpy import NDArrayLike
from ._base import Initializer


@Initializer.register_variant("constant")
@dataclass(frozen=True)
class Constant(Initializer):
    """
    Fills the tensor with ``value`` everywhere.

    Attributes
    ----------
    value : float
        The value to fill the tensor with.
    """

    value: float


@Initializer.register_variant("ones")
@dataclass(frozen=True)
class Ones(Initializer):
    """Fills the tensor with 1s everywhere."""


@Initializer.register_variant("zeros")
@dataclass(frozen=True)
class Zeros(Initializer):
    """Fills the tensor with 0s everywhere."""


@Initializer.register_initializer("constant")
def constant(
    initializer: Constant,
    shape: tuple[int, ...],
    fan_in: Optional[int],
    fan_out: Optional[int],
    backend: IBackend,
) -> NDArrayLike:
    return backend.fill(shape, initializer.value)


@Initializer.register_initializer("ones")
def ones(
    initializer: Ones,
    shape: tuple[int, ...],
    fan_in: Optional[int],
    fan_out: Optional[int],
    backend: IBackend,
) -> NDArrayLike:
    return backend.fill(shape, 1.0)


@Initializer.register_initializer("zeros")
def zeros(
    initializer: Zeros,
    shape: tuple[int, ...],
    fan_in: Optional[int],
    fan_out: Optional[int],
    backend: IBackend,
) -> NDArrayLike:
    return backend.fill(shape, 0.0)
