"""
Xavier/Glorot initializers.

This module provides Xavier (Glorot) initialization strategies, as described
in "Understanding the difficulty of training deep feedforward neural
networks" (Glorot & Bengio, 2010), and registers them into the
`Initializer` registries.

Implemented variants
--------------------
- ``xavier_uniform``:
    ``U(-a, a)`` with ``a = sqrt(3) * gain * sqrt(2 / (fan_in + fan_out))``,
    i.e. ``gain * sqrt(6 / (fan_in + fan_out))``.
- ``xavier_normal``:
    ``N(0, gain * sqrt(2 / (fan_in + fan_out)))``.

Notes
-----
- Both ``fan_in`` and ``fan_out`` are required.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ....domain._backend import IBackend
from ....domain.types._numpy import NDArrayLike
from ....domain.utils._weight_initialization import xavier_std
from ._base import Initializer
from ._random import normal_draw, uniform_draw


@Initializer.register_variant("xavier_uniform")
@dataclass(frozen=True)
class XavierUniform(Initializer):
    """
    Fills the tensor according to the uniform version of Xavier initialization.

    Attributes
    ----------
    gain : float
        The gain to use in the initialization formula.
    """

    gain: float = 1.0


@Initializer.register_variant("xavier_normal")
@dataclass(frozen=True)
class XavierNormal(Initializer):
    """
    Fills the tensor according to the normal version of Xavier initialization.

    Attributes
    ----------
    gain : float
        The gain to use in the initialization formula.
    """

    gain: float = 1.0


@Initializer.register_initializer("xavier_uniform")
def xavier_uniform(
    initializer: XavierUniform,
    shape: tuple[int, ...],
    fan_in: Optional[int],
    fan_out: Optional[int],
    backend: IBackend,
) -> NDArrayLike:
    a = math.sqrt(3.0) * initializer.gain * xavier_std(fan_in, fan_out)
    return uniform_draw(backend, shape, -a, a)


@Initializer.register_initializer("xavier_normal")
def xavier_normal(
    initializer: XavierNormal,
    shape: tuple[int, ...],
    fan_in: Optional[int],
    fan_out: Optional[int],
    backend: IBackend,
) -> NDArrayLike:
    std = initializer.gain * xavier_std(fan_in, fan_out)
    return normal_draw(backend, shape, 0.0, std)
