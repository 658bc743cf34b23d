"""
Kaiming (He) initializers.

This module provides Kaiming initialization strategies and registers them
into the `Initializer` registries.

Implemented variants
--------------------
- ``kaiming_uniform``:
    ``U(-a, a)`` with ``a = sqrt(3) * gain / sqrt(fan)``.
- ``kaiming_normal``:
    ``N(0, gain / sqrt(fan))``.

Notes
-----
- ``fan`` is ``fan_in`` by default and ``fan_out`` when ``fan_out_only`` is
  set. Only the selected fan has to be supplied.
- ``gain`` is not applied implicitly; pass ``calculate_gain("relu")`` for
  the classic He scheme.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ....domain._backend import IBackend
from ....domain.types._numpy import NDArrayLike
from ....domain.utils._weight_initialization import kaiming_std
from ._base import Initializer
from ._random import normal_draw, uniform_draw


@Initializer.register_variant("kaiming_uniform")
@dataclass(frozen=True)
class KaimingUniform(Initializer):
    """
    Fills the tensor according to the uniform version of Kaiming initialization.

    Attributes
    ----------
    gain : float
        The gain to use in the initialization formula.
    fan_out_only : bool
        Whether to use fan out instead of fan in.
    """

    gain: float = 1.0
    fan_out_only: bool = False


@Initializer.register_variant("kaiming_normal")
@dataclass(frozen=True)
class KaimingNormal(Initializer):
    """
    Fills the tensor according to the normal version of Kaiming initialization.

    Attributes
    ----------
    gain : float
        The gain to use in the initialization formula.
    fan_out_only : bool
        Whether to use fan out instead of fan in.
    """

    gain: float = 1.0
    fan_out_only: bool = False


@Initializer.register_initializer("kaiming_uniform")
def kaiming_uniform(
    initializer: KaimingUniform,
    shape: tuple[int, ...],
    fan_in: Optional[int],
    fan_out: Optional[int],
    backend: IBackend,
) -> NDArrayLike:
    """
    Draw from ``U(-a, a)`` where:

        a = sqrt(3) * gain * (1 / sqrt(fan))
    """
    std = kaiming_std(initializer.fan_out_only, fan_in, fan_out)
    a = math.sqrt(3.0) * initializer.gain * std
    return uniform_draw(backend, shape, -a, a)


@Initializer.register_initializer("kaiming_normal")
def kaiming_normal(
    initializer: KaimingNormal,
    shape: tuple[int, ...],
    fan_in: Optional[int],
    fan_out: Optional[int],
    backend: IBackend,
) -> NDArrayLike:
    std = initializer.gain * kaiming_std(initializer.fan_out_only, fan_in, fan_out)
    return normal_draw(backend, shape, 0.0, std)
