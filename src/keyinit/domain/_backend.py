"""
Tensor backend contract consumed by initializers.

An initializer only needs two allocation capabilities from a backend:

- fill a tensor of a given shape with a constant, and
- fill a tensor of a given shape with values drawn from a distribution.

Backends additionally expose ``seed`` so that draws can be reproduced: the
same seed followed by the same sequence of calls must yield identical values.

Design notes
------------
- Uses ``typing.Protocol`` so any object with matching members qualifies,
  without inheriting from a framework base class.
- The returned tensor type is backend-defined; ``NDArrayLike`` documents the
  minimal surface callers can rely on.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ._distribution import Distribution
from .types._numpy import NDArrayLike


@runtime_checkable
class IBackend(Protocol):
    """
    Structural contract for tensor allocation backends.
    """

    def fill(self, shape: tuple[int, ...], value: float) -> NDArrayLike:
        """
        Allocate a tensor of ``shape`` with every element set to ``value``.

        Parameters
        ----------
        shape : tuple[int, ...]
            Requested tensor shape.
        value : float
            Constant written into every element.

        Returns
        -------
        NDArrayLike
            A newly allocated tensor.
        """
        ...

    def random(
        self, shape: tuple[int, ...], distribution: Distribution
    ) -> NDArrayLike:
        """
        Allocate a tensor of ``shape`` with values drawn from ``distribution``.

        Parameters
        ----------
        shape : tuple[int, ...]
            Requested tensor shape.
        distribution : Distribution
            The distribution to sample each element from.

        Returns
        -------
        NDArrayLike
            A newly allocated tensor.
        """
        ...

    def seed(self, seed: Optional[int]) -> None:
        """
        Reset the backend's random source.

        Parameters
        ----------
        seed : Optional[int]
            Seed value. ``None`` requests fresh, non-reproducible entropy.
        """
        ...
