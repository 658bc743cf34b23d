"""
Domain-level structural typing for NumPy-like n-dimensional arrays.

This module defines :class:`NDArrayLike`, a backend-agnostic Protocol for the
tensors returned by initializers, without introducing a dependency on NumPy
in the domain layer.

Typical implementers include:
- ``numpy.ndarray``
- Backend-specific arrays (e.g., CuPy, JAX) that emulate ndarray semantics

This protocol is intended for typing and documentation purposes only.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, runtime_checkable


@runtime_checkable
class NDArrayLike(Protocol):
    """
    A structural typing interface for objects that behave like NumPy ndarrays.

    Only the surface initializer callers rely on is modelled: the array's
    geometry, element type, and reductions used when checking statistics.
    """

    @property
    def shape(self) -> Tuple[int, ...]:
        """
        Shape of the array as a tuple of dimension sizes.
        """
        ...

    @property
    def ndim(self) -> int:
        """
        Number of dimensions of the array.
        """
        ...

    @property
    def size(self) -> int:
        """
        Total number of elements in the array.
        """
        ...

    @property
    def dtype(self) -> Any:
        """
        Backend-defined dtype object (e.g., ``numpy.dtype``).
        """
        ...

    def sum(self, axis: Any = ..., **kwargs: Any) -> Any: ...
    def mean(self, axis: Any = ..., **kwargs: Any) -> Any: ...
    def var(self, axis: Any = ..., **kwargs: Any) -> Any: ...
    def min(self, axis: Any = ..., **kwargs: Any) -> Any: ...
    def max(self, axis: Any = ..., **kwargs: Any) -> Any: ...
