"""
CPU tensor backend built on NumPy.

This module intentionally contains the NumPy usage of the package and serves
as the boundary between random array generation and initializers.
Initializers only decide *what* to fill with; this backend allocates the
arrays and owns the random generator.

Notes
-----
- Default dtype is float32.
- Randomness comes from a private ``numpy.random.Generator``. Re-seeding
  reproduces the exact same draws for the same sequence of calls.
- Generator access is serialized with a lock so a single backend instance
  can be shared between threads.
"""

from __future__ import annotations

import threading
from typing import Any, Optional

import numpy as np

from ...domain._distribution import (
    Distribution,
    NormalDistribution,
    UniformDistribution,
)


def _normalize_dtype(dtype: Any) -> np.dtype:
    """
    Normalize dtype inputs to a NumPy floating dtype.

    Accepts:
    - numpy dtype objects (np.float32, np.dtype("float64"))
    - strings ("float32")
    - None (defaults to float32)
    """
    if dtype is None:
        return np.dtype(np.float32)
    dt = np.dtype(dtype)
    if dt.kind != "f":
        raise TypeError(f"NumpyBackend requires a floating dtype, got {dt}.")
    return dt


class NumpyBackend:
    """
    Seedable NumPy implementation of the ``IBackend`` contract.

    Parameters
    ----------
    seed : Optional[int]
        Initial seed. ``None`` draws fresh entropy from the OS.
    dtype : Any
        Floating element type of the produced arrays. Defaults to float32.
    """

    def __init__(self, seed: Optional[int] = None, *, dtype: Any = np.float32) -> None:
        self._dtype = _normalize_dtype(dtype)
        self._lock = threading.Lock()
        self._rng = np.random.default_rng(seed)

    @property
    def dtype(self) -> np.dtype:
        """Element type of arrays produced by this backend."""
        return self._dtype

    def seed(self, seed: Optional[int]) -> None:
        """Replace the random generator with a freshly seeded one."""
        with self._lock:
            self._rng = np.random.default_rng(seed)

    def fill(self, shape: tuple[int, ...], value: float) -> np.ndarray:
        """
        Create an array filled with a constant value.

        Parameters
        ----------
        shape : tuple[int, ...]
            Desired array shape (``()`` for a scalar array).
        value : float
            Constant value to write into every element.

        Returns
        -------
        np.ndarray
            A newly allocated array of this backend's dtype.
        """
        return np.full(shape, value, dtype=self._dtype)

    def random(self, shape: tuple[int, ...], distribution: Distribution) -> np.ndarray:
        """
        Create an array with values drawn from ``distribution``.

        Parameter validation is left to NumPy: e.g. a negative standard
        deviation raises NumPy's own ``ValueError``.

        Raises
        ------
        TypeError
            If ``distribution`` is not a supported distribution type.
        """
        with self._lock:
            if isinstance(distribution, UniformDistribution):
                arr = self._rng.uniform(
                    distribution.low, distribution.high, size=shape
                )
            elif isinstance(distribution, NormalDistribution):
                arr = self._rng.normal(distribution.mean, distribution.std, size=shape)
            else:
                raise TypeError(
                    f"Unsupported distribution: {type(distribution).__name__}"
                )
        return np.asarray(arr).astype(self._dtype, copy=False)

    def __repr__(self) -> str:
        return f"NumpyBackend(dtype={self._dtype})"
