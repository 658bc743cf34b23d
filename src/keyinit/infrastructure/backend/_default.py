"""
Process-wide default backend.

Initializers called without an explicit ``backend`` allocate through the
default returned here. It is created lazily as a ``NumpyBackend`` and can be
replaced with any object satisfying ``IBackend``.
"""

from __future__ import annotations

import threading
from typing import Optional

from ...domain._backend import IBackend
from ._numpy_backend import NumpyBackend

_DEFAULT_BACKEND: Optional[IBackend] = None
_DEFAULT_LOCK = threading.Lock()


def get_default_backend() -> IBackend:
    """Return the process-wide backend, creating a ``NumpyBackend`` on first use."""
    global _DEFAULT_BACKEND
    with _DEFAULT_LOCK:
        if _DEFAULT_BACKEND is None:
            _DEFAULT_BACKEND = NumpyBackend()
        return _DEFAULT_BACKEND


def set_default_backend(backend: Optional[IBackend]) -> None:
    """
    Replace the process-wide backend.

    Passing ``None`` resets it so the next call to ``get_default_backend``
    creates a fresh ``NumpyBackend``.

    Raises
    ------
    TypeError
        If ``backend`` does not provide ``fill``, ``random`` and ``seed``.
    """
    global _DEFAULT_BACKEND
    if backend is not None and not isinstance(backend, IBackend):
        raise TypeError(
            f"Expected an IBackend implementation, got {type(backend).__name__}"
        )
    with _DEFAULT_LOCK:
        _DEFAULT_BACKEND = backend


def seed(seed: Optional[int]) -> None:
    """Seed the process-wide backend's random source."""
    get_default_backend().seed(seed)
