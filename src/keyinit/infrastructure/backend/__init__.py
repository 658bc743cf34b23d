"""
Tensor allocation backends.

Exports
-------
- NumpyBackend:
    Seedable CPU backend producing NumPy arrays.
- get_default_backend / set_default_backend / seed:
    Access to the process-wide backend used when initializers are called
    without an explicit ``backend``.
"""

from ._numpy_backend import NumpyBackend
from ._default import get_default_backend, set_default_backend, seed

__all__ = [
    NumpyBackend.__name__,
    get_default_backend.__name__,
    set_default_backend.__name__,
    seed.__name__,
]
