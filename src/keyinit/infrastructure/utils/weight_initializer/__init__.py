"""
Initializer public API.

This module aggregates and exposes every supported initialization variant
(constant, uniform/normal, Kaiming, Xavier) and registers them into the
`Initializer` registries via import side effects.

Importing this module ensures that all built-in variants are available for
construction by kind (``Initializer.create`` / ``Initializer.from_config``)
and for dispatch through ``Initializer.init_with``.
"""

from ._base import Initializer
from ._constants import Constant, Ones, Zeros
from ._random import Normal, Uniform
from ._kaiming import KaimingNormal, KaimingUniform
from ._xavier import XavierNormal, XavierUniform

__all__ = [
    Initializer.__name__,
    Constant.__name__,
    Ones.__name__,
    Zeros.__name__,
    Uniform.__name__,
    Normal.__name__,
    KaimingUniform.__name__,
    KaimingNormal.__name__,
    XavierUniform.__name__,
    XavierNormal.__name__,
]
