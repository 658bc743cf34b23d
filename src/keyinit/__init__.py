"""
keyinit: parameter initialization strategies for trainable tensors.

Pick an initializer, then ask it for a tensor:

    >>> from keyinit import KaimingUniform, calculate_gain, seed
    >>> seed(0)
    >>> w = KaimingUniform(gain=calculate_gain("relu")).init_with((64, 32), fan_in=32)
    >>> w.shape
    (64, 32)

Fan-dependent variants (Kaiming, Xavier) raise ``MissingFanError`` when the
fan they need is not supplied.
"""

from .domain._distribution import Distribution, NormalDistribution, UniformDistribution
from .domain._errors import InvalidFanError, MissingFanError, PreconditionError
from .domain._backend import IBackend
from .domain.utils._weight_initialization import (
    calculate_fan_in_and_fan_out,
    calculate_gain,
    kaiming_std,
    xavier_std,
)
from .infrastructure.backend import (
    NumpyBackend,
    get_default_backend,
    seed,
    set_default_backend,
)
from .infrastructure.utils.weight_initializer import (
    Constant,
    Initializer,
    KaimingNormal,
    KaimingUniform,
    Normal,
    Ones,
    Uniform,
    XavierNormal,
    XavierUniform,
    Zeros,
)

__version__ = "0.1.0"

__all__ = [
    "Initializer",
    "Constant",
    "Ones",
    "Zeros",
    "Uniform",
    "Normal",
    "KaimingUniform",
    "KaimingNormal",
    "XavierUniform",
    "XavierNormal",
    "Distribution",
    "UniformDistribution",
    "NormalDistribution",
    "IBackend",
    "NumpyBackend",
    "get_default_backend",
    "set_default_backend",
    "seed",
    "kaiming_std",
    "xavier_std",
    "calculate_fan_in_and_fan_out",
    "calculate_gain",
    "PreconditionError",
    "MissingFanError",
    "InvalidFanError",
]
