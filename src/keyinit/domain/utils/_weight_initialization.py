"""
Abstract interfaces and pure math for parameter initialization.

This module defines the abstract base class for initializers used throughout
the package, along with the fan-based statistics that variance-scaling
schemes (Kaiming, Xavier) are built on.

The concrete variants and their registry live in the infrastructure layer.
This module exists in the domain layer to define contracts and shared
mathematical utilities without binding to any specific backend.
"""

from __future__ import annotations

import math
import numbers
from abc import ABC
from typing import Any, Dict, Optional, Sequence, Union

from .._backend import IBackend
from .._errors import InvalidFanError, MissingFanError
from ..types._numpy import NDArrayLike

ShapeLike = Union[int, Sequence[int]]


class _Initializer(ABC):
    """
    Abstract base class for parameter initializers.

    Design notes
    ------------
    - An initializer is an immutable value holding only its scalar
      hyperparameters; shape and fan statistics are supplied per call.
    - Each call allocates a new tensor through a backend; no state is
      accumulated between calls.
    """

    def init(
        self, shape: ShapeLike, *, backend: Optional[IBackend] = None
    ) -> NDArrayLike:
        """
        Initialize a tensor of ``shape`` without fan information.

        Parameters
        ----------
        shape:
            Requested tensor shape.
        backend:
            Backend used for allocation. Defaults to the process-wide backend.

        Returns
        -------
        NDArrayLike
            The newly initialized tensor.
        """
        ...

    def init_with(
        self,
        shape: ShapeLike,
        fan_in: Optional[int] = None,
        fan_out: Optional[int] = None,
        *,
        backend: Optional[IBackend] = None,
    ) -> NDArrayLike:
        """
        Initialize a tensor of ``shape``, optionally using fan statistics.

        Parameters
        ----------
        shape:
            Requested tensor shape.
        fan_in:
            Number of input connections of the layer, if needed by the scheme.
        fan_out:
            Number of output connections of the layer, if needed by the scheme.
        backend:
            Backend used for allocation. Defaults to the process-wide backend.

        Returns
        -------
        NDArrayLike
            The newly initialized tensor.
        """
        ...

    def get_config(self) -> Dict[str, Any]:
        """
        Return the JSON-serializable hyperparameters of this initializer.

        Returns
        -------
        Dict[str, Any]
            Field name to value mapping.
        """
        ...


def _require_fan(initializer: str, name: str, value: Optional[int]) -> int:
    if value is None:
        raise MissingFanError(initializer, name)
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidFanError(name, value)
    if value <= 0:
        raise InvalidFanError(name, value)
    return int(value)


def kaiming_std(
    fan_out_only: bool, fan_in: Optional[int], fan_out: Optional[int]
) -> float:
    """
    Compute the unscaled Kaiming (He) standard deviation.

        std = 1 / sqrt(fan)

    where ``fan`` is ``fan_out`` if ``fan_out_only`` is set, else ``fan_in``.

    Parameters
    ----------
    fan_out_only:
        Select ``fan_out`` instead of ``fan_in``.
    fan_in, fan_out:
        Layer fan statistics. Only the selected one is required.

    Returns
    -------
    float
        The standard deviation before applying the gain.

    Raises
    ------
    MissingFanError
        If the selected fan is ``None``.
    InvalidFanError
        If the selected fan is not a positive integer.
    """
    if fan_out_only:
        fan = _require_fan("Kaiming", "fan_out", fan_out)
    else:
        fan = _require_fan("Kaiming", "fan_in", fan_in)
    return 1.0 / math.sqrt(float(fan))


def xavier_std(fan_in: Optional[int], fan_out: Optional[int]) -> float:
    """
    Compute the unscaled Xavier (Glorot) standard deviation.

        std = sqrt(2 / (fan_in + fan_out))

    Raises
    ------
    MissingFanError
        If either fan is ``None`` (``fan_in`` is checked first).
    InvalidFanError
        If either fan is not a positive integer.
    """
    fan_in = _require_fan("Xavier", "fan_in", fan_in)
    fan_out = _require_fan("Xavier", "fan_out", fan_out)
    return math.sqrt(2.0 / float(fan_in + fan_out))


def calculate_fan_in_and_fan_out(shape: Sequence[int]) -> tuple[int, int]:
    """
    Compute both fan-in and fan-out values for a weight tensor shape.

    Fan-in represents the number of inputs to a single output unit, while
    fan-out represents the number of outputs influenced by a single input
    unit.

    Parameters
    ----------
    shape:
        Shape of the weight tensor. Linear weights are ``(out, in)``;
        convolution weights are ``(out_channels, in_channels, k1, k2, ...)``.

    Returns
    -------
    tuple[int, int]
        A tuple of (fan_in, fan_out).
    """
    shape = tuple(int(d) for d in shape)
    if len(shape) == 0:
        return 1, 1  # scalar
    if len(shape) == 1:
        # bias or vector parameter
        return shape[0], shape[0]
    if len(shape) == 2:
        fan_out, fan_in = shape
        return fan_in, fan_out

    receptive_field = 1
    for d in shape[2:]:
        receptive_field *= d

    fan_in = shape[1] * receptive_field
    fan_out = shape[0] * receptive_field
    return fan_in, fan_out


_UNIT_GAIN = frozenset(
    {
        "linear",
        "identity",
        "sigmoid",
        "conv1d",
        "conv2d",
        "conv3d",
        "conv_transpose1d",
        "conv_transpose2d",
        "conv_transpose3d",
    }
)


def calculate_gain(nonlinearity: str, param: Optional[float] = None) -> float:
    """
    Return the recommended gain for a nonlinearity.

    ================  =============================
    nonlinearity      gain
    ================  =============================
    linear / conv     1
    sigmoid           1
    tanh              5 / 3
    relu              sqrt(2)
    leaky_relu        sqrt(2 / (1 + negative_slope^2))
    selu              3 / 4
    ================  =============================

    Parameters
    ----------
    nonlinearity:
        Name of the activation following the initialized layer.
    param:
        Negative slope for ``leaky_relu`` (defaults to 0.01). Ignored otherwise.

    Raises
    ------
    ValueError
        If the nonlinearity is unknown or the slope is not a number.
    """
    if nonlinearity in _UNIT_GAIN:
        return 1.0
    if nonlinearity == "tanh":
        return 5.0 / 3.0
    if nonlinearity == "relu":
        return math.sqrt(2.0)
    if nonlinearity == "leaky_relu":
        if param is None:
            negative_slope = 0.01
        elif isinstance(param, bool) or not isinstance(param, numbers.Real):
            raise ValueError(f"negative_slope {param!r} is not a valid number")
        else:
            negative_slope = float(param)
        return math.sqrt(2.0 / (1.0 + negative_slope * negative_slope))
    if nonlinearity == "selu":
        return 3.0 / 4.0
    raise ValueError(f"Unsupported nonlinearity: {nonlinearity!r}")
