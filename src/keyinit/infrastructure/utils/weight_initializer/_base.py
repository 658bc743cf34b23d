"""
Initializer base class, registries and dispatch.

This module defines the concrete `Initializer` base that every initialization
variant (Constant, Kaiming, Xavier, ...) derives from.

Design
------
- Each variant is a frozen dataclass holding only its scalar hyperparameters.
  Shape and fan statistics are supplied per call, so one value can initialize
  many tensors of different shapes.
- Variants are tagged with a string ``KIND`` and registered by a class
  decorator; this is what configuration documents refer to.
- The function that turns a variant into a tensor is registered separately
  under the same ``KIND``. ``init_with`` is the single dispatch point: it
  looks up that function and hands it the normalized shape, the fans and the
  backend.

Usage example
-------------
Registering a variant:

    @Initializer.register_variant("constant")
    @dataclass(frozen=True)
    class Constant(Initializer):
        value: float

    @Initializer.register_initializer("constant")
    def constant(initializer, shape, fan_in, fan_out, backend):
        return backend.fill(shape, initializer.value)

Applying it:

    Constant(0.5).init((3, 4))

Notes
-----
- Registration keys must be unique unless explicitly overwritten.
- Configuration round-trips through ``to_config`` / ``from_config`` and the
  JSON helpers built on top of them.
"""

from __future__ import annotations

import dataclasses
import json
import numbers
import operator
from pathlib import Path
from typing import Any, Callable, ClassVar, Dict, Optional, Type, TypeVar

from ....domain._backend import IBackend
from ....domain.types._numpy import NDArrayLike
from ....domain.utils._weight_initialization import ShapeLike, _Initializer
from ...backend._default import get_default_backend

F = TypeVar("F", bound=Callable[..., NDArrayLike])
C = TypeVar("C", bound=type)

JSON_FORMAT = "keyinit.json.initializer.v1"


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {value!r}")
    return float(value)


def _as_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, numbers.Integral) and value in (0, 1):
        return bool(value)
    raise TypeError(f"{name} must be a bool, got {value!r}")


_FIELD_CASTS: Dict[Any, Callable[[str, Any], Any]] = {
    "float": _as_float,
    "bool": _as_bool,
    float: _as_float,
    bool: _as_bool,
}


def _normalize_shape(shape: ShapeLike) -> tuple[int, ...]:
    if isinstance(shape, numbers.Integral):
        return (operator.index(shape),)
    return tuple(operator.index(d) for d in shape)


def _check_name(name: str) -> None:
    if not isinstance(name, str) or not name:
        raise ValueError("Initializer kind must be a non-empty string")


class Initializer(_Initializer):
    """
    Base class of all initialization variants.

    Usage
    -----
    Construct a variant and call it:
        KaimingUniform(gain=1.0).init_with((64, 32), fan_in=32)

    Build one from configuration:
        Initializer.create("xavier_normal", gain=1.0)

    Notes
    -----
    - ``VARIANTS`` maps kind to variant class; ``INITIALIZERS`` maps kind to
      the function producing the tensor. Both are class-level registries.
    - Fields annotated ``float`` / ``bool`` are checked and coerced on
      construction so values read from JSON compare equal to hand-built ones.
      Strings, and bools in float fields, raise ``TypeError``; bool fields
      also accept the integers 0 and 1.
    """

    KIND: ClassVar[str] = ""
    VARIANTS: ClassVar[Dict[str, type]] = {}
    INITIALIZERS: ClassVar[Dict[str, Callable[..., NDArrayLike]]] = {}

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            cast = _FIELD_CASTS.get(f.type)
            if cast is not None:
                object.__setattr__(self, f.name, cast(f.name, getattr(self, f.name)))

    # ------------------------------------------------------------------
    # Registries
    # ------------------------------------------------------------------
    @classmethod
    def register_variant(cls, kind: str, *, overwrite: bool = False) -> Callable[[C], C]:
        """
        Decorator to register an initializer variant class under ``kind``.

        Parameters
        ----------
        kind:
            Tag used in configuration documents and for dispatch.
        overwrite:
            If False (default), raises if ``kind`` is already registered.
        """
        _check_name(kind)

        def decorator(variant: C) -> C:
            if not overwrite and kind in cls.VARIANTS:
                raise ValueError(f"Initializer variant already registered: {kind!r}")
            variant.KIND = kind
            cls.VARIANTS[kind] = variant
            return variant

        return decorator

    @classmethod
    def register_initializer(
        cls, kind: str, *, overwrite: bool = False
    ) -> Callable[[F], F]:
        """
        Decorator to register the tensor-producing function for ``kind``.

        The function receives ``(initializer, shape, fan_in, fan_out, backend)``
        and returns the newly allocated tensor.
        """
        _check_name(kind)

        def decorator(func: F) -> F:
            if not overwrite and kind in cls.INITIALIZERS:
                raise ValueError(f"Initializer already registered: {kind!r}")
            cls.INITIALIZERS[kind] = func
            return func

        return decorator

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """Return registered variant kinds (sorted)."""
        return tuple(sorted(cls.VARIANTS))

    @classmethod
    def get(cls, kind: str) -> Callable[..., NDArrayLike]:
        """Get the registered tensor-producing function by kind."""
        return cls.INITIALIZERS[kind]

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------
    def init(
        self, shape: ShapeLike, *, backend: Optional[IBackend] = None
    ) -> NDArrayLike:
        """
        Initialize a tensor of ``shape`` without fan information.

        Fan-dependent variants raise ``MissingFanError`` here; use
        ``init_with`` for those.
        """
        return self.init_with(shape, None, None, backend=backend)

    def init_with(
        self,
        shape: ShapeLike,
        fan_in: Optional[int] = None,
        fan_out: Optional[int] = None,
        *,
        backend: Optional[IBackend] = None,
    ) -> NDArrayLike:
        """
        Initialize a tensor of ``shape``, using ``fan_in`` / ``fan_out`` when
        the variant's formula needs them.

        Parameters
        ----------
        shape:
            An int or a sequence of ints.
        fan_in, fan_out:
            Layer fan statistics, or None when not applicable.
        backend:
            Allocation backend. Defaults to ``get_default_backend()``.

        Returns
        -------
        NDArrayLike
            A newly allocated tensor of exactly ``shape``.

        Raises
        ------
        MissingFanError
            If a fan required by the variant is None.
        InvalidFanError
            If a fan used by the variant is not a positive integer.
        TypeError
            If a dimension of ``shape`` is not an integer.
        """
        kind = type(self).KIND
        try:
            initializer = self.INITIALIZERS[kind]
        except KeyError as e:
            raise ValueError(
                f"No initializer registered for {type(self).__name__} "
                f"(kind={kind!r})."
            ) from e

        if backend is None:
            backend = get_default_backend()
        return initializer(self, _normalize_shape(shape), fan_in, fan_out, backend)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def get_config(self) -> Dict[str, Any]:
        """Return a JSON-serializable dict of this variant's fields."""
        return {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}

    def to_config(self) -> Dict[str, Any]:
        """
        Convert this initializer into a tagged configuration node.

        Node format
        -----------
        {"type": "kaiming_uniform", "config": {"gain": 1.0, "fan_out_only": false}}
        """
        return {"type": type(self).KIND, "config": self.get_config()}

    @classmethod
    def from_config(cls, node: Dict[str, Any]) -> "Initializer":
        """
        Rebuild an initializer from a node produced by ``to_config``.

        Raises
        ------
        ValueError
            If the type is missing or unknown, the config does not match the
            variant's fields, or the result is not an instance of ``cls``.
        """
        if "type" not in node:
            available = ", ".join(sorted(cls.VARIANTS)) or "<none>"
            raise ValueError(
                f"Initializer config is missing 'type'. Available: {available}"
            )
        kind = str(node["type"])
        if kind not in cls.VARIANTS:
            available = ", ".join(sorted(cls.VARIANTS)) or "<none>"
            raise ValueError(
                f"Unsupported initializer kind: {kind!r}. Available: {available}"
            )

        variant: Type[Initializer] = cls.VARIANTS[kind]
        cfg = node.get("config", {}) or {}
        try:
            initializer = variant(**cfg)
        except TypeError as e:
            raise ValueError(f"Invalid config for initializer {kind!r}: {e}") from e

        if not isinstance(initializer, cls):
            raise ValueError(
                f"Initializer kind {kind!r} does not produce a {cls.__name__}."
            )
        return initializer

    @classmethod
    def create(cls, kind: str, **params: Any) -> "Initializer":
        """Construct a registered variant by kind and keyword parameters."""
        return cls.from_config({"type": kind, "config": params})

    def to_json(self) -> str:
        """Serialize ``to_config()`` as a JSON string."""
        return json.dumps(self.to_config(), sort_keys=True)

    @classmethod
    def from_json(cls, text: str) -> "Initializer":
        """Parse a JSON string produced by ``to_json``."""
        return cls.from_config(json.loads(text))

    def save_json(self, path: str | Path) -> None:
        """
        Save this initializer's configuration to a JSON file.

        File format
        -----------
        {
          "format": "keyinit.json.initializer.v1",
          "initializer": {"type": ..., "config": {...}}
        }
        """
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        payload = {"format": JSON_FORMAT, "initializer": self.to_config()}
        p.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")

    @classmethod
    def load_json(cls, path: str | Path) -> "Initializer":
        """
        Load an initializer saved by ``save_json``.

        Raises
        ------
        ValueError
            If the file's format tag is not recognized.
        """
        p = Path(path)
        payload = json.loads(p.read_text(encoding="utf-8"))

        fmt = payload.get("format")
        if fmt != JSON_FORMAT:
            raise ValueError(f"Unsupported initializer file format: {fmt!r}")
        return cls.from_config(payload["initializer"])
