"""Tri-state optional values for request fields.

Purpose
-------
JSON request bodies must distinguish three situations for a field:

* ``ABSENT``: the caller said nothing, the key is omitted from the body;
* ``NULL``: the caller explicitly wants ``null`` sent;
* ``VALUE``: a concrete value is sent.

``Opt`` models this explicitly. ``Opt.absent()`` is the default for every
optional request field; raw values passed to a request model are wrapped as
``Opt.of(v)`` and ``None`` as ``Opt.null()``.

Invariants
----------
- ``value`` is ``None`` unless the state is ``VALUE``.
- Instances are immutable and hashable when the wrapped value is hashable.
- ``is_set`` is true only for ``VALUE``.

Serialization
-------------
- Request models (``groqwire.types.RequestModel``) omit ``ABSENT`` fields and
  send ``NULL`` as ``null``.
- Multipart encoding skips both ``ABSENT`` and ``NULL``.
- ``to_json`` / ``from_json`` give a standalone JSON round-trip: unset states
  serialize to ``null`` and ``null`` parses back to ``NULL``.
"""
from __future__ import annotations

import json
from enum import Enum
from typing import Any, Generic, TypeVar, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema, to_json

T = TypeVar("T")


class OptState(str, Enum):
    ABSENT = "absent"
    NULL = "null"
    VALUE = "value"


class Opt(Generic[T]):
    """Explicit absent / null / value wrapper."""

    __slots__ = ("_state", "_value")

    def __init__(self, state: OptState = OptState.ABSENT, value: T | None = None) -> None:
        object.__setattr__(self, "_state", state)
        object.__setattr__(self, "_value", value if state is OptState.VALUE else None)

    # ------------------------------------------------------------------ ctors
    @classmethod
    def of(cls, value: T) -> "Opt[T]":
        return cls(OptState.VALUE, value)

    @classmethod
    def null(cls) -> "Opt[T]":
        return cls(OptState.NULL)

    @classmethod
    def absent(cls) -> "Opt[T]":
        return cls(OptState.ABSENT)

    # ------------------------------------------------------------- accessors
    @property
    def state(self) -> OptState:
        return self._state

    @property
    def value(self) -> T | None:
        """The wrapped value, or ``None`` when unset."""
        return self._value

    @property
    def is_set(self) -> bool:
        return self._state is OptState.VALUE

    @property
    def is_null(self) -> bool:
        return self._state is OptState.NULL

    @property
    def is_absent(self) -> bool:
        return self._state is OptState.ABSENT

    def get(self, default: T | None = None) -> T | None:
        """Return the value when set, otherwise ``default``."""
        return self._value if self._state is OptState.VALUE else default

    # ---------------------------------------------------------- json helpers
    def to_json(self) -> str:
        if self._state is not OptState.VALUE:
            return "null"
        return to_json(self._value).decode("utf-8")

    @classmethod
    def from_json(cls, text: str | bytes) -> "Opt[Any]":
        """Parse a JSON document; ``null`` yields ``Opt.null()``.

        Raises:
            ValueError: when ``text`` is not valid JSON.
        """
        parsed = json.loads(text)
        if parsed is None:
            return cls.null()
        return cls.of(parsed)

    # -------------------------------------------------------------- dunders
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Opt is immutable")

    def __copy__(self) -> "Opt[T]":
        return self

    def __deepcopy__(self, memo: dict) -> "Opt[T]":
        return self

    def __reduce__(self):
        return (type(self), (self._state, self._value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Opt):
            return NotImplemented
        return self._state is other._state and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._state, self._value))

    def __repr__(self) -> str:
        if self._state is OptState.VALUE:
            return f"Opt.of({self._value!r})"
        return f"Opt.{self._state.value}()"

    # ------------------------------------------------------------- pydantic
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        args = get_args(source_type)
        inner = handler.generate_schema(args[0]) if args else core_schema.any_schema()
        from_value = core_schema.no_info_after_validator_function(cls.of, inner)
        from_none = core_schema.no_info_after_validator_function(
            lambda _: cls.null(), core_schema.none_schema()
        )
        return core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_none, from_value],
            mode="left_to_right",
            serialization=core_schema.plain_serializer_function_ser_schema(
                _unwrap,
                return_schema=core_schema.nullable_schema(inner),
                when_used="always",
            ),
        )


def _unwrap(value: Any) -> Any:
    return value.value if isinstance(value, Opt) else value


def unwrap(value: Any) -> Any:
    """Return the plain value for ``Opt`` (``None`` when unset) or ``value`` itself."""
    return _unwrap(value)


def is_unset(value: Any) -> bool:
    """True for ``None`` and for ``Opt`` instances that are absent or null."""
    if isinstance(value, Opt):
        return not value.is_set
    return value is None


__all__ = ["Opt", "OptState", "unwrap", "is_unset"]
