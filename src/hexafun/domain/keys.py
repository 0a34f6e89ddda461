"""Typed keys for use-case and adapter dispatch.

A key carries a name plus two typing-only parameters describing the input and
output of whatever it identifies. The parameters are erased at runtime:
identity is the name alone.

Two key kinds exist and they are separate namespaces:

- :class:`UseCaseKey` addresses the use-case registry.
- :class:`AdapterKey` addresses the adapter registry.

INVARIANT: Two keys of the same kind are equal iff their names are equal.
INVARIANT: A UseCaseKey never equals an AdapterKey, even with the same name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self


def _require_name(kind: str, name: Any) -> None:
    if not isinstance(name, str):
        msg = f"{kind} name must be a string, got {type(name).__name__}"
        raise ValueError(msg)
    if not name.strip():
        msg = f"{kind} name must not be empty"
        raise ValueError(msg)


@dataclass(frozen=True)
class UseCaseKey[I, O]:
    """Identity of a registered use case taking ``I`` and returning ``O``.

    Usage::

        DOUBLE: UseCaseKey[int, int] = UseCaseKey.of("double")
        container.invoke(DOUBLE, 5)
    """

    name: str

    def __post_init__(self) -> None:
        _require_name("Use case", self.name)

    @classmethod
    def of(cls, name: str) -> Self:
        return cls(name)

    def __repr__(self) -> str:
        return f"UseCaseKey({self.name!r})"


@dataclass(frozen=True)
class AdapterKey[From, To]:
    """Identity of a registered adapter transforming ``From`` into ``To``."""

    name: str

    def __post_init__(self) -> None:
        _require_name("Adapter", self.name)

    @classmethod
    def of(cls, name: str) -> Self:
        return cls(name)

    def __repr__(self) -> str:
        return f"AdapterKey({self.name!r})"
