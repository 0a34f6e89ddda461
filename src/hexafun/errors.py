"""Exception hierarchy for hexafun.

Four error channels, deliberately kept apart:

1. Validation failure: an expected domain condition. Always a
   :class:`~hexafun.domain.result.Failure` value, never raised.
2. Unregistered lookup: a configuration fault. Raised as a
   :class:`RegistryLookupError` subclass naming the missing key or type.
3. Operation-body exception: anything raised inside a registered use case,
   validator, or adapter propagates to the caller of ``invoke``/``adapt``
   unaltered. The container performs no catch-and-wrap.
4. Test-assertion failure: raised only by :mod:`hexafun.testing` as
   :class:`~hexafun.testing.harness.HarnessAssertionError`.

INVARIANT: channels 1 and 3 are never merged. An unexpected defect inside an
operation must not become a ``Failure``, and an expected domain failure must
not be raised.
"""

from __future__ import annotations

from typing import Any


class HexafunError(Exception):
    """Base class for every fault raised by the engine itself."""


# ---------------------------------------------------------------------------
# Channel 2: unregistered lookups
# ---------------------------------------------------------------------------


class RegistryLookupError(HexafunError, LookupError):
    """A use case, port, or adapter was requested but never registered."""


class UnregisteredUseCaseError(RegistryLookupError):
    """No use case is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No use case registered with name: {name}")


class UnregisteredPortError(RegistryLookupError):
    """No port instance is registered for the requested type."""

    def __init__(self, port_type: Any) -> None:
        self.port_type = port_type
        super().__init__(f"No port registered for type: {type_name(port_type)}")


class UnregisteredAdapterError(RegistryLookupError):
    """No adapter is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No adapter registered with name: {name}")


# ---------------------------------------------------------------------------
# Configuration and programming faults
# ---------------------------------------------------------------------------


class DuplicateRegistrationError(HexafunError, ValueError):
    """A key was registered twice while duplicates are rejected."""

    def __init__(self, registry: str, key: str) -> None:
        self.registry = registry
        self.key = key
        super().__init__(f"Duplicate {registry} registration: {key}")


class ContainerFrozenError(HexafunError, RuntimeError):
    """A registration was attempted on a container that has been frozen."""


class BuilderStateError(HexafunError, RuntimeError):
    """A builder stage was used out of order (e.g. handled twice)."""


class ResultAccessError(HexafunError, RuntimeError):
    """``get()`` was called on a Failure, or ``error()`` on a Success."""


def type_name(port_type: Any) -> str:
    """Return a readable name for a port type token."""
    name = getattr(port_type, "__qualname__", None) or getattr(port_type, "__name__", None)
    return name if isinstance(name, str) else repr(port_type)
