"""Container — three independent registries and their dispatch contracts.

Registries:

- use cases: name -> operation, dispatched with :meth:`Container.invoke`
- ports: type token -> instance, retrieved with :meth:`Container.port`
- adapters: name -> transform, dispatched with :meth:`Container.adapt`

A use-case name and an adapter name with the same text never collide.

Lifecycle: a container is mutable until :meth:`Container.freeze` is called.
:meth:`ContainerBuilder.build() <hexafun.core.builder.ContainerBuilder.build>`
always returns a frozen container. Concurrent reads of a frozen container are
safe; the container takes no locks and callers must not register from one
thread while another dispatches.

INVARIANT: invoke/port/adapt never mutate state.
INVARIANT: Exceptions raised by operations and transforms propagate unaltered.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from hexafun.domain.keys import AdapterKey, UseCaseKey
from hexafun.errors import (
    ContainerFrozenError,
    DuplicateRegistrationError,
    UnregisteredAdapterError,
    UnregisteredPortError,
    UnregisteredUseCaseError,
    type_name,
)

if TYPE_CHECKING:
    from hexafun.testing.harness import UseCaseTest

logger = logging.getLogger(__name__)


class DuplicatePolicy(StrEnum):
    """What a registry does when a key is registered a second time."""

    OVERWRITE = "overwrite"
    ERROR = "error"


def key_name(key: UseCaseKey[Any, Any] | AdapterKey[Any, Any] | str, kind: type) -> str:
    """Return the registry name for a key of *kind* or a plain string.

    A key of the other kind is rejected: the two namespaces are never mixed.
    """
    if isinstance(key, kind):
        return key.name
    if isinstance(key, (UseCaseKey, AdapterKey)):
        msg = f"Expected {kind.__name__} or a name, got {key!r}"
        raise TypeError(msg)
    if isinstance(key, str) and key.strip():
        return key
    msg = f"Expected a key or a non-empty name, got {key!r}"
    raise ValueError(msg)


class Container:
    """In-process registry of use cases, ports, and adapters.

    Usage::

        container = Container()
        container.register_use_case("double", lambda x: x * 2)
        container.invoke(UseCaseKey.of("double"), 5)  # 10
    """

    def __init__(self, *, duplicates: DuplicatePolicy | str = DuplicatePolicy.OVERWRITE) -> None:
        self._duplicates = DuplicatePolicy(duplicates)
        self._use_cases: dict[str, Callable[[Any], Any]] = {}
        self._ports: dict[Any, Any] = {}
        self._adapters: dict[str, Callable[[Any], Any]] = {}
        self._frozen = False

    def __repr__(self) -> str:
        return (
            f"Container(use_cases={len(self._use_cases)}, ports={len(self._ports)}, "
            f"adapters={len(self._adapters)}, frozen={self._frozen})"
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def duplicates(self) -> DuplicatePolicy:
        return self._duplicates

    @property
    def is_frozen(self) -> bool:
        """Whether registration has been closed."""
        return self._frozen

    def freeze(self) -> Container:
        """Reject all further registration. Idempotent."""
        self._frozen = True
        return self

    def _check_writable(self, registry: str, key: str) -> None:
        if self._frozen:
            msg = f"Cannot register {registry} {key!r}: container is frozen"
            raise ContainerFrozenError(msg)

    def _check_duplicate(self, registry: str, store: dict[Any, Any], key: Any, label: str) -> None:
        if key not in store:
            return
        if self._duplicates is DuplicatePolicy.ERROR:
            raise DuplicateRegistrationError(registry, label)
        logger.debug("Overwriting %s registration: %s", registry, label)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_use_case(
        self,
        name: UseCaseKey[Any, Any] | str,
        operation: Callable[[Any], Any],
    ) -> None:
        """Register *operation* under *name*."""
        resolved = key_name(name, UseCaseKey)
        self._check_writable("use case", resolved)
        if not callable(operation):
            msg = f"Use case {resolved!r} must be callable, got {type(operation).__name__}"
            raise TypeError(msg)
        self._check_duplicate("use case", self._use_cases, resolved, resolved)
        self._use_cases[resolved] = operation
        logger.debug("Registered use case: %s", resolved)

    def register_port(self, port_type: Any, instance: Any) -> None:
        """Register *instance* as the port for *port_type*.

        The instance is stored as-is; it is never checked against the type.
        """
        label = type_name(port_type)
        self._check_writable("port", label)
        self._check_duplicate("port", self._ports, port_type, label)
        self._ports[port_type] = instance
        logger.debug("Registered port: %s", label)

    def register_adapter(
        self,
        name: AdapterKey[Any, Any] | str,
        transform: Callable[[Any], Any],
    ) -> None:
        """Register *transform* under *name*."""
        resolved = key_name(name, AdapterKey)
        self._check_writable("adapter", resolved)
        if not callable(transform):
            msg = f"Adapter {resolved!r} must be callable, got {type(transform).__name__}"
            raise TypeError(msg)
        self._check_duplicate("adapter", self._adapters, resolved, resolved)
        self._adapters[resolved] = transform
        logger.debug("Registered adapter: %s", resolved)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def invoke[I, O](self, key: UseCaseKey[I, O] | str, value: I) -> O:
        """Run the use case registered under *key* with *value*.

        Raises:
            UnregisteredUseCaseError: nothing is registered under the name.
        """
        return self.invoke_by_name(key_name(key, UseCaseKey), value)

    def invoke_by_name(self, name: str, value: Any) -> Any:
        """Run the use case registered under *name* with *value*."""
        operation = self._use_cases.get(name)
        if operation is None:
            raise UnregisteredUseCaseError(name)
        logger.debug("Invoking use case: %s", name)
        return operation(value)

    def port[T](self, port_type: type[T]) -> T:
        """Return the instance registered for *port_type*.

        Raises:
            UnregisteredPortError: no instance is registered for the type.
        """
        if port_type not in self._ports:
            raise UnregisteredPortError(port_type)
        return self._ports[port_type]

    def adapt[From, To](self, key: AdapterKey[From, To] | str, value: From) -> To:
        """Apply the adapter registered under *key* to *value*.

        Raises:
            UnregisteredAdapterError: nothing is registered under the name.
        """
        name = key_name(key, AdapterKey)
        transform = self._adapters.get(name)
        if transform is None:
            raise UnregisteredAdapterError(name)
        logger.debug("Applying adapter: %s", name)
        return transform(value)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def has_use_case(self, key: UseCaseKey[Any, Any] | str) -> bool:
        return key_name(key, UseCaseKey) in self._use_cases

    def has_port(self, port_type: Any) -> bool:
        return port_type in self._ports

    def has_adapter(self, key: AdapterKey[Any, Any] | str) -> bool:
        return key_name(key, AdapterKey) in self._adapters

    def registered_use_case_names(self) -> frozenset[str]:
        return frozenset(self._use_cases)

    def registered_port_types(self) -> frozenset[Any]:
        return frozenset(self._ports)

    def registered_adapter_names(self) -> frozenset[str]:
        return frozenset(self._adapters)

    # ------------------------------------------------------------------
    # Testing
    # ------------------------------------------------------------------

    def test[I, O](self, key: UseCaseKey[I, O]) -> UseCaseTest[I, O]:
        """Start a :class:`~hexafun.testing.harness.UseCaseTest` for *key*."""
        from hexafun.testing.harness import HexaTest

        return HexaTest.for_container(self).test(key)
