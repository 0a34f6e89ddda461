"""ContainerBuilder — fluent, staged construction of a :class:`Container`.

Each use-case definition reads as one chain::

    app = (
        ContainerBuilder()
        .use_case(DOUBLE).handle(lambda x: x * 2)
        .use_case(DIVIDE)
            .validate(non_zero_divisor)
            .handle(lambda pair: Result.ok(pair[0] / pair[1]))
        .with_adapter(TO_LEN, len)
        .build()
    )

Every terminal ``handle`` produces an immutable :class:`StagedUseCase` that is
appended to the builder. Starting the next ``use_case`` therefore never loses
the previous definition, and there is no explicit "close" call.

INVARIANT: A stage is consumed exactly once. Calling ``handle`` or ``validate``
on a stage that was already used raises :class:`BuilderStateError`.
INVARIANT: ``build()`` registers ports, then adapters, then use cases into a
new container and freezes it. Builder state is retained, so each ``build()``
yields an independent container holding the same registrations.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

from hexafun.core.container import Container, DuplicatePolicy, key_name
from hexafun.core.validation import ValidationChain, ValidationStep
from hexafun.domain.keys import AdapterKey, UseCaseKey
from hexafun.errors import BuilderStateError, DuplicateRegistrationError, type_name

if TYPE_CHECKING:
    from hexafun.config.settings import HexafunSettings
    from hexafun.core.handler import UseCaseHandler
    from hexafun.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

type OperationFactory = Callable[[Container], Callable[[Any], Any]]


@dataclass(frozen=True)
class StagedUseCase:
    """A finalized use-case definition awaiting ``build()``.

    ``factory`` receives the container being built and returns the operation
    to register, so class-based handlers can bind to that container.
    """

    name: str
    factory: OperationFactory
    validated: bool = False

    def resolve(self, container: Container) -> Callable[[Any], Any]:
        return self.factory(container)


class _Stage:
    __slots__ = ("_builder", "_consumed", "_name")

    def __init__(self, builder: ContainerBuilder, name: str) -> None:
        self._builder = builder
        self._name = name
        self._consumed = False

    @property
    def name(self) -> str:
        return self._name

    def _consume(self) -> None:
        if self._consumed:
            msg = f"Use case {self._name!r}: this stage has already been used"
            raise BuilderStateError(msg)
        self._consumed = True


class UseCaseStage[I](_Stage):
    """Start of a use-case definition; follow with ``validate`` or ``handle``."""

    def validate(self, step: ValidationStep[I]) -> ValidationStage[I]:
        self._consume()
        return ValidationStage(self._builder, self._name, ValidationChain(step))

    def handle(self, operation: Callable[[I], Any]) -> ContainerBuilder:
        """Finalize the use case with *operation* and no validation."""
        self._consume()
        _require_callable(self._name, operation)
        return self._builder._stage(StagedUseCase(self._name, lambda _container: operation))

    def handle_with(self, handler_cls: type[UseCaseHandler[I, Any]]) -> ContainerBuilder:
        """Finalize with a handler class instantiated against the built container."""
        self._consume()
        return self._builder._stage(StagedUseCase(self._name, handler_cls))


class ValidationStage[I](_Stage):
    """A use-case definition with one or more validators accumulated."""

    __slots__ = ("_chain",)

    def __init__(self, builder: ContainerBuilder, name: str, chain: ValidationChain[I]) -> None:
        super().__init__(builder, name)
        self._chain = chain

    @property
    def chain(self) -> ValidationChain[I]:
        return self._chain

    def validate(self, step: ValidationStep[I]) -> ValidationStage[I]:
        """Append *step*; it runs after every previously added validator."""
        self._consume()
        return ValidationStage(self._builder, self._name, self._chain.then(step))

    def handle(self, operation: Callable[[I], Any]) -> ContainerBuilder:
        """Finalize with *operation*, run only on validated input."""
        self._consume()
        _require_callable(self._name, operation)
        guarded = self._chain.guard(operation)
        return self._builder._stage(
            StagedUseCase(self._name, lambda _container: guarded, validated=True)
        )

    def handle_with(self, handler_cls: type[UseCaseHandler[I, Any]]) -> ContainerBuilder:
        self._consume()
        chain = self._chain
        return self._builder._stage(
            StagedUseCase(
                self._name,
                lambda container: chain.guard(handler_cls(container)),
                validated=True,
            )
        )


def _require_callable(name: str, operation: Any) -> None:
    if not callable(operation):
        msg = f"Use case {name!r} must be callable, got {type(operation).__name__}"
        raise TypeError(msg)


class ContainerBuilder:
    """Accumulates use cases, ports, and adapters, then builds a Container.

    Not safe for concurrent mutation; confine a builder to one owner until
    ``build()`` returns.
    """

    def __init__(self, *, duplicates: DuplicatePolicy | str = DuplicatePolicy.OVERWRITE) -> None:
        self._duplicates = DuplicatePolicy(duplicates)
        self._use_cases: list[StagedUseCase] = []
        self._ports: dict[Any, Any] = {}
        self._adapters: dict[str, Callable[[Any], Any]] = {}
        self._unfinished: set[str] = set()

    @classmethod
    def from_settings(cls, settings: HexafunSettings) -> Self:
        """Create a builder honoring the configured duplicate policy."""
        return cls(duplicates=settings.duplicates)

    @property
    def duplicates(self) -> DuplicatePolicy:
        return self._duplicates

    # ------------------------------------------------------------------
    # Use cases
    # ------------------------------------------------------------------

    def use_case[I, O](self, key: UseCaseKey[I, O]) -> UseCaseStage[I]:
        """Begin defining the use case identified by *key*."""
        name = key_name(key, UseCaseKey)
        self._unfinished.add(name)
        return UseCaseStage(self, name)

    def _stage(self, staged: StagedUseCase) -> Self:
        if self._duplicates is DuplicatePolicy.ERROR and staged.name in self.staged_names():
            raise DuplicateRegistrationError("use case", staged.name)
        self._use_cases.append(staged)
        self._unfinished.discard(staged.name)
        logger.debug("Staged use case: %s", staged.name)
        return self

    def staged(self) -> tuple[StagedUseCase, ...]:
        """Finalized use-case definitions in declaration order."""
        return tuple(self._use_cases)

    def staged_names(self) -> frozenset[str]:
        return frozenset(s.name for s in self._use_cases)

    # ------------------------------------------------------------------
    # Ports and adapters
    # ------------------------------------------------------------------

    def with_port[T](self, port_type: type[T], instance: T) -> Self:
        """Register *instance* for *port_type*; independent of use-case staging."""
        if self._duplicates is DuplicatePolicy.ERROR and port_type in self._ports:
            raise DuplicateRegistrationError("port", type_name(port_type))
        self._ports[port_type] = instance
        return self

    def with_adapter[From, To](
        self,
        key: AdapterKey[From, To] | str,
        transform: Callable[[From], To],
    ) -> Self:
        """Register *transform* under *key*; independent of use-case staging."""
        name = key_name(key, AdapterKey)
        if not callable(transform):
            msg = f"Adapter {name!r} must be callable, got {type(transform).__name__}"
            raise TypeError(msg)
        if self._duplicates is DuplicatePolicy.ERROR and name in self._adapters:
            raise DuplicateRegistrationError("adapter", name)
        self._adapters[name] = transform
        return self

    def with_plugins(self, plugins: PluginManager) -> Self:
        """Let every registered plugin contribute registrations to this builder."""
        plugins.configure(self)
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build(self) -> Container:
        """Materialize a new, frozen Container from the staged registrations."""
        for name in sorted(self._unfinished):
            logger.warning("Use case %r was declared but never handled; skipping it", name)

        container = Container(duplicates=self._duplicates)
        for port_type, instance in self._ports.items():
            container.register_port(port_type, instance)
        for name, transform in self._adapters.items():
            container.register_adapter(name, transform)
        for staged in self._use_cases:
            container.register_use_case(staged.name, staged.resolve(container))
        container.freeze()

        logger.debug(
            "Built container: %d use cases, %d ports, %d adapters",
            len(container.registered_use_case_names()),
            len(self._ports),
            len(self._adapters),
        )
        return container
