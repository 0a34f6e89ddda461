"""UseCaseHandler — base for class-based use cases that consume ports.

Registered operations are plain callables. When a use case needs external
dependencies, subclass :class:`UseCaseHandler`, implement :meth:`__call__`,
and pull ports from the owning container at call time::

    class SendWelcome(UseCaseHandler[str, Result[str]]):
        def __call__(self, email: str) -> Result[str]:
            self.port(EmailService).send(email, "Welcome!")
            return Result.ok(email)

Ports are resolved on every call, never cached, so the handler sees whatever
the container holds when it runs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hexafun.core.container import Container


class UseCaseHandler[I, O](ABC):
    """Callable use case bound to a :class:`Container`."""

    def __init__(self, container: Container) -> None:
        self._container = container

    @property
    def container(self) -> Container:
        return self._container

    def port[T](self, port_type: type[T]) -> T:
        return self._container.port(port_type)

    def has_port(self, port_type: Any) -> bool:
        return self._container.has_port(port_type)

    @abstractmethod
    def __call__(self, value: I) -> O: ...
