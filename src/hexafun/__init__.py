"""hexafun — an in-process composition container for use cases, ports, and adapters."""

from __future__ import annotations

from hexafun.core.builder import ContainerBuilder
from hexafun.core.container import Container, DuplicatePolicy
from hexafun.core.validation import ValidationChain, require
from hexafun.domain.keys import AdapterKey, UseCaseKey
from hexafun.domain.result import Failure, Result, Success, fail, ok

__version__ = "0.3.0"

__all__ = [
    "AdapterKey",
    "Container",
    "ContainerBuilder",
    "DuplicatePolicy",
    "Failure",
    "Result",
    "Success",
    "UseCaseKey",
    "ValidationChain",
    "__version__",
    "dsl",
    "fail",
    "ok",
    "require",
]


def dsl(*, duplicates: DuplicatePolicy | str = DuplicatePolicy.OVERWRITE) -> ContainerBuilder:
    """Start a fluent container definition.

    Usage::

        app = (
            hexafun.dsl()
            .use_case(DOUBLE).handle(lambda x: x * 2)
            .with_port(EmailService, SmtpEmailService())
            .build()
        )
    """
    return ContainerBuilder(duplicates=duplicates)
