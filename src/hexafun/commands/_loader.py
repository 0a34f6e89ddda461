"""Resolve a ``module:attr`` target string to a built Container.

The attribute may be a :class:`Container`, a :class:`ContainerBuilder`
(built on the spot, after plugins configure it), or a zero-argument callable
returning either.
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Any

from hexafun.core.builder import ContainerBuilder
from hexafun.core.container import Container
from hexafun.errors import HexafunError

if TYPE_CHECKING:
    from hexafun.config.settings import HexafunSettings
    from hexafun.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class TargetError(HexafunError, ValueError):
    """A CLI target string could not be resolved to a container."""


def split_target(target: str) -> tuple[str, str]:
    """Split ``package.module:attr.path`` into its module and attribute parts."""
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        msg = f"Target must look like 'package.module:attribute', got {target!r}"
        raise TargetError(msg)
    return module_name, attr_path


def resolve_target(target: str) -> Any:
    """Import the module named in *target* and return the referenced attribute."""
    module_name, attr_path = split_target(target)
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import module {module_name!r}: {exc}"
        raise TargetError(msg) from exc
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            msg = f"Module {module_name!r} has no attribute {attr_path!r}"
            raise TargetError(msg) from exc
    return obj


def load_container(
    target: str,
    *,
    settings: HexafunSettings | None = None,
    plugins: PluginManager | None = None,
) -> Container:
    """Resolve *target* to a Container, building it if necessary."""
    obj = resolve_target(target)
    if callable(obj) and not isinstance(obj, (Container, ContainerBuilder)):
        logger.debug("Calling container factory %s", target)
        obj = obj()

    if isinstance(obj, Container):
        return obj
    if isinstance(obj, ContainerBuilder):
        if plugins is not None and (settings is None or settings.plugins.enabled):
            obj.with_plugins(plugins)
        return obj.build()

    msg = f"Target {target!r} is not a Container or ContainerBuilder (got {type(obj).__name__})"
    raise TargetError(msg)
