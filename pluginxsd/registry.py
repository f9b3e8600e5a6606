"""Registries of target types the schema is generated from."""

import importlib
import inspect
import logging
from importlib.metadata import entry_points
from typing import Any, Iterable, List, Optional

from pluginxsd.errors import RegistryError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = 'pluginxsd.targets'


class TargetRegistry:
    """Target classes in registration order."""

    def __init__(self, types: Iterable[type] = ()):
        self._types: List[type] = []
        for t in types:
            self.register(t)

    def register(self, t: type) -> type:
        """Add ``t`` to the registry. Usable as a class decorator."""
        if not inspect.isclass(t):
            raise RegistryError(f"Only classes can be registered as targets, got {t!r}")
        if t not in self._types:
            self._types.append(t)
        return t

    @property
    def target_types(self) -> List[type]:
        return list(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self):
        return iter(self._types)


def import_object(spec: str) -> Any:
    """Import ``module:attribute``."""
    module_name, sep, attribute = spec.partition(':')
    if not sep or not module_name or not attribute:
        raise RegistryError("Registry must be given as module:attribute", context=spec)
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise RegistryError(f"Cannot import module {module_name}: {e}", context=spec, cause=e) from e
    obj = module
    for name in attribute.split('.'):
        try:
            obj = getattr(obj, name)
        except AttributeError as e:
            raise RegistryError(f"Module {module_name} has no attribute {attribute}", context=spec, cause=e) from e
    return obj


def load_entry_point_targets(registry: TargetRegistry, group: str = ENTRY_POINT_GROUP) -> TargetRegistry:
    """Register every target class advertised under the entry point ``group``."""
    for entry_point in entry_points(group=group):
        try:
            loaded = entry_point.load()
        except Exception as e:
            logger.warning("Failed to load target entry point %s: %s", entry_point.name, e)
            raise RegistryError(f"Cannot load target entry point {entry_point.name}: {e}", context=entry_point.value, cause=e) from e
        for t in as_types(loaded, entry_point.value):
            registry.register(t)
    return registry


def as_types(obj: Any, context: str) -> List[type]:
    if hasattr(obj, 'target_types'):
        return list(obj.target_types)
    if inspect.isclass(obj):
        return [obj]
    try:
        return list(obj)
    except TypeError as e:
        raise RegistryError(f"Expected a registry, a class or an iterable of classes, got {type(obj).__name__}", context=context, cause=e) from e


def load_registry(spec: Optional[str] = None) -> TargetRegistry:
    """
    Load the registry to generate the schema from.

    Args:
        spec: ``module:attribute`` naming a ``TargetRegistry``, a target class or
            an iterable of target classes. When omitted, the built-in targets
            plus those advertised under the ``pluginxsd.targets`` entry point
            group are used.
    """
    if spec:
        return TargetRegistry(as_types(import_object(spec), spec))

    from pluginxsd.targets import default_registry
    registry = TargetRegistry(default_registry.target_types)
    return load_entry_point_targets(registry)
