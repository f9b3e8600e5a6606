import importlib

mod = "pluginxsd"


class LazyLoader:
    """
    Resolves the public pluginxsd names on first access, so that importing
    the package does not pull in lxml or the built-in targets.
    """
    def __init__(self, exports, submodules):
        self._exports = exports
        self._submodules = frozenset(submodules)
        self._resolved = {}

    def names(self):
        return sorted(set(self._exports) | self._submodules)

    def resolve(self, name):
        if name in self._resolved:
            return self._resolved[name]
        if name in self._exports:
            module_name, attr = self._exports[name]
            value = getattr(importlib.import_module(f"{mod}.{module_name}"), attr)
        elif name in self._submodules:
            value = importlib.import_module(f"{mod}.{name}")
        else:
            raise AttributeError(f"module {mod!r} has no attribute {name!r}")
        self._resolved[name] = value
        return value


# Public name -> (submodule, attribute)
_exports = {
    "convert_types_to_xsd": ("typestoxsd", "convert_types_to_xsd"),
    "TypesToXSD": ("typestoxsd", "TypesToXSD"),
    "ClassIntrospector": ("reflection", "ClassIntrospector"),
    "TargetRegistry": ("registry", "TargetRegistry"),
    "load_registry": ("registry", "load_registry"),
    "attribute_name": ("common", "attribute_name"),
    "schema_type_name": ("common", "schema_type_name"),
    "SchemaGenerationError": ("errors", "SchemaGenerationError"),
}

_submodules = ("common", "definitions", "errors", "framework", "pluginxsd",
               "reflection", "registry", "targets", "typemodel", "typestoxsd",
               "xsdassembler")

_lazy_loader = LazyLoader(_exports, _submodules)

__all__ = sorted(_exports)


def __getattr__(name):
    return _lazy_loader.resolve(name)


def __dir__():
    return _lazy_loader.names()
