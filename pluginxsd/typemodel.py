"""
Type model shared by the schema generator and the registry introspectors.

The generator never looks at Python classes directly. Everything it needs to
know about a type (its kind, base type, declared properties and annotations)
is obtained through a ``TypeIntrospector``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional, Protocol


class TypeKind(Enum):
    """Schema shape of a type."""
    PRIMITIVE = 'primitive'
    STRING = 'string'
    ENUM = 'enum'
    ARRAY = 'array'
    STRUCTURED = 'structured'


class Primitive(Enum):
    """Primitive value types with a fixed XSD name."""
    BYTE = 'byte'
    INT32 = 'int32'
    INT64 = 'int64'
    STRING = 'string'
    BOOLEAN = 'boolean'
    DOUBLE = 'double'


class WellKnownType(Enum):
    """Framework types that get special treatment during generation."""
    OBJECT = 'object'
    TARGET = 'target'
    TARGET_COLLECTION = 'target_collection'
    LAYOUT = 'layout'
    CONDITION_EXPRESSION = 'condition_expression'


@dataclass(frozen=True)
class TargetAttribute:
    """Name under which a target is registered, and whether it ignores the implicit layout."""
    name: str
    ignores_layout: bool = False


@dataclass(frozen=True)
class ArrayParameter:
    """Marks a property as a repeatable child element."""
    item_type: Any
    element_name: str


@dataclass(frozen=True)
class PropertyInfo:
    """A property declared directly on a type."""
    name: str
    property_type: Any
    can_write: bool = True
    array_parameter: Optional[ArrayParameter] = None
    accepts_layout: bool = False
    accepts_condition: bool = False


class TypeIntrospector(Protocol):
    """Capability interface a plugin registry exposes for its types."""

    def type_name(self, t: Any) -> str:
        ...

    def kind(self, t: Any) -> TypeKind:
        ...

    def primitive(self, t: Any) -> Optional[Primitive]:
        ...

    def base_type(self, t: Any) -> Optional[Any]:
        ...

    def own_properties(self, t: Any) -> List[PropertyInfo]:
        ...

    def enum_members(self, t: Any) -> List[str]:
        ...

    def target_attribute(self, t: Any) -> Optional[TargetAttribute]:
        ...

    def well_known(self, t: Any) -> Optional[WellKnownType]:
        ...

    def well_known_type(self, tag: WellKnownType) -> Optional[Any]:
        ...

    def is_target(self, t: Any) -> bool:
        ...


class TypeRegistry(Protocol):
    """A plugin registry: the root types to generate the schema from."""

    @property
    def target_types(self) -> Iterable[Any]:
        ...
