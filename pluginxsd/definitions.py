"""Schema type definitions produced by the generator."""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class EnumDefinition:
    """A string type restricted to a set of values."""
    name: str
    values: Tuple[str, ...]


@dataclass(frozen=True)
class ElementDeclaration:
    """A repeatable, optional child element."""
    name: str
    type_name: str


@dataclass(frozen=True)
class AttributeDeclaration:
    name: str
    type_name: str


@dataclass(frozen=True)
class ComplexTypeDefinition:
    """
    A complex type: an unbounded choice of child elements followed by attributes,
    optionally extending ``base``.
    """
    name: str
    base: Optional[str] = None
    elements: Tuple[ElementDeclaration, ...] = ()
    attributes: Tuple[AttributeDeclaration, ...] = ()


Definition = Union[EnumDefinition, ComplexTypeDefinition]
