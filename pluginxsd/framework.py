"""
Plugin framework surface.

Targets are plain classes deriving from ``Target``. Their configurable
parameters are declared as class annotations, with ``typing.Annotated``
metadata to mark special parameters::

    @target('File')
    class FileTarget(TargetWithLayout):
        FileName: Annotated[str, AcceptsLayout()]
        Encoding: str
        Targets: Annotated[TargetCollection, ArrayParameter(Target, 'target')]
        Version: Final[str]
"""

from dataclasses import dataclass
from typing import Callable, NewType, TypeVar

from pluginxsd.typemodel import ArrayParameter, TargetAttribute

__all__ = [
    'Target', 'TargetCollection', 'Layout', 'ConditionExpression',
    'Byte', 'Long', 'target', 'ArrayParameter', 'AcceptsLayout',
    'AcceptsCondition', 'TargetAttribute',
]

T = TypeVar('T', bound=type)

Byte = NewType('Byte', int)
Long = NewType('Long', int)


class Target:
    """Base class of all output targets."""


class TargetCollection(list):
    """A list of child targets."""


class Layout:
    """A text template rendered for each log event."""


class ConditionExpression:
    """A boolean expression evaluated for each log event."""


@dataclass(frozen=True)
class AcceptsLayout:
    """The annotated parameter holds a layout expression."""


@dataclass(frozen=True)
class AcceptsCondition:
    """The annotated parameter holds a condition expression."""


def target(name: str, ignores_layout: bool = False) -> Callable[[T], T]:
    """Register the decorated class under ``name`` in configuration files."""
    def decorate(cls: T) -> T:
        cls.__target__ = TargetAttribute(name, ignores_layout)
        return cls
    return decorate
