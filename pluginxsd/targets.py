"""Built-in targets."""

from enum import Enum
from typing import Annotated, ClassVar, Final, List

from pluginxsd.framework import (AcceptsCondition, AcceptsLayout,
                                 ArrayParameter, Byte, ConditionExpression,
                                 Long, Target, TargetCollection, target)
from pluginxsd.registry import TargetRegistry

default_registry = TargetRegistry()


class LineEndingMode(Enum):
    Default = 'default'
    CRLF = 'crlf'
    CR = 'cr'
    LF = 'lf'


class ArchiveNumberingMode(Enum):
    Sequence = 'sequence'
    Rolling = 'rolling'
    Date = 'date'


class ConsoleOutputColor(Enum):
    Black = 'black'
    DarkBlue = 'dark_blue'
    DarkGreen = 'dark_green'
    DarkRed = 'dark_red'
    Gray = 'gray'
    Blue = 'blue'
    Green = 'green'
    Red = 'red'
    Yellow = 'yellow'
    White = 'white'
    NoChange = 'no_change'


class AsyncTargetWrapperOverflowAction(Enum):
    Grow = 'grow'
    Discard = 'discard'
    Block = 'block'


class ConsoleTargetBase(Target):
    Header: Annotated[str, AcceptsLayout()]
    Footer: Annotated[str, AcceptsLayout()]


@default_registry.register
@target('Console')
class ConsoleTarget(ConsoleTargetBase):
    """Writes log events to standard output or standard error."""
    Error: bool


class ConsoleRowHighlightingRule:
    """Colors whole rows matching a condition."""
    Condition: Annotated[str, AcceptsCondition()]
    ForegroundColor: ConsoleOutputColor
    BackgroundColor: ConsoleOutputColor


@default_registry.register
@target('ColoredConsole')
class ColoredConsoleTarget(ConsoleTargetBase):
    ErrorStream: bool
    UseDefaultRowHighlightingRules: bool
    RowHighlightingRules: Annotated[List[ConsoleRowHighlightingRule],
                                    ArrayParameter(ConsoleRowHighlightingRule, 'highlight-row')]


@default_registry.register
@target('File')
class FileTarget(Target):
    """Writes log events to files."""
    FileName: Annotated[str, AcceptsLayout()]
    Encoding: str
    LineEnding: LineEndingMode
    KeepFileOpen: bool
    CreateDirs: bool
    BufferSize: int
    ArchiveAboveSize: Long
    ArchiveNumbering: ArchiveNumberingMode
    MaxArchiveFiles: int


@default_registry.register
@target('Memory')
class MemoryTarget(Target):
    """Keeps log events in a list."""
    MaxLogsCount: int

    @property
    def Logs(self) -> List[str]:
        return []


@default_registry.register
@target('Network')
class NetworkTarget(Target):
    DEFAULT_MAX_MESSAGE_SIZE: ClassVar[int] = 65000
    Address: Annotated[str, AcceptsLayout()]
    NewLine: bool
    KeepConnection: bool
    MaxMessageSize: int


class DatabaseParameterInfo:
    """A parameter bound to the database command."""
    Name: str
    Layout: Annotated[str, AcceptsLayout()]
    Size: int
    Precision: Byte
    Scale: Byte


@default_registry.register
@target('Database', ignores_layout=True)
class DatabaseTarget(Target):
    DBProvider: str
    DBHost: Annotated[str, AcceptsLayout()]
    ConnectionString: Annotated[str, AcceptsLayout()]
    CommandText: Annotated[str, AcceptsLayout()]
    KeepConnection: bool
    Parameters: Annotated[List[DatabaseParameterInfo], ArrayParameter(DatabaseParameterInfo, 'parameter')]


class WrapperTargetBase(Target):
    WrappedTarget: Target


@default_registry.register
@target('AsyncWrapper', ignores_layout=True)
class AsyncTargetWrapper(WrapperTargetBase):
    QueueLimit: int
    BatchSize: int
    TimeToSleepBetweenBatches: int
    OverflowAction: AsyncTargetWrapperOverflowAction


@default_registry.register
@target('FilteringWrapper', ignores_layout=True)
class FilteringTargetWrapper(WrapperTargetBase):
    Condition: Annotated[str, AcceptsCondition()]
    CompiledCondition: ConditionExpression


class CompoundTargetBase(Target):
    Targets: Annotated[TargetCollection, ArrayParameter(Target, 'target')]


@default_registry.register
@target('SplitGroup', ignores_layout=True)
class SplitGroupTarget(CompoundTargetBase):
    """Writes each log event to all child targets."""


@default_registry.register
@target('FallbackGroup', ignores_layout=True)
class FallbackGroupTarget(CompoundTargetBase):
    """Writes to the first child target that succeeds."""
    ReturnToFirstOnSuccess: bool
    Version: Final[int] = 1
