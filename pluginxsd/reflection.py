"""Introspection of plugin classes through Python reflection."""

import enum
import inspect
import types
import typing
from typing import (Annotated, Any, ClassVar, Dict, Final, List, Optional,
                    Tuple, Union)

from pluginxsd.common import pascal
from pluginxsd.framework import (AcceptsCondition, AcceptsLayout, Byte,
                                 ConditionExpression, Layout, Long, Target,
                                 TargetCollection)
from pluginxsd.typemodel import (ArrayParameter, Primitive, PropertyInfo,
                                 TargetAttribute, TypeKind, WellKnownType)

PRIMITIVE_TYPES: Dict[Any, Primitive] = {
    Byte: Primitive.BYTE,
    int: Primitive.INT32,
    Long: Primitive.INT64,
    str: Primitive.STRING,
    bool: Primitive.BOOLEAN,
    float: Primitive.DOUBLE,
}

ARRAY_ORIGINS = (list, tuple, set, frozenset)

DEFAULT_WELL_KNOWN_TYPES: Dict[WellKnownType, Any] = {
    WellKnownType.OBJECT: object,
    WellKnownType.TARGET: Target,
    WellKnownType.TARGET_COLLECTION: TargetCollection,
    WellKnownType.LAYOUT: Layout,
    WellKnownType.CONDITION_EXPRESSION: ConditionExpression,
}


def is_class_variable(hint: Any) -> bool:
    """Whether ``hint`` declares a class-level constant rather than a parameter."""
    hint = typing.get_args(hint)[0] if typing.get_origin(hint) is Annotated else hint
    return hint is ClassVar or typing.get_origin(hint) is ClassVar


def unwrap_hint(hint: Any) -> Tuple[Any, bool, tuple]:
    """
    Strip ``Annotated``, ``Final`` and ``Optional`` from a type hint.

    Returns:
        Tuple of the bare type, whether the hint was ``Final`` and the
        collected ``Annotated`` metadata.
    """
    final = False
    metadata: tuple = ()
    while True:
        origin = typing.get_origin(hint)
        if origin is Annotated:
            metadata += hint.__metadata__
            hint = hint.__origin__
        elif hint is Final:
            return Any, True, metadata
        elif origin is Final:
            final = True
            hint = typing.get_args(hint)[0]
        elif origin is Union or origin is types.UnionType:
            args = [a for a in typing.get_args(hint) if a is not type(None)]
            if len(args) != 1:
                return hint, final, metadata
            hint = args[0]
        else:
            return hint, final, metadata


class ClassIntrospector:
    """Describes Python plugin classes to the schema generator."""

    def __init__(self, well_known_types: Optional[Dict[WellKnownType, Any]] = None):
        self.well_known_types = dict(well_known_types or DEFAULT_WELL_KNOWN_TYPES)
        self._tags = {t: tag for tag, t in self.well_known_types.items()}
        self._properties: Dict[Any, List[PropertyInfo]] = {}

    def type_name(self, t: Any) -> str:
        if self.kind(t) == TypeKind.ARRAY:
            args = typing.get_args(t)
            item = self.type_name(args[0]) if args else 'object'
            return f"{item}[]"
        return getattr(t, '__name__', str(t))

    def kind(self, t: Any) -> TypeKind:
        if typing.get_origin(t) in ARRAY_ORIGINS or t in ARRAY_ORIGINS:
            return TypeKind.ARRAY
        primitive = self.primitive(t)
        if primitive == Primitive.STRING:
            return TypeKind.STRING
        if primitive is not None:
            return TypeKind.PRIMITIVE
        if inspect.isclass(t) and issubclass(t, enum.Enum):
            return TypeKind.ENUM
        return TypeKind.STRUCTURED

    def primitive(self, t: Any) -> Optional[Primitive]:
        try:
            return PRIMITIVE_TYPES.get(t)
        except TypeError:
            # unhashable typing constructs
            return None

    def base_type(self, t: Any) -> Optional[Any]:
        if not inspect.isclass(t) or t is object:
            return None
        return t.__bases__[0] if t.__bases__ else object

    def own_properties(self, t: Any) -> List[PropertyInfo]:
        """
        Properties declared directly on ``t``.

        Annotated class attributes come first, in declaration order, followed
        by ``property`` objects in declaration order. Names are reported in
        PascalCase.
        """
        if not inspect.isclass(t):
            return []
        if t not in self._properties:
            self._properties[t] = self._collect_properties(t)
        return self._properties[t]

    def _collect_properties(self, t: type) -> List[PropertyInfo]:
        properties: List[PropertyInfo] = []
        own_annotations = inspect.get_annotations(t)
        if own_annotations:
            hints = typing.get_type_hints(t, include_extras=True)
            for name in own_annotations:
                if name.startswith('__') or is_class_variable(hints[name]):
                    continue
                properties.append(self._property_from_hint(name, hints[name], True))

        for name, member in vars(t).items():
            if not isinstance(member, property) or member.fget is None:
                continue
            hints = typing.get_type_hints(member.fget, include_extras=True)
            hint = hints.get('return', Any)
            properties.append(self._property_from_hint(name, hint, member.fset is not None))
        return properties

    def _property_from_hint(self, name: str, hint: Any, can_write: bool) -> PropertyInfo:
        property_type, final, metadata = unwrap_hint(hint)
        array_parameter = next((m for m in metadata if isinstance(m, ArrayParameter)), None)
        return PropertyInfo(
            name=pascal(name),
            property_type=property_type,
            can_write=can_write and not final,
            array_parameter=array_parameter,
            accepts_layout=any(isinstance(m, AcceptsLayout) for m in metadata),
            accepts_condition=any(isinstance(m, AcceptsCondition) for m in metadata))

    def enum_members(self, t: Any) -> List[str]:
        return list(t.__members__)

    def target_attribute(self, t: Any) -> Optional[TargetAttribute]:
        if not inspect.isclass(t):
            return None
        attribute = vars(t).get('__target__')
        return attribute if isinstance(attribute, TargetAttribute) else None

    def well_known(self, t: Any) -> Optional[WellKnownType]:
        try:
            return self._tags.get(t)
        except TypeError:
            return None

    def well_known_type(self, tag: WellKnownType) -> Optional[Any]:
        return self.well_known_types.get(tag)

    def is_target(self, t: Any) -> bool:
        target_type = self.well_known_types.get(WellKnownType.TARGET)
        return inspect.isclass(t) and target_type is not None and issubclass(t, target_type)
