# pylint: disable=line-too-long

""" TypesToXSD class for generating XML Schema (XSD) type definitions from a plugin type graph """

import logging
from typing import Any, Iterable, List, Optional, Set, Tuple

from pluginxsd.common import attribute_name, schema_type_name
from pluginxsd.definitions import (AttributeDeclaration, ComplexTypeDefinition,
                                   Definition, ElementDeclaration,
                                   EnumDefinition)
from pluginxsd.errors import SchemaGenerationError
from pluginxsd.reflection import ClassIntrospector
from pluginxsd.typemodel import (TypeIntrospector, TypeKind, TypeRegistry,
                                 WellKnownType)
from pluginxsd import xsdassembler

logger = logging.getLogger(__name__)

LAYOUT_TYPE_NAME = 'NLogLayout'
CONDITION_TYPE_NAME = 'NLogCondition'

# Never emitted, even when referenced.
PRESEEDED_TYPES = (WellKnownType.OBJECT, WellKnownType.TARGET, WellKnownType.LAYOUT)

# Property types that are never turned into attributes.
EXCLUDED_PROPERTY_TYPES = {
    WellKnownType.TARGET,
    WellKnownType.TARGET_COLLECTION,
    WellKnownType.LAYOUT,
    WellKnownType.CONDITION_EXPRESSION,
}

SKIPPED_KINDS = {TypeKind.ARRAY, TypeKind.PRIMITIVE, TypeKind.STRING}


class TypesToXSD:
    """ Walks a plugin type graph and produces XSD type definitions """

    def __init__(self, introspector: Optional[TypeIntrospector] = None):
        self.introspector: TypeIntrospector = introspector or ClassIntrospector()

    def classify(self, t: Any) -> TypeKind:
        """Schema shape of ``t``. Array, primitive and string types produce no definition."""
        kind = self.introspector.kind(t)
        if kind in SKIPPED_KINDS or kind == TypeKind.ENUM:
            return kind
        return TypeKind.STRUCTURED

    def new_visited_set(self) -> Set[Any]:
        """A visited set seeded with the types that never get a definition of their own."""
        visited: Set[Any] = set()
        for tag in PRESEEDED_TYPES:
            t = self.introspector.well_known_type(tag)
            if t is not None:
                visited.add(t)
        return visited

    def create_enum(self, t: Any) -> EnumDefinition:
        """Restricted string type listing the enumeration's member names."""
        return EnumDefinition(
            name=schema_type_name(t, self.introspector),
            values=tuple(self.introspector.enum_members(t)))

    def create_complex_type(self, t: Any) -> Tuple[ComplexTypeDefinition, List[Any]]:
        """
        Build the complex type definition for a structured type.

        Returns:
            The definition and the referenced types still to be visited: the
            base type, then array item types, then attribute value types.
        """
        introspector = self.introspector
        types_to_dump: List[Any] = []

        base = introspector.base_type(t)
        base_name = None
        if base is not None:
            types_to_dump.append(base)
            if introspector.well_known(base) != WellKnownType.OBJECT:
                base_name = schema_type_name(base, introspector)

        properties = introspector.own_properties(t)

        elements: List[ElementDeclaration] = []
        for prop in properties:
            if prop.array_parameter is None:
                continue
            array_parameter = prop.array_parameter
            elements.append(ElementDeclaration(
                name=array_parameter.element_name,
                type_name=schema_type_name(array_parameter.item_type, introspector)))
            types_to_dump.append(array_parameter.item_type)

        attributes: List[AttributeDeclaration] = []
        for prop in properties:
            if prop.array_parameter is not None:
                continue
            if introspector.well_known(prop.property_type) in EXCLUDED_PROPERTY_TYPES:
                continue
            if not prop.can_write:
                continue

            if prop.accepts_layout:
                type_name = LAYOUT_TYPE_NAME
            elif prop.accepts_condition:
                type_name = CONDITION_TYPE_NAME
            else:
                type_name = schema_type_name(prop.property_type, introspector)
            attributes.append(AttributeDeclaration(attribute_name(prop.name), type_name))
            types_to_dump.append(prop.property_type)

        if introspector.is_target(t):
            target_attribute = introspector.target_attribute(t)
            if target_attribute is not None and not target_attribute.ignores_layout:
                attributes.append(AttributeDeclaration('layout', LAYOUT_TYPE_NAME))

        definition = ComplexTypeDefinition(
            name=schema_type_name(t, introspector),
            base=base_name,
            elements=tuple(elements),
            attributes=tuple(attributes))
        return definition, types_to_dump

    def dump_type(self, t: Any, visited: Set[Any], definitions: List[Definition]) -> None:
        """Append the definition of ``t`` and of every type it references that has not been visited yet."""
        if t in visited:
            return
        visited.add(t)

        kind = self.classify(t)
        if kind in SKIPPED_KINDS:
            logger.debug("Skipping %s type %s", kind.value, t)
            return

        if kind == TypeKind.ENUM:
            definition = self.create_enum(t)
            logger.debug("Emitting enumeration %s", definition.name)
            definitions.append(definition)
            return

        try:
            complex_type, types_to_dump = self.create_complex_type(t)
        except SchemaGenerationError:
            raise
        except Exception as e:
            raise SchemaGenerationError(f"Cannot describe type: {e}", context=str(t), cause=e) from e
        logger.debug("Emitting complex type %s", complex_type.name)
        definitions.append(complex_type)

        for referenced_type in types_to_dump:
            self.dump_type(referenced_type, visited, definitions)

    def types_to_definitions(self, root_types: Iterable[Any]) -> List[Definition]:
        """Definitions for every type reachable from ``root_types``, in discovery order."""
        visited = self.new_visited_set()
        definitions: List[Definition] = []
        for root_type in root_types:
            self.dump_type(root_type, visited, definitions)
        logger.debug("Generated %d type definitions", len(definitions))
        return definitions

    def convert_types_to_xsd(self, registry: TypeRegistry, xsd_file_path: str, template_path: Optional[str] = None) -> None:
        """Generate the schema for ``registry`` and write it to ``xsd_file_path``."""
        template = xsdassembler.load_template(template_path)
        definitions = self.types_to_definitions(registry.target_types)
        fragment = xsdassembler.render_fragment(definitions)
        xsdassembler.splice_definitions(template, fragment)
        xsdassembler.save_schema(template, xsd_file_path)


def convert_types_to_xsd(registry: TypeRegistry, xsd_file_path: str, template_path: Optional[str] = None,
                         introspector: Optional[TypeIntrospector] = None) -> None:
    """Generate the XSD for a plugin registry."""
    converter = TypesToXSD(introspector)
    converter.convert_types_to_xsd(registry, xsd_file_path, template_path)
