"""
Splices generated type definitions into the template schema.

Definitions are first rendered as a standalone fragment under a temporary
``root`` element, then parsed and moved into the template in front of its
``types-go-here`` marker. The marker is removed afterwards.
"""

import os
from typing import Iterable, Optional
import xml.etree.ElementTree as ET
from xml.etree.ElementTree import Element, SubElement, tostring

from lxml import etree

from pluginxsd.common import XSD_NAMESPACE
from pluginxsd.definitions import ComplexTypeDefinition, Definition, EnumDefinition
from pluginxsd.errors import TemplateError

MARKER_QUERY = "//*[local-name()='types-go-here']"
DEFAULT_TEMPLATE_PATH = os.path.join(os.path.dirname(__file__), 'template.xsd')


def create_element(parent: Element, tag: str, **attributes) -> Element:
    """Create an XML element in the XSD namespace."""
    return SubElement(parent, f"{{{XSD_NAMESPACE}}}{tag}", **attributes)


def create_enum(parent: Element, definition: EnumDefinition) -> Element:
    simple_type = create_element(parent, "simpleType", name=definition.name)
    restriction = create_element(simple_type, "restriction", base="xs:string")
    for value in definition.values:
        create_element(restriction, "enumeration", value=value)
    return simple_type


def create_complex_type(parent: Element, definition: ComplexTypeDefinition) -> Element:
    complex_type = create_element(parent, "complexType", name=definition.name)
    body = complex_type
    if definition.base is not None:
        complex_content = create_element(complex_type, "complexContent")
        body = create_element(complex_content, "extension", base=definition.base)

    choice = create_element(body, "choice", minOccurs="0", maxOccurs="unbounded")
    for element in definition.elements:
        create_element(choice, "element", name=element.name, type=element.type_name,
                       minOccurs="0", maxOccurs="unbounded")
    for attribute in definition.attributes:
        create_element(body, "attribute", name=attribute.name, type=attribute.type_name)
    return complex_type


def render_fragment(definitions: Iterable[Definition]) -> str:
    """Serialize ``definitions`` under a temporary root element."""
    ET.register_namespace('xs', XSD_NAMESPACE)
    root = Element("root")
    for definition in definitions:
        if isinstance(definition, EnumDefinition):
            create_enum(root, definition)
        else:
            create_complex_type(root, definition)
    return tostring(root, encoding='unicode')


def load_template(template_path: Optional[str] = None) -> etree._ElementTree:
    """Load the template schema."""
    template_path = template_path or DEFAULT_TEMPLATE_PATH
    if not os.path.isfile(template_path):
        raise TemplateError("Template schema not found", context=template_path)
    parser = etree.XMLParser(remove_blank_text=True)
    try:
        return etree.parse(template_path, parser)
    except etree.XMLSyntaxError as e:
        raise TemplateError(f"Template schema is not well-formed: {e}", context=template_path, cause=e) from e
    except OSError as e:
        raise TemplateError(f"Template schema cannot be read: {e}", context=template_path, cause=e) from e


def splice_definitions(template: etree._ElementTree, fragment: str) -> etree._ElementTree:
    """Insert the definitions in ``fragment`` in front of the template's marker and remove the marker."""
    markers = template.xpath(MARKER_QUERY)
    if len(markers) != 1:
        raise TemplateError(f"Expected exactly one types-go-here marker, found {len(markers)}")
    marker = markers[0]
    parent = marker.getparent()

    generated = etree.fromstring(fragment, etree.XMLParser(remove_blank_text=True))
    for definition in list(generated):
        if not isinstance(definition.tag, str):
            continue
        marker.addprevious(definition)
    # Unused namespace declarations are left alone: type references in
    # attribute values depend on the template's default namespace.
    parent.remove(marker)
    return template


def save_schema(document: etree._ElementTree, xsd_file_path: str) -> None:
    """Save the XML schema to a file."""
    os.makedirs(os.path.dirname(xsd_file_path) or '.', exist_ok=True)
    document.write(xsd_file_path, pretty_print=True, xml_declaration=True, encoding='utf-8')
