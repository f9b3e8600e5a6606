"""
Common naming functions for pluginxsd.
"""

import re
from typing import Any

from pluginxsd.typemodel import Primitive, TypeIntrospector

XSD_NAMESPACE = 'http://www.w3.org/2001/XMLSchema'

PRIMITIVE_XSD_TYPES = {
    Primitive.BYTE: 'xs:byte',
    Primitive.INT32: 'xs:integer',
    Primitive.INT64: 'xs:long',
    Primitive.STRING: 'xs:string',
    Primitive.BOOLEAN: 'xs:boolean',
    Primitive.DOUBLE: 'xs:double',
}


def pascal(string):
    """
    Convert a string to PascalCase from snake_case, camelCase, or PascalCase.
    Underscores at the beginning of the string are preserved in the output, but
    underscores in the middle of the string are removed.

    Args:
        string (str): The string to convert.

    Returns:
        str: The string in PascalCase.
    """
    if not string:
        return string
    words = []
    startswith_under = string[0] == '_'
    if '_' in string:
        # snake_case
        words = [word for word in re.split(r'_', string) if word]
        result = ''.join(word[0].upper() + word[1:] for word in words)
    elif string[0].isupper():
        # PascalCase, acronyms kept as they are
        result = string
    else:
        # camelCase
        result = string[0].upper() + string[1:]
    if startswith_under:
        result = '_' + result
    return result


def attribute_name(name: str) -> str:
    """
    Convert a property name to the name of its XML attribute.

    The leading run of uppercase letters is lowercased. When that run is an
    acronym followed by more text, its last letter starts the next word:
    ``Host`` becomes ``host``, ``DBType`` becomes ``dbType``, ``URL`` becomes
    ``url``.
    """
    if len(name) < 1:
        return name.lower()

    first_lower = len(name)
    for i, c in enumerate(name):
        if c.islower():
            first_lower = i
            break

    if first_lower == 0:
        return name

    # DBType
    if first_lower != 1 and first_lower != len(name):
        first_lower -= 1
    return name[:first_lower].lower() + name[first_lower:]


def schema_type_name(t: Any, introspector: TypeIntrospector) -> str:
    """Name of the XSD type used to reference ``t``."""
    primitive = introspector.primitive(t)
    if primitive is not None:
        return PRIMITIVE_XSD_TYPES[primitive]

    target_attribute = introspector.target_attribute(t)
    if target_attribute is not None:
        return target_attribute.name

    return introspector.type_name(t)
