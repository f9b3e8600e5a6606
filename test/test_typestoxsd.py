"""
Tests for generating XSD type definitions from a plugin type graph
"""
import os
import sys
import unittest
from enum import Enum
from typing import Annotated, ClassVar, Final, List

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from pluginxsd.definitions import (AttributeDeclaration, ComplexTypeDefinition,
                                   ElementDeclaration, EnumDefinition)
from pluginxsd.framework import (AcceptsCondition, AcceptsLayout,
                                 ArrayParameter, ConditionExpression, Layout,
                                 Target, TargetCollection, target)
from pluginxsd.typemodel import TypeKind
from pluginxsd.typestoxsd import TypesToXSD


class Severity(Enum):
    Low = 1
    Medium = 2
    High = 3


class Threshold:
    Level: Severity
    Count: int


class Container:
    """Round-trip sample: one scalar property and one array-valued property of strings."""
    Count: int
    Items: Annotated[List[str], ArrayParameter(str, 'item')]


class Node:
    Name: str
    Next: 'Node'


class TargetWithThreshold(Target):
    Threshold: Threshold


@target('Alert')
class AlertTarget(TargetWithThreshold):
    Recipient: Annotated[str, AcceptsLayout()]
    Filter: Annotated[str, AcceptsCondition()]
    Thresholds: Annotated[List[Threshold], ArrayParameter(Threshold, 'threshold')]
    Severity: Severity
    Wrapped: Target
    Children: TargetCollection
    Text: Layout
    When: ConditionExpression
    Version: Final[str] = '1'


@target('Quiet', ignores_layout=True)
class QuietTarget(Target):
    Severity: Severity


@target('Syslog')
class SyslogTarget(Target):
    DEFAULT_PORT: ClassVar[int] = 514
    Port: int


@target('Mixed')
class MixedTarget(Target):
    """Scalar properties declared before and after the array-valued ones."""
    First: int
    Targets: Annotated[TargetCollection, ArrayParameter(Target, 'target')]
    Middle: str
    Rules: Annotated[List[Threshold], ArrayParameter(Threshold, 'rule')]
    Last: bool


class TestTypesToXSD(unittest.TestCase):

    def setUp(self):
        self.converter = TypesToXSD()

    def definitions_by_name(self, root_types):
        definitions = self.converter.types_to_definitions(root_types)
        return definitions, {d.name: d for d in definitions}

    def test_classify(self):
        self.assertEqual(self.converter.classify(List[Threshold]), TypeKind.ARRAY)
        self.assertEqual(self.converter.classify(int), TypeKind.PRIMITIVE)
        self.assertEqual(self.converter.classify(str), TypeKind.STRING)
        self.assertEqual(self.converter.classify(Severity), TypeKind.ENUM)
        self.assertEqual(self.converter.classify(Threshold), TypeKind.STRUCTURED)

    def test_enum_values_in_declaration_order(self):
        self.assertEqual(self.converter.create_enum(Severity),
                         EnumDefinition('Severity', ('Low', 'Medium', 'High')))

    def test_round_trip_container(self):
        definitions = self.converter.types_to_definitions([Container])
        self.assertEqual(definitions, [
            ComplexTypeDefinition(
                name='Container',
                base=None,
                elements=(ElementDeclaration('item', 'xs:string'),),
                attributes=(AttributeDeclaration('count', 'xs:integer'),)),
        ])

    def test_structured_target(self):
        _, by_name = self.definitions_by_name([AlertTarget])
        alert = by_name['Alert']
        self.assertEqual(alert.base, 'TargetWithThreshold')
        self.assertEqual(alert.elements, (ElementDeclaration('threshold', 'Threshold'),))
        self.assertEqual(alert.attributes, (
            AttributeDeclaration('recipient', 'NLogLayout'),
            AttributeDeclaration('filter', 'NLogCondition'),
            AttributeDeclaration('severity', 'Severity'),
            AttributeDeclaration('layout', 'NLogLayout'),
        ))

    def test_visit_order(self):
        definitions, _ = self.definitions_by_name([AlertTarget])
        self.assertEqual([d.name for d in definitions],
                         ['Alert', 'TargetWithThreshold', 'Threshold', 'Severity'])

    def test_base_extends_target_and_never_emits_target(self):
        _, by_name = self.definitions_by_name([AlertTarget])
        self.assertEqual(by_name['TargetWithThreshold'].base, 'Target')
        self.assertEqual(by_name['TargetWithThreshold'].attributes,
                         (AttributeDeclaration('threshold', 'Threshold'),))
        self.assertNotIn('Target', by_name)
        self.assertNotIn('Layout', by_name)
        self.assertNotIn('object', by_name)

    def test_plain_type_has_no_extension(self):
        _, by_name = self.definitions_by_name([AlertTarget])
        self.assertIsNone(by_name['Threshold'].base)
        self.assertEqual(by_name['Threshold'].attributes, (
            AttributeDeclaration('level', 'Severity'),
            AttributeDeclaration('count', 'xs:integer'),
        ))

    def test_ignores_layout_suppresses_implicit_attribute(self):
        _, by_name = self.definitions_by_name([QuietTarget])
        self.assertEqual(by_name['Quiet'].attributes, (AttributeDeclaration('severity', 'Severity'),))

    def test_implicit_layout_requires_target_attribute(self):
        _, by_name = self.definitions_by_name([TargetWithThreshold])
        names = [a.name for a in by_name['TargetWithThreshold'].attributes]
        self.assertNotIn('layout', names)

    def test_each_type_is_emitted_once(self):
        definitions = self.converter.types_to_definitions([AlertTarget, QuietTarget, MixedTarget, AlertTarget])
        names = [d.name for d in definitions]
        self.assertEqual(len(names), len(set(names)))
        self.assertEqual(names.count('Severity'), 1)
        self.assertEqual(names.count('Threshold'), 1)

    def test_cyclic_references_terminate(self):
        definitions = self.converter.types_to_definitions([Node])
        self.assertEqual(definitions, [
            ComplexTypeDefinition(
                name='Node',
                attributes=(AttributeDeclaration('name', 'xs:string'),
                            AttributeDeclaration('next', 'Node'))),
        ])

    def test_array_elements_independent_of_declaration_order(self):
        _, by_name = self.definitions_by_name([MixedTarget])
        mixed = by_name['Mixed']
        self.assertEqual(mixed.elements, (
            ElementDeclaration('target', 'Target'),
            ElementDeclaration('rule', 'Threshold'),
        ))
        self.assertEqual([a.name for a in mixed.attributes], ['first', 'middle', 'last', 'layout'])

    def test_class_constants_produce_no_attribute(self):
        definitions = self.converter.types_to_definitions([SyslogTarget])
        self.assertEqual(definitions, [
            ComplexTypeDefinition(
                name='Syslog',
                base='Target',
                attributes=(AttributeDeclaration('port', 'xs:integer'),
                            AttributeDeclaration('layout', 'NLogLayout'))),
        ])

    def test_visited_set_is_per_run(self):
        first = self.converter.types_to_definitions([QuietTarget])
        second = self.converter.types_to_definitions([QuietTarget])
        self.assertEqual(first, second)

    def test_skipped_roots_produce_nothing(self):
        self.assertEqual(self.converter.types_to_definitions([int, str, List[int], Target]), [])


if __name__ == '__main__':
    unittest.main()
