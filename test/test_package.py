import os
import sys
import unittest

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

import pluginxsd
from pluginxsd.errors import SchemaGenerationError
from pluginxsd.typestoxsd import convert_types_to_xsd


class TestPackage(unittest.TestCase):

    def test_exported_names(self):
        self.assertIs(pluginxsd.convert_types_to_xsd, convert_types_to_xsd)
        self.assertIs(pluginxsd.SchemaGenerationError, SchemaGenerationError)
        self.assertIn('TypesToXSD', pluginxsd.__all__)

    def test_submodule_access(self):
        self.assertEqual(pluginxsd.targets.__name__, 'pluginxsd.targets')

    def test_unknown_name(self):
        with self.assertRaises(AttributeError):
            pluginxsd.no_such_name  # pylint: disable=pointless-statement

    def test_dir_lists_public_names(self):
        names = dir(pluginxsd)
        self.assertIn('load_registry', names)
        self.assertIn('xsdassembler', names)


if __name__ == '__main__':
    unittest.main()
