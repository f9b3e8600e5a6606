"""

Command line utility to generate the XML schema of a plugin registry's configuration format.

"""

import argparse
import logging
import sys

from pluginxsd.registry import load_registry
from pluginxsd.typestoxsd import convert_types_to_xsd

USAGE = "Usage: pluginxsd outputfile.xsd"


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message):
        print(USAGE)
        sys.exit(1)


def create_parser() -> ArgumentParser:
    """Create the command line parser."""
    parser = ArgumentParser(prog='pluginxsd', usage='%(prog)s outputfile.xsd',
                            description='Generate the XML schema for the targets of a plugin registry.')
    parser.add_argument('output', help='Path of the schema file to write.')
    parser.add_argument('--template', default=None, help='Template schema containing a types-go-here marker.')
    parser.add_argument('--registry', default=None, help='Registry to introspect, as module:attribute.')
    parser.add_argument('--verbose', action='store_true', help='Log each generated type definition.')
    return parser


def main(argv=None) -> int:
    """Main function for the command line utility."""
    args = create_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    try:
        registry = load_registry(args.registry)
        convert_types_to_xsd(registry, args.output, args.template)
        print(f"Saving schema to: {args.output}")
        return 0
    except Exception as e:
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
