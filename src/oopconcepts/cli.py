# src/oopconcepts/cli.py
"""
Command-line interface for oopconcepts package
"""

import argparse
import logging
import sys
from typing import Optional

from . import __version__
from .config import ExampleConfig
from .enums import Concept
from .registry import ExampleRegistry


def print_example_list(registry: ExampleRegistry, concept: Optional[Concept] = None):
    """Print the examples grouped by concept."""
    print(f"oopconcepts v{__version__} - Available Examples")
    print("=" * 50)

    for group in [concept] if concept else list(Concept):
        print(f"\n{group.value.title()}:")
        for info in registry.by_concept(group):
            print(f"  {info.name:<24} {info.description}")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="oopconcepts: object-oriented programming by example",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  oop-examples --list                      # Show available examples
  oop-examples bank_account                # Run one example
  oop-examples --all --concept inheritance # Run every inheritance example
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'oopconcepts v{__version__}'
    )

    parser.add_argument(
        'examples',
        nargs='*',
        metavar='EXAMPLE',
        help='Name(s) of the examples to run'
    )

    parser.add_argument('--list', action='store_true', help='List available examples')
    parser.add_argument('--all', action='store_true', help='Run every example')
    parser.add_argument(
        '--concept',
        choices=[c.value for c in Concept],
        help='Restrict --list/--all to one concept'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable INFO logging')

    args = parser.parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    config = ExampleConfig(verbose=args.verbose)
    registry = ExampleRegistry()
    concept = Concept(args.concept) if args.concept else None

    if args.list or not (args.examples or args.all):
        print_example_list(registry, concept)
        return 0

    if args.all:
        return registry.run_all(config, concept)

    unknown = [name for name in args.examples if name not in registry.names()]
    if unknown:
        print(f"Error: unknown example(s): {', '.join(unknown)}", file=sys.stderr)
        print("Use --list to see available examples", file=sys.stderr)
        return 2

    status = 0
    for name in args.examples:
        status = status or registry.run(name, config)
    return status


if __name__ == "__main__":
    sys.exit(main())
