"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the catalog application service
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from patternbook import __version__
from patternbook.bootstrap import Application
from patternbook.cli.formatters import format_output
from patternbook.domain.base.exceptions import DomainException
from patternbook.domain.catalog import PatternCategory
from patternbook.infrastructure.exceptions import InfrastructureError
from patternbook.infrastructure.logging.logger import get_logger

FORMATS = ["json", "yaml", "table", "list"]
CATEGORIES = [c.value for c in PatternCategory.ordered()]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="patternbook",
        description="Executable catalog of Gang-of-Four and modern design patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List all patterns
  %(prog)s list --category behavioral        # List one category
  %(prog)s show "chain of responsibility"    # Show intent and source
  %(prog)s demo observer --format list       # Run one demonstration
  %(prog)s demo --all --format table         # Run every demonstration
  %(prog)s readme --output README.md         # Render the catalog as Markdown
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured logging level')
    parser.add_argument('--format', choices=FORMATS, help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser('list', help='List patterns')
    list_parser.add_argument('--category', choices=CATEGORIES, help='Only list this category')

    show_parser = subparsers.add_parser('show', help='Show a pattern with its source code')
    show_parser.add_argument('name', help='Pattern name, slug or alias')

    search_parser = subparsers.add_parser('search', help='Search names, aliases and intents')
    search_parser.add_argument('term', help='Text to search for')

    subparsers.add_parser('categories', help='Count patterns per category')

    demo_parser = subparsers.add_parser('demo', help='Run pattern demonstrations')
    demo_parser.add_argument('name', nargs='?', help='Pattern name, slug or alias')
    demo_parser.add_argument('--all', action='store_true', help='Run every demonstration')
    demo_parser.add_argument('--category', choices=CATEGORIES, help='With --all, only this category')

    subparsers.add_parser('readme', help='Render the catalog as Markdown')

    args = parser.parse_args(argv)

    if args.command is None:
        parser.error("No command specified")
    if args.command == 'demo' and not args.all and not args.name:
        parser.error("demo needs a pattern name or --all")
    if args.command == 'demo' and args.all and args.name:
        parser.error("demo takes either a pattern name or --all, not both")

    return args


def execute_command(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    """Run the selected command and return data for formatting."""
    service = app.catalog_service
    category = PatternCategory(args.category) if getattr(args, 'category', None) else None

    if args.command == 'list':
        return {"patterns": [p.to_dict() for p in service.list_patterns(category)]}
    elif args.command == 'show':
        return {"pattern": service.get_pattern(args.name).to_dict()}
    elif args.command == 'search':
        return {"patterns": [p.to_dict() for p in service.search(args.term)]}
    elif args.command == 'categories':
        return {"categories": service.categories()}
    elif args.command == 'demo':
        if args.all:
            results = service.run_all_demos(category)
        else:
            results = [service.run_demo(args.name)]
        return {"demos": [r.to_dict() for r in results]}
    raise ValueError(f"Unknown command: {args.command}")


def _write(text: str, output: Optional[str]) -> None:
    if output:
        directory = os.path.dirname(output)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output, 'w', encoding='utf-8') as f:
            f.write(text)
        print(f"Output written to {output}", file=sys.stderr)
    else:
        print(text)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point; returns the process exit code."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    try:
        app = Application(args.config, log_level=args.log_level)
        app.initialize()

        if args.command == 'readme':
            _write(app.render_readme(), args.output)
            return 0

        result = execute_command(args, app)
        output_format = args.format or app.config.output.format.value
        _write(format_output(result, output_format, app.config.output.table_width), args.output)

        if args.command == 'demo' and not all(d["succeeded"] for d in result["demos"]):
            return 1
        return 0

    except DomainException as e:
        logger.error(f"Domain error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except InfrastructureError as e:
        logger.error(f"Infrastructure error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
