"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Error reporting and exit codes
"""
import argparse
import sys
import traceback
from typing import Any, Dict, List, Optional

from pattern_catalog import __version__
from pattern_catalog.catalog.loader import load_catalog
from pattern_catalog.catalog.markdown import code_listing, export_catalog, render_entry
from pattern_catalog.catalog.registry import PatternRegistry
from pattern_catalog.cli.formatters import format_output
from pattern_catalog.config.manager import get_config_manager
from pattern_catalog.config.schemas import AppConfig, OutputFormat
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category
from pattern_catalog.domain.exceptions import CatalogError
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging

FORMAT_CHOICES = [f.value for f in OutputFormat]
RUN_ALL = "all"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per action."""
    parser = argparse.ArgumentParser(
        prog="pattern-catalog",
        description="Design patterns and SOLID principles, explained and runnable",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List every pattern
  %(prog)s list --category creational        # Only creational patterns
  %(prog)s show command                      # Explanation, diagram, code and output
  %(prog)s run observer                      # Run one demo
  %(prog)s run all --format json             # Run every demo, JSON output
  %(prog)s export --output-dir docs          # Write the markdown write-ups
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=FORMAT_CHOICES, help='Output format')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Show tracebacks on errors')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser('list', help='List patterns')
    list_parser.add_argument('--category', choices=[c.value for c in Category],
                             help='Only list one category')

    show_parser = subparsers.add_parser('show', help='Show the full write-up of a pattern')
    show_parser.add_argument('key', help='Pattern key, e.g. chain-of-responsibility')
    show_parser.add_argument('--no-source', action='store_true', help='Leave out the code listing')

    run_parser = subparsers.add_parser('run', help='Run pattern demos')
    run_parser.add_argument('keys', nargs='+', help=f"Pattern keys, or '{RUN_ALL}'")

    export_parser = subparsers.add_parser('export', help='Write markdown documentation')
    export_parser.add_argument('--output-dir', help='Target directory')
    export_parser.add_argument('--no-source', action='store_true', help='Leave out code listings')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides."""
    manager = get_config_manager(args.config)
    logging_overrides: Dict[str, Any] = {}
    output_overrides: Dict[str, Any] = {}
    if args.log_level:
        logging_overrides['level'] = args.log_level
    if args.format:
        output_overrides['format'] = args.format
    return manager.override(logging=logging_overrides, output=output_overrides)


def list_patterns(args: argparse.Namespace, registry: PatternRegistry, config: AppConfig) -> Dict[str, Any]:
    category = Category(args.category) if args.category else None
    return {"patterns": [entry.to_summary() for entry in registry.list(category)]}


def show_pattern(args: argparse.Namespace, registry: PatternRegistry, config: AppConfig) -> Any:
    entry = registry.get(args.key)
    result = registry.run(entry.key)
    include_source = config.output.include_source and not args.no_source
    if config.output.format in (OutputFormat.TEXT, OutputFormat.TABLE):
        return render_entry(entry, result, include_source)
    data = entry.to_summary()
    data.update({
        "explanation": entry.explanation,
        "diagram": entry.diagram,
        "output": result.lines,
    })
    if include_source:
        data["code"] = code_listing(entry)
    return data


def run_patterns(args: argparse.Namespace, registry: PatternRegistry, config: AppConfig) -> Any:
    keys = registry.keys() if RUN_ALL in args.keys else args.keys
    # Fail before running anything when a key is unknown
    entries = [registry.get(key) for key in keys]

    if config.output.format is OutputFormat.TEXT and config.output.echo:
        for index, entry in enumerate(entries):
            if index:
                print()
            print(f"== {entry.name} ==")
            registry.run(entry.key, Console(echo=True))
        return None

    results = [registry.run(entry.key).model_dump(mode="json") for entry in entries]
    return {"results": results}


def export_patterns(args: argparse.Namespace, registry: PatternRegistry, config: AppConfig) -> Any:
    output_dir = args.output_dir or config.export_dir
    if not output_dir:
        raise CatalogError("No output directory given; use --output-dir or set export_dir")
    include_source = config.output.include_source and not args.no_source
    written = export_catalog(output_dir, registry, include_source=include_source)
    if args.quiet:
        return None
    return f"Wrote {len(written)} files to {output_dir}"


COMMANDS = {
    'list': list_patterns,
    'show': show_pattern,
    'run': run_patterns,
    'export': export_patterns,
}


def execute_command(args: argparse.Namespace, registry: PatternRegistry, config: AppConfig) -> Any:
    """Route parsed arguments to the matching command function."""
    return COMMANDS[args.command](args, registry, config)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2

    try:
        config = load_config(args)
    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging)
    logger = get_logger(__name__)

    try:
        registry = load_catalog()
        result = execute_command(args, registry, config)
        if result is not None:
            print(format_output(result, config.output.format.value))
        return 0
    except CatalogError as e:
        logger.error("Catalog error", error=str(e), command=args.command)
        if args.verbose:
            traceback.print_exc()
        if not args.quiet:
            print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
