"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the example registry and runner
"""
import os
import sys
import argparse
from typing import Any, Callable, Dict, List, Optional

from design_patterns._package import __version__
from design_patterns.cli.formatters import format_output
from design_patterns.config import ConfigurationLoader, ConfigurationManager, validate_config
from design_patterns.domain.core.exceptions import ConfigurationError, DomainException
from design_patterns.infrastructure.logging.logger import get_logger, setup_logging
from design_patterns.infrastructure.registry import ExampleRegistry
from design_patterns.infrastructure.registry.example_registry import CATEGORIES
from design_patterns.infrastructure.runner import ExampleRunner
from design_patterns.patterns.catalog import register_builtin_examples

FORMATS = ['json', 'yaml', 'table', 'list']


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "design-patterns",
        description="Design Patterns Catalog - runnable GoF pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s patterns list                          # List every example
  %(prog)s --format table patterns list           # Display as table
  %(prog)s patterns show observer                 # Show both observer variants
  %(prog)s patterns run adapter                   # Run both adapter variants
  %(prog)s patterns run builder --variant real_world
  %(prog)s config show                            # Show effective configuration
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=FORMATS, help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    # Resource subparsers
    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Patterns resource
    patterns_parser = subparsers.add_parser('patterns', help='Browse and run pattern examples')
    patterns_subparsers = patterns_parser.add_subparsers(dest='action', help='Pattern actions')

    # Patterns list
    patterns_list = patterns_subparsers.add_parser('list', help='List all examples')
    patterns_list.add_argument('--category', choices=list(CATEGORIES), help='Filter by category')

    # Patterns show
    patterns_show = patterns_subparsers.add_parser('show', help='Show the examples of one pattern')
    patterns_show.add_argument('pattern', help='Pattern name, e.g. "observer" or "chain-of-responsibility"')

    # Patterns run
    patterns_run = patterns_subparsers.add_parser('run', help='Run the examples of one pattern')
    patterns_run.add_argument('pattern', help='Pattern name')
    patterns_run.add_argument('--variant', choices=['conceptual', 'real_world', 'all'],
                              help='Variant to run (default: from configuration)')

    # Config resource
    config_parser = subparsers.add_parser('config', help='Inspect configuration')
    config_subparsers = config_parser.add_subparsers(dest='action', help='Config actions')
    config_subparsers.add_parser('show', help='Show effective configuration')
    config_validate = config_subparsers.add_parser('validate', help='Validate a configuration file')
    config_validate.add_argument('--file', required=True, help='Configuration file to validate')

    return parser.parse_args(argv)


def handle_patterns_list(args: argparse.Namespace, registry: ExampleRegistry,
                         config: ConfigurationManager) -> Dict[str, Any]:
    examples = registry.list_examples(getattr(args, 'category', None))
    return {"examples": [example.to_dict() for example in examples]}


def handle_patterns_show(args: argparse.Namespace, registry: ExampleRegistry,
                         config: ConfigurationManager) -> Dict[str, Any]:
    variants = registry.get_variants(args.pattern)
    return {"examples": [variant.to_dict() for variant in variants]}


def handle_patterns_run(args: argparse.Namespace, registry: ExampleRegistry,
                        config: ConfigurationManager) -> Dict[str, Any]:
    runner = ExampleRunner(config.get_catalog_config(), registry)
    return {"results": runner.run(args.pattern, args.variant)}


def handle_config_show(args: argparse.Namespace, registry: ExampleRegistry,
                       config: ConfigurationManager) -> Dict[str, Any]:
    return config.to_dict()


def handle_config_validate(args: argparse.Namespace, registry: ExampleRegistry,
                           config: ConfigurationManager) -> Dict[str, Any]:
    raw = ConfigurationLoader().load_from_file(args.file)
    try:
        validate_config(raw)
    except ValueError as e:
        # pydantic.ValidationError is a ValueError
        raise ConfigurationError(f"Invalid configuration in {args.file}: {e}") from e
    return {"file": args.file, "valid": True}


COMMAND_HANDLERS: Dict[tuple, Callable[..., Dict[str, Any]]] = {
    ('patterns', 'list'): handle_patterns_list,
    ('patterns', 'show'): handle_patterns_show,
    ('patterns', 'run'): handle_patterns_run,
    ('config', 'show'): handle_config_show,
    ('config', 'validate'): handle_config_validate,
}


def execute_command(args: argparse.Namespace, registry: ExampleRegistry,
                    config: ConfigurationManager) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler_key = (args.resource, args.action)

    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")

    return COMMAND_HANDLERS[handler_key](args, registry, config)


def create_registry() -> ExampleRegistry:
    """Get the shared registry, loading the built-in catalog on first use."""
    registry = ExampleRegistry.get_instance()
    if not registry.list_examples():
        register_builtin_examples(registry)
    return registry


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        # Validate required arguments
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.")
            sys.exit(1)

        if not args.action:
            print(f"Error: No action specified for {args.resource}. Use --help for usage information.")
            sys.exit(1)

        # Load configuration and configure logging
        config = ConfigurationManager(args.config)
        try:
            logging_config = config.get_logging_config()
        except ConfigurationError as e:
            print(f"Error: {e}")
            sys.exit(1)
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": args.log_level})
        elif args.verbose:
            logging_config = logging_config.model_copy(update={"level": "INFO"})
        setup_logging(logging_config)

        logger = get_logger(__name__)

        # Execute command
        try:
            registry = create_registry()
            result = execute_command(args, registry, config)

            if args.resource == 'patterns' and args.action == 'run' and not args.verbose:
                return

            # Format and output result
            output_format = args.format or config.get_catalog_config().output_format
            formatted_output = format_output(result, output_format)

            if args.output:
                with open(args.output, 'w') as f:
                    f.write(formatted_output)
                if not args.quiet:
                    print(f"Output written to {args.output}")
            else:
                print(formatted_output)

        except DomainException as e:
            logger.error(f"Domain error: {e}")
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)
        except EOFError:
            logger.error("Input ended before the example finished")
            if not args.quiet:
                print("\nError: input ended before the example finished.")
            sys.exit(1)
        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            if args.verbose:
                import traceback
                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
