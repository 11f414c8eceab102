"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Application bootstrap (configuration and logging)
"""
import argparse
import dataclasses
import os
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from confpatterns._package import DESCRIPTION, PACKAGE_NAME, __version__
from confpatterns.cli.formatters import format_output
from confpatterns.config.loader import ConfigurationLoader
from confpatterns.config.manager import ConfigurationManager
from confpatterns.config.schemas.app_schema import AppConfig
from confpatterns.demo import build_sample_order, run_demo
from confpatterns.domain.core.exceptions import DomainException
from confpatterns.domain.report import HtmlReportBuilder, ReportDirector, TextReportBuilder
from confpatterns.infrastructure.logging.logger import get_logger, setup_logging
from confpatterns.infrastructure.persistence.exceptions import PersistenceError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with resource-action structure."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # Run the full walkthrough
  %(prog)s settings set username user1       # Store a setting
  %(prog)s settings list --format table      # Display settings as a table
  %(prog)s reports build --type html         # Build an HTML report
  %(prog)s orders clone                      # Clone the sample order
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (YAML or JSON)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured logging level')
    parser.add_argument('--format', choices=['json', 'yaml', 'table'],
                        default='json', help='Output format')
    parser.add_argument('--settings-file', help='Settings file (overrides configuration)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    # Resource subparsers
    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Demo
    subparsers.add_parser('demo', help='Run the singleton, builder and prototype walkthrough')

    # Settings resource
    settings_parser = subparsers.add_parser('settings', help='Manage stored settings')
    settings_subparsers = settings_parser.add_subparsers(dest='action', help='Settings actions')

    settings_get = settings_subparsers.add_parser('get', help='Show one setting')
    settings_get.add_argument('key', help='Setting name')

    settings_set = settings_subparsers.add_parser('set', help='Store a setting')
    settings_set.add_argument('key', help='Setting name')
    settings_set.add_argument('value', help='Setting value')

    settings_subparsers.add_parser('list', help='List all settings')

    # Reports resource
    reports_parser = subparsers.add_parser('reports', help='Build reports')
    reports_subparsers = reports_parser.add_subparsers(dest='action', help='Report actions')

    reports_build = reports_subparsers.add_parser('build', help='Build the standard report')
    reports_build.add_argument('--type', dest='report_type', choices=['text', 'html'],
                               default='text', help='Report style')

    # Orders resource
    orders_parser = subparsers.add_parser('orders', help='Inspect the sample order')
    orders_subparsers = orders_parser.add_subparsers(dest='action', help='Order actions')
    orders_subparsers.add_parser('show', help='Show the sample order')
    orders_subparsers.add_parser('clone', help='Clone the sample order and show both')

    return parser


def bootstrap(args: argparse.Namespace) -> AppConfig:
    """Load configuration, set up logging and configure the settings store."""
    app_config = ConfigurationLoader().load_app_config(args.config)

    logging_config = app_config.logging
    if args.log_level:
        logging_config = logging_config.model_copy(update={'level': args.log_level})
    setup_logging(logging_config)

    settings_config = app_config.settings
    if args.settings_file:
        settings_config = settings_config.model_copy(update={'default_file': args.settings_file})
    ConfigurationManager.get_instance().apply_config(settings_config)

    return app_config


def _load_existing(manager: ConfigurationManager) -> None:
    if os.path.exists(manager.default_file):
        manager.load_settings_from_file()


def handle_settings_get(args: argparse.Namespace) -> Dict[str, Any]:
    manager = ConfigurationManager.get_instance()
    manager.load_settings_from_file()
    return {'key': args.key, 'value': manager.get_setting(args.key)}


def handle_settings_set(args: argparse.Namespace) -> Dict[str, Any]:
    manager = ConfigurationManager.get_instance()
    _load_existing(manager)
    manager.set_setting(args.key, args.value)
    manager.save_settings_to_file()
    return {'key': args.key, 'value': args.value, 'file': manager.default_file}


def handle_settings_list(args: argparse.Namespace) -> Dict[str, Any]:
    manager = ConfigurationManager.get_instance()
    _load_existing(manager)
    return {'settings': manager.get_all_settings()}


def handle_reports_build(args: argparse.Namespace) -> Dict[str, Any]:
    builder = HtmlReportBuilder() if args.report_type == 'html' else TextReportBuilder()
    report = ReportDirector().construct_report(builder)
    return dataclasses.asdict(report)


def handle_orders_show(args: argparse.Namespace) -> Dict[str, Any]:
    order = build_sample_order()
    return {'order': _order_to_dict(order)}


def handle_orders_clone(args: argparse.Namespace) -> Dict[str, Any]:
    original = build_sample_order()
    cloned = original.clone()
    return {'original': _order_to_dict(original), 'clone': _order_to_dict(cloned)}


def _order_to_dict(order) -> Dict[str, Any]:
    data = dataclasses.asdict(order)
    data['total'] = order.total()
    return data


COMMAND_HANDLERS: Dict[Tuple[str, str], Callable[[argparse.Namespace], Dict[str, Any]]] = {
    # Settings
    ('settings', 'get'): handle_settings_get,
    ('settings', 'set'): handle_settings_set,
    ('settings', 'list'): handle_settings_list,

    # Reports
    ('reports', 'build'): handle_reports_build,

    # Orders
    ('orders', 'show'): handle_orders_show,
    ('orders', 'clone'): handle_orders_clone,
}


def execute_command(args: argparse.Namespace) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler_key = (args.resource, getattr(args, 'action', None))
    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {handler_key[1]}")
    return COMMAND_HANDLERS[handler_key](args)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.resource in ('settings', 'reports', 'orders') and not args.action:
        parser.error(f"No action specified for {args.resource}")

    logger = get_logger(__name__)
    try:
        bootstrap(args)

        if args.resource in (None, 'demo'):
            run_demo()
            return 0

        result = execute_command(args)
        print(format_output(result, args.format))
        return 0

    except (DomainException, PersistenceError) as e:
        logger.debug("Command failed", resource=args.resource, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
