"""
Command-line interface for Tornado Watch.
"""

import argparse
import logging
import sys
from rich.console import Console
from rich.markup import escape

from .core.config import AppConfig
from .core.application import TornadoWatchApplication
from .core.scheduler import IntervalScheduler, RunOnceScheduler
from .utils.logging import setup_logging

console = Console()
logger = logging.getLogger(__name__)


def build_application(config: AppConfig, clean_slate: bool = False) -> TornadoWatchApplication:
    """Set up logging and create the application for a loaded config."""
    _, alert_logger = setup_logging(config.logging)
    app = TornadoWatchApplication(config, console=console, alert_logger=alert_logger)
    if clean_slate:
        app.store.clear()
    return app


def run_application_with_config(config_path=None, clean_slate: bool = False) -> int:
    """Poll the feed continuously with the configured interval."""
    config = AppConfig.from_yaml(config_path)
    console.print(f"[bold green]Starting Tornado Watch[/bold green] (every {config.poll_interval}s)")

    app = build_application(config, clean_slate)
    try:
        return app.run(IntervalScheduler(config.poll_interval))
    finally:
        app.close()


def run_once_with_config(config_path=None, clean_slate: bool = False) -> int:
    """Run a single pass; errors propagate."""
    config = AppConfig.from_yaml(config_path)
    app = build_application(config, clean_slate)
    try:
        return app.run(RunOnceScheduler())
    finally:
        app.close()


def test_nws_client_with_config(config_path=None) -> bool:
    """Test the NWS feed connection with specified config."""
    from .api.nws_client import NWSClient

    console.print("[bold blue]Testing NWS API Connection[/bold blue]")

    config = AppConfig.from_yaml(config_path)
    setup_logging(config.logging)

    with NWSClient(config.nws) as nws_client:
        if nws_client.test_connection():
            console.print("[green]✓ NWS API connection successful[/green]")
            return True

    console.print("[red]✗ NWS API connection failed[/red]")
    return False


def create_parser():
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        description="Tornado Watch - new tornado alerts from the NWS feed",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s run --config config/default.yaml    Poll the feed continuously
  %(prog)s once                               Run a single pass
  %(prog)s test-nws                           Test NWS API connection
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    run_parser = subparsers.add_parser('run', help='Poll the feed continuously')
    once_parser = subparsers.add_parser('once', help='Run a single pass and exit')
    test_nws_parser = subparsers.add_parser('test-nws', help='Test NWS API connection')

    for sub in (run_parser, once_parser, test_nws_parser):
        sub.add_argument('--config', '-c',
                         help='Configuration file path (default: config/default.yaml)',
                         default='config/default.yaml')

    for sub in (run_parser, once_parser):
        sub.add_argument('--clean-slate', action='store_true',
                         help='Forget previously processed alerts before starting')

    return parser


def main(argv=None):
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == 'run':
            run_application_with_config(args.config, args.clean_slate)
        elif args.command == 'once':
            run_once_with_config(args.config, args.clean_slate)
        elif args.command == 'test-nws':
            if not test_nws_client_with_config(args.config):
                sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(0)
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        logger.exception("Unhandled exception")
        sys.exit(1)


if __name__ == "__main__":
    main()
