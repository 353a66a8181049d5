"""
Command-line interface for the typosquat checker.

This module provides the main CLI entry point with commands for:
- scan: Generate typo candidates for a domain and report the ones that resolve
- strategies: List the mutation strategies
- config: Configuration management
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .config import (
    DEFAULT_CONFIG_PATH,
    SystemConfig,
    apply_environment,
    create_default_config,
    load_config_from_file,
    save_config_to_file,
    validate_config,
)
from .enums import KeyboardLayout, OutputFormat, StrategyTag
from .exceptions import ConfigError
from .models import ScanReport
from .orchestrator import ScanOrchestrator
from .output import colorizer_for, render
from .scan_logger import ScanLogger

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def build_scan_config(args: argparse.Namespace) -> SystemConfig:
    """
    Resolve the effective configuration for a scan.

    Precedence, lowest first: defaults or --config file, environment
    (including .env), command-line flags.

    Raises:
        ConfigError: If the file cannot be loaded or the result is invalid
    """
    if args.config:
        config = load_config_from_file(Path(args.config))
    else:
        config = create_default_config()

    config = apply_environment(config)

    if args.layout:
        config.generator.keyboard_layout = args.layout
    if args.strategy:
        config.generator.strategies = list(args.strategy)
    if args.workers is not None:
        config.resolver.workers = args.workers
    if args.timeout is not None:
        config.resolver.timeout_seconds = args.timeout
    if args.nameserver:
        config.resolver.nameservers = list(args.nameserver)
    if args.retries is not None:
        config.resolver.max_retries = args.retries
    if args.dry_run:
        config.resolver.simulation_mode = True
    if args.format:
        config.output.format = args.format
    if args.color:
        config.output.color = True
    if args.show_invalid:
        config.output.show_invalid = True

    validate_config(config)
    return config


async def run_scan(orchestrator: ScanOrchestrator, domain: str, resolve: bool) -> ScanReport:
    async with orchestrator:
        return await orchestrator.scan(domain, resolve=resolve)


def write_report(text: str, output_file: Optional[Path]) -> bool:
    if output_file is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return True
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        print(f"Error writing results: {e}", file=sys.stderr)
        return False
    print(f"Results written to: {output_file}", file=sys.stderr)
    return True


def cmd_scan(args: argparse.Namespace) -> int:
    """Handle the 'scan' command."""
    try:
        config = build_scan_config(args)
    except ConfigError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    logger = None
    if args.verbose:
        logger = ScanLogger.from_config(config.logging.level, config.logging.output_format)

    if config.resolver.simulation_mode:
        print("Simulation mode: no DNS queries will be sent", file=sys.stderr)

    orchestrator = ScanOrchestrator(config, logger=logger)
    try:
        report = asyncio.run(run_scan(orchestrator, args.domain, resolve=not args.no_resolve))
    except ConfigError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        report = orchestrator.partial_report()
        if report is None:
            print("Interrupted", file=sys.stderr)
            return EXIT_INTERRUPTED

    if report.error:
        print(f"Error: {report.error}", file=sys.stderr)

    text = render(
        report,
        config.output.format,
        colorizer=colorizer_for(config.output.color),
        show_invalid=config.output.show_invalid,
    )
    output_file = Path(args.output) if args.output else None
    if not write_report(text, output_file):
        return EXIT_ERROR

    if report.interrupted:
        print("Interrupted: results are partial", file=sys.stderr)
        return EXIT_INTERRUPTED
    return EXIT_OK


def cmd_strategies(args: argparse.Namespace) -> int:
    """Handle the 'strategies' command."""
    for tag in StrategyTag:
        if tag is StrategyTag.ORIGINAL:
            continue
        print(f"{tag.name.lower().replace('_', '-'):<24}{tag.value}")
    return EXIT_OK


def cmd_config(args: argparse.Namespace) -> int:
    """Handle the 'config' command."""
    config_path = Path(args.path) if args.path else DEFAULT_CONFIG_PATH

    if args.action == "show":
        try:
            config = load_config_from_file(config_path)
        except ConfigError as e:
            print(e.message)
            if e.code == "config_not_found":
                print("Use 'config init' to create a default configuration.")
            return EXIT_ERROR

        print(f"Configuration from: {config_path}")
        print(f"  Keyboard layout: {config.generator.keyboard_layout}")
        strategies = config.generator.strategies
        print(f"  Strategies: {', '.join(strategies) if strategies else 'all'}")
        print(f"  Homoglyph limit: {config.generator.homoglyph_limit}")
        print(f"  Workers: {config.resolver.workers}")
        print(f"  DNS timeout: {config.resolver.timeout_seconds}s")
        nameservers = config.resolver.nameservers
        print(f"  Nameservers: {', '.join(nameservers) if nameservers else 'system'}")
        print(f"  Retries: {config.resolver.max_retries}")
        print(f"  Simulation mode: {config.resolver.simulation_mode}")
        print(f"  Output format: {config.output.format}")
        print(f"  Log level: {config.logging.level}")
        return EXIT_OK

    elif args.action == "init":
        if config_path.exists() and not args.force:
            print(f"Configuration already exists at: {config_path}")
            print("Use --force to overwrite.")
            return EXIT_ERROR

        if save_config_to_file(create_default_config(), config_path):
            print(f"Configuration created at: {config_path}")
            return EXIT_OK
        print(f"Error: Could not write configuration to {config_path}", file=sys.stderr)
        return EXIT_ERROR

    elif args.action == "validate":
        try:
            load_config_from_file(config_path)
        except ConfigError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            for error in e.details.get("errors", [])[1:]:
                print(f"  - {error}", file=sys.stderr)
            return EXIT_ERROR

        print(f"Configuration at {config_path} is valid.")
        return EXIT_OK

    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="typosquat-checker",
        description="Generate typosquatting candidates for a domain and report the ones that resolve",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'scan' command
    scan_parser = subparsers.add_parser(
        "scan",
        help="Generate and resolve typo candidates for a domain",
    )
    scan_parser.add_argument(
        "domain",
        help="Domain to scan (e.g., example.com)",
    )
    scan_parser.add_argument(
        "--layout", "-k",
        choices=[layout.value for layout in KeyboardLayout],
        help="Keyboard layout for adjacency typos (default: qwerty)",
    )
    scan_parser.add_argument(
        "--format", "-f",
        choices=[fmt.value for fmt in OutputFormat],
        help="Output format (default: human)",
    )
    scan_parser.add_argument(
        "--output", "-o",
        help="Write the report to a file instead of stdout",
    )
    scan_parser.add_argument(
        "--workers", "-w",
        type=int,
        help="Number of concurrent resolver workers",
    )
    scan_parser.add_argument(
        "--timeout", "-t",
        type=float,
        help="Per-query DNS timeout in seconds",
    )
    scan_parser.add_argument(
        "--nameserver", "-n",
        action="append",
        help="Nameserver IP or DNS-over-HTTPS URL (repeatable)",
    )
    scan_parser.add_argument(
        "--retries",
        type=int,
        help="Retries for transient DNS errors",
    )
    scan_parser.add_argument(
        "--strategy", "-s",
        action="append",
        help="Only run this strategy (repeatable, see 'strategies')",
    )
    scan_parser.add_argument(
        "--no-resolve",
        action="store_true",
        help="List every candidate without DNS lookups",
    )
    scan_parser.add_argument(
        "--show-invalid",
        action="store_true",
        help="List every record, not only valid resolving ones",
    )
    scan_parser.add_argument(
        "--color",
        action="store_true",
        help="Highlight strategy names in human output",
    )
    scan_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Simulation mode - no real DNS queries",
    )
    scan_parser.add_argument(
        "--config", "-c",
        help="Path to configuration file",
    )
    scan_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable log output on stderr",
    )
    scan_parser.set_defaults(func=cmd_scan)

    # 'strategies' command
    strategies_parser = subparsers.add_parser(
        "strategies",
        help="List the mutation strategies",
    )
    strategies_parser.set_defaults(func=cmd_strategies)

    # 'config' command
    config_parser = subparsers.add_parser(
        "config",
        help="Configuration management",
    )
    config_parser.add_argument(
        "action",
        choices=["show", "init", "validate"],
        help="Configuration action",
    )
    config_parser.add_argument(
        "--path", "-p",
        help="Path to configuration file",
    )
    config_parser.add_argument(
        "--force",
        action="store_true",
        help="Force overwrite existing configuration",
    )
    config_parser.set_defaults(func=cmd_config)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
