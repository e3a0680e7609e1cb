"""
Command-line interface for R class generation.

Reads a resource table document and writes the R class for one or more
packages to stdout, a file, or a source tree.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from .codegen import (
    GenerationResult,
    GeneratorConfig,
    collect_packages,
    generate_r_class,
    load_config,
    write_r_class,
)
from .codegen.core.config import ConfigError, get_config_manager
from .logging_config import get_logger, setup_logging
from .table import ResourceTable, TableFormatError, table_from_dict
from .utils import TableLoaderError, load_table_json

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resgen",
        description="Generate R.java symbol classes from a compiled resource table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  resgen table.json
  resgen table.json --package com.example.lib -o R.java
  resgen --url https://example.com/table.json --output-dir gen/ --all-packages
  resgen --stdin --no-final < table.json
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument("file", nargs="?", help="Resource table JSON file")
    input_group.add_argument("--url", help="URL to fetch the table from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the table from standard input"
    )

    parser.add_argument(
        "--package",
        "--package-name",
        dest="package_name",
        help="Package to generate (default: the table's package)",
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument(
        "--output-dir", help="Source root; writes <dir>/<package path>/R.java"
    )
    parser.add_argument(
        "--all-packages",
        action="store_true",
        help="Generate one R class per package found in the table (needs --output-dir)",
    )
    parser.add_argument(
        "--no-final",
        action="store_true",
        help="Emit non-final constants",
    )
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Console script entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.all_packages and not args.output_dir:
            raise CLIError("--all-packages requires --output-dir")
        if args.output and args.output_dir:
            raise CLIError("--output and --output-dir cannot be combined")

        table = _load_input(args)
        config = _build_config(args)
        return _generate_and_output(table, config, args)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except (TableLoaderError, TableFormatError, ConfigError, OSError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug("Failure details", exc_info=True)
        return 1


def _load_input(args: argparse.Namespace) -> ResourceTable:
    if args.file or args.url:
        _, data = load_table_json(file_path=args.file, url=args.url)
    elif args.stdin:
        try:
            data = json.load(sys.stdin)
        except json.JSONDecodeError as e:
            raise CLIError(f"Invalid JSON input: {e}") from e
    else:
        raise CLIError("Input source required (file, --url, or --stdin)")

    table = table_from_dict(data)
    logger.info(
        "Loaded table %s: %d types, %d entries",
        table.package,
        len(table),
        table.entry_count(),
    )
    return table


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides: dict[str, Any] = {}

    if args.package_name:
        overrides["package_name"] = args.package_name
    if args.no_final:
        overrides["use_final"] = False

    config = load_config("java", custom_config=overrides, config_file=args.config)

    for warning in get_config_manager().validate_config(config, "java"):
        console.print(f"[yellow]⚠️  {warning}[/yellow]")

    return config


def _generate_and_output(
    table: ResourceTable, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    if args.all_packages:
        packages = collect_packages(table)
    else:
        packages = [config.package_name or table.package]

    for package in packages:
        if args.output_dir:
            result = write_r_class(table, args.output_dir, package, config)
        else:
            result = generate_r_class(table, package, config)

        if not result.success:
            console.print(f"[red]✗ Error:[/red] {result.error_message}")
            return 1

        if args.output_dir:
            console.print(
                f"[green]✓[/green] {package}: wrote [cyan]{result.metadata['output_file']}[/cyan]"
            )
        elif args.output or config.output_file:
            output_path = Path(args.output or config.output_file)
            try:
                output_path.write_text(result.code, encoding="utf-8")
            except OSError as e:
                console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
                return 1
            console.print(f"[green]✓[/green] R class saved to [cyan]{output_path}[/cyan]")
        else:
            sys.stdout.write(result.code)

        if args.verbose:
            _print_metadata(result)

    return 0


def _print_metadata(result: GenerationResult) -> None:
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)


if __name__ == "__main__":
    sys.exit(main())
