"""
Command-line interface for vbcbuild.

This module provides the `vbcbuild` CLI tool for rendering VB.NET compiler
arguments and resolving resource linkage.
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from vbcbuild import __version__, output
from vbcbuild.build.compiler_config import CompilerConfiguration
from vbcbuild.build.debug_modes import InvalidConfigurationError
from vbcbuild.build.directives import write_response_file
from vbcbuild.build.option_emitter import emit_compiler_directives
from vbcbuild.build.resource_linkage import SOURCE_EXTENSION, dependent_source_for, resolve
from vbcbuild.framework_configs import list_available_frameworks, load_target_framework

DEFAULT_FRAMEWORK = "net-2.0"

console = Console()
err_console = Console(stderr=True, soft_wrap=True)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False) -> None:
    """Route library logging to stderr.

    Advisory warnings are printed by the commands themselves, so only errors
    are logged unless verbose output is requested.
    """
    logger = logging.getLogger("vbcbuild")
    logger.setLevel(logging.DEBUG if verbose else logging.ERROR)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
        logger.addHandler(handler)


@dataclass
class OptionsArgs:
    """Arguments for the options command."""

    config_file: Path
    framework: str = DEFAULT_FRAMEWORK
    response_file: Optional[Path] = None
    verbose: bool = False


@dataclass
class LinkageArgs:
    """Arguments for the linkage command."""

    source_file: Path
    root_namespace: Optional[str] = None
    culture: Optional[str] = None
    verbose: bool = False


def options_command(args: OptionsArgs) -> int:
    """Render compiler arguments for a configuration file.

    Examples:
        vbcbuild options build.json                     # Target net-2.0
        vbcbuild options build.json -f net-1.1          # Target .NET 1.1
        vbcbuild options build.json -o obj/vbc.rsp      # Write a response file
    """
    output.log_phase(1, 3, f"Loading target framework {args.framework}...", verbose_only=True)
    framework = load_target_framework(args.framework)
    if framework is None:
        err_console.print(f"[bold red]✗ Error: Unknown target framework: {escape(args.framework)}[/bold red]")
        return 2
    output.log_detail(framework.description, verbose_only=True)

    output.log_phase(2, 3, f"Reading {args.config_file}...", verbose_only=True)
    try:
        data = json.loads(args.config_file.read_text(encoding="utf-8"))
        config = CompilerConfiguration.from_dict(data)
    except InvalidConfigurationError as e:
        err_console.print(f"[bold red]✗ Invalid configuration: {escape(str(e))}[/bold red]")
        return 1
    except (OSError, ValueError) as e:
        err_console.print(f"[bold red]✗ Error: {escape(str(e))}[/bold red]")
        return 1

    output.log_phase(3, 3, "Emitting compiler options...", verbose_only=True)
    result = emit_compiler_directives(config, framework=framework)

    for warning in result.warnings:
        err_console.print(f"[yellow]Warning: {escape(warning.message)}[/yellow]")

    if args.response_file is not None:
        path = write_response_file(result.directives, args.response_file)
        output.log(f"Wrote {len(result.directives)} arguments to {path}")
    else:
        for argument in result.arguments():
            print(argument)

    return 0


def linkage_command(args: LinkageArgs) -> int:
    """Resolve the namespace/class a resource depending on a source file is linked under.

    A resource file (any non-.vb path) is mapped to the source file it
    depends on first.

    Examples:
        vbcbuild linkage Form1.vb                       # Declared namespace/class
        vbcbuild linkage Form1.vb -r MyApp              # Prefixed with root namespace
        vbcbuild linkage Form1.de-DE.resx --culture de-DE  # Resolved through Form1.vb
    """
    source_file = args.source_file
    if source_file.suffix.lower() != f".{SOURCE_EXTENSION}":
        source_file = dependent_source_for(source_file, args.culture)
        output.log_detail(f"{args.source_file.name} depends on {source_file.name}", verbose_only=True)

    try:
        linkage = resolve(source_file, root_namespace=args.root_namespace, culture=args.culture)
    except OSError as e:
        err_console.print(f"[bold red]✗ Error: {escape(str(e))}[/bold red]")
        return 1

    if linkage is None:
        err_console.print(f"[bold red]✗ Error: Source file not found: {escape(str(source_file))}[/bold red]")
        return 2

    print(f"namespace: {linkage.namespace_name or ''}")
    print(f"class: {linkage.class_name or ''}")
    print(f"qualified: {linkage.qualified_name or ''}")
    return 0


def frameworks_command() -> int:
    """List packaged target framework descriptors."""
    table = Table(title="Target frameworks")
    table.add_column("Name", no_wrap=True)
    table.add_column("Family", no_wrap=True)
    table.add_column("Description")
    table.add_column("/doc", justify="center")
    table.add_column("/nostdlib", justify="center")
    table.add_column("/platform", justify="center")

    def mark(flag: bool) -> str:
        return "[green]yes[/green]" if flag else "[dim]no[/dim]"

    for name in list_available_frameworks():
        framework = load_target_framework(name)
        if framework is None:
            continue
        caps = framework.capabilities
        table.add_row(
            framework.name,
            framework.family,
            framework.description,
            mark(caps.supports_doc_generation),
            mark(caps.supports_no_stdlib),
            mark(caps.supports_platform),
        )

    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vbcbuild",
        description="VB.NET compiler option emission and resource linkage",
    )
    parser.add_argument("--version", action="version", version=f"vbcbuild {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Options command
    options_parser = subparsers.add_parser(
        "options",
        help="Render compiler arguments for a JSON configuration",
    )
    options_parser.add_argument(
        "config_file",
        type=Path,
        help="JSON file with compiler options",
    )
    options_parser.add_argument(
        "-f",
        "--framework",
        default=DEFAULT_FRAMEWORK,
        help=f"Target framework (default: {DEFAULT_FRAMEWORK})",
    )
    options_parser.add_argument(
        "-o",
        "--response-file",
        type=Path,
        default=None,
        help="Write arguments to a response file instead of stdout",
    )
    options_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output",
    )

    # Linkage command
    linkage_parser = subparsers.add_parser(
        "linkage",
        help="Resolve resource linkage from a VB.NET source or resource file",
    )
    linkage_parser.add_argument(
        "source_file",
        type=Path,
        help="Source file the resource depends on, or the resource file itself",
    )
    linkage_parser.add_argument(
        "-r",
        "--root-namespace",
        default=None,
        help="Project root namespace",
    )
    linkage_parser.add_argument(
        "--culture",
        default=None,
        help="Culture of the resource file",
    )
    linkage_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output",
    )

    # Frameworks command
    subparsers.add_parser(
        "frameworks",
        help="List packaged target frameworks",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the vbcbuild CLI."""
    parser = build_parser()
    parsed_args = parser.parse_args(argv)

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        return 0

    output.init_timer(sys.stderr)
    verbose = getattr(parsed_args, "verbose", False)
    setup_logging(verbose)
    output.set_verbose(verbose)
    if output.is_verbose():
        output.log_header("vbcbuild", __version__)

    if parsed_args.command == "options":
        return options_command(
            OptionsArgs(
                config_file=parsed_args.config_file,
                framework=parsed_args.framework,
                response_file=parsed_args.response_file,
                verbose=parsed_args.verbose,
            )
        )
    if parsed_args.command == "linkage":
        return linkage_command(
            LinkageArgs(
                source_file=parsed_args.source_file,
                root_namespace=parsed_args.root_namespace,
                culture=parsed_args.culture,
                verbose=parsed_args.verbose,
            )
        )
    return frameworks_command()


if __name__ == "__main__":
    sys.exit(main())
