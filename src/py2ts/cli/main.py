# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the py2ts command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from py2ts.errors import GenerationError
from py2ts.workspace.config import (
    CONFIG_NAME,
    ConfigError,
    GeneratorConfig,
    build_generator,
    load_config,
    save_config,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the py2ts CLI."""
    parser = argparse.ArgumentParser(
        prog="py2ts",
        description="py2ts - generate TypeScript declarations from Python types",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every declaration as it is generated",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create a py2ts config file",
        description=f"Create a starter {CONFIG_NAME} in a project directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Write the TypeScript declarations",
        description="Generate TypeScript declarations for the types listed in the config file.",
    )
    _add_project_arguments(generate_parser)
    generate_parser.add_argument(
        "--output",
        default=None,
        help="Output file, overriding the config's 'output' (relative to the project directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check that the generated file is up to date",
        description="Regenerate in memory and fail if the output file is missing or stale.",
    )
    _add_project_arguments(check_parser)

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_project_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )
    parser.add_argument(
        "--config",
        default=CONFIG_NAME,
        help=f"Config file, relative to the project directory (default: {CONFIG_NAME})",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_NAME
    if config_file.exists():
        print(f"Error: config file already exists at '{config_file}'.", file=sys.stderr)
        return 1

    try:
        save_config(GeneratorConfig(output="types.ts"), config_file)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Created py2ts config at '{config_file}'.")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    loaded = _generate(args)
    if loaded is None:
        return 1
    output_path, text = loaded
    if args.output:
        output_path = Path(args.directory).resolve() / args.output

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot write '{output_path}': {exc}", file=sys.stderr)
        return 1

    print(f"Wrote TypeScript declarations to '{output_path}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    loaded = _generate(args)
    if loaded is None:
        return 1
    output_path, text = loaded

    if not output_path.exists():
        print(f"Error: '{output_path}' does not exist. Run 'py2ts generate'.", file=sys.stderr)
        return 1
    if output_path.read_text(encoding="utf-8") != text:
        print(f"Error: '{output_path}' is out of date. Run 'py2ts generate'.", file=sys.stderr)
        return 1

    print("Generated declarations are up to date.")
    return 0


def _generate(args: argparse.Namespace) -> tuple[Path, str] | None:
    """Load the config and render the declarations; None after reporting an error."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return None

    # Project modules referenced by the config are imported relative to the project root.
    if str(directory) not in sys.path:
        sys.path.insert(0, str(directory))

    try:
        config = load_config(directory / args.config)
        generator = build_generator(config)
    except (ConfigError, GenerationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None

    logger.debug("Generated %d declaration(s)", len(generator.registry))
    return directory / config.output, generator.render_string()
