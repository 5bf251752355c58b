"""CLI entrypoint for SystemCSS."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from systemcss import __version__
from systemcss.config import SystemConfig, load_config, validate_config_file
from systemcss.constants.branding import CLI_DESCRIPTION
from systemcss.dsl import SelectorCompiler
from systemcss.exceptions import ConfigError
from systemcss.exceptions.validation import format_errors
from systemcss.mixins import write_mixins


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="systemcss",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    compile_cmd = subparsers.add_parser("compile", help="Compile DSL selectors to CSS selectors")
    compile_cmd.add_argument(
        "selectors",
        nargs="*",
        help="Selectors to compile (read from stdin, one per line, when omitted)",
    )
    _add_config_args(compile_cmd)

    mixins = subparsers.add_parser("mixins", help="Write a preprocessor mixin file")
    _add_config_args(mixins)
    mixins.add_argument("-e", "--engine", default=None, help="Preprocessor: sass, scss, less or stylus")
    mixins.add_argument("-o", "--output", type=Path, default=None, help="Directory to write the mixin file to")
    mixins.add_argument("-n", "--namespace", default=None, help="Prefix for generated mixin names")
    mixins.add_argument("--filename", default=None, help="Mixin file name without extension (default: system)")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without compiling")
    _add_config_args(validate)

    show = subparsers.add_parser("show-config", help="Print the resolved configuration as JSON")
    _add_config_args(show)

    return parser


def _add_config_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root holding systemcss.yaml")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "validate-config":
        return _handle_validate_config(args)

    try:
        if args.command == "compile":
            return _handle_compile(args)
        if args.command == "mixins":
            return _handle_mixins(args)
        if args.command == "show-config":
            return _handle_show_config(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"I/O error: {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _load(args: argparse.Namespace, overrides: dict[str, Any] | None = None) -> SystemConfig:
    return load_config(args.root, args.config, overrides)


def _handle_compile(args: argparse.Namespace) -> int:
    compiler = SelectorCompiler(_load(args))
    selectors = args.selectors or [line for line in sys.stdin.read().splitlines() if line.strip()]
    for compiled in compiler.transform_all(selectors):
        print(compiled)
    return 0


def _handle_mixins(args: argparse.Namespace) -> int:
    preprocessor: dict[str, Any] = {}
    if args.engine is not None:
        preprocessor["engine"] = args.engine
    if args.output is not None:
        preprocessor["output"] = str(args.output)
    if args.namespace is not None:
        preprocessor["namespace"] = args.namespace
    if args.filename is not None:
        preprocessor["filename"] = args.filename

    config = _load(args, {"preprocessor": preprocessor} if preprocessor else None)
    dest = write_mixins(config)
    print(f"Wrote {dest}")
    return 0


def _handle_show_config(args: argparse.Namespace) -> int:
    print(json.dumps(_load(args).to_dict(), indent=2, sort_keys=True))
    return 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
