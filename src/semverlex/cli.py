"""Command-line interface for semverlex."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from semverlex.errors import LexError, ParseError, RangeError

CONFIG_NAME = "semverlex.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    command: str
    versions: list[str]
    part: str | None
    range_min: str | None
    range_max: str | None
    reverse: bool
    debug: bool


class ConfigError(Exception):
    """Raised when a config file value has the wrong type."""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="semverlex",
        description="Validate, compare, sort and bump semantic versions",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens and fields to stderr")

    sub = p.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Validate versions and print their canonical form")
    check.add_argument("versions", nargs="+", metavar="VERSION")

    cmp = sub.add_parser("compare", help="Print <, = or > for two versions")
    cmp.add_argument("versions", nargs=2, metavar="VERSION")

    srt = sub.add_parser("sort", help="Print versions in precedence order")
    srt.add_argument("versions", nargs="+", metavar="VERSION")
    srt.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        default=None,
        help="Highest precedence first",
    )

    contains = sub.add_parser("contains", help="Test whether a version lies in [min, max]")
    contains.add_argument("versions", nargs=1, metavar="VERSION")
    contains.add_argument("--min", dest="range_min", metavar="VERSION", help="Lower bound")
    contains.add_argument("--max", dest="range_max", metavar="VERSION", help="Upper bound")

    bump = sub.add_parser("bump", help="Increment one part of a version")
    bump.add_argument("part", choices=("major", "minor", "patch"))
    bump.add_argument("versions", nargs=1, metavar="VERSION")

    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace, search_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir if search_dir is not None else Path("."))

    # Range bounds: config < CLI
    range_min: str | None = None
    range_max: str | None = None
    cfg_range = config.get("range")
    if isinstance(cfg_range, dict):
        range_min = _config_str(cfg_range, "min", "range.min")
        range_max = _config_str(cfg_range, "max", "range.max")
    if getattr(args, "range_min", None) is not None:
        range_min = args.range_min
    if getattr(args, "range_max", None) is not None:
        range_max = args.range_max

    # Sort direction: config < CLI
    reverse = False
    cfg_sort = config.get("sort")
    if isinstance(cfg_sort, dict) and "reverse" in cfg_sort:
        if not isinstance(cfg_sort["reverse"], bool):
            raise ConfigError("sort.reverse must be a boolean")
        reverse = cfg_sort["reverse"]
    if getattr(args, "reverse", None) is not None:
        reverse = args.reverse

    return CliOptions(
        command=args.command,
        versions=list(args.versions),
        part=getattr(args, "part", None),
        range_min=range_min,
        range_max=range_max,
        reverse=reverse,
        debug=args.debug,
    )


def _config_str(table: dict[str, Any], key: str, dotted: str) -> str | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{dotted} must be a version string")
    return value


def run(options: CliOptions) -> list[str]:
    """Execute the command and return the output lines."""
    from semverlex.debug import dump_tokens, dump_version
    from semverlex.parser import parse_tokens
    from semverlex.ranges import Range
    from semverlex.scanner import scan
    from semverlex.version import Ordering, Version

    def load(text: str) -> Version:
        tokens = scan(text)
        if options.debug:
            dump_tokens(tokens)
        version = parse_tokens(tokens, text)
        if options.debug:
            dump_version(version)
        return version

    versions = [load(text) for text in options.versions]

    if options.command == "check":
        return [str(v) for v in versions]

    if options.command == "compare":
        symbol = {Ordering.LESS: "<", Ordering.EQUAL: "=", Ordering.GREATER: ">"}
        return [symbol[versions[0].compare(versions[1])]]

    if options.command == "sort":
        ordered = sorted(versions, key=lambda v: v.sort_key(), reverse=options.reverse)
        return [str(v) for v in ordered]

    if options.command == "contains":
        if options.range_min is None or options.range_max is None:
            raise ConfigError("contains needs --min and --max (or [range] in the config file)")
        bounds = Range(load(options.range_min), load(options.range_max))
        return ["true" if bounds.contains(versions[0]) else "false"]

    if options.command == "bump":
        version = versions[0]
        if options.part == "major":
            return [str(version.inc_major())]
        if options.part == "minor":
            return [str(version.inc_minor())]
        if options.part == "patch":
            return [str(version.inc_patch())]

    raise ValueError(f"unknown command {options.command!r}")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (ConfigError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        lines = run(options)
    except (LexError, ParseError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except (ConfigError, RangeError, OverflowError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    for line in lines:
        sys.stdout.write(line + "\n")

    return 0
