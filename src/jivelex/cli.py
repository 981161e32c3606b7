"""Command-line interface for jivelex."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jivelex.errors import JiveError
from jivelex.report import FORMATTERS


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    output_format: str
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="jivelex",
        description="Lexical analyzer for the jive language",
    )
    p.add_argument("input", help="Input .jive file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=sorted(FORMATTERS),
        default=None,
        help="Token report format (default: text)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover jivelex.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file.

    An explicit *config_path* must be readable. Without one, ``jivelex.toml``
    next to the input is used if present, otherwise the config is empty.
    """
    path = config_path
    if path is None:
        path = input_dir / "jivelex.toml"
        if not path.is_file():
            return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc
    except OSError as exc:
        raise argparse.ArgumentTypeError(f"cannot read config file: {exc}") from exc

    output_format = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATTERS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config: {cfg_format!r}"
                )
            output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        debug=args.debug,
    )


def lex_to_report(options: CliOptions) -> str:
    """Read and tokenize the input file, returning the rendered report."""
    from jivelex.debug import dump_tokens
    from jivelex.lexer import tokenize
    from jivelex.source import read_source

    source = read_source(options.input_file)
    tokens = tokenize(source, str(options.input_file))

    if options.debug:
        dump_tokens(tokens, file=sys.stderr)

    return FORMATTERS[options.output_format](tokens)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        report = lex_to_report(options)
    except JiveError as exc:
        print(exc.diagnostic(), file=sys.stderr)
        return 1
    except MemoryError:
        print("error: out of memory", file=sys.stderr)
        return 1

    if options.output_file:
        try:
            options.output_file.write_text(report, encoding="utf-8")
        except OSError as exc:
            print(f"error: cannot write output file: {exc}", file=sys.stderr)
            return 1
    else:
        sys.stdout.write(report)

    return 0
