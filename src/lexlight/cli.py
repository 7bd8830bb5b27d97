"""Command-line interface for lexlight."""

from __future__ import annotations

import argparse
import logging
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lexlight.errors import LexlightError, OpenFailure, WriteFailure
from lexlight.render import DEFAULT_INDENT_WIDTH, DEFAULT_TITLE

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "file.txt"
DEFAULT_OUTPUT = "output.html"
CONFIG_NAME = "lexlight.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path
    title: str
    indent_width: int
    listing: bool
    watch: bool
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="lexlight",
        description="Tokenize C-like source and render a colorized HTML listing",
    )
    p.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Input source file (default: {DEFAULT_INPUT})",
    )
    p.add_argument("-o", "--output", help=f"Output HTML file (default: {DEFAULT_OUTPUT})")
    p.add_argument("--title", help=f"Document title (default: {DEFAULT_TITLE!r})")
    p.add_argument(
        "--indent",
        type=int,
        default=None,
        metavar="N",
        help=f"Spaces per indentation level (default: {DEFAULT_INDENT_WIDTH})",
    )
    p.add_argument(
        "--no-listing",
        dest="listing",
        action="store_false",
        default=None,
        help="Do not print the token listing to stdout",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and regenerate")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
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

    # Output path: config < CLI
    output_file = Path(DEFAULT_OUTPUT)
    cfg_output = config.get("output")
    if isinstance(cfg_output, str):
        output_file = Path(cfg_output)
    if args.output:
        output_file = Path(args.output)

    # Title and indent: config [html] table < CLI
    title = DEFAULT_TITLE
    indent_width = DEFAULT_INDENT_WIDTH
    cfg_html = config.get("html")
    if isinstance(cfg_html, dict):
        cfg_title = cfg_html.get("title")
        if isinstance(cfg_title, str):
            title = cfg_title
        cfg_indent = cfg_html.get("indent")
        if isinstance(cfg_indent, int) and not isinstance(cfg_indent, bool):
            indent_width = cfg_indent
    if args.title is not None:
        title = args.title
    if args.indent is not None:
        indent_width = args.indent
    if indent_width < 0:
        raise argparse.ArgumentTypeError(f"indent must be non-negative, got {indent_width}")

    # Listing: config < CLI
    listing = True
    cfg_listing = config.get("listing")
    if isinstance(cfg_listing, bool):
        listing = cfg_listing
    if args.listing is not None:
        listing = args.listing

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        title=title,
        indent_width=indent_width,
        listing=listing,
        watch=args.watch,
        verbose=args.verbose,
    )


def read_source(path: Path) -> str:
    """Read *path* line by line, appending a newline after every line.

    Undecodable bytes become U+FFFD rather than failing the run.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            content = "".join(line.rstrip("\n") + "\n" for line in f)
    except OSError as exc:
        raise OpenFailure(path, exc.strerror or str(exc)) from exc
    logger.debug("read %d characters from %s", len(content), path)
    return content


def write_output(path: Path, html: str) -> None:
    """Write the rendered document to *path*."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(html)
    except OSError as exc:
        raise WriteFailure(path, exc.strerror or str(exc)) from exc
    logger.info("wrote %s", path)


def process_file(options: CliOptions) -> str:
    """Read, tokenize, list, and render a source file; write and return the HTML."""
    from lexlight.lexer import tokenize
    from lexlight.listing import dump_tokens
    from lexlight.render import render

    source = read_source(options.input_file)
    tokens = tokenize(source, str(options.input_file))

    if options.listing:
        dump_tokens(tokens)

    html = render(tokens, title=options.title, indent_width=options.indent_width)
    write_output(options.output_file, html)
    return html


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, regenerate on each modification."""
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    process_file(options)
                    print(f"Rendered {options.input_file}", file=sys.stderr)
                except LexlightError as exc:
                    print(exc.format(), file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    try:
        process_file(options)
    except LexlightError as exc:
        print(exc.format(), file=sys.stderr)
        return 1

    return 0


def run() -> None:
    """Console-script wrapper around main()."""
    sys.exit(main())
