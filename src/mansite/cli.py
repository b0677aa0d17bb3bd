"""Command line entry point for mansite.

Usage::

    mansite [-h] [-s] [--theme PATH] [--background-hue DEG]
            [--text-hue DEG] [--accent-hue DEG] [<path>|-]

Renders ``<path>`` (default ``index.1``, ``-`` for stdin) as HTML on stdout,
or as the debug summary with ``-s``. Output is written only when parsing and
rendering both succeed.

Exit codes:
    0: success
    1: ``-h`` was given, or the document is structurally invalid
    2: unrecognized parameter or malformed option value
    3: the document or theme could not be opened
    4: the document or theme could not be read
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from mansite import __version__, load_page
from mansite.config import RenderConfig, parse_hue
from mansite.errors import (
    ConfigError,
    ParseError,
    ResourceOpenError,
    ResourceReadError,
)
from mansite.renderers.html import HtmlRenderer
from mansite.renderers.protocol import PageRenderer
from mansite.renderers.summary import SummaryRenderer
from mansite.source import encode_output

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_STRUCTURE = 1
EXIT_UNRECOGNIZED = 2
EXIT_OPEN = 3
EXIT_READ = 4

DEFAULT_SOURCE = "index.1"

_LOG_FORMAT = "%(levelname)s: %(message)s"


class _UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def _hue(text: str) -> float:
    try:
        return parse_hue("hue", text)
    except ConfigError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="mansite",
        description="Render a man-page style source document as a static HTML page.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", dest="help", action="store_true", help="Show this help and exit.")
    parser.add_argument(
        "-s",
        dest="summary",
        action="store_true",
        help="Print a plain-text summary of the parsed page instead of HTML.",
    )
    parser.add_argument("--theme", default=None, help="Stylesheet embedded into the page.")
    parser.add_argument("--background-hue", type=_hue, default=None, metavar="DEG")
    parser.add_argument("--text-hue", type=_hue, default=None, metavar="DEG")
    parser.add_argument("--accent-hue", type=_hue, default=None, metavar="DEG")
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_SOURCE,
        help=f"Source document, '-' for standard input (default: {DEFAULT_SOURCE}).",
    )
    return parser


def parse_args(argv: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
    """Parse arguments, returning the namespace and any unrecognized ones."""
    return _build_parser().parse_known_args(list(argv))


def usage() -> str:
    return _build_parser().format_help() + f"\nmansite {__version__}\n"


def _print_error(msg: str) -> None:
    print(f"error: {msg}", file=sys.stderr)


def _config_from_args(args: argparse.Namespace) -> RenderConfig:
    return RenderConfig().with_overrides(
        theme_path=args.theme,
        background_hue=args.background_hue,
        text_hue=args.text_hue,
        accent_hue=args.accent_hue,
    )


def run(args: argparse.Namespace) -> int:
    try:
        config = _config_from_args(args)
    except ConfigError as e:
        _print_error(str(e))
        return EXIT_UNRECOGNIZED

    renderer: PageRenderer = SummaryRenderer() if args.summary else HtmlRenderer(config)
    try:
        page = load_page(args.path)
        output = renderer.render(page)
    except ResourceOpenError as e:
        _print_error(str(e))
        return EXIT_OPEN
    except ResourceReadError as e:
        _print_error(str(e))
        return EXIT_READ
    except ParseError as e:
        _print_error(str(e))
        return EXIT_STRUCTURE

    # Written only once everything succeeded; fatal paths produce no output
    sys.stdout.buffer.write(encode_output(output))
    sys.stdout.buffer.flush()
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    try:
        args, extras = parse_args(sys.argv[1:] if argv is None else argv)
    except _UsageError as e:
        _print_error(str(e))
        return EXIT_UNRECOGNIZED

    if args.help:
        sys.stderr.write(usage())
        return EXIT_USAGE
    if extras:
        _print_error(f"unrecognized parameter: {extras[0]}")
        return EXIT_UNRECOGNIZED

    # Library loggers stay handler-free; diagnostics reach stderr only while running
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.WARNING)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    pkg_logger = logging.getLogger("mansite")
    pkg_logger.addHandler(handler)
    try:
        return run(args)
    finally:
        pkg_logger.removeHandler(handler)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
