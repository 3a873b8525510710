"""Command line entry point: preprocessor protocol and the ``gen`` command."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, TextIO

from .config import AutoGenConfig, DirectoryWithoutIndexBehavior
from .summary import AutoGenSummary, gen_summary

MDBOOK_VERSION = "0.4.52"

_EXIT_SUPPORTED = 0
_EXIT_UNSUPPORTED = 1

_BEHAVIOR_CHOICES = [behavior.value for behavior in DirectoryWithoutIndexBehavior]


def make_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the ``supports`` and ``gen`` commands."""
    parser = argparse.ArgumentParser(
        prog="auto-gen-summary-preprocessor",
        description="A mdbook preprocessor to auto generate book summary",
    )
    commands = parser.add_subparsers(dest="command")

    supports = commands.add_parser(
        "supports",
        help="Check whether a renderer is supported by this preprocessor",
    )
    supports.add_argument("renderer")

    gen = commands.add_parser("gen", help="gen SUMMARY.md")
    gen.add_argument("dir", help="A path to the mdbook src directory")
    gen.add_argument(
        "-t",
        "--title",
        action="store_true",
        help="Use the first line of markdown files the title in SUMMARY.md",
    )
    gen.add_argument(
        "-T",
        "--dir-title",
        action="store_true",
        help="Use the first line of directory index files the title in SUMMARY.md",
    )
    gen.add_argument(
        "-i",
        "--dir-index-names",
        help="Name of files to use as a directory index",
    )
    gen.add_argument(
        "-w",
        "--dir-without-index-behavior",
        type=str.lower,
        choices=_BEHAVIOR_CHOICES,
        help="Behavior of a directory without an index file",
    )
    return parser


def _parse_input(stdin: TextIO) -> tuple[dict[str, Any], Any]:
    data = json.load(stdin)
    if not isinstance(data, list) or len(data) != 2 or not isinstance(data[0], dict):
        raise ValueError("Expected a JSON array holding the context and the book")
    return data[0], data[1]


def handle_preprocessing(
    preprocessor: AutoGenSummary,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Read the context and book as JSON, run the preprocessor, write the book."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    ctx, book = _parse_input(stdin)

    version = ctx.get("mdbook_version")
    if version != MDBOOK_VERSION:
        print(
            f"Warning: The {preprocessor.name()} plugin was built against version "
            f"{MDBOOK_VERSION} of mdbook, but we're being called from version {version}",
            file=sys.stderr,
        )

    processed = preprocessor.run(ctx, book)
    json.dump(processed, stdout)


def handle_supports(preprocessor: AutoGenSummary, renderer: str) -> int:
    """Return the exit status telling whether ``renderer`` is supported."""
    supported = preprocessor.supports_renderer(renderer)
    if supported:
        status = _EXIT_SUPPORTED
    else:
        status = _EXIT_UNSUPPORTED
    return status


def _config_from_args(args: argparse.Namespace) -> AutoGenConfig | None:
    config = AutoGenConfig(
        first_line_as_link_text=args.title,
        index_first_line_as_directory_link_text=args.dir_title,
    )
    if args.dir_without_index_behavior is not None:
        behavior = DirectoryWithoutIndexBehavior.from_str(args.dir_without_index_behavior)
        if behavior is not None:
            config.directory_without_index_behavior = behavior

    if args.dir_index_names is not None:
        names = [name for name in args.dir_index_names.split(",") if name]
        if not names:
            print("Directory index names must not be empty.", file=sys.stderr)
            return None
        config.generated_directory_index_name = names[0]
        config.directory_index_names = set(names)
    return config


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = make_parser().parse_args(argv)
    preprocessor = AutoGenSummary()

    if args.command == "supports":
        return handle_supports(preprocessor, args.renderer)

    if args.command == "gen":
        config = _config_from_args(args)
        if config is None:
            return 1
        gen_summary(Path(args.dir), config)
        return 0

    try:
        handle_preprocessing(preprocessor)
    except (ValueError, KeyError, OSError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())