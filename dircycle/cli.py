"""Command-line front door for dircycle.

Parses CLI options into explicit cycle settings, then lists a directory's
ordered files or steps from a current file to its neighbour.
"""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import replace
from pathlib import Path

from .config import load_close_previous, load_filter_pattern, load_order_name
from .cycler import CycleSettings, DirectoryCycler
from .editor import EditorHost
from .ordering import predicate_by_name, predicate_names


def _regex(value: str) -> str:
    """argparse type for file-name regular expressions."""
    try:
        re.compile(value)
    except re.error as exc:
        raise argparse.ArgumentTypeError(f"invalid regular expression {value!r}: {exc}") from exc
    return value


def _order_name(value: str) -> str:
    """argparse type for predicate names."""
    try:
        predicate_by_name(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return value.strip().lower()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dircycle",
        description="Step through the files of a directory ordered by modification time or another order.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Current file (or a directory with --list). Defaults to the current directory.",
    )
    parser.add_argument("--dir", dest="directory", default=None, help="Directory to cycle through.")
    parser.add_argument(
        "--filter",
        type=_regex,
        default=None,
        help="Only consider file names matching this regular expression.",
    )
    parser.add_argument(
        "--order",
        type=_order_name,
        default=None,
        help=f"File order ({', '.join(predicate_names())}). Default: older.",
    )
    step = parser.add_mutually_exclusive_group()
    step.add_argument("--step", type=int, default=None, help="Signed number of files to step (default: 1).")
    step.add_argument("--next", dest="step", action="store_const", const=1, help="Step to the next file.")
    step.add_argument("--prev", dest="step", action="store_const", const=-1, help="Step to the previous file.")
    parser.add_argument("--list", action="store_true", help="Print the ordered files and exit.")
    parser.add_argument("--edit", action="store_true", help="Open the target file in $EDITOR.")
    return parser


def settings_from_args(args: argparse.Namespace) -> CycleSettings:
    """Merge command-line options over config defaults."""
    order = args.order if args.order is not None else load_order_name()
    return CycleSettings(
        directory=Path(args.directory) if args.directory is not None else None,
        filter=args.filter if args.filter is not None else load_filter_pattern(),
        predicate=predicate_by_name(order),
        close_previous=load_close_previous(),
    )


def _list_directory(args: argparse.Namespace, default_path: Path) -> Path:
    if args.directory is not None:
        return Path(args.directory)
    path = Path(args.path) if args.path is not None else default_path
    return path if path.is_dir() else path.absolute().parent


def main(argv: list[str] | None = None, default_path: Path | None = None) -> int:
    """Parse CLI arguments and run one listing or cycling request.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Returns the process exit status.
    """
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    if default_path is None:
        default_path = Path.cwd()

    if args.list:
        directory = _list_directory(args, default_path)
        cycler = DirectoryCycler(replace(settings, directory=directory))
        for path in cycler.files():
            sys.stdout.write(f"{path}\n")
        return 0

    if args.path is None:
        raise SystemExit("A current file is required unless --list is given.")
    current = Path(args.path)
    if not current.exists():
        raise SystemExit(f"Path not found: {current}")

    cycler = DirectoryCycler(settings)
    increment = args.step if args.step is not None else 1

    if args.edit:
        host = EditorHost(current)
        target = cycler.cycle(host, increment)
        if host.error is not None:
            raise SystemExit(host.error)
    else:
        target = cycler.peek(current, increment)

    if target is None:
        sys.stderr.write(f"No file {increment:+d} from {current}\n")
        return 1
    sys.stdout.write(f"{target}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
