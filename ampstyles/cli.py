"""CLI entry point for AmpStyles.

Two commands: ``build`` compiles once, ``watch`` builds and then rebuilds
on every source change.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import LOG_LEVEL, MINIFY, OUTPUT_DIR, SOURCE_DIR


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ampstyles",
        description="Compile SCSS into site.css and an AMP-safe amp.css.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"AmpStyles {__version__}",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--src", "-s", type=Path, default=SOURCE_DIR, help="SCSS source directory")
    common.add_argument("--out", "-o", type=Path, default=OUTPUT_DIR, help="Output directory")
    common.add_argument(
        "--minify",
        action=argparse.BooleanOptionalAction,
        default=MINIFY,
        help="Minify output CSS",
    )
    common.add_argument("--verbose", action="store_true", help="Log every pipeline stage")

    sub = parser.add_subparsers(dest="cmd", required=True)
    sub.add_parser("build", parents=[common], help="Build stylesheets once")
    sub.add_parser("watch", parents=[common], help="Build, then rebuild on change")

    args = parser.parse_args(argv)

    from .log import configure_logging

    configure_logging("DEBUG" if args.verbose else LOG_LEVEL)

    if args.cmd == "build":
        return _cmd_build(args)
    if args.cmd == "watch":
        return _cmd_watch(args)

    parser.print_help()
    return 2


def _config(args: Any):
    from .models import BuildConfig

    return BuildConfig(source_dir=args.src, output_dir=args.out, minify=bool(args.minify))


def _cmd_build(args: Any) -> int:
    from .build.pipeline import build_styles
    from .errors import BuildError

    try:
        report = build_styles(_config(args))
    except BuildError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Stylesheets built")
    for out in report.outputs:
        status = "written" if out.changed else "unchanged"
        print(f"  {out.path}  {out.size / 1024:.1f} KB  ({status})")
    print(f"  Time: {report.duration_ms:.0f} ms")
    return 0


def _cmd_watch(args: Any) -> int:
    from .watch import watch

    if not args.src.is_dir():
        print(f"Error: source directory not found: {args.src}", file=sys.stderr)
        return 2

    watch(_config(args))
    return 0


if __name__ == "__main__":
    app()
