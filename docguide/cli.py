from __future__ import annotations

import argparse
import io
import logging
import shlex
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from docguide.config import GuideConfig
from docguide.features import FeatureDescription, iter_features
from docguide.features.manifest import load_manifest
from docguide.guide import GuideOverrides, TemplateRenderError, build_user_guide, render_user_guide
from docguide.manpage import print_man_page
from docguide.vimdoc import print_vimdoc

# Ensure the built-in feature descriptions are registered
from docguide.features import builtin as _builtin_features  # noqa: F401

DEFAULT_ABOUT = "docguide"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docguide",
        description=(
            "Combine feature descriptions, a man page and a plain-text help "
            "reference into one HTML page."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details, including suppressed generation failures.",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    _register_guide(subparsers)
    _register_man(subparsers)
    _register_vimdoc(subparsers)
    _register_preview(subparsers)

    return parser


def parse_args(argv: List[str]) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: List[str]) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


def cli() -> None:
    """Entry point for the console script."""

    raise SystemExit(main(sys.argv[1:]))


# ---- Shared arguments ------------------------------------------------------------
def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-a",
        "--about",
        default=DEFAULT_ABOUT,
        help="Name of the documented program, used in titles (default: %(default)s).",
    )
    parser.add_argument(
        "-f",
        "--features",
        type=Path,
        help="JSON manifest of feature descriptions. Defaults to docguide's own commands.",
    )


def _add_generation_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--man-page-html",
        type=Path,
        help="Pre-rendered man page HTML to use instead of running the formatter.",
    )
    parser.add_argument(
        "--vimdoc-html",
        type=Path,
        help="Pre-rendered help reference HTML to use instead of generating it.",
    )
    parser.add_argument(
        "--formatter",
        help="Command that converts troff from stdin to HTML (default: groff -t -mandoc -Thtml).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds to wait for the formatter before giving up (default: no limit).",
    )


def _register_guide(subparsers) -> None:
    parser = subparsers.add_parser("guide", help="Write the HTML guide.")
    _add_source_arguments(parser)
    _add_generation_arguments(parser)
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Destination HTML file. Defaults to printing to stdout.",
    )
    parser.set_defaults(func=_run_guide_command)


def _register_man(subparsers) -> None:
    parser = subparsers.add_parser("man", help="Print the troff man page.")
    _add_source_arguments(parser)
    parser.set_defaults(func=_run_man_command)


def _register_vimdoc(subparsers) -> None:
    parser = subparsers.add_parser("vimdoc", help="Print the plain-text help reference.")
    _add_source_arguments(parser)
    parser.set_defaults(func=_run_vimdoc_command)


def _register_preview(subparsers) -> None:
    parser = subparsers.add_parser("preview", help="Browse the guide sections in a terminal UI.")
    _add_source_arguments(parser)
    _add_generation_arguments(parser)
    parser.set_defaults(func=_run_preview_command)


# ---- Helpers ---------------------------------------------------------------------
def _load_features(args) -> Tuple[FeatureDescription, ...]:
    if args.features is None:
        return tuple(iter_features())
    return load_manifest(args.features).iter()


def _read_fragment(path: Optional[Path]) -> str:
    if path is None:
        return ""
    if not path.is_file():
        raise FileNotFoundError(f"HTML fragment not found: {path}")
    return path.read_text(encoding="utf-8")


def _prepare(args):
    features = _load_features(args)
    overrides = GuideOverrides(
        man_page_html=_read_fragment(args.man_page_html),
        vimdoc_html=_read_fragment(args.vimdoc_html),
    )
    command = shlex.split(args.formatter) if args.formatter else None
    config = GuideConfig.from_env().with_overrides(command=command, timeout=args.timeout)
    return build_user_guide(
        args.about,
        build_parser(),
        features=features,
        overrides=overrides,
        config=config,
    )


# ---- Commands --------------------------------------------------------------------
def _run_guide_command(args) -> int:
    try:
        content = _prepare(args)
    except (FileNotFoundError, ValueError) as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    buffer = io.StringIO()
    try:
        render_user_guide(content, buffer)
    except TemplateRenderError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    if args.output is None:
        sys.stdout.write(buffer.getvalue())
        return 0

    try:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(buffer.getvalue(), encoding="utf-8")
    except OSError as exc:
        sys.stderr.write(f"Could not write {args.output}: {exc}\n")
        return 1
    print(f"Wrote guide to {args.output}")
    return 0


def _run_man_command(args) -> int:
    try:
        features = _load_features(args)
    except (FileNotFoundError, ValueError) as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    print_man_page(args.about, build_parser(), features, stream=sys.stdout)
    return 0


def _run_vimdoc_command(args) -> int:
    try:
        features = _load_features(args)
    except (FileNotFoundError, ValueError) as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    print_vimdoc(args.about, build_parser(), features, stream=sys.stdout)
    return 0


def _run_preview_command(args) -> int:
    from docguide.tui import launch_preview

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        sys.stderr.write("docguide preview requires an interactive terminal.\n")
        return 1

    try:
        content = _prepare(args)
    except (FileNotFoundError, ValueError) as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    try:
        launch_preview(content)
    except RuntimeError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    cli()
