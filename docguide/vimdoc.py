from __future__ import annotations

import argparse
import sys
import textwrap
from typing import Iterable, List, TextIO

from .argdoc import describe_commands, describe_options
from .features import FeatureDescription

WIDTH = 78
RULE = "=" * WIDTH


def _tagged(title: str, tag: str) -> str:
    """Right-align a ``*tag*`` on the same line as ``title``."""

    target = f"*{tag}*"
    gap = max(WIDTH - len(title) - len(target), 1)
    return f"{title}{' ' * gap}{target}"


def _wrap(text: str, indent: int) -> List[str]:
    if not text:
        return []
    prefix = " " * indent
    return textwrap.wrap(text, width=WIDTH, initial_indent=prefix, subsequent_indent=prefix)


def write_vimdoc(
    about_text: str,
    parser: argparse.ArgumentParser,
    features: Iterable[FeatureDescription],
    stream: TextIO,
) -> None:
    """Write a Vim help file documenting the program described by ``parser``."""

    prog = parser.prog
    commands = describe_commands(parser)
    options = describe_options(parser)
    features = list(features)

    sections = [("Commands", "commands"), ("Options", "options"), ("Features", "features")]

    lines: List[str] = [f"*{prog}.txt*\t{about_text}", "", RULE, _tagged("CONTENTS", f"{prog}-contents"), ""]
    for number, (title, tag) in enumerate(sections, start=1):
        entry = f"    {number}. {title} "
        link = f" |{prog}-{tag}|"
        lines.append(entry + "." * max(WIDTH - len(entry) - len(link), 1) + link)
    lines.append("")

    lines.extend([RULE, _tagged("1. Commands", f"{prog}-commands"), ""])
    for command in commands:
        lines.append(_tagged(command.name, f"{prog}-{command.name}"))
        lines.extend(_wrap(command.help, 4))
        lines.extend(_wrap(f"Usage: {command.usage}", 4))
        for option in command.options:
            lines.append(f"        {option.label}")
            lines.extend(_wrap(option.help, 12))
        lines.append("")

    lines.extend([RULE, _tagged("2. Options", f"{prog}-options"), ""])
    for option in options:
        lines.append(f"    {option.label}")
        lines.extend(_wrap(option.help, 8))
    lines.append("")

    lines.extend([RULE, _tagged("3. Features", f"{prog}-features"), ""])
    for feature in features:
        lines.append(_tagged(feature.name, f"{prog}-feature-{feature.key}"))
    lines.append("")

    lines.append(" vim:tw=78:ts=8:ft=help:norl:")

    stream.write("\n".join(lines))
    stream.write("\n")


def print_vimdoc(
    about_text: str,
    parser: argparse.ArgumentParser,
    features: Iterable[FeatureDescription],
    stream: TextIO = sys.stdout,
) -> None:
    write_vimdoc(about_text, parser, features, stream)


__all__ = ["print_vimdoc", "write_vimdoc"]
