from __future__ import annotations

import argparse
import sys
from typing import Iterable, TextIO

from .argdoc import describe_commands, describe_options, usage_line
from .features import FeatureDescription


def escape_troff(text: str) -> str:
    """Escape text so troff prints it literally."""

    text = text.replace("\\", "\\e").replace("-", "\\-")
    lines = []
    for line in text.splitlines() or [""]:
        if line.startswith((".", "'")):
            line = "\\&" + line
        lines.append(line)
    return "\n".join(lines)


def _quote(text: str) -> str:
    return '"' + escape_troff(text).replace('"', "\\(dq") + '"'


def write_man_page(
    about_text: str,
    parser: argparse.ArgumentParser,
    features: Iterable[FeatureDescription],
    stream: TextIO,
) -> None:
    """Write a -mandoc man page for the program described by ``parser``."""

    prog = parser.prog
    lines = [
        f".TH {_quote(prog.upper())} 1 \"\" {_quote(about_text)} \"User Commands\"",
        ".SH NAME",
        f"{escape_troff(prog)} \\- {escape_troff(about_text)}",
        ".SH SYNOPSIS",
        ".nf",
        escape_troff(usage_line(parser)),
        ".fi",
    ]

    if parser.description:
        lines.extend([".SH DESCRIPTION", escape_troff(parser.description)])

    commands = describe_commands(parser)
    if commands:
        lines.append(".SH COMMANDS")
        for command in commands:
            lines.extend([".TP", f".B {escape_troff(command.name)}", escape_troff(command.help or command.usage)])
            if command.options:
                lines.append(".RS")
                for option in command.options:
                    lines.extend([".TP", f".B {escape_troff(option.label)}", escape_troff(option.help)])
                lines.append(".RE")

    options = describe_options(parser)
    if options:
        lines.append(".SH OPTIONS")
        for option in options:
            lines.extend([".TP", f".B {escape_troff(option.label)}", escape_troff(option.help)])

    features = list(features)
    if features:
        lines.append(".SH FEATURES")
        for feature in features:
            lines.extend([".TP", f".B {escape_troff(feature.name)}", f"Anchor: {escape_troff(feature.key)}"])

    lines.extend([".SH SEE ALSO", ".BR groff (1)"])

    stream.write("\n".join(lines))
    stream.write("\n")


def print_man_page(
    about_text: str,
    parser: argparse.ArgumentParser,
    features: Iterable[FeatureDescription],
    stream: TextIO = sys.stdout,
) -> None:
    write_man_page(about_text, parser, features, stream)


__all__ = ["escape_troff", "print_man_page", "write_man_page"]
