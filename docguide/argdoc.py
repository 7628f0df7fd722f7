from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class OptionDoc:
    label: str
    help: str


@dataclass(frozen=True)
class CommandDoc:
    name: str
    help: str
    usage: str
    options: Tuple[OptionDoc, ...]


def usage_line(parser: argparse.ArgumentParser) -> str:
    """Return the parser's usage without the leading ``usage:`` label."""

    usage = " ".join(parser.format_usage().split())
    prefix = "usage:"
    if usage.lower().startswith(prefix):
        usage = usage[len(prefix):].strip()
    return usage


def _expand_help(action: argparse.Action, prog: str) -> str:
    text = action.help or ""
    if "%(" not in text:
        return text
    params = dict(vars(action), prog=prog)
    try:
        return text % params
    except (KeyError, TypeError, ValueError):
        return text


def _label(action: argparse.Action) -> str:
    if not action.option_strings:
        metavar = action.metavar or action.dest
        return metavar if isinstance(metavar, str) else " ".join(metavar)
    label = ", ".join(action.option_strings)
    if action.nargs != 0:
        metavar = action.metavar or action.dest.upper()
        if not isinstance(metavar, str):
            metavar = " ".join(metavar)
        label = f"{label} {metavar}"
    return label


def describe_options(parser: argparse.ArgumentParser) -> List[OptionDoc]:
    """Options and positionals of ``parser``, skipping help and sub-commands."""

    options: List[OptionDoc] = []
    for action in parser._actions:
        if isinstance(action, (argparse._HelpAction, argparse._SubParsersAction)):
            continue
        if action.help == argparse.SUPPRESS:
            continue
        options.append(OptionDoc(label=_label(action), help=_expand_help(action, parser.prog)))
    return options


def describe_commands(parser: argparse.ArgumentParser) -> List[CommandDoc]:
    commands: List[CommandDoc] = []
    for action in parser._actions:
        if not isinstance(action, argparse._SubParsersAction):
            continue
        help_by_name = {choice.dest: choice.help or "" for choice in action._choices_actions}
        for name, subparser in action.choices.items():
            if name not in help_by_name:
                # aliases share the parser of the command they name
                continue
            commands.append(
                CommandDoc(
                    name=name,
                    help=help_by_name[name],
                    usage=usage_line(subparser),
                    options=tuple(describe_options(subparser)),
                )
            )
    return commands


__all__ = ["CommandDoc", "OptionDoc", "describe_commands", "describe_options", "usage_line"]
