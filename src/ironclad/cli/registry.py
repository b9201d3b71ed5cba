"""CLI – explicit command registry and argparse wiring."""
from __future__ import annotations

import argparse
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import IO, Any, NoReturn

from ironclad.config import IroncladSettings
from ironclad.kernel.errors import UsageError

__all__ = [
    "Command",
    "CommandContext",
    "CommandRegistry",
    "Handler",
    "Option",
    "PROG",
    "global_parser",
]

PROG = "ironclad"


@dataclass(frozen=True)
class CommandContext:
    """Everything a handler needs; handlers never reach for globals."""

    settings: IroncladSettings
    registry: CommandRegistry
    stdout: IO[str]
    stderr: IO[str]

    def out(self, message: str) -> None:
        print(message, file=self.stdout)

    def err(self, message: str) -> None:
        print(message, file=self.stderr)


Handler = Callable[[argparse.Namespace, CommandContext], int]


@dataclass(frozen=True)
class Option:
    """One ``add_argument`` call; ``flags`` without a leading dash are positional."""

    flags: tuple[str, ...]
    help: str
    metavar: str | None = None
    kwargs: Mapping[str, Any] = field(default_factory=dict)

    @property
    def positional(self) -> bool:
        return not self.flags[0].startswith("-")

    def usage(self) -> str:
        label = ", ".join(self.flags)
        return f"{label} <{self.metavar}>" if self.metavar else label

    def add_to(self, parser: argparse.ArgumentParser) -> None:
        kwargs = dict(self.kwargs)
        if self.metavar and not self.positional:
            kwargs.setdefault("metavar", f"<{self.metavar}>")
        parser.add_argument(*self.flags, help=self.help, **kwargs)


@dataclass(frozen=True)
class Command:
    name: str
    description: str
    handler: Handler
    options: tuple[Option, ...] = ()


class _ArgumentParser(argparse.ArgumentParser):
    """Raises :class:`UsageError` instead of exiting on bad arguments."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def global_parser(options: tuple[Option, ...]) -> argparse.ArgumentParser:
    """Parser for the options accepted before the command name."""
    parser = _ArgumentParser(prog=PROG, add_help=False, allow_abbrev=False)
    for option in options:
        option.add_to(parser)
    return parser


class CommandRegistry:
    """Name -> :class:`Command`, built once at startup and passed explicitly."""

    def __init__(self, commands: list[Command] | None = None) -> None:
        self._commands: dict[str, Command] = {}
        for command in commands or []:
            self.register(command)

    def register(self, command: Command) -> Command:
        if command.name in self._commands:
            raise ValueError(f"Command '{command.name}' is already registered")
        self._commands[command.name] = command
        return command

    def get(self, name: str) -> Command | None:
        return self._commands.get(name)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def build_parser(self, global_options: tuple[Option, ...] = ()) -> argparse.ArgumentParser:
        parser = global_parser(global_options)
        subparsers = parser.add_subparsers(dest="command", parser_class=_ArgumentParser)
        for command in self:
            sub = subparsers.add_parser(command.name, help=command.description, description=command.description)
            for option in command.options:
                option.add_to(sub)
        return parser

    def help_text(self) -> str:
        lines = [f"Usage: {PROG} <command> [options] [arguments]", "", "Available Commands:"]
        for command in self:
            lines.append(f"  {command.name:<16} {command.description}")
            for option in command.options:
                if not option.positional:
                    lines.append(f"    {option.usage():<32} {option.help}")
        return "\n".join(lines)
