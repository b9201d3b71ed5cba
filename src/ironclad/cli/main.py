"""CLI – ``ironclad`` entry point."""
from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import IO

from ironclad.cli.commands import build_registry
from ironclad.cli.registry import CommandContext, CommandRegistry, Option, global_parser
from ironclad.config import DotenvSettingsLoader, EnvSettingsLoader, IroncladSettings
from ironclad.kernel.errors import IroncladError
from ironclad.observability.logging import configure_logging, get_logger

__all__ = ["GLOBAL_OPTIONS", "main"]

_log = get_logger(__name__)

GLOBAL_OPTIONS: tuple[Option, ...] = (
    Option(("--log-level",), "Logging level (default: WARNING)", "level"),
    Option(("--log-format",), "Log output format (console, json)", "format", {"choices": ["console", "json"]}),
    Option(("--env-file",), "Load IRONCLAD_* settings from a .env file", "path"),
)
_HELP_FLAGS = frozenset({"-h", "--help"})


def _load_settings(env_file: str | None) -> IroncladSettings:
    loader = DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
    return loader.load(IroncladSettings)


def main(
    argv: Sequence[str] | None = None,
    *,
    registry: CommandRegistry | None = None,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
) -> int:
    """Run one command and return its exit code.

    0 on success, 1 on a reported error, 2 for an unknown command. Global
    options go before the command name; `-h` or `--help` in place of a command
    prints the help text.
    """
    args_list = list(argv) if argv is not None else sys.argv[1:]
    registry = registry or build_registry()
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        globals_, rest = global_parser(GLOBAL_OPTIONS).parse_known_args(args_list)
        settings = _load_settings(globals_.env_file)
    except IroncladError as exc:
        print(f"Error: {exc.message}", file=stderr)
        return 1

    configure_logging(
        globals_.log_level or settings.log_level,
        globals_.log_format or settings.log_format,
        stream=stderr,
    )
    ctx = CommandContext(settings=settings, registry=registry, stdout=stdout, stderr=stderr)

    name = rest[0] if rest else None
    if name in _HELP_FLAGS:
        ctx.out(registry.help_text())
        return 0
    command = registry.get(name) if name else None
    if command is None:
        if name:
            print(f"Unknown command: {name}", file=stderr)
        ctx.out(registry.help_text())
        return 2 if name else 0

    try:
        args = registry.build_parser(GLOBAL_OPTIONS).parse_args(args_list)
        return command.handler(args, ctx)
    except IroncladError as exc:
        _log.debug("cli.command_failed", command=command.name, code=exc.code)
        print(f"Error: {exc.message}", file=stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
