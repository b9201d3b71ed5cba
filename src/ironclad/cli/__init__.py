"""CLI – command registry, handlers and the ``ironclad`` entry point."""
from ironclad.cli.commands import build_registry
from ironclad.cli.main import main
from ironclad.cli.registry import Command, CommandContext, CommandRegistry, Option

__all__ = ["Command", "CommandContext", "CommandRegistry", "Option", "build_registry", "main"]
