"""Subcommands of the cabinetry CLI that live outside ``main``."""

from cabinetry.cli.commands.validate import load_or_exit, validate_command

__all__ = ["load_or_exit", "validate_command"]
