"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from devtimer.services.session_machine import MSG_INVALID_COMMAND
from devtimer.utils.exit_codes import ERROR_INVALID_ARGS
from devtimer.utils.ui.console import get_console


class SuggestingGroup(TyperGroup):
    """Custom Typer group that reports unknown commands and suggests close matches."""

    def resolve_command(self, ctx, args):
        """Override to report unknown commands with a usage hint."""
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            # Option-like arguments keep the default usage error.
            if not args or args[0].startswith("-"):
                raise
            attempted = args[0]
            available_commands = list(self.commands.keys())

            # Find close matches (max 3 suggestions, cutoff 0.6 for similarity)
            suggestions = get_close_matches(
                attempted, available_commands, n=3, cutoff=0.6
            )

            console = get_console(highlight=False)
            console.print(MSG_INVALID_COMMAND, markup=False, soft_wrap=True)
            if suggestions:
                console.print()
                if len(suggestions) == 1:
                    console.print("[yellow]Did you mean this?[/yellow]")
                else:
                    console.print("[yellow]Did you mean one of these?[/yellow]")
                for suggestion in suggestions:
                    console.print(f"        {suggestion}")
            raise typer.Exit(ERROR_INVALID_ARGS) from e
