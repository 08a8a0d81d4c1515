"""Output formatting utilities for devtimer."""

from rich.markup import escape

from devtimer.utils.ui.console import get_console

console = get_console(highlight=False)


def format_message(message: str) -> None:
    """Display a command's result line."""
    console.print(message, markup=False, soft_wrap=True)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)
