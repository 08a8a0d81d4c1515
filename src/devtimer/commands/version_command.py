"""Command 'version' of devtimer"""

from devtimer import __version__
from devtimer.utils.ui.console import get_console

console = get_console(highlight=False)


def version() -> None:
    """Show version information"""
    console.print(__version__)
