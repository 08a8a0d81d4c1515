"""Main entry point for devtimer."""

import typer

from devtimer import __version__
from devtimer.commands import timer, version_command
from devtimer.utils.typer_helpers import SuggestingGroup
from devtimer.utils.ui.console import get_console

app = typer.Typer(
    name="devtimer",
    cls=SuggestingGroup,
    help="Track time spent coding on a project",
    no_args_is_help=True,
    add_completion=False,
)

console = get_console(highlight=False)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"devtimer {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Print version information and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Track time spent coding on a project."""


app.command("start")(timer.start_timer)
app.command("break")(timer.break_timer)
app.command("back")(timer.back_timer)
app.command("stop")(timer.stop_timer)
app.command("spent")(timer.spent_timer)
app.command("version")(version_command.version)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
