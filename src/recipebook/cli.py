"""recipebook command-line entry point."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from . import __version__
from .console import InteractiveConsole
from .dispatcher import CommandDispatcher
from .logger import configure_logging, get_logger
from .profile import Profile
from .recipe_list import RecipeList
from .results import Err, Ok
from .storage import RecipeStorage
from .ui import UI

logger = get_logger("cli")

APP_NAME = "Recipe Book"

app = typer.Typer(
    help=f"{APP_NAME} - manage your recipes from the terminal",
    epilog="Type 'help' inside the session for the list of commands.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()


@app.command()
def run(
    file: Annotated[Optional[Path], typer.Option("--file", "-f", help="Save file to use instead of the profile's")] = None,
    profile: Annotated[Optional[str], typer.Option("--profile", help="Profile name (default: RECIPEBOOK_PROFILE or 'default')")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
    ] = False,
):
    """Start an interactive recipe book session."""
    active_profile = Profile(profile)
    configure_logging("DEBUG" if verbose else "ERROR", active_profile)

    storage = RecipeStorage(file or active_profile.save_file)
    ui = UI()
    logger.info(f"Starting session with {active_profile} and save file {storage.path}")

    match storage.load():
        case Ok(recipes):
            pass
        case Err(error):
            ui.show_error("Error loading saved recipes", error)
            ui.console.print("[yellow]Starting with an empty recipe list.[/yellow]")
            recipes = RecipeList()

    dispatcher = CommandDispatcher(recipes, storage, ui)
    InteractiveConsole(dispatcher).run()


def main():
    """Entry point for the recipebook CLI."""
    app()


if __name__ == "__main__":
    main()
