import logging
from typing import Optional

import typer
from rich.console import Console

from music_manager.domain.models import PlaylistLibrary
from music_manager.i18n import get_lang, get_message, set_lang
from music_manager.logger_config import setup_logger
from music_manager.shell import MusicShell

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="music-manager",
    help="An interactive terminal tool to manage playlists.",
    add_completion=False,
)


@app.command()
def main(
    lang: Optional[str] = typer.Option(
        None,
        "--lang",
        help=get_message("help_lang"),
        show_default=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=get_message("help_verbose")),
):
    """Starts the interactive playlist manager."""
    setup_logger(logging.INFO if verbose else logging.WARNING)

    if lang:
        set_lang(lang)
        logger.info(f"Language explicitly set to: {get_lang()}")

    shell = MusicShell(PlaylistLibrary(), Console())
    shell.run()


if __name__ == "__main__":
    app()
