# music_manager/shell.py
import logging
from typing import Callable, Dict, Optional

from pymonad.either import Either
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from toolz import pipe

from music_manager.domain.errors import ErrorKind, MusicError
from music_manager.domain.models import PlaylistLibrary
from music_manager.i18n import get_message, is_affirmative

logger = logging.getLogger(__name__)

EXIT_CHOICE = "0"


class MusicShell:
    """
    Interactive menu loop over a PlaylistLibrary.

    The shell owns every prompt and all rendering; the library only sees
    validated, non-empty names.
    """

    def __init__(self, library: PlaylistLibrary, console: Optional[Console] = None):
        self.library = library
        self.console = console or Console()
        self._handlers: Dict[str, Callable[[], None]] = {
            "1": self.handle_create,
            "2": self.handle_add_song,
            "3": self.handle_play,
            "4": self.handle_list,
        }

    def run(self) -> None:
        """Runs the menu until the exit choice or end of input."""
        try:
            while self._step():
                pass
        except EOFError:
            logger.info("End of input reached, leaving the menu.")

        self.console.clear()
        self.console.print(f"  {get_message('goodbye')}")

    def _step(self) -> bool:
        self._screen()
        self._show_menu()
        choice = self._prompt(get_message("menu_choice"))
        logger.info(f"Menu choice: '{choice}'")

        if choice == EXIT_CHOICE:
            return False

        handler = self._handlers.get(choice)
        if handler is None:
            self._warning(get_message("invalid_choice"))
        else:
            handler()
        self._pause()
        return True

    # --- Menu handlers ---

    def handle_create(self) -> None:
        self._screen(get_message("section_create"))

        name = self._prompt(get_message("prompt_playlist_name"))
        if not name:
            self._warning(get_message("name_empty"))
            return

        pipe(
            self.library.create(name),
            lambda e: e.map(lambda _: get_message("playlist_created", name=name)),
            self._render,
        )

    def handle_add_song(self) -> None:
        self._screen(get_message("section_add_song"))
        self._show_playlists()
        self.console.print()

        playlist = self._prompt(get_message("prompt_playlist_name"))
        song = self._prompt(get_message("prompt_song_name"))
        if not playlist or not song:
            self._warning(get_message("fields_empty"))
            return

        pipe(
            self.library.add_song(playlist, song),
            lambda e: e.map(lambda _: get_message("song_added", song=song, playlist=playlist)),
            self._render,
        )

    def handle_play(self) -> None:
        self._screen(get_message("section_play"))
        self._show_playlists()
        self.console.print()

        playlist = self._prompt(get_message("prompt_playlist_name"))
        song = self._prompt(get_message("prompt_song_name"))
        online = is_affirmative(self._prompt(get_message("prompt_online")))
        if not playlist or not song:
            self._warning(get_message("fields_empty"))
            return

        result = self._render(self.library.play(playlist, song, online))
        if not self._is_offline(result):
            return

        # One explicit retry with the online flag forced on.
        if is_affirmative(self._prompt(get_message("prompt_retry"))):
            logger.info(f"Retrying playback of '{song}' from '{playlist}' online.")
            self._render(self.library.play(playlist, song, True))

    def handle_list(self) -> None:
        self._screen(get_message("section_list"))
        self._show_playlists()

    # --- Rendering helpers ---

    def _screen(self, section: Optional[str] = None) -> None:
        self.console.clear()
        self.console.print(
            Panel(f"  {get_message('app_title')}  ", box=box.DOUBLE, expand=False)
        )
        self.console.print()
        if section:
            self.console.print(f"  {section}\n")

    def _show_menu(self) -> None:
        entries = [
            get_message(key)
            for key in ("menu_create", "menu_add_song", "menu_play", "menu_list", "menu_exit")
        ]
        self.console.print(
            Panel("\n".join(escape(entry) for entry in entries), box=box.SQUARE, expand=False)
        )

    def _show_playlists(self) -> None:
        self.console.print()
        playlists = self.library.playlists()
        if not playlists:
            self.console.print(f"  {get_message('no_playlists')}")
            return

        for playlist in playlists:
            self.console.print(f"  📁  {escape(playlist.name)}", emoji=False)
            if not playlist.songs:
                self.console.print(f"       {get_message('no_songs')}")
                continue
            for index, song in enumerate(playlist.songs, start=1):
                self.console.print(f"       {index}. {escape(song)}", emoji=False)

    def _render(self, result: Either[MusicError, str]) -> Either[MusicError, str]:
        result.either(self._error, self._success)
        return result

    def _success(self, message: str) -> None:
        self.console.print(f"\n  ✅  {escape(message)}", style="bold green", emoji=False)

    def _error(self, error: MusicError) -> None:
        self.console.print(f"\n  ❌  {escape(error.message)}", style="bold red", emoji=False)

    def _warning(self, message: str) -> None:
        self.console.print(f"\n  ⚠️   {escape(message)}", style="yellow", emoji=False)

    def _prompt(self, label: str) -> str:
        return self.console.input(f"  {escape(label)} ").strip()

    def _pause(self) -> None:
        self.console.print()
        self._prompt(get_message("prompt_continue"))

    @staticmethod
    def _is_offline(result: Either[MusicError, str]) -> bool:
        if result.is_right():
            return False
        error, _ = result.monoid
        return error.kind is ErrorKind.OFFLINE
