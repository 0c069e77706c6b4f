# music_manager/domain/models.py
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from pymonad.either import Either, Left, Right

from music_manager.domain.errors import ErrorKind, MusicError
from music_manager.i18n import get_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Playlist:
    """Read-only snapshot of a playlist."""
    name: str
    songs: Tuple[str, ...] = ()


class PlaylistLibrary:
    """
    In-memory collection mapping playlist names to their ordered songs.

    Every operation returns an Either: Right on success, Left(MusicError)
    on failure. A failed operation never changes the collection.
    """

    def __init__(self):
        self._playlists: Dict[str, List[str]] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._playlists

    def __len__(self) -> int:
        return len(self._playlists)

    def create(self, name: str) -> Either[MusicError, None]:
        """
        Creates an empty playlist.

        Returns:
            Either: Right(None), or Left(MusicError) if the name is taken.
        """
        if name in self._playlists:
            logger.warning(f"Playlist '{name}' already exists.")
            return Left(MusicError(ErrorKind.PLAYLIST_ALREADY_EXISTS, name))

        self._playlists[name] = []
        logger.info(f"Playlist '{name}' created.")
        return Right(None)

    def add_song(self, playlist_name: str, song_name: str) -> Either[MusicError, None]:
        """
        Appends a song to the end of a playlist.

        Returns:
            Either: Right(None), or Left(MusicError) if the playlist is
            missing or already holds the song.
        """
        songs = self._playlists.get(playlist_name)
        if songs is None:
            logger.warning(f"Cannot add '{song_name}': playlist '{playlist_name}' not found.")
            return Left(MusicError(ErrorKind.PLAYLIST_NOT_FOUND, playlist_name))

        if song_name in songs:
            logger.warning(f"Song '{song_name}' is already in playlist '{playlist_name}'.")
            return Left(MusicError(ErrorKind.SONG_ALREADY_IN_PLAYLIST, song_name))

        songs.append(song_name)
        logger.info(f"Song '{song_name}' added to playlist '{playlist_name}'.")
        return Right(None)

    def play(self, playlist_name: str, song_name: str, is_online: bool) -> Either[MusicError, str]:
        """
        Simulates playback of a song from a playlist.

        Checks run in a fixed order: playlist exists, playlist is not empty,
        song is in the playlist, then connectivity. The collection is never
        modified.

        Returns:
            Either: Right(now_playing_message) or Left(MusicError).
        """
        songs = self._playlists.get(playlist_name)
        if songs is None:
            return self._rejected(MusicError(ErrorKind.PLAYLIST_NOT_FOUND, playlist_name))

        if not songs:
            return self._rejected(MusicError(ErrorKind.EMPTY_PLAYLIST, playlist_name))

        if song_name not in songs:
            return self._rejected(MusicError(ErrorKind.SONG_NOT_FOUND, song_name))

        if not is_online:
            return self._rejected(MusicError(ErrorKind.OFFLINE))

        logger.info(f"Playing '{song_name}' from playlist '{playlist_name}'.")
        return Right(get_message("now_playing", song=song_name))

    def songs(self, playlist_name: str) -> Optional[Tuple[str, ...]]:
        songs = self._playlists.get(playlist_name)
        return tuple(songs) if songs is not None else None

    def playlists(self) -> List[Playlist]:
        return [Playlist(name=name, songs=tuple(songs)) for name, songs in self._playlists.items()]

    @staticmethod
    def _rejected(error: MusicError) -> Either[MusicError, str]:
        logger.warning(f"Playback rejected: {error.kind.name} ({error.subject})")
        return Left(error)
