# music_manager/domain/errors.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from music_manager.i18n import get_message


class ErrorKind(Enum):
    """Flat taxonomy of playlist failures. Values are i18n message keys."""
    PLAYLIST_ALREADY_EXISTS = "playlist_already_exists"
    PLAYLIST_NOT_FOUND = "playlist_not_found"
    SONG_ALREADY_IN_PLAYLIST = "song_already_in_playlist"
    SONG_NOT_FOUND = "song_not_found"
    EMPTY_PLAYLIST = "empty_playlist"
    OFFLINE = "offline"
    # Reserved for a future user feature, never produced.
    INVALID_USER = "invalid_user"


@dataclass(frozen=True)
class MusicError:
    """A failed playlist operation, naming the offending playlist or song."""
    kind: ErrorKind
    subject: Optional[str] = None

    @property
    def message(self) -> str:
        return get_message(self.kind.value, name=self.subject)

    def __str__(self) -> str:
        return self.message
