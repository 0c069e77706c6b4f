import io

import pytest
from rich.console import Console

from music_manager.domain.models import PlaylistLibrary
from music_manager.i18n import set_lang
from music_manager.shell import MusicShell


@pytest.fixture(autouse=True)
def english():
    """Every test starts from the English catalogue."""
    set_lang("en")
    yield
    set_lang("en")


@pytest.fixture
def library():
    return PlaylistLibrary()


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=100)


@pytest.fixture
def shell(library, console):
    return MusicShell(library, console)


@pytest.fixture
def user_input(mocker):
    """Feeds the given lines to every prompt, then signals end of input."""

    def feed(*lines):
        return mocker.patch("builtins.input", side_effect=[*lines, EOFError()])

    return feed
