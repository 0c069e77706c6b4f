# music_manager/i18n.py
import locale

MESSAGES = {
    "en": {
        "app_title": "🎵  Music Manager TUI  🎵",
        "menu_create": "[1]  Create playlist",
        "menu_add_song": "[2]  Add song to playlist",
        "menu_play": "[3]  Play song",
        "menu_list": "[4]  Show all playlists and songs",
        "menu_exit": "[0]  Exit",
        "menu_choice": "Choose:",
        "section_create": "── Create playlist ──",
        "section_add_song": "── Add song ──",
        "section_play": "── Play song ──",
        "section_list": "── All playlists ──",
        "prompt_playlist_name": "Playlist name:",
        "prompt_song_name": "Song name:",
        "prompt_online": "Are you online? (y/n):",
        "prompt_retry": "Try again? (y/n):",
        "prompt_continue": "Press Enter to continue...",
        "yes_token": "y",
        "name_empty": "Name must not be empty.",
        "fields_empty": "No fields may be empty.",
        "invalid_choice": "Invalid choice.",
        "goodbye": "Goodbye! 👋",
        "playlist_created": "Playlist '{name}' created!",
        "song_added": "'{song}' added to '{playlist}'!",
        "now_playing": "♪  Now playing: '{song}'  ♪",
        "no_playlists": "(no playlists yet)",
        "no_songs": "(no songs)",
        "help_lang": "Set the language for output messages (e.g., 'en' or 'da').",
        "help_verbose": "Log informational messages to stderr.",
        "playlist_already_exists": "Playlist '{name}' already exists.",
        "playlist_not_found": "Playlist '{name}' was not found.",
        "song_already_in_playlist": "The song '{name}' is already in the playlist.",
        "song_not_found": "The song '{name}' does not exist.",
        "empty_playlist": "Playlist '{name}' is empty.",
        "offline": "No internet connection, try again.",
        "invalid_user": "Invalid username.",
    },
    "da": {
        "app_title": "🎵  Musik Manager TUI  🎵",
        "menu_create": "[1]  Opret afspilningsliste",
        "menu_add_song": "[2]  Tilføj sang til liste",
        "menu_play": "[3]  Afspil sang",
        "menu_list": "[4]  Vis alle lister og sange",
        "menu_exit": "[0]  Afslut",
        "menu_choice": "Vælg:",
        "section_create": "── Opret afspilningsliste ──",
        "section_add_song": "── Tilføj sang ──",
        "section_play": "── Afspil sang ──",
        "section_list": "── Alle afspilningslister ──",
        "prompt_playlist_name": "Navn på afspilningsliste:",
        "prompt_song_name": "Sangnavn:",
        "prompt_online": "Er du online? (j/n):",
        "prompt_retry": "Prøv igen? (j/n):",
        "prompt_continue": "Tryk Enter for at fortsætte...",
        "yes_token": "j",
        "name_empty": "Navn må ikke være tomt.",
        "fields_empty": "Ingen felter må være tomme.",
        "invalid_choice": "Ugyldigt valg.",
        "goodbye": "Farvel! 👋",
        "playlist_created": "Playlist '{name}' oprettet!",
        "song_added": "'{song}' tilføjet til '{playlist}'!",
        "now_playing": "♪  Afspiller nu: '{song}'  ♪",
        "no_playlists": "(ingen afspilningslister endnu)",
        "no_songs": "(ingen sange)",
        "help_lang": "Sæt sproget for beskeder (f.eks. 'en' eller 'da').",
        "help_verbose": "Log informative beskeder til stderr.",
        "playlist_already_exists": "Playlist '{name}' eksisterer allerede.",
        "playlist_not_found": "Playlist '{name}' blev ikke fundet.",
        "song_already_in_playlist": "Sangen '{name}' er allerede på listen.",
        "song_not_found": "Sangen '{name}' findes ikke.",
        "empty_playlist": "Playlist '{name}' er tom.",
        "offline": "Ingen internetforbindelse, prøv igen.",
        "invalid_user": "Ugyldigt brugernavn.",
    },
}

DEFAULT_LANG = "en"

_current_lang = DEFAULT_LANG


def get_default_lang():
    try:
        lang_code, _ = locale.getlocale()
        return "da" if lang_code and lang_code.lower().startswith("da") else DEFAULT_LANG
    except (ValueError, TypeError):
        return DEFAULT_LANG


def set_lang(lang: str):
    global _current_lang
    _current_lang = lang if lang in MESSAGES else DEFAULT_LANG


def get_lang() -> str:
    return _current_lang


def get_message(key, **kwargs):
    lang = _current_lang
    if lang not in MESSAGES or key not in MESSAGES[lang]:
        # Fallback to English if key not found in current language
        lang = DEFAULT_LANG

    message_template = MESSAGES[lang].get(key, f"Translation missing for key: {key}")

    try:
        return message_template.format(**kwargs)
    except KeyError as e:
        # This can happen if a placeholder is missing in kwargs
        return f"Formatting error for key '{key}': missing placeholder {e}"


def is_affirmative(answer: str) -> bool:
    """True when the answer is the localized 'yes' token, case-insensitively."""
    return answer.strip().lower() == get_message("yes_token")


# Initialize with default system language
set_lang(get_default_lang())
