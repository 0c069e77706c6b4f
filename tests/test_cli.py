import logging

from typer.testing import CliRunner

from music_manager.cli import app

runner = CliRunner()


def test_cli_full_session():
    """Creates a playlist, adds a song, plays it offline then retries online."""
    session = "\n".join(
        [
            "1", "Road Trip", "",
            "2", "Road Trip", "Sunny Day", "",
            "3", "Road Trip", "Sunny Day", "n", "y", "",
            "0",
        ]
    )

    result = runner.invoke(app, [], input=session + "\n")

    assert result.exit_code == 0, result.stdout
    assert "Playlist 'Road Trip' created!" in result.stdout
    assert "'Sunny Day' added to 'Road Trip'!" in result.stdout
    assert "No internet connection, try again." in result.stdout
    assert "Now playing: 'Sunny Day'" in result.stdout
    assert "Goodbye!" in result.stdout


def test_cli_danish_language():
    result = runner.invoke(app, ["--lang", "da"], input="4\n\n0\n")

    assert result.exit_code == 0, result.stdout
    assert "(ingen afspilningslister endnu)" in result.stdout
    assert "Farvel!" in result.stdout


def test_cli_exits_cleanly_without_input():
    result = runner.invoke(app, [], input="")

    assert result.exit_code == 0, result.stdout
    assert "Goodbye!" in result.stdout


def test_cli_verbose_enables_info_logging(mocker):
    setup_logger = mocker.patch("music_manager.cli.setup_logger")
    mocker.patch("music_manager.cli.MusicShell")

    result = runner.invoke(app, ["--verbose"])

    assert result.exit_code == 0
    setup_logger.assert_called_once_with(logging.INFO)


def test_cli_builds_a_fresh_library_per_run(mocker):
    shell_class = mocker.patch("music_manager.cli.MusicShell")

    runner.invoke(app, [])
    runner.invoke(app, [])

    first_library = shell_class.call_args_list[0].args[0]
    second_library = shell_class.call_args_list[1].args[0]
    assert first_library is not second_library
    assert shell_class.return_value.run.call_count == 2
