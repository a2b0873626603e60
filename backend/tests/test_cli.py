"""Tests for CLI commands."""
import pytest
from unittest.mock import patch
from typer.testing import CliRunner

from songcatalog.cli.main import app
from songcatalog.models.song import Song

runner = CliRunner()


@pytest.fixture
def cli_db(db):
    """Point CLI commands at the test database."""
    with patch("songcatalog.cli.songs.get_db_session", return_value=db):
        yield db


def test_version():
    """Test version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "Song Catalog" in result.stdout


def test_status():
    result = runner.invoke(app, ["status"])
    assert result.exit_code == 0
    assert "Database" in result.stdout


def test_songs_list(cli_db, sample_catalog):
    result = runner.invoke(app, ["songs", "list", "--group", "radiohead"])
    assert result.exit_code == 0
    assert "Total: 3" in result.stdout
    assert "Radiohead" in result.stdout


def test_songs_list_bad_date(cli_db):
    result = runner.invoke(app, ["songs", "list", "--release-date", "yesterday"])
    assert result.exit_code != 0


def test_songs_show(cli_db, test_song):
    result = runner.invoke(app, ["songs", "show", str(test_song.id)])
    assert result.exit_code == 0
    assert "Muse" in result.stdout
    assert "2006-07-16" in result.stdout


def test_songs_show_not_found(cli_db):
    result = runner.invoke(app, ["songs", "show", "999"])
    assert result.exit_code == 1
    assert "Song not found" in result.stdout


def test_songs_lyrics(cli_db, test_song):
    result = runner.invoke(app, ["songs", "lyrics", str(test_song.id), "--page-size", "1", "--page", "2"])
    assert result.exit_code == 0
    assert "You set my soul alight" in result.stdout
    assert "suffer" not in result.stdout


def test_songs_delete(cli_db, test_song):
    result = runner.invoke(app, ["songs", "delete", str(test_song.id), "--force"])
    assert result.exit_code == 0
    assert cli_db.query(Song).count() == 0


def test_songs_add_requires_names(cli_db):
    result = runner.invoke(app, ["songs", "add", " ", "Starlight"])
    assert result.exit_code == 1


def test_songs_add_requires_args():
    result = runner.invoke(app, ["songs", "add"])
    assert result.exit_code != 0
