"""Pytest fixtures for song catalog tests."""
import os

# Settings are read on import; point them at test values first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["MUSIC_API_URL"] = "http://music-api.test"

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from songcatalog.main import app
from songcatalog.database import Base, get_db
from songcatalog.dependencies import get_music_info_client
from songcatalog.models.artist import Artist
from songcatalog.models.song import Song
from songcatalog.schemas.song import SongDetail
from songcatalog.utils.normalize import normalize_name

# In-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

SUPERMASSIVE_LYRICS = (
    "Ooh baby, don't you know I suffer?\n"
    "Ooh baby, can you hear me moan?\n"
    "You caught me under false pretenses\n"
    "How long before you let me go?\n"
    "\n"
    "Ooh\n"
    "You set my soul alight\n"
    "Ooh\n"
    "You set my soul alight"
)


class FakeMusicInfoClient:
    """Stands in for MusicInfoClient; records calls, returns a fixed detail."""

    def __init__(self):
        self.detail = SongDetail(
            release_date=date(2006, 7, 16),
            text=SUPERMASSIVE_LYRICS,
            link="https://www.youtube.com/watch?v=Xsp3_a-PMTw",
        )
        self.error = None
        self.calls = []

    async def fetch_song_detail(self, group, song):
        self.calls.append((group, song))
        if self.error:
            raise self.error
        return self.detail


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def music_info():
    """Fake music info API client."""
    return FakeMusicInfoClient()


@pytest.fixture(scope="function")
def client(db, music_info):
    """Create a test client with the test database and fake music info API."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_music_info_client] = lambda: music_info
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_artist(db, name):
    artist = Artist(name=name, normalized_name=normalize_name(name))
    db.add(artist)
    db.commit()
    db.refresh(artist)
    return artist


def make_song(db, artist, title, release_date=None, lyrics="", link=""):
    song = Song(
        artist_id=artist.id,
        title=title,
        release_date=release_date,
        lyrics=lyrics,
        link=link,
    )
    db.add(song)
    db.commit()
    db.refresh(song)
    return song


@pytest.fixture
def test_artist(db):
    """Create a test artist."""
    return make_artist(db, "Muse")


@pytest.fixture
def test_song(db, test_artist):
    """Create a test song."""
    return make_song(
        db,
        test_artist,
        "Supermassive Black Hole",
        release_date=date(2006, 7, 16),
        lyrics=SUPERMASSIVE_LYRICS,
        link="https://www.youtube.com/watch?v=Xsp3_a-PMTw",
    )


@pytest.fixture
def sample_catalog(db):
    """Create two artists with a handful of songs."""
    muse = make_artist(db, "Muse")
    radiohead = make_artist(db, "Radiohead")

    songs = [
        make_song(db, muse, "Supermassive Black Hole", date(2006, 7, 16),
                  SUPERMASSIVE_LYRICS, "https://www.youtube.com/watch?v=Xsp3_a-PMTw"),
        make_song(db, muse, "Starlight", date(2006, 9, 4),
                  "Far away\nThis ship is taking me far away", "https://example.com/starlight"),
        make_song(db, radiohead, "Karma Police", date(1997, 8, 25),
                  "Karma police\nArrest this man", "https://example.com/karma-police"),
        make_song(db, radiohead, "No Surprises", date(1998, 1, 12),
                  "A heart that's full up like a landfill", "https://example.com/no-surprises"),
        make_song(db, radiohead, "100% Pure", date(2001, 6, 4), "", "https://example.com/pure"),
    ]

    return {"muse": muse, "radiohead": radiohead, "songs": songs}
