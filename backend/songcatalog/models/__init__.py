"""SQLAlchemy models for the song catalog."""
from songcatalog.models.artist import Artist
from songcatalog.models.song import Song

__all__ = [
    "Artist",
    "Song",
]
