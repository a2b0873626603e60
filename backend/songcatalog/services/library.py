"""Song library: database access for songs and artists."""
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from songcatalog.exceptions import ConflictError, NotFoundError, StoreError
from songcatalog.models.artist import Artist
from songcatalog.models.song import Song
from songcatalog.utils.normalize import normalize_name
from songcatalog.utils.pagination import Page

logger = logging.getLogger(__name__)

# Song attributes a partial update may change directly
SONG_FIELDS = ("title", "release_date", "lyrics", "link")

# Integer primary keys are 32-bit signed on PostgreSQL
MAX_ID = 2**31 - 1


@dataclass
class SongFilters:
    """Optional song list filters. Text filters match substrings, case-insensitively."""
    group: Optional[str] = None
    song: Optional[str] = None
    release_date: Optional[date] = None
    text: Optional[str] = None
    link: Optional[str] = None


def contains_pattern(value: str) -> str:
    """LIKE pattern matching ``value`` literally anywhere in a string."""
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SongLibrary:
    """Reads and writes songs and artists in the catalog database."""

    def __init__(self, db: Session):
        self.db = db

    def _filtered_query(self, filters: SongFilters):
        query = self.db.query(Song)

        if filters.group:
            query = query.join(Artist, Song.artist_id == Artist.id).filter(
                Artist.name.ilike(contains_pattern(filters.group), escape="\\")
            )
            logger.debug(f"Filtering by group: {filters.group}")

        if filters.song:
            query = query.filter(Song.title.ilike(contains_pattern(filters.song), escape="\\"))
            logger.debug(f"Filtering by song: {filters.song}")

        if filters.release_date:
            query = query.filter(Song.release_date == filters.release_date)
            logger.debug(f"Filtering by release date: {filters.release_date}")

        if filters.text:
            query = query.filter(Song.lyrics.ilike(contains_pattern(filters.text), escape="\\"))
            logger.debug(f"Filtering by text: {filters.text}")

        if filters.link:
            query = query.filter(Song.link.ilike(contains_pattern(filters.link), escape="\\"))
            logger.debug(f"Filtering by link: {filters.link}")

        return query

    def list_songs(self, filters: SongFilters, page: Page) -> List[Song]:
        """List songs matching filters, one page at a time, ordered by ID."""
        logger.debug(f"Pagination - page: {page.number}, size: {page.size}, offset: {page.offset}")
        try:
            return (
                self._filtered_query(filters)
                .options(joinedload(Song.artist))
                .order_by(Song.id)
                .offset(page.offset)
                .limit(page.size)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to list songs: {e}")
            raise StoreError("Failed to list songs") from e

    def count_songs(self, filters: SongFilters) -> int:
        """Count songs matching filters."""
        try:
            return self._filtered_query(filters).count()
        except SQLAlchemyError as e:
            logger.error(f"Failed to count songs: {e}")
            raise StoreError("Failed to count songs") from e

    def get_song(self, song_id: int) -> Song:
        """Get a single song with its artist."""
        if not 1 <= song_id <= MAX_ID:
            raise NotFoundError("Song not found")
        song = (
            self.db.query(Song)
            .options(joinedload(Song.artist))
            .filter(Song.id == song_id)
            .first()
        )
        if song is None:
            raise NotFoundError("Song not found")
        return song

    def create_song(self, song: Song) -> Song:
        """Insert a new song."""
        self.db.add(song)
        self._commit(f"create song {song.title!r}")
        self.db.refresh(song)
        logger.info(f"Created song {song.id}: {song.title}")
        return song

    def update_song(self, song_id: int, changes: Dict[str, Any]) -> Song:
        """Apply a partial update to a song.

        An ``artist_name`` change renames the song's artist row itself, so
        every song by that artist shows the new name.
        """
        song = self.get_song(song_id)

        if "artist_name" in changes:
            artist = self.db.query(Artist).filter(Artist.id == song.artist_id).first()
            if artist is None:
                raise NotFoundError("Artist not found")
            logger.info(f"Renaming artist {artist.id}: {artist.name} -> {changes['artist_name']}")
            artist.name = changes["artist_name"]
            artist.normalized_name = normalize_name(changes["artist_name"])

        for field in SONG_FIELDS:
            if field in changes:
                setattr(song, field, changes[field])

        try:
            self._commit(f"update song {song_id}")
        except ConflictError as e:
            # Rename collisions surface as store failures
            raise StoreError("Failed to update song") from e
        self.db.refresh(song)
        logger.info(f"Updated song {song_id}")
        return song

    def delete_song(self, song_id: int) -> None:
        """Delete a song by ID."""
        if not 1 <= song_id <= MAX_ID:
            raise NotFoundError("Song not found")
        song = self.db.query(Song).filter(Song.id == song_id).first()
        if song is None:
            raise NotFoundError("Song not found")

        self.db.delete(song)
        self._commit(f"delete song {song_id}")
        logger.info(f"Deleted song {song_id}")

    def find_artist(self, name: str) -> Optional[Artist]:
        """Find an artist by name, ignoring case."""
        return (
            self.db.query(Artist)
            .filter(Artist.normalized_name == normalize_name(name))
            .first()
        )

    def find_or_create_artist(self, name: str) -> Artist:
        """Find an artist by name or create it.

        Two requests can create the same artist concurrently; the unique
        index on normalized_name rejects the second insert, which then
        re-reads the row the first one committed.
        """
        artist = self.find_artist(name)
        if artist:
            logger.info(f"Found existing artist {artist.id}: {artist.name}")
            return artist

        artist = Artist(name=name, normalized_name=normalize_name(name))
        self.db.add(artist)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            existing = self.find_artist(name)
            if existing:
                logger.info(f"Artist created concurrently, reusing {existing.id}: {existing.name}")
                return existing
            logger.error(f"Failed to create artist {name!r}: {e}")
            raise ConflictError("Artist already exists") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create artist {name!r}: {e}")
            raise StoreError("Failed to save artist") from e

        self.db.refresh(artist)
        logger.info(f"Created artist {artist.id}: {artist.name}")
        return artist

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Constraint violation during {action}: {e}")
            raise ConflictError("Record conflicts with an existing one") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error during {action}: {e}")
            raise StoreError("Database error") from e
