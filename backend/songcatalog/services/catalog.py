"""Song service: request-level orchestration over the song library."""
import logging
from typing import List, Tuple

from songcatalog.exceptions import UpstreamError
from songcatalog.integrations.music_info import MusicInfoClient, MusicInfoError
from songcatalog.models.song import Song
from songcatalog.schemas.song import SongCreate, SongUpdate
from songcatalog.services.library import SongFilters, SongLibrary
from songcatalog.utils.lyrics import paginate_verses, split_verses
from songcatalog.utils.pagination import Page

logger = logging.getLogger(__name__)


class SongService:
    """Lists, reads, creates, updates and deletes catalog songs."""

    def __init__(self, library: SongLibrary, music_info: MusicInfoClient):
        self.library = library
        self.music_info = music_info

    def list_songs(self, filters: SongFilters, page: Page) -> List[Song]:
        logger.info("Listing songs")
        return self.library.list_songs(filters, page)

    def get_song(self, song_id: int) -> Song:
        logger.info(f"Getting song {song_id}")
        return self.library.get_song(song_id)

    def get_verses(self, song_id: int, page: Page) -> Tuple[List[str], int]:
        """Return one page of a song's verses and the total verse count."""
        logger.info(f"Getting lyrics of song {song_id}")
        song = self.library.get_song(song_id)
        verses = split_verses(song.lyrics or "")
        return paginate_verses(verses, page.number, page.size), len(verses)

    def delete_song(self, song_id: int) -> None:
        logger.info(f"Deleting song {song_id}")
        self.library.delete_song(song_id)

    def update_song(self, song_id: int, update: SongUpdate) -> Song:
        changes = update.to_changes()
        logger.info(f"Updating song {song_id}")
        logger.debug(f"Update fields: {changes}")
        return self.library.update_song(song_id, changes)

    async def create_song(self, data: SongCreate) -> Song:
        """Create a song, filling in details from the music info API.

        The artist is reused when one with the same name (ignoring case)
        already exists.
        """
        logger.info(f"Adding song {data.group} - {data.song}")

        try:
            detail = await self.music_info.fetch_song_detail(data.group, data.song)
        except MusicInfoError as e:
            logger.error(f"Music info lookup failed for {data.group} - {data.song}: {e}")
            raise UpstreamError("Failed to fetch song details") from e
        logger.debug(f"Song detail: {detail}")

        artist = self.library.find_or_create_artist(data.group)

        song = Song(
            artist_id=artist.id,
            title=data.song,
            release_date=detail.release_date,
            lyrics=detail.text,
            link=detail.link,
        )
        return self.library.create_song(song)
