"""Music info API integration for song enrichment.

The API exposes a single endpoint:

    GET {MUSIC_API_URL}/info?group=<artist>&song=<title>

which answers with ``{"releaseDate": "16.07.2006", "text": "...", "link": "..."}``.
"""
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from songcatalog.config import Settings, get_settings
from songcatalog.schemas.song import SongDetail

logger = logging.getLogger(__name__)


class MusicInfoError(Exception):
    """Music info lookup failed."""
    pass


class MusicInfoConfigError(MusicInfoError):
    """Music info API URL is not configured."""
    pass


class MusicInfoNetworkError(MusicInfoError):
    """Request could not be sent or the connection failed."""
    pass


class MusicInfoStatusError(MusicInfoError):
    """Music info API answered with a non-200 status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Music info API returned status {status_code}")


class MusicInfoDecodeError(MusicInfoError):
    """Response body does not have the expected shape."""
    pass


class MusicInfoClient:
    """Music info API client."""

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self.base_url = settings.music_api_url.rstrip("/") if settings.music_api_url else ""
        self.timeout = settings.music_api_timeout

    async def fetch_song_detail(self, group: str, song: str) -> SongDetail:
        """Fetch release date, lyrics and link for a song.

        Args:
            group: Artist name
            song: Song title

        Raises:
            MusicInfoConfigError: MUSIC_API_URL is empty
            MusicInfoNetworkError: transport failure or timeout
            MusicInfoStatusError: status other than 200
            MusicInfoDecodeError: body is not a song detail object
        """
        if not self.base_url:
            raise MusicInfoConfigError("MUSIC_API_URL is not configured")

        url = f"{self.base_url}/info"
        logger.debug(f"Requesting song detail: {url} group={group!r} song={song!r}")

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.get(url, params={"group": group, "song": song})
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise MusicInfoNetworkError(f"Music info request failed: {e}") from e

        if response.status_code != 200:
            raise MusicInfoStatusError(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise MusicInfoDecodeError(f"Music info response is not JSON: {e}") from e

        if not isinstance(data, dict):
            raise MusicInfoDecodeError("Music info response is not an object")

        try:
            detail = SongDetail.model_validate(data)
        except ValidationError as e:
            raise MusicInfoDecodeError(f"Unexpected music info response: {e}") from e

        logger.info(f"Fetched song detail for {group} - {song}")
        return detail
