"""Tests for the music info API client."""
from datetime import date
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from songcatalog.config import Settings
from songcatalog.integrations.music_info import (
    MusicInfoClient,
    MusicInfoConfigError,
    MusicInfoDecodeError,
    MusicInfoNetworkError,
    MusicInfoStatusError,
)

INFO_RESPONSE = {
    "releaseDate": "16.07.2006",
    "text": "Ooh baby, don't you know I suffer?\n\nOoh\nYou set my soul alight",
    "link": "https://www.youtube.com/watch?v=Xsp3_a-PMTw",
}


def make_client(url="http://music-api.test/"):
    return MusicInfoClient(Settings(database_url="sqlite://", music_api_url=url))


def mock_get(**kwargs):
    return patch.object(httpx.AsyncClient, "get", new=AsyncMock(**kwargs))


@pytest.mark.asyncio
async def test_fetch_song_detail():
    """Successful lookup parses release date, text and link."""
    with mock_get(return_value=httpx.Response(200, json=INFO_RESPONSE)) as get:
        detail = await make_client().fetch_song_detail("Muse", "Supermassive Black Hole")

    get.assert_awaited_once_with(
        "http://music-api.test/info",
        params={"group": "Muse", "song": "Supermassive Black Hole"},
    )
    assert detail.release_date == date(2006, 7, 16)
    assert detail.text == INFO_RESPONSE["text"]
    assert detail.link == INFO_RESPONSE["link"]


@pytest.mark.asyncio
async def test_fetch_song_detail_iso_date():
    """ISO release dates are accepted too."""
    body = dict(INFO_RESPONSE, releaseDate="2006-07-16")
    with mock_get(return_value=httpx.Response(200, json=body)):
        detail = await make_client().fetch_song_detail("Muse", "Supermassive Black Hole")

    assert detail.release_date == date(2006, 7, 16)


@pytest.mark.asyncio
async def test_null_text_and_link_become_empty():
    body = {"releaseDate": None, "text": None, "link": None}
    with mock_get(return_value=httpx.Response(200, json=body)):
        detail = await make_client().fetch_song_detail("Muse", "Starlight")

    assert detail.release_date is None
    assert detail.text == ""
    assert detail.link == ""


@pytest.mark.asyncio
async def test_missing_base_url():
    """No URL configured fails before any request."""
    with mock_get() as get:
        with pytest.raises(MusicInfoConfigError):
            await make_client(url="").fetch_song_detail("Muse", "Starlight")

    get.assert_not_awaited()


@pytest.mark.asyncio
async def test_connection_error():
    """Transport failures become network errors."""
    with mock_get(side_effect=httpx.ConnectError("Connection refused")):
        with pytest.raises(MusicInfoNetworkError):
            await make_client().fetch_song_detail("Muse", "Starlight")


@pytest.mark.asyncio
async def test_timeout():
    """Timeouts are network errors."""
    with mock_get(side_effect=httpx.ReadTimeout("timed out")):
        with pytest.raises(MusicInfoNetworkError):
            await make_client().fetch_song_detail("Muse", "Starlight")


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 404, 500, 503])
async def test_non_200_status(status_code):
    """Any status other than 200 is an upstream failure."""
    with mock_get(return_value=httpx.Response(status_code, json={"error": "nope"})):
        with pytest.raises(MusicInfoStatusError) as exc_info:
            await make_client().fetch_song_detail("Muse", "Starlight")

    assert exc_info.value.status_code == status_code


@pytest.mark.asyncio
async def test_body_not_json():
    with mock_get(return_value=httpx.Response(200, content=b"<html>oops</html>")):
        with pytest.raises(MusicInfoDecodeError):
            await make_client().fetch_song_detail("Muse", "Starlight")


@pytest.mark.asyncio
async def test_body_not_object():
    with mock_get(return_value=httpx.Response(200, json=["not", "an", "object"])):
        with pytest.raises(MusicInfoDecodeError):
            await make_client().fetch_song_detail("Muse", "Starlight")


@pytest.mark.asyncio
async def test_unparsable_release_date():
    body = dict(INFO_RESPONSE, releaseDate="sometime in 2006")
    with mock_get(return_value=httpx.Response(200, json=body)):
        with pytest.raises(MusicInfoDecodeError):
            await make_client().fetch_song_detail("Muse", "Starlight")
