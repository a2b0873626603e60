"""Song catalog endpoints."""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from pydantic import ValidationError as PydanticValidationError

from songcatalog.config import Settings, get_settings
from songcatalog.dependencies import get_song_service
from songcatalog.exceptions import ValidationError, describe_errors
from songcatalog.schemas.common import ErrorResponse, MessageResponse
from songcatalog.schemas.song import SongCreate, SongResponse, SongUpdate, VersesResponse
from songcatalog.services.catalog import SongService
from songcatalog.services.library import SongFilters
from songcatalog.utils.pagination import resolve_page

router = APIRouter(prefix="/songs")

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Song not found"}}


def parse_date_filter(value: Optional[str]) -> Optional[date]:
    """Parse a YYYY-MM-DD query value."""
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise ValidationError("releaseDate must be in YYYY-MM-DD format")


@router.get(
    "",
    response_model=List[SongResponse],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def list_songs(
    group: Optional[str] = Query(None, description="Artist name fragment (case-insensitive)"),
    song: Optional[str] = Query(None, description="Song title fragment (case-insensitive)"),
    release_date: Optional[str] = Query(None, alias="releaseDate", description="Release date, YYYY-MM-DD"),
    text: Optional[str] = Query(None, description="Lyrics fragment"),
    link: Optional[str] = Query(None, description="Link fragment"),
    page: Optional[str] = Query(None, description="Page number (default 1)"),
    page_size: Optional[str] = Query(None, alias="pageSize", description="Page size (default 10)"),
    service: SongService = Depends(get_song_service),
    settings: Settings = Depends(get_settings),
):
    """List songs with optional filters and pagination."""
    filters = SongFilters(
        group=group,
        song=song,
        release_date=parse_date_filter(release_date),
        text=text,
        link=link,
    )
    songs = service.list_songs(
        filters,
        resolve_page(page, page_size, settings.default_page_size, settings.max_page_size),
    )
    return [SongResponse.from_song(s) for s in songs]


@router.get("/{song_id}", response_model=SongResponse, responses=NOT_FOUND)
def get_song(
    song_id: int,
    service: SongService = Depends(get_song_service),
):
    """Get a single song with its artist."""
    return SongResponse.from_song(service.get_song(song_id))


@router.get("/{song_id}/text", response_model=VersesResponse, responses=NOT_FOUND)
def get_song_text(
    song_id: int,
    page: Optional[str] = Query(None, description="Page number (default 1)"),
    page_size: Optional[str] = Query(None, alias="pageSize", description="Verses per page (default 5)"),
    service: SongService = Depends(get_song_service),
    settings: Settings = Depends(get_settings),
):
    """Get a song's lyrics split into verses, one page at a time."""
    requested = resolve_page(page, page_size, settings.default_verses_page_size)
    verses, total = service.get_verses(song_id, requested)
    return VersesResponse(
        verses=verses,
        page=requested.number,
        page_size=requested.size,
        total=total,
    )


@router.post(
    "",
    response_model=SongResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def add_song(
    data: SongCreate,
    service: SongService = Depends(get_song_service),
):
    """Add a song. Release date, lyrics and link come from the music info API."""
    song = await service.create_song(data)
    return SongResponse.from_song(song)


@router.patch(
    "/{song_id}",
    response_model=SongResponse,
    responses={
        **NOT_FOUND,
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": SongUpdate.model_json_schema(by_alias=True)}},
        },
    },
)
async def patch_song(
    song_id: int,
    request: Request,
    service: SongService = Depends(get_song_service),
):
    """Update the supplied fields of a song. A new group renames the artist.

    The song is looked up before the body is read, so a missing song is a
    404 whatever the body holds.
    """
    service.get_song(song_id)

    try:
        payload = await request.json()
    except ValueError:
        raise ValidationError("Request body must be valid JSON")
    try:
        data = SongUpdate.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(describe_errors(e.errors()))

    return SongResponse.from_song(service.update_song(song_id, data))


@router.delete("/{song_id}", response_model=MessageResponse, responses=NOT_FOUND)
def delete_song(
    song_id: int,
    service: SongService = Depends(get_song_service),
):
    """Delete a song."""
    service.delete_song(song_id)
    return {"message": "Song deleted"}
