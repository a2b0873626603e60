"""Pydantic schemas for API request/response validation."""
from songcatalog.schemas.artist import ArtistResponse
from songcatalog.schemas.song import (
    SongCreate,
    SongUpdate,
    SongDetail,
    SongResponse,
    VersesResponse,
)
from songcatalog.schemas.common import MessageResponse, ErrorResponse

__all__ = [
    "ArtistResponse",
    "SongCreate",
    "SongUpdate",
    "SongDetail",
    "SongResponse",
    "VersesResponse",
    "MessageResponse",
    "ErrorResponse",
]
