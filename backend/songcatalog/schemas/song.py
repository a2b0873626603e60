"""Song schemas."""
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from songcatalog.schemas.artist import ArtistResponse

# Formats the music info API has been seen to use for releaseDate
RELEASE_DATE_FORMATS = ("%Y-%m-%d", "%d.%m.%Y")


def parse_release_date(value: Any) -> Any:
    """Parse a release date string in any known format.

    Non-string values and unrecognised strings are returned unchanged so
    pydantic reports the validation error.
    """
    if not isinstance(value, str):
        return value
    value = value.strip()
    if not value:
        return None
    for fmt in RELEASE_DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    return value


class SongCreate(BaseModel):
    """New song request. Everything else is fetched from the music info API."""
    model_config = ConfigDict(str_strip_whitespace=True)

    group: str = Field(..., min_length=1, max_length=255)
    song: str = Field(..., min_length=1, max_length=255)


class SongUpdate(BaseModel):
    """Partial song update. Omitted or null fields are left untouched."""
    model_config = ConfigDict(populate_by_name=True)

    group: Optional[str] = Field(None, min_length=1, max_length=255)
    song: Optional[str] = Field(None, min_length=1, max_length=255)
    release_date: Optional[date] = Field(None, alias="releaseDate")
    text: Optional[str] = None
    link: Optional[str] = Field(None, max_length=1000)

    @field_validator("group", "song", mode="before")
    @classmethod
    def strip_names(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("release_date", mode="before")
    @classmethod
    def parse_release_date_format(cls, value):
        return parse_release_date(value)

    def to_changes(self) -> Dict[str, Any]:
        """Supplied fields keyed by model attribute name."""
        supplied = self.model_dump(exclude_unset=True, exclude_none=True)
        names = {
            "group": "artist_name",
            "song": "title",
            "release_date": "release_date",
            "text": "lyrics",
            "link": "link",
        }
        return {names[key]: value for key, value in supplied.items()}


class SongDetail(BaseModel):
    """Song details returned by the music info API ``/info`` endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    release_date: Optional[date] = Field(None, alias="releaseDate")
    text: str = ""
    link: str = ""

    @field_validator("release_date", mode="before")
    @classmethod
    def parse_release_date_format(cls, value):
        return parse_release_date(value)

    @field_validator("text", "link", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value


class SongResponse(BaseModel):
    """Song with its artist."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    artist_id: int = Field(alias="artistId")
    artist: Optional[ArtistResponse] = None
    title: str = Field(alias="song")
    release_date: Optional[date] = Field(None, alias="releaseDate")
    lyrics: str = Field("", alias="text")
    link: str = ""
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    @classmethod
    def from_song(cls, song) -> "SongResponse":
        """Build a response from a Song ORM object."""
        return cls(
            id=song.id,
            artist_id=song.artist_id,
            artist=ArtistResponse.from_artist(song.artist) if song.artist else None,
            title=song.title,
            release_date=song.release_date,
            lyrics=song.lyrics or "",
            link=song.link or "",
            created_at=song.created_at,
            updated_at=song.updated_at,
        )


class VersesResponse(BaseModel):
    """One page of a song's verses."""
    model_config = ConfigDict(populate_by_name=True)

    verses: List[str]
    page: int
    page_size: int = Field(alias="pageSize")
    total: int
