"""Artist schemas."""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional


class ArtistResponse(BaseModel):
    """Artist response. The name is exposed as ``group``."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str = Field(alias="group")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    @classmethod
    def from_artist(cls, artist) -> "ArtistResponse":
        """Build a response from an Artist ORM object."""
        return cls(
            id=artist.id,
            name=artist.name,
            created_at=artist.created_at,
            updated_at=artist.updated_at,
        )
