"""FastAPI dependencies for the song service."""
from fastapi import Depends
from sqlalchemy.orm import Session

from songcatalog.config import Settings, get_settings
from songcatalog.database import get_db
from songcatalog.integrations.music_info import MusicInfoClient
from songcatalog.services.catalog import SongService
from songcatalog.services.library import SongLibrary


def get_music_info_client(settings: Settings = Depends(get_settings)) -> MusicInfoClient:
    """Music info API client built from settings."""
    return MusicInfoClient(settings)


def get_song_service(
    db: Session = Depends(get_db),
    music_info: MusicInfoClient = Depends(get_music_info_client),
) -> SongService:
    """Song service bound to the request's database session."""
    return SongService(SongLibrary(db), music_info)
