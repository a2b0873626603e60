"""Business logic services."""
from songcatalog.services.library import SongLibrary, SongFilters
from songcatalog.services.catalog import SongService

__all__ = [
    "SongLibrary",
    "SongFilters",
    "SongService",
]
