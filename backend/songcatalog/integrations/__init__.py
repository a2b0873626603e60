"""External service integrations."""
from songcatalog.integrations.music_info import (
    MusicInfoClient,
    MusicInfoError,
    MusicInfoConfigError,
    MusicInfoNetworkError,
    MusicInfoStatusError,
    MusicInfoDecodeError,
)

__all__ = [
    "MusicInfoClient",
    "MusicInfoError",
    "MusicInfoConfigError",
    "MusicInfoNetworkError",
    "MusicInfoStatusError",
    "MusicInfoDecodeError",
]
