"""Text normalization utilities."""
import re
import unicodedata


def normalize_name(name: str) -> str:
    """
    Normalize an artist name for case-insensitive matching.

    - Normalize unicode
    - Lowercase
    - Collapse whitespace

    Punctuation is kept: "AC/DC" and "ACDC" are different artists.
    """
    if not name:
        return ""

    name = unicodedata.normalize("NFKC", name)
    name = name.casefold()
    return re.sub(r"\s+", " ", name).strip()
