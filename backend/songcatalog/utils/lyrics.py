"""Lyrics text utilities."""
import re
from typing import List

# A blank line: two line breaks with only horizontal whitespace between them
_VERSE_SEPARATOR = re.compile(r"\n[ \t]*\n")


def split_verses(text: str) -> List[str]:
    """
    Split lyrics into verses.

    - Verses are separated by blank lines
    - Each verse is trimmed
    - Empty verses (runs of blank lines) are dropped
    """
    if not text:
        return []

    text = text.replace("\r\n", "\n").replace("\r", "\n")

    verses = []
    for chunk in _VERSE_SEPARATOR.split(text):
        verse = chunk.strip()
        if verse:
            verses.append(verse)
    return verses


def paginate_verses(verses: List[str], page: int, page_size: int) -> List[str]:
    """Return the verses of a 1-based page, or an empty list past the end."""
    start = (page - 1) * page_size
    if start >= len(verses):
        return []
    return verses[start:min(len(verses), start + page_size)]
