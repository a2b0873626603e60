"""Offset pagination parameters."""
from dataclasses import dataclass
from typing import Optional, Union

# Largest OFFSET/LIMIT value every supported database accepts (32-bit signed)
MAX_OFFSET = 2**31 - 1


@dataclass(frozen=True)
class Page:
    """A 1-based page request."""
    number: int
    size: int

    @property
    def offset(self) -> int:
        return (self.number - 1) * self.size


def _positive_int(value: Union[str, int, None]) -> Optional[int]:
    if value is None:
        return None
    try:
        number = int(str(value).strip())
    except ValueError:
        return None
    return number if number >= 1 else None


def resolve_page(
    page: Union[str, int, None],
    page_size: Union[str, int, None],
    default_size: int,
    max_size: Optional[int] = None,
) -> Page:
    """Build a Page from raw query values.

    Missing, unparsable and non-positive values fall back to page 1 and
    ``default_size``. When ``max_size`` is given, larger sizes are clamped to
    it. Page numbers are capped so the offset never exceeds ``MAX_OFFSET``;
    any page that far out is past the end of the data and reads as empty.
    """
    size = _positive_int(page_size) or default_size
    if max_size is not None:
        size = min(size, max_size)
    size = min(size, MAX_OFFSET)
    number = min(_positive_int(page) or 1, MAX_OFFSET // size + 1)
    return Page(number=number, size=size)
