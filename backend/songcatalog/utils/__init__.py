"""Utility functions."""
from songcatalog.utils.lyrics import split_verses, paginate_verses
from songcatalog.utils.normalize import normalize_name
from songcatalog.utils.pagination import Page, resolve_page

__all__ = [
    "split_verses",
    "paginate_verses",
    "normalize_name",
    "Page",
    "resolve_page",
]
