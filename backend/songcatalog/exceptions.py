"""Error taxonomy shared by the service layer and the HTTP handlers.

Every error carries a client-safe ``message`` and the HTTP status it maps to.
Internal details (SQL errors, upstream bodies) are logged where the error is
raised and never placed in ``message``.
"""


class CatalogError(Exception):
    """Base class for song catalog errors."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(CatalogError):
    """Malformed or missing request input."""

    status_code = 400


class NotFoundError(CatalogError):
    """Requested entity does not exist."""

    status_code = 404


class ConflictError(CatalogError):
    """Write rejected by a uniqueness constraint."""

    status_code = 409


class UpstreamError(CatalogError):
    """External music info API failed or was unreachable."""

    status_code = 500


class StoreError(CatalogError):
    """Database operation failed."""

    status_code = 500


def describe_errors(errors) -> str:
    """One-line summary of the first pydantic error, e.g. ``song: String should have at least 1 character``."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else first.get("msg", "Invalid request")
