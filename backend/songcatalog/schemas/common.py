"""Common schema patterns."""
from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Simple message response."""
    message: str


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""
    error: str
