"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Uniform ``{status, msg, data}`` envelope.

    ``status`` repeats the HTTP status code; ``data`` is null on failure.
    """

    status: int
    msg: str
    data: T | None = None


def error_body(status_code: int, msg: str) -> dict:
    """Envelope content for a failed request."""
    return {"status": status_code, "msg": msg, "data": None}
