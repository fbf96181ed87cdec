"""Cat Schemas — response contracts for the cats endpoints.

Invariants:
    - Field names match the store columns verbatim (id, name, image_path)
    - ErrorResponse mirrors CatApiError.to_response()
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CatResponse(BaseModel):
    """A single cat record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    image_path: str


class ErrorBody(BaseModel):
    code: str
    message: str
    category: str
    severity: str
    timestamp: str | None = None
    details: dict[str, Any] | list[Any] | None = None


class ErrorResponse(BaseModel):
    """Error envelope returned for every non-2xx response."""
    error: ErrorBody
