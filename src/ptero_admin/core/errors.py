"""
ptero-admin - Error Envelope Decoder

Turns a failed panel response into a typed exception. The panel reports
failures as::

    {"errors": [{"code": "ValidationException", "status": "422",
                 "detail": "The name field is required.",
                 "source": {"field": "name"}}]}

Bodies that do not match (HTML error pages, plain text, empty bodies) fall
back to HTTPStatusError with the raw bytes attached.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import HTTPStatusError, PanelAPIError, PanelClientError
from .models import PanelModel


class PanelErrorItem(PanelModel):
    """A single entry of the panel error envelope.

    Only ``code`` and ``detail`` are interpreted; every other key is kept
    as the panel sent it.
    """

    model_config = ConfigDict(extra="allow")

    code: str
    detail: str = ""
    status: Any = None
    source: Any = None

    @field_validator("detail", mode="before")
    @classmethod
    def detail_as_text(cls, v):
        return v if isinstance(v, str) else str(v)


class ErrorEnvelope(BaseModel):
    """Panel error envelope."""

    errors: list[PanelErrorItem]


def decode_error(status_code: int, body: bytes) -> PanelClientError:
    """Classify a non-2xx response.

    Never raises: anything that is not a well-formed envelope with at least
    one coded error degrades to HTTPStatusError.

    Args:
        status_code: HTTP status returned by the panel
        body: Raw response body

    Returns:
        PanelAPIError for a decodable envelope, HTTPStatusError otherwise
    """
    if body:
        try:
            envelope = ErrorEnvelope.model_validate_json(body)
        except (PydanticValidationError, ValueError):
            envelope = None

        if envelope and envelope.errors and envelope.errors[0].code:
            first = envelope.errors[0]
            return PanelAPIError(
                status_code=status_code,
                code=first.code,
                detail=first.detail,
                errors=[item.model_dump(exclude_none=True) for item in envelope.errors],
            )

    return HTTPStatusError(status_code, body)
