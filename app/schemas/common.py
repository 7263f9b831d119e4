"""Shared schema bases and small response bodies."""

from datetime import datetime, timezone
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for API bodies: camelCase on the wire, snake_case in Python; accepts either on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(CamelModel):
    """
    Base for PUT bodies where every field is optional.

    Only fields present in the request are applied. An explicit null is ignored
    unless the field is listed in NULLABLE_FIELDS (e.g. clearing expiresAt).
    """

    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict[str, Any]:
        """Return the supplied fields as a {column: value} dict."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key in self.NULLABLE_FIELDS
        }


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., description="Human-readable error message")


class SuccessResponse(BaseModel):
    """Acknowledgement for logout, delete and password change."""

    success: bool = True
    message: str | None = Field(default=None, description="Optional detail")


class FallbackNotice(BaseModel):
    """Returned by public list endpoints when nothing is stored; the frontend then uses its built-in data."""

    success: bool = True
    message: str


def ensure_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC so they compare with timezone-aware ones."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
