"""
ptero-admin - Data Models

This module contains Pydantic models for configuration and the pagination
metadata shared by every list endpoint.
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Untyped wire fields (external ids, pack, allocation alias) carry a string,
# a number, or nothing at all.
LooseValue = Union[int, float, str, None]


class PanelConfig(BaseModel):
    """Configuration for a panel connection."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Panel base URL")
    api_key: str = Field(..., min_length=1, description="Application API key", repr=False)
    verify_ssl: bool = Field(default=True, description="Whether to verify SSL certificates")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v):
        """Validate URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        v = v.rstrip("/")
        if v in ("http:", "https:"):
            raise ValueError("URL must include a host")
        return v


class PanelModel(BaseModel):
    """Base for wire models: unknown keys ignored, absent keys become zero values."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # null decodes to the field's zero value, same as an omitted key
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Meta(PanelModel):
    """Pagination metadata attached to list responses.

    The panel nests the counters under ``meta.pagination``; both that and a
    flat layout are accepted.
    """

    total: int = 0
    count: int = 0
    per_page: int = 0
    current_page: int = 0
    total_pages: int = 0
    links: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def unwrap_pagination(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("pagination"), dict):
            return {key: value for key, value in data["pagination"].items() if value is not None}
        return data

    @field_validator("links", mode="before")
    @classmethod
    def empty_links(cls, v):
        # PHP serializes an empty links map as []
        if v is None or v == []:
            return {}
        return v

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages
