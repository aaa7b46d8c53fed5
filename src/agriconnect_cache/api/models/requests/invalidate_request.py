"""Invalidate cache request model.

ONLY invalidation requests - validates substring and tag based cache
invalidation.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class InvalidateRequest(BaseModel):
    """Request model for invalidating cache entries by pattern or tags."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "pattern": "plots:agent:42",
                "tags": ["plots"],
            }
        },
    )

    pattern: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=256,
        description="Plain, case-sensitive substring matched against keys",
    )

    tags: Optional[List[str]] = Field(
        default=None,
        description="Entries carrying any of these tags are removed",
    )

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v):
        """Drop blank tags."""
        if v is None:
            return v
        return [tag for tag in v if tag and not tag.isspace()]

    @model_validator(mode="after")
    def require_selector(self):
        """At least one of pattern or tags must select something."""
        if not self.pattern and not self.tags:
            raise ValueError("Provide a non-empty pattern or at least one tag")
        return self
