"""Operation response models.

ONLY operation responses - structures generic cache operation results.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class OperationResponse(BaseModel):
    """Generic cache operation response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Invalidated 3 cache entries",
                "data": {"removed": 3},
                "timestamp": "2024-05-01T12:00:00Z",
                "operation_time_ms": 0.4,
            }
        }
    )

    success: bool = Field(..., description="Whether the operation was successful")

    message: Optional[str] = Field(default=None, description="Operation message")

    data: Optional[Dict[str, Any]] = Field(default=None, description="Additional operation data")

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Response timestamp",
    )

    operation_time_ms: Optional[float] = Field(
        default=None,
        ge=0,
        description="Time taken for operation in milliseconds",
    )
