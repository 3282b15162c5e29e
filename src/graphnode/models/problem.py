from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProblemDetails(BaseModel):
    """RFC 9457 problem details returned by the API on errors."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )

    type: str = "about:blank"
    title: str
    status: int
    detail: Optional[str] = None
    instance: Optional[str] = None
    correlation_id: Optional[str] = Field(default=None, alias="correlationId")
    errors: Optional[List[Dict[str, Any]]] = None
    retryable: Optional[bool] = None
