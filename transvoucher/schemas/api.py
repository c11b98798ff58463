from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ApiResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    success: bool = False
    data: Any = None
    message: Optional[str] = None
    errors: Optional[dict[str, Any]] = None


class RequestOptions(BaseModel):
    timeout: Optional[float] = None  # seconds
    headers: Optional[dict[str, str]] = None
