from typing import Any

from transvoucher.core.errors import ValidationError
from transvoucher.schemas.api import ApiResponse


def unwrap(response: ApiResponse, endpoint: str) -> Any:
    """Return the envelope's ``data``, or fail if the API did not succeed."""
    if not response.success or response.data is None:
        raise ValidationError(f"Invalid response from {endpoint}", {})
    return response.data
