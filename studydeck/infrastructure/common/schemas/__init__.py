"""Common schemas shared across contexts."""

from studydeck.infrastructure.common.schemas.response_wrappers import SuccessResponse

__all__ = ["SuccessResponse"]
