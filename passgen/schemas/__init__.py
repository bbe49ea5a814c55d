"""
Schemas module for passgen API.
Contains Pydantic models for request/response validation.
"""

from .password import (
    PasswordGenerationRequest,
    PasswordGenerationResponse,
    PasswordResponse,
    ErrorResponse
)

__all__ = [
    "PasswordGenerationRequest",
    "PasswordGenerationResponse",
    "PasswordResponse",
    "ErrorResponse"
]
