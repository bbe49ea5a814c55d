"""
Password schemas for passgen API.
Request and response models for generation, complexity checks and deletion.
"""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, List

from passgen.core.models.complexity import Complexity


class PasswordGenerationRequest(BaseModel):
    """
    Request schema for password generation.
    Bounds are validated by the generator so every rule violation returns 400.
    """
    length: int = Field(..., description="Length of every generated password")
    lower_case: bool = Field(default=True, description="Include lowercase letters")
    upper_case: bool = Field(default=False, description="Include uppercase letters")
    special_case: bool = Field(default=False, description="Include special characters")
    amount: int = Field(default=1, description="Number of passwords to generate")


class PasswordGenerationResponse(BaseModel):
    """
    Response schema for password generation.
    """
    passwords: List[str] = Field(..., description="Generated passwords in generation order")
    duplicates: List[str] = Field(default=[], description="Generated passwords that were already stored")
    complexity: Complexity = Field(..., description="Complexity shared by the whole batch")


class PasswordResponse(BaseModel):
    """
    Response schema for complexity checks and deletions.
    A null generation_date_time means the password was never persisted.
    """
    password: str = Field(..., description="Echoed password")
    complexity: Complexity = Field(..., description="Password complexity")
    generation_date_time: Optional[datetime] = Field(None, description="Generation timestamp of the stored record")


class ErrorResponse(BaseModel):
    """
    Error response schema.
    """
    detail: str = Field(..., description="Human-readable error message")
