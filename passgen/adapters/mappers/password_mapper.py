"""
Password mapper for converting between domain models and API schemas.
"""
from passgen.core.models.password import GenerationRequest, GenerationResult, PasswordLookup
from passgen.schemas.password import (
    PasswordGenerationRequest,
    PasswordGenerationResponse,
    PasswordResponse
)


class PasswordMapper:
    """Mapper for password-related conversions."""

    @staticmethod
    def to_generation_request(request: PasswordGenerationRequest) -> GenerationRequest:
        """
        Convert the API generation request to the domain request.

        Args:
            request: Validated API request

        Returns:
            GenerationRequest: Domain generation parameters
        """
        return GenerationRequest(
            length=request.length,
            include_lower=request.lower_case,
            include_upper=request.upper_case,
            include_special=request.special_case,
            amount=request.amount
        )

    @staticmethod
    def to_generation_response(result: GenerationResult) -> PasswordGenerationResponse:
        """
        Convert a generation result to the API response.

        Args:
            result: Generated passwords and rejected duplicates

        Returns:
            PasswordGenerationResponse: API response schema
        """
        return PasswordGenerationResponse(
            passwords=[password.plaintext for password in result.passwords],
            duplicates=[password.plaintext for password in result.duplicates],
            complexity=result.complexity
        )

    @staticmethod
    def to_password_response(lookup: PasswordLookup) -> PasswordResponse:
        """Convert a password projection to the API response."""
        return PasswordResponse(
            password=lookup.password,
            complexity=lookup.complexity,
            generation_date_time=lookup.created_at
        )
