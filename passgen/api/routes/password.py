"""
Password routes for passgen API.
Handles password generation, complexity checks and deletion.
"""
from fastapi import APIRouter, Depends, HTTPException, Request, status

from passgen.core.models.errors import (
    DigestUnavailableError,
    PasswordRepositoryError,
    PasswordValidationError,
    UndeterminableComplexityError
)
from passgen.core.usecases.generate_passwords import GeneratePasswordsUseCase
from passgen.core.usecases.password_lookup import CheckComplexityUseCase, DeletePasswordUseCase
from passgen.api.dependencies import (
    get_generate_passwords_use_case,
    get_check_complexity_use_case,
    get_delete_password_use_case
)
from passgen.schemas.password import (
    PasswordGenerationRequest,
    PasswordGenerationResponse,
    PasswordResponse,
    ErrorResponse
)
from passgen.adapters.mappers.password_mapper import PasswordMapper
from passgen.infrastructure.logging.log_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/password", tags=["Password"])

SERVER_ERRORS = (DigestUnavailableError, UndeterminableComplexityError, PasswordRepositoryError)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Request breaks a password rule"},
    500: {"model": ErrorResponse, "description": "Hashing or password store failure"}
}


async def read_plain_text(request: Request) -> str:
    """Read the raw request body as a UTF-8 password."""
    body = await request.body()
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Password must be valid UTF-8 text")


@router.post(
    "/generate",
    response_model=PasswordGenerationResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES
)
async def generate_passwords(
    request: PasswordGenerationRequest,
    generate_use_case: GeneratePasswordsUseCase = Depends(get_generate_passwords_use_case)
) -> PasswordGenerationResponse:
    """
    Generate a batch of passwords and store the ones not seen before.

    Args:
        request: Length, character classes and amount
        generate_use_case: Generate passwords use case instance

    Returns:
        PasswordGenerationResponse: Generated passwords, duplicates and batch complexity

    Raises:
        HTTPException: 400 if the request breaks a password rule
        HTTPException: 500 if hashing or the password store fails
    """
    try:
        result = await generate_use_case.execute(PasswordMapper.to_generation_request(request))

        logger.info("Password batch generated", extra={
            'extra_fields': {
                "length": request.length,
                "amount": request.amount,
                "duplicates": len(result.duplicates),
                "complexity": result.complexity.value
            }
        })

        return PasswordMapper.to_generation_response(result)

    except PasswordValidationError as e:
        logger.warning("Rejected generation request", extra={
            'extra_fields': {"error": str(e), "error_type": type(e).__name__}
        })
        raise HTTPException(status_code=400, detail=str(e))
    except SERVER_ERRORS as e:
        logger.error("Password generation failed", extra={
            'extra_fields': {"error": str(e), "error_type": type(e).__name__}
        })
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/complexity", response_model=PasswordResponse, responses=ERROR_RESPONSES)
async def check_complexity(
    password: str = Depends(read_plain_text),
    complexity_use_case: CheckComplexityUseCase = Depends(get_check_complexity_use_case)
) -> PasswordResponse:
    """
    Report the complexity of a plain-text password.

    The stored complexity and generation time are returned when the
    password was generated here; otherwise it is classified on the fly and
    generation_date_time is null.

    Raises:
        HTTPException: 400 if the password length is out of bounds
        HTTPException: 500 if hashing or the password store fails
    """
    try:
        lookup = await complexity_use_case.execute(password)
        return PasswordMapper.to_password_response(lookup)

    except PasswordValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SERVER_ERRORS as e:
        logger.error("Complexity check failed", extra={
            'extra_fields': {"error": str(e), "error_type": type(e).__name__}
        })
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("", response_model=PasswordResponse, responses=ERROR_RESPONSES)
async def delete_password(
    password: str = Depends(read_plain_text),
    delete_use_case: DeletePasswordUseCase = Depends(get_delete_password_use_case)
) -> PasswordResponse:
    """
    Delete a stored password.

    Deleting a password that is not stored succeeds and echoes its
    computed complexity with a null generation_date_time.

    Raises:
        HTTPException: 400 if the password length is out of bounds
        HTTPException: 500 if hashing or the password store fails
    """
    try:
        lookup = await delete_use_case.execute(password)

        logger.info("Password delete request handled", extra={
            'extra_fields': {"deleted": lookup.persisted}
        })

        return PasswordMapper.to_password_response(lookup)

    except PasswordValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SERVER_ERRORS as e:
        logger.error("Password deletion failed", extra={
            'extra_fields': {"error": str(e), "error_type": type(e).__name__}
        })
        raise HTTPException(status_code=500, detail=str(e))
