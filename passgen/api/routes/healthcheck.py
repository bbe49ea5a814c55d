"""
Health check routes for passgen.
Provides application and infrastructure health status.
"""
from fastapi import APIRouter, HTTPException
from passgen.config.app_settings import app_settings
from datetime import datetime, timezone
from passgen.infrastructure.services.health_checks import health_check_service


router = APIRouter()


@router.get("/ping", tags=["Health"])
async def ping():
    """
    Basic health check endpoint.

    Returns:
        dict: Simple pong response
    """
    return {"message": "pong"}


@router.get("/health", tags=["Health"])
async def health_check():
    """
    Health check including password store connectivity.

    Returns:
        dict: Health status of application and dependencies

    Raises:
        HTTPException: 503 if the password store is unavailable
    """
    try:
        health_status = health_check_service.check_all_services()

        response = {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "environment": app_settings.environment,
            "version": app_settings.app_version,
            "services": health_status
        }

        critical_services = ["repository"]
        unhealthy_services = [
            service for service in critical_services
            if health_status.get(service, {}).get("status") != "healthy"
        ]

        if unhealthy_services:
            raise HTTPException(
                status_code=503,
                detail=f"Services unavailable: {', '.join(unhealthy_services)}"
            )

        return response

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=503,
            detail=f"Health check failed: {str(e)}"
        )
