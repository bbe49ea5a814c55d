"""
passgen FastAPI Application (Clean Architecture).
Main application with password store integration and complete routing.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from passgen.api.routes.password import router as password_router
from passgen.api.routes.healthcheck import router as healthcheck_router

from passgen.api.dependencies import validate_dependencies
from passgen.config.app_settings import app_settings
from passgen.infrastructure.config.infrastructure_settings import infra_settings
from passgen.infrastructure.logging.log_config import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    """
    # Startup
    validate_dependencies()
    initialize_infrastructure()

    logger.info("Application started", extra={
        'extra_fields': {
            "environment": app_settings.environment,
            "repository_backend": infra_settings.repository_backend
        }
    })

    yield


def initialize_infrastructure() -> None:
    """
    Create the passwords table when running against DynamoDB with
    create_tables_on_startup enabled.
    """
    if not (infra_settings.use_dynamodb and infra_settings.create_tables_on_startup):
        return

    from passgen.infrastructure.databases.dynamodb_setup import DynamoDBSetup

    try:
        DynamoDBSetup().create_passwords_table()
    except Exception as e:
        # Table can be created manually with the dynamodb_setup CLI
        logger.warning("Passwords table setup failed", extra={
            'extra_fields': {"error": str(e), "error_type": type(e).__name__}
        })


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with Clean Architecture.
    """
    app = FastAPI(
        title=app_settings.app_title,
        version=app_settings.app_version,
        description="Secure password generation with deduplicated, hashed storage",
        lifespan=lifespan
    )

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Route registration
    app.include_router(healthcheck_router, prefix=app_settings.api_prefix)
    app.include_router(password_router, prefix=app_settings.api_prefix)

    return app


app = create_app()
