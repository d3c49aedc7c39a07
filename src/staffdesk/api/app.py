"""
Main FastAPI application for the staffdesk backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, is_production, settings
from ..database.connection import create_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..services import Services, build_services
from ..storage.implementations.local import LocalStorageProvider

logger = get_logger(__name__)


def create_app(config: Settings | None = None, services: Services | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or settings
    configure_logging(debug=config.debug, log_level=config.log_level)

    if services is None:
        services = build_services(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting staffdesk API...", environment=config.environment)

        if config.auto_create_schema and services.engine is not None:
            await create_schema(services.engine)

        if services.engine is not None:
            from ..validation import ValidationError, validate_startup_configuration

            results = await validate_startup_configuration(config, services.engine)
            if not results["overall_valid"] and is_production(config):
                raise ValidationError("Critical configuration validation failed in production")

        yield

        logger.info("Shutting down staffdesk API...")
        await services.dispose()

    app = FastAPI(
        title="staffdesk API",
        description="GraphQL API for employee management",
        version=__version__,
        lifespan=lifespan,
        debug=config.debug,
    )

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    provider = services.photos.provider
    if isinstance(provider, LocalStorageProvider):
        from .endpoints.storage import STORAGE_PREFIX, create_storage_router

        app.include_router(create_storage_router(provider), prefix=STORAGE_PREFIX, tags=["Storage"])

    from ..graphql.schema import create_graphql_router, validate_schema

    logger.info("Validating GraphQL schema...")
    validate_schema()
    app.include_router(create_graphql_router(services, graphiql=config.debug), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app
