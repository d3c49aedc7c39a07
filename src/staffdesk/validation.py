"""
Configuration validation for the staffdesk application.

These checks run at startup so misconfiguration shows up in the logs (or
aborts startup in production) instead of surfacing on the first request.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine

from .config import Settings, is_production
from .database.connection import test_database_connection
from .logging import get_logger

logger = get_logger(__name__)

MIN_PRODUCTION_SECRET_LENGTH = 32


class ValidationError(Exception):
    """Raised when application validation fails."""

    pass


async def validate_database_connection(engine: AsyncEngine) -> dict[str, Any]:
    """Validate that the database is accessible and responsive."""
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "connection_info": None,
    }

    success, error_message = await test_database_connection(engine)

    if success:
        results["connection_info"] = {
            "status": "connected",
            "message": "Database connection successful",
        }
        logger.info("Database connection validation successful")
    else:
        results["valid"] = False
        results["errors"].append(error_message)
        logger.error("Database connection validation failed", error=error_message)

    return results


def validate_auth_configuration(config: Settings) -> dict[str, Any]:
    """Validate token signing configuration."""
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "auth_info": {
            "algorithm": config.jwt_algorithm,
            "token_expiry_hours": config.token_expiry_hours,
            "bcrypt_rounds": config.bcrypt_rounds,
        },
    }

    if not config.jwt_secret:
        results["errors"].append("JWT secret not configured (STAFFDESK_JWT_SECRET)")
        results["valid"] = False
    elif is_production(config) and len(config.jwt_secret) < MIN_PRODUCTION_SECRET_LENGTH:
        results["warnings"].append(
            f"JWT secret is shorter than {MIN_PRODUCTION_SECRET_LENGTH} characters in production"
        )

    if config.storage_provider == "local" and is_production(config):
        results["warnings"].append("Local photo storage is in use in a production environment")

    return results


async def validate_startup_configuration(config: Settings, engine: AsyncEngine) -> dict[str, Any]:
    """Run all startup checks and log a summary."""
    logger.info("Starting application configuration validation")

    db_results = await validate_database_connection(engine)
    auth_results = validate_auth_configuration(config)

    combined_results = {
        "overall_valid": db_results["valid"] and auth_results["valid"],
        "database": db_results,
        "auth": auth_results,
        "environment": {
            "environment": config.environment,
            "debug": config.debug,
            "storage_provider": config.storage_provider,
        },
    }

    if combined_results["overall_valid"]:
        logger.info("Application configuration validation completed successfully")
    else:
        logger.error(
            "Application configuration validation failed",
            errors=db_results["errors"] + auth_results["errors"],
        )

    all_warnings = db_results["warnings"] + auth_results["warnings"]
    if all_warnings:
        logger.warning("Configuration warnings detected", warnings=all_warnings)

    return combined_results
