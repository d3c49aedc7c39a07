"""Service container wiring stores, auth and storage from explicit settings."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine

from .assets import PhotoResolver
from .auth.adapters.base import AuthAdapter
from .auth.adapters.jwt import JWTAuthAdapter
from .auth.passwords import PasswordHasher
from .config import Settings
from .database.connection import create_engine, create_session_factory
from .storage.factory import create_storage_provider
from .stores.employees import EmployeeStore
from .stores.users import UserStore


@dataclass
class Services:
    """Collaborators shared by every resolver; built once at startup."""

    users: UserStore
    employees: EmployeeStore
    photos: PhotoResolver
    tokens: AuthAdapter
    passwords: PasswordHasher
    engine: AsyncEngine | None = None

    async def dispose(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


def build_services(config: Settings, engine: AsyncEngine | None = None) -> Services:
    """Create the service container from configuration.

    Raises:
        ValueError: If the JWT secret or storage configuration is missing
    """
    if engine is None:
        engine = create_engine(
            config.database_url,
            pool_size=config.database_pool_size,
            max_overflow=config.database_max_overflow,
            echo=config.sql_echo,
        )
    session_factory = create_session_factory(engine)

    return Services(
        users=UserStore(session_factory),
        employees=EmployeeStore(session_factory),
        photos=PhotoResolver(
            create_storage_provider(config),
            folder=config.photo_folder,
            max_retries=config.storage_upload_retries,
        ),
        tokens=JWTAuthAdapter(
            secret_key=config.jwt_secret or "",
            algorithm=config.jwt_algorithm,
            issuer=config.jwt_issuer,
            audience=config.jwt_audience,
            token_expiry_hours=config.token_expiry_hours,
        ),
        passwords=PasswordHasher(rounds=config.bcrypt_rounds),
        engine=engine,
    )
