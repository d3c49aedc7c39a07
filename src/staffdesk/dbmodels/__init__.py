"""
Database models for staffdesk (authoritative ORM definitions).

The SQLAlchemy Base uses a naming convention so constraint names stay stable
across backends. Column types are kept portable (``Uuid``, ``DateTime(True)``)
so the same models run on PostgreSQL in production and SQLite in tests.
"""

from datetime import UTC, date, datetime
from uuid import UUID, uuid4

from sqlalchemy import (
    Date,
    DateTime,
    Float,
    MetaData,
    PrimaryKeyConstraint,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="users_pkey"),
        UniqueConstraint("username", name="users_username_key"),
        UniqueConstraint("email", name="users_email_key"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(True), default=utcnow, onupdate=utcnow)


class Employees(Base):
    __tablename__ = "employees"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="employees_pkey"),
        UniqueConstraint("email", name="employees_email_key"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    gender: Mapped[str | None] = mapped_column(String(50))
    designation: Mapped[str] = mapped_column(String(255), nullable=False)
    salary: Mapped[float] = mapped_column(Float, nullable=False)
    date_of_joining: Mapped[date] = mapped_column(Date, nullable=False)
    department: Mapped[str] = mapped_column(String(255), nullable=False)
    employee_photo: Mapped[str | None] = mapped_column(String(2048))
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(True), default=utcnow, onupdate=utcnow)


# Columns a caller may write through the employee store.
EMPLOYEE_WRITABLE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "gender",
    "designation",
    "salary",
    "date_of_joining",
    "department",
    "employee_photo",
)

target_metadata = Base.metadata

__all__ = [
    "Base",
    "Users",
    "Employees",
    "EMPLOYEE_WRITABLE_FIELDS",
    "target_metadata",
    "utcnow",
]
