"""Persistence stores used by the resolver layer."""

from .base import StoreError, UniqueViolationError
from .employees import EmployeeStore
from .users import UserStore

__all__ = ["EmployeeStore", "StoreError", "UniqueViolationError", "UserStore"]
