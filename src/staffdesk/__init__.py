"""
staffdesk backend
GraphQL API for authenticating users and managing employee records
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
