"""API route handlers."""
from . import users

__all__ = ["users"]
