"""SQLAlchemy ORM models."""

from .preference import Preference

__all__ = ["Preference"]
