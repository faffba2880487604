"""Pydantic request/response schemas."""

from .preference import PreferencesModel, PutPreferencesModel

__all__ = ["PreferencesModel", "PutPreferencesModel"]
