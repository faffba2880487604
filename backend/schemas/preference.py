"""Pydantic schemas for user preferences."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class _LanguageModel(BaseModel):
    """Base for bodies carrying a language, exchanged in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    language: str

    @field_validator("language")
    @classmethod
    def language_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only languages."""
        if not v.strip():
            raise ValueError("language must not be blank")
        return v


class PreferencesModel(_LanguageModel):
    """Request body for creating a preference, and the read projection."""

    user_id: UUID


class PutPreferencesModel(_LanguageModel):
    """Request body for changing a user's preferred language."""

    pass
