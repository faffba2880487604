"""Tests for preference request schemas."""

import uuid

import pytest
from pydantic import ValidationError

from schemas.preference import PreferencesModel, PutPreferencesModel


class TestPreferencesModel:
    """Tests for PreferencesModel."""

    def test_accepts_camel_case(self):
        """Parses the userId/language wire format."""
        user_id = uuid.uuid4()
        model = PreferencesModel.model_validate({"userId": str(user_id), "language": "GB"})
        assert model.user_id == user_id
        assert model.language == "GB"

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"language": "GB"},
            {"userId": str(uuid.uuid4())},
            {"userId": "not-a-uuid", "language": "GB"},
            {"userId": str(uuid.uuid4()), "language": "   "},
        ],
    )
    def test_rejects_invalid(self, payload):
        """Missing, malformed or blank fields are rejected."""
        with pytest.raises(ValidationError):
            PreferencesModel.model_validate(payload)


class TestPutPreferencesModel:
    """Tests for PutPreferencesModel."""

    def test_language_is_free_form(self):
        """Any non-blank language string is accepted as-is."""
        assert PutPreferencesModel(language="en-GB").language == "en-GB"

    @pytest.mark.parametrize("payload", [{}, {"language": ""}, {"language": None}])
    def test_rejects_missing_language(self, payload):
        """Language is required."""
        with pytest.raises(ValidationError):
            PutPreferencesModel.model_validate(payload)
