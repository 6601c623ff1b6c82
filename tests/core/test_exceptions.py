"""Tests for the exception hierarchy."""

from visualsuite.core.exceptions import (
    ImageCredentialMissingError,
    UpstreamModelError,
    ValidationError,
    VisualNotFoundError,
    VisualSuiteException,
)


class TestExceptions:
    """Tests for message and details handling."""

    def test_validation_error_records_field(self) -> None:
        error = ValidationError("Prompt is required", field="prompt")
        assert error.message == "Prompt is required"
        assert error.details == {"field": "prompt"}
        assert isinstance(error, VisualSuiteException)

    def test_upstream_error_keeps_provider_payload(self) -> None:
        error = UpstreamModelError(
            "HF API failed",
            provider="huggingface",
            status_code=503,
            details={"error": "loading"},
        )
        assert error.status_code == 503
        assert error.upstream_details == {"error": "loading"}
        assert "status_code" in str(error)

    def test_credential_missing_message(self) -> None:
        assert ImageCredentialMissingError().message == "HF Key missing"

    def test_not_found_includes_id(self) -> None:
        error = VisualNotFoundError("abc")
        assert error.message == "Visual not found: abc"
        assert error.details["visual_id"] == "abc"

    def test_str_without_details(self) -> None:
        assert str(VisualSuiteException("boom")) == "boom"
