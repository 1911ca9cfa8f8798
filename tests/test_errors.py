"""Domain error types and provider error aggregation."""

from __future__ import annotations

import pytest

from sweego_mail.domain.errors import (
    ConfigurationError,
    EmailAdapterError,
    InvalidAttachmentError,
    ProviderRejectedError,
)
from sweego_mail.domain.results import format_provider_error

# ======================== Error types ========================


@pytest.mark.os_agnostic
def test_configuration_error_preserves_message() -> None:
    exc = ConfigurationError("No [sweego] configuration section found")
    assert str(exc) == "No [sweego] configuration section found"


@pytest.mark.os_agnostic
def test_provider_rejected_error_carries_status_code() -> None:
    exc = ProviderRejectedError("Error sending email: 401 Unauthorized.", status_code=401)

    assert isinstance(exc, EmailAdapterError)
    assert exc.message == "Error sending email: 401 Unauthorized."
    assert exc.status_code == 401


@pytest.mark.os_agnostic
def test_invalid_attachment_error_defaults_to_400_and_is_value_error() -> None:
    with pytest.raises(ValueError, match="missing filename") as exc_info:
        raise InvalidAttachmentError("Attachment is missing filename or content")

    assert exc_info.value.status_code == 400


# ======================== format_provider_error ========================


@pytest.mark.os_agnostic
def test_single_detail_entry_is_quoted_after_status_line() -> None:
    message = format_provider_error(
        422,
        "Unprocessable Entity",
        {"detail": [{"msg": "bad field", "type": "validation_error"}]},
    )

    assert message == 'Error sending email: 422 Unprocessable Entity. Type: "validation_error", Message: "bad field"'


@pytest.mark.os_agnostic
def test_multiple_entries_are_joined_with_semicolons() -> None:
    message = format_provider_error(
        400,
        "Bad Request",
        {"detail": [{"msg": "a", "type": "x"}, {"msg": "b", "type": "y"}]},
    )

    assert message == 'Error sending email: 400 Bad Request. Type: "x", Message: "a"; Type: "y", Message: "b"'


@pytest.mark.os_agnostic
def test_null_type_omits_type_segment() -> None:
    message = format_provider_error(400, "Bad Request", {"detail": [{"msg": "oops", "type": "null"}]})

    assert message == 'Error sending email: 400 Bad Request. Message: "oops"'


@pytest.mark.os_agnostic
def test_entries_missing_type_or_msg_are_skipped() -> None:
    message = format_provider_error(
        400,
        "Bad Request",
        {"detail": [{"msg": "no type"}, {"type": "no_msg"}, {"msg": "kept", "type": "t"}]},
    )

    # Separator follows the entry's position, so a skipped first entry still yields "; ".
    assert message == 'Error sending email: 400 Bad Request.; Type: "t", Message: "kept"'


@pytest.mark.os_agnostic
@pytest.mark.parametrize("body", [{}, {"detail": []}, {"detail": "text"}, None, []])
def test_bodies_without_details_yield_status_line_only(body: object) -> None:
    assert format_provider_error(500, "Internal Server Error", body) == "Error sending email: 500 Internal Server Error."
