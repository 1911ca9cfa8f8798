"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[sweego]`` configuration section lacks required values
    or holds values that fail validation. Typically caught at CLI boundaries
    to provide user-friendly error messages.

    Example:
        >>> from sweego_mail.domain.errors import ConfigurationError
        >>> err = ConfigurationError("sweego.api_key is not configured")
        >>> str(err)
        'sweego.api_key is not configured'
    """


class EmailAdapterError(Exception):
    """Base class for failures surfaced by the send operation.

    Carries the HTTP-style status code the host can relay to its own
    callers.

    Example:
        >>> err = EmailAdapterError("boom", status_code=500)
        >>> err.status_code
        500
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidAttachmentError(EmailAdapterError, ValueError):
    """Attachment lacks filename/content or has unsupported content.

    Raised while mapping the message, before any network call. Inherits
    from ValueError so generic ``except ValueError`` handlers catch it.

    Example:
        >>> err = InvalidAttachmentError("Attachment is missing filename or content")
        >>> err.status_code
        400
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ProviderRejectedError(EmailAdapterError):
    """The Sweego API answered with a non-200 status.

    Example:
        >>> err = ProviderRejectedError("Error sending email: 401 Unauthorized.", status_code=401)
        >>> str(err)
        'Error sending email: 401 Unauthorized.'
        >>> err.status_code
        401
    """


__all__ = [
    "ConfigurationError",
    "EmailAdapterError",
    "InvalidAttachmentError",
    "ProviderRejectedError",
]
