"""HTTP transport for the Sweego send endpoint.

Issues exactly one ``POST`` per call through a fresh ``httpx.AsyncClient``
and classifies the answer by status code. Connection errors and malformed
JSON bodies propagate unchanged.
"""

from __future__ import annotations

import base64
import logging
from typing import Any, Final, cast

import httpx
import orjson

from sweego_mail.domain.errors import ProviderRejectedError
from sweego_mail.domain.payload import WirePayload
from sweego_mail.domain.results import SweegoSuccess, format_provider_error

logger = logging.getLogger(__name__)

#: Sweego transactional send endpoint.
SWEEGO_SEND_URL: Final[str] = "https://api.sweego.io/send"


def _encode_binary(value: Any) -> str:
    """orjson fallback serializer: attachment bytes travel as base64 text.

    Example:
        >>> _encode_binary(b"hi")
        'aGk='
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    raise TypeError(f"Type is not JSON serializable: {type(value).__name__}")


def encode_payload(payload: WirePayload) -> bytes:
    """Serialize *payload* to the JSON request body."""
    return orjson.dumps(payload.to_wire(), default=_encode_binary)


def build_request_headers(api_key: str) -> dict[str, str]:
    """Return the request headers carrying the API key.

    Example:
        >>> build_request_headers("k")
        {'Api-Key': 'k', 'Content-Type': 'application/json'}
    """
    return {"Api-Key": api_key, "Content-Type": "application/json"}


def classify_response(response: httpx.Response) -> SweegoSuccess:
    """Turn an HTTP answer into a success value or a raised rejection.

    Args:
        response: Completed response from the send endpoint.

    Returns:
        Decoded success body, unvalidated.

    Raises:
        ProviderRejectedError: For any status other than 200.
        orjson.JSONDecodeError: When the body is not JSON.
    """
    if response.status_code == 200:
        return cast(SweegoSuccess, orjson.loads(response.content))

    body: Any = orjson.loads(response.content)
    logger.warning(
        "Sweego rejected email",
        extra={"status_code": response.status_code, "response": body},
    )
    message = format_provider_error(response.status_code, response.reason_phrase, body)
    raise ProviderRejectedError(message, status_code=response.status_code)


async def post_payload(
    payload: WirePayload,
    *,
    api_key: str,
    url: str = SWEEGO_SEND_URL,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SweegoSuccess:
    """Send *payload* to Sweego and classify the answer.

    No timeout or retry policy is applied here; httpx defaults hold unless
    the caller supplies a transport with its own policy.

    Args:
        payload: Assembled wire payload.
        api_key: Sweego API key sent in the ``Api-Key`` header.
        url: Endpoint, fixed to the Sweego send URL in production.
        transport: Optional transport forwarded to the client.

    Returns:
        Vendor success body.

    Raises:
        ProviderRejectedError: When Sweego answers with a non-200 status.
        httpx.HTTPError: On network-level failures.
    """
    logger.info(
        "Sending email via Sweego",
        extra={
            "recipient_count": len(payload.recipients),
            "subject": payload.subject,
            "dry_run": payload.dry_run,
            "attachment_count": len(payload.attachments) if payload.attachments else 0,
        },
    )

    async with httpx.AsyncClient(transport=transport) as client:
        response = await client.post(url, content=encode_payload(payload), headers=build_request_headers(api_key))

    result = classify_response(response)
    transaction_id = result.get("transaction_id") if isinstance(result, dict) else None
    logger.info("Email accepted by Sweego", extra={"transaction_id": transaction_id})
    return result


__all__ = [
    "SWEEGO_SEND_URL",
    "build_request_headers",
    "classify_response",
    "encode_payload",
    "post_payload",
]
