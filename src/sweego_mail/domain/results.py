"""Sweego response shapes and error-message aggregation.

The vendor answers with a success object on HTTP 200 and with a
``{"detail": [{"msg", "type"}]}`` object otherwise; the status code alone
decides which shape applies.
"""

from __future__ import annotations

from typing import Any, TypedDict


class SweegoSuccess(TypedDict):
    """Body of a 200 answer, returned to the host unchanged."""

    channel: str
    provider: str
    swg_uids: dict[str, str]
    transaction_id: str


class SweegoErrorDetail(TypedDict):
    """One entry of the ``detail`` list in an error answer."""

    msg: str
    type: str | None


class SweegoErrorBody(TypedDict):
    """Body of a non-200 answer."""

    detail: list[SweegoErrorDetail]


def _detail_entries(body: Any) -> list[Any]:
    detail = body.get("detail") if isinstance(body, dict) else None
    return detail if isinstance(detail, list) else []


def format_provider_error(status_code: int, reason_phrase: str, body: Any) -> str:
    """Aggregate a rejected answer into one human-readable sentence.

    Entries lacking ``type`` or ``msg`` are skipped; a ``type`` of ``"null"``
    drops the ``Type:`` segment. The separator depends on the entry's
    position in ``detail``, not on how many entries were kept.

    Examples:
        >>> format_provider_error(422, "Unprocessable Entity", {"detail": [{"msg": "bad field", "type": "validation_error"}]})
        'Error sending email: 422 Unprocessable Entity. Type: "validation_error", Message: "bad field"'
        >>> format_provider_error(400, "Bad Request", {"detail": [{"msg": "a", "type": "x"}, {"msg": "b", "type": "null"}]})
        'Error sending email: 400 Bad Request. Type: "x", Message: "a"; Message: "b"'
        >>> format_provider_error(500, "Internal Server Error", {})
        'Error sending email: 500 Internal Server Error.'
    """
    message = f"Error sending email: {status_code} {reason_phrase}."

    for index, entry in enumerate(_detail_entries(body)):
        if not isinstance(entry, dict):
            continue
        msg = entry.get("msg")
        type_ = entry.get("type")
        if not (type_ and msg):
            continue
        separator = " " if index == 0 else "; "
        type_segment = f'Type: "{type_}", ' if type_ != "null" else ""
        message += f'{separator}{type_segment}Message: "{msg}"'

    return message


__all__ = [
    "SweegoErrorBody",
    "SweegoErrorDetail",
    "SweegoSuccess",
    "format_provider_error",
]
