"""
Turn a completed HTTP response into a decoded value or a classified error.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping, Optional, TypeVar

import requests

from .errors import ApiError, ErrorKind, JsonError, RateLimitError

__all__ = [
    "REQUEST_ID_HEADER",
    "Decoder",
    "error_payload",
    "handle_response",
    "parse_retry_after",
    "request_id_from",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")
Decoder = Callable[[Any], T]

REQUEST_ID_HEADER = "x-request-id"
TOO_MANY_REQUESTS = 429


def request_id_from(response: requests.Response) -> Optional[str]:
    return response.headers.get(REQUEST_ID_HEADER) or None


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Whole seconds from a ``Retry-After`` header; ``None`` when unusable."""
    if value is None:
        return None
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def _body_text(response: requests.Response) -> str:
    try:
        return response.text
    except (requests.RequestException, UnicodeDecodeError, LookupError):
        return ""


def handle_response(
    response: requests.Response,
    decode: Optional[Decoder[T]] = None,
    *,
    allow_empty: bool = False,
) -> Optional[T]:
    """
    Map ``response`` to ``decode(json_body)`` or raise the matching error.

    With ``decode`` set to ``None`` the body is ignored on success. An empty
    success body decodes to ``None`` only when ``allow_empty`` is set and is
    a :class:`JsonError` otherwise, as is a body that is not a JSON object.
    """
    status = response.status_code
    request_id = request_id_from(response)

    if status == TOO_MANY_REQUESTS:
        retry_after = parse_retry_after(response.headers.get("retry-after"))
        raise RateLimitError(retry_after, request_id=request_id)

    if not 200 <= status < 300:
        raise ApiError(
            ErrorKind.from_status(status),
            _body_text(response),
            status_code=status,
            request_id=request_id,
        )

    logger.debug("Decoding %s response (request id %s)", status, request_id)
    if decode is None:
        return None
    if not response.content:
        if allow_empty:
            return None
        raise JsonError(f"empty response body (status {status})")

    try:
        payload = response.json()
    except ValueError as exc:
        raise JsonError(f"response body is not valid JSON: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise JsonError(
            f"response body is a JSON {type(payload).__name__}, expected an object"
        )

    try:
        return decode(payload)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise JsonError(
            f"unexpected response shape ({type(exc).__name__}: {exc})"
        ) from exc


def error_payload(error: ApiError) -> Mapping[str, Any]:
    """Best-effort parse of an API error body into a mapping."""
    try:
        parsed = json.loads(error.message)
    except ValueError:
        return {}
    return parsed if isinstance(parsed, Mapping) else {}
