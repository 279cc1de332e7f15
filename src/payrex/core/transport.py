"""
Single-attempt HTTP transport for the PayRex API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .config import ClientConfig
from .encoding import FormPairs
from .errors import RequestTimeoutError, TransportError

__all__ = ["BODIED_METHODS", "Transport", "build_url"]

logger = logging.getLogger(__name__)

BODIED_METHODS = frozenset({"POST", "PUT", "PATCH"})
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_url(base_url: str, path: str) -> str:
    """Join ``base_url`` and ``path`` with exactly one ``/`` between them."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


class Transport:
    """
    Performs exactly one HTTP exchange per :meth:`send` call.

    Every response is returned as-is whatever its status code; only a failure
    to complete the exchange raises.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        self._headers = {
            "Authorization": config.authorization,
            "User-Agent": config.user_agent,
            "Accept": "application/json",
        }

    def headers_for(self, method: str) -> Dict[str, str]:
        headers = dict(self._headers)
        if method in BODIED_METHODS:
            headers["Content-Type"] = FORM_CONTENT_TYPE
        return headers

    def send(
        self,
        method: str,
        path: str,
        *,
        form: Any = None,
        query: Optional[FormPairs] = None,
    ) -> requests.Response:
        method = method.upper()
        url = build_url(self.config.base_url, path)
        data = form if method in BODIED_METHODS else None

        try:
            return self.session.request(
                method,
                url,
                headers=self.headers_for(method),
                data=data,
                params=query or None,
                timeout=self.config.timeout,
            )
        except requests.Timeout as exc:
            logger.debug("%s %s timed out after %ss", method, url, self.config.timeout)
            raise RequestTimeoutError(self.config.timeout) from exc
        except requests.ConnectionError as exc:
            raise TransportError(str(exc), connect=True) from exc
        except requests.RequestException as exc:
            raise TransportError(str(exc)) from exc
