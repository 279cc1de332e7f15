"""
HTTP client that executes request descriptors against the PayRex API.
"""

from __future__ import annotations

import itertools
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

import requests

from .config import ClientConfig
from .encoding import flatten_form, to_wire
from .responses import Decoder, handle_response
from .retry import RetryController
from .transport import BODIED_METHODS, Transport

__all__ = ["HttpClient", "RequestDescriptor"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RequestDescriptor:
    """
    One logical API call: verb, path relative to the base URL and an
    optional body.

    For GET and DELETE the body is sent as query parameters instead.
    ``allow_empty`` lets a successful response without a body decode to
    ``None``.
    """

    method: str
    path: str
    body: Any = None
    allow_empty: bool = False


class HttpClient:
    """
    Runs :class:`RequestDescriptor` values through encoding, transport,
    retry and response decoding.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self.transport = Transport(config, session=session)
        self.retry = RetryController(config, sleep=sleep)

    @property
    def session(self) -> requests.Session:
        return self.transport.session

    def _attempt(
        self,
        descriptor: RequestDescriptor,
        decode: Optional[Decoder[T]],
        number: int,
    ) -> Optional[T]:
        method = descriptor.method.upper()
        encoded = flatten_form(to_wire(descriptor.body))

        logger.debug("%s %s attempt %d", method, descriptor.path, number)
        if method in BODIED_METHODS:
            response = self.transport.send(method, descriptor.path, form=encoded)
        else:
            query = encoded if isinstance(encoded, list) else None
            response = self.transport.send(method, descriptor.path, query=query)
        logger.debug(
            "%s %s answered %s", method, descriptor.path, response.status_code
        )
        return handle_response(
            response, decode, allow_empty=descriptor.allow_empty
        )

    def execute(
        self,
        descriptor: RequestDescriptor,
        decode: Optional[Decoder[T]] = None,
        *,
        cancel: Optional[threading.Event] = None,
        deadline: Optional[float] = None,
    ) -> Optional[T]:
        """
        Perform ``descriptor`` with retries and return ``decode(json_body)``.

        The body is re-encoded from the descriptor on every attempt. Raises a
        :class:`payrex.core.errors.PayrexError` subclass on failure; setting
        ``cancel`` aborts any pending backoff and further attempts, and
        ``deadline`` bounds the whole call in seconds.
        """
        attempts = itertools.count(1)
        return self.retry.run(
            lambda: self._attempt(descriptor, decode, next(attempts)),
            cancel=cancel,
            deadline=deadline,
        )
