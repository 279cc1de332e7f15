"""
The :class:`PayrexClient` entry point.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

import requests

from .core.client import HttpClient
from .core.config import ClientConfig
from .resources import (
    BillingStatementLineItems,
    BillingStatements,
    CheckoutSessions,
    Customers,
    Events,
    PaymentIntents,
    Payments,
    Payouts,
    Refunds,
    Webhooks,
)

__all__ = ["PayrexClient"]


class PayrexClient:
    """
    Access point for every PayRex resource.

    All resource clients share one :class:`HttpClient`, and through it one
    configuration and one ``requests.Session``.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self.http = HttpClient(config, session=session, sleep=sleep)
        self._payment_intents = PaymentIntents(self.http)
        self._customers = Customers(self.http)
        self._billing_statements = BillingStatements(self.http)
        self._billing_statement_line_items = BillingStatementLineItems(self.http)
        self._checkout_sessions = CheckoutSessions(self.http)
        self._payments = Payments(self.http)
        self._payouts = Payouts(self.http)
        self._refunds = Refunds(self.http)
        self._webhooks = Webhooks(self.http)
        self._events = Events(self.http)

    @classmethod
    def with_api_key(cls, api_key: str, **kwargs) -> "PayrexClient":
        """Build a client with default settings for ``api_key``."""
        return cls(ClientConfig(api_key=api_key), **kwargs)

    @property
    def payment_intents(self) -> PaymentIntents:
        return self._payment_intents

    @property
    def customers(self) -> Customers:
        return self._customers

    @property
    def billing_statements(self) -> BillingStatements:
        return self._billing_statements

    @property
    def billing_statement_line_items(self) -> BillingStatementLineItems:
        return self._billing_statement_line_items

    @property
    def checkout_sessions(self) -> CheckoutSessions:
        return self._checkout_sessions

    @property
    def payments(self) -> Payments:
        return self._payments

    @property
    def payouts(self) -> Payouts:
        return self._payouts

    @property
    def refunds(self) -> Refunds:
        return self._refunds

    @property
    def webhooks(self) -> Webhooks:
        return self._webhooks

    @property
    def events(self) -> Events:
        return self._events
