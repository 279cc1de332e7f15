"""Tests for resource clients: paths, verbs, bodies and decoding."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from payrex import (
    ApiError,
    Currency,
    Deleted,
    ErrorKind,
    InvalidRequestError,
    JsonError,
    ListParams,
    Metadata,
    PaymentMethod,
)
from payrex.resources import (
    BillingStatementStatus,
    CapturePaymentIntent,
    CheckoutSessionLineItem,
    CreateCheckoutSession,
    CreateCustomer,
    CreatePaymentIntent,
    CreateRefund,
    CreateWebhook,
    PaymentIntentStatus,
    PayoutTransactionType,
    RefundReason,
    UpdateCustomer,
    UpdatePayment,
    WebhookListParams,
)

BASE = "https://api.payrexhq.com/v1"


def _page(*items):
    return {"resource": "list", "data": list(items), "has_more": False}


# ── payment intents ────────────────────────────────────────────────────────

class TestPaymentIntents:
    def test_create(self, client, session, respond, payment_intent_payload):
        session.queue(respond(200, payment_intent_payload))
        params = CreatePaymentIntent(
            amount=10000,
            currency=Currency.PHP,
            payment_methods=[PaymentMethod.CARD, PaymentMethod.GCASH],
            metadata=Metadata(order_id="12345"),
        )

        intent = client.payment_intents.create(params)

        call = session.calls[0]
        assert (call.method, call.url) == ("POST", f"{BASE}/payment_intents")
        assert call.data == [
            ("amount", "10000"),
            ("currency", "PHP"),
            ("payment_methods[0]", "card"),
            ("payment_methods[1]", "gcash"),
            ("metadata[order_id]", "12345"),
        ]
        assert intent.id == "pi_123"
        assert intent.status is PaymentIntentStatus.AWAITING_PAYMENT_METHOD
        assert intent.currency is Currency.PHP
        assert intent.metadata == {"order_id": "12345"}
        assert intent.created_at == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
        assert intent.raw == payment_intent_payload

    def test_retrieve(self, client, session, respond, payment_intent_payload):
        session.queue(respond(200, payment_intent_payload))
        client.payment_intents.retrieve("pi_123")
        call = session.calls[0]
        assert (call.method, call.url) == ("GET", f"{BASE}/payment_intents/pi_123")
        assert call.data is None

    def test_retrieve_rejects_foreign_id_without_a_request(self, client, session):
        with pytest.raises(InvalidRequestError):
            client.payment_intents.retrieve("cus_123")
        assert session.calls == []

    def test_cancel_and_capture(self, client, session, respond, payment_intent_payload):
        session.queue(respond(200, payment_intent_payload), respond(200, payment_intent_payload))

        client.payment_intents.cancel("pi_123")
        client.payment_intents.capture("pi_123", CapturePaymentIntent(amount=5000))

        cancel, capture = session.calls
        assert (cancel.method, cancel.url) == ("POST", f"{BASE}/payment_intents/pi_123/cancel")
        assert (capture.method, capture.url) == ("POST", f"{BASE}/payment_intents/pi_123/capture")
        assert capture.data == [("amount", "5000")]

    def test_missing_required_field_is_json_error(self, client, session, respond):
        session.queue(respond(200, {"id": "pi_123"}))
        with pytest.raises(JsonError):
            client.payment_intents.retrieve("pi_123")


# ── customers ──────────────────────────────────────────────────────────────

class TestCustomers:
    def test_create_omits_unset_fields(self, client, session, respond, customer_payload):
        session.queue(respond(200, customer_payload))
        customer = client.customers.create(CreateCustomer(currency=Currency.PHP, name="Juan"))

        assert session.calls[0].data == [("currency", "PHP"), ("name", "Juan")]
        assert customer.name == "Juan Dela Cruz"
        assert customer.metadata is None

    def test_update_uses_patch(self, client, session, respond, customer_payload):
        session.queue(respond(200, customer_payload))
        client.customers.update("cus_123", UpdateCustomer(email="new@example.com"))

        call = session.calls[0]
        assert (call.method, call.url) == ("PATCH", f"{BASE}/customers/cus_123")
        assert call.data == [("email", "new@example.com")]

    def test_delete(self, client, session, respond):
        session.queue(respond(200, {"id": "cus_123", "resource": "customer", "deleted": True}))
        result = client.customers.delete("cus_123")

        assert session.calls[0].method == "DELETE"
        assert result == Deleted(id="cus_123", deleted=True, object="customer")

    def test_delete_with_empty_body(self, client, session, respond):
        session.queue(respond(204))
        assert client.customers.delete("cus_123") is None

    def test_retrieve_with_empty_body_is_json_error(self, client, session, respond):
        session.queue(respond(200))
        with pytest.raises(JsonError):
            client.customers.retrieve("cus_123")

    def test_list_with_empty_body_is_json_error(self, client, session, respond):
        session.queue(respond(200))
        with pytest.raises(JsonError):
            client.customers.list()

    @pytest.mark.parametrize("body", [[], '"ok"', "null"])
    def test_retrieve_with_non_object_body_is_json_error(
        self, client, session, respond, body
    ):
        session.queue(respond(200, body))
        with pytest.raises(JsonError):
            client.customers.retrieve("cus_123")
        assert len(session.calls) == 1

    def test_list_sends_query(self, client, session, respond, customer_payload):
        session.queue(respond(200, _page(customer_payload)))
        page = client.customers.list(ListParams(limit=10, starting_after="cus_100"))

        call = session.calls[0]
        assert (call.method, call.url) == ("GET", f"{BASE}/customers")
        assert call.params == [("limit", "10"), ("starting_after", "cus_100")]
        assert [c.id for c in page] == ["cus_123"]

    def test_not_found_surfaces_api_error(self, client, session, respond):
        session.queue(respond(404, '{"errors": []}', headers={"x-request-id": "req_1"}))
        with pytest.raises(ApiError) as excinfo:
            client.customers.retrieve("cus_404")
        assert excinfo.value.kind is ErrorKind.NOT_FOUND
        assert excinfo.value.status_code == 404
        assert excinfo.value.request_id == "req_1"


# ── billing statements ─────────────────────────────────────────────────────

@pytest.fixture
def billing_statement_payload():
    return {
        "id": "bstm_123",
        "amount": 5000,
        "currency": "PHP",
        "customer_id": "cus_123",
        "livemode": False,
        "status": "draft",
        "payment_settings": {"payment_methods": ["card", "gcash"]},
        "line_items": [
            {
                "id": "bstm_li_1",
                "description": "Consulting",
                "unit_price": 2500,
                "quantity": 2,
                "billing_statement_id": "bstm_123",
                "livemode": False,
                "created_at": 1700000000,
            }
        ],
        "created_at": 1700000000,
        "updated_at": 1700000000,
    }


class TestBillingStatements:
    def test_decodes_line_items(self, client, session, respond, billing_statement_payload):
        session.queue(respond(200, billing_statement_payload))
        statement = client.billing_statements.retrieve("bstm_123")

        assert statement.status is BillingStatementStatus.DRAFT
        assert statement.payment_settings.payment_methods == (
            PaymentMethod.CARD,
            PaymentMethod.GCASH,
        )
        assert statement.line_items[0].amount == 5000

    @pytest.mark.parametrize("action", ["finalize", "send", "void", "mark_uncollectible"])
    def test_actions(self, client, session, respond, billing_statement_payload, action):
        session.queue(respond(200, billing_statement_payload))
        getattr(client.billing_statements, action)("bstm_123")

        call = session.calls[0]
        assert (call.method, call.url) == ("POST", f"{BASE}/billing_statements/bstm_123/{action}")

    def test_line_item_delete_path(self, client, session, respond):
        session.queue(respond(204))
        client.billing_statement_line_items.delete("bstm_li_1")
        assert session.calls[0].url == f"{BASE}/billing_statement_line_items/bstm_li_1"


# ── checkout sessions ──────────────────────────────────────────────────────

class TestCheckoutSessions:
    def test_create_flattens_line_items(self, client, session, respond):
        payload = {
            "id": "cs_123",
            "status": "active",
            "currency": "PHP",
            "line_items": [{"name": "Shirt", "amount": 50000, "quantity": 1}],
            "livemode": False,
            "url": "https://checkout.payrexhq.com/c/cs_123",
            "created_at": 1700000000,
            "updated_at": 1700000000,
        }
        session.queue(respond(200, payload))
        params = CreateCheckoutSession(
            currency=Currency.PHP,
            line_items=[CheckoutSessionLineItem(name="Shirt", amount=50000, quantity=1)],
            success_url="https://example.com/ok",
            cancel_url="https://example.com/cancel",
            payment_methods=[PaymentMethod.CARD],
        )

        checkout = client.checkout_sessions.create(params)

        assert session.calls[0].data == [
            ("currency", "PHP"),
            ("line_items[0][name]", "Shirt"),
            ("line_items[0][amount]", "50000"),
            ("line_items[0][quantity]", "1"),
            ("success_url", "https://example.com/ok"),
            ("cancel_url", "https://example.com/cancel"),
            ("payment_methods[0]", "card"),
        ]
        assert checkout.line_items[0].name == "Shirt"

    def test_expire_rejects_foreign_id(self, client, session, respond):
        with pytest.raises(InvalidRequestError):
            client.checkout_sessions.expire("pi_123")
        assert session.calls == []


# ── payments, payouts, refunds ─────────────────────────────────────────────

class TestPaymentsPayoutsRefunds:
    def test_payment_update(self, client, session, respond):
        payload = {
            "id": "pay_123",
            "amount": 10000,
            "amount_refunded": 0,
            "currency": "PHP",
            "fee": 250,
            "livemode": False,
            "net_amount": 9750,
            "payment_intent_id": "pi_123",
            "status": "paid",
            "payment_method": {
                "type": "card",
                "card": {"first6": "424242", "last4": "4242", "brand": "visa"},
            },
            "refunded": False,
            "created_at": 1700000000,
            "updated_at": 1700000000,
        }
        session.queue(respond(200, payload))
        payment = client.payments.update("pay_123", UpdatePayment(description="Paid"))

        assert session.calls[0].method == "PATCH"
        assert payment.payment_method.type is PaymentMethod.CARD
        assert payment.payment_method.card.last4 == "4242"

    def test_payout_transactions(self, client, session, respond):
        transaction = {
            "id": "pot_1",
            "amount": 10000,
            "net_amount": 9750,
            "transaction_id": "pay_123",
            "transaction_type": "payment",
            "created_at": 1700000000,
        }
        session.queue(respond(200, _page(transaction)))
        page = client.payouts.list_transactions("po_1", ListParams(limit=5))

        call = session.calls[0]
        assert call.url == f"{BASE}/payouts/po_1/transactions"
        assert call.params == [("limit", "5")]
        assert page.data[0].transaction_type is PayoutTransactionType.PAYMENT

    def test_payout_transactions_with_empty_body_is_json_error(
        self, client, session, respond
    ):
        session.queue(respond(200))
        with pytest.raises(JsonError):
            client.payouts.list_transactions("po_1")

    def test_refund_create(self, client, session, respond):
        payload = {
            "id": "ref_1",
            "amount": 1000,
            "currency": "PHP",
            "livemode": False,
            "status": "pending",
            "reason": "requested_by_customer",
            "payment_id": "pay_123",
            "created_at": 1700000000,
            "updated_at": 1700000000,
        }
        session.queue(respond(200, payload))
        refund = client.refunds.create(
            CreateRefund(
                payment_id="pay_123",
                amount=1000,
                currency=Currency.PHP,
                reason=RefundReason.REQUESTED_BY_CUSTOMER,
            )
        )
        assert ("reason", "requested_by_customer") in session.calls[0].data
        assert refund.reason is RefundReason.REQUESTED_BY_CUSTOMER


# ── webhooks & events ──────────────────────────────────────────────────────

@pytest.fixture
def webhook_payload():
    return {
        "id": "wh_1",
        "secret_key": "whsk_secret",
        "status": "enabled",
        "livemode": False,
        "url": "https://example.com/hooks",
        "events": ["payment_intent.succeeded"],
        "created_at": 1700000000,
        "updated_at": 1700000000,
    }


class TestWebhooksAndEvents:
    def test_create(self, client, session, respond, webhook_payload):
        session.queue(respond(200, webhook_payload))
        webhook = client.webhooks.create(
            CreateWebhook(url="https://example.com/hooks", events=["payment_intent.succeeded"])
        )
        assert session.calls[0].data == [
            ("url", "https://example.com/hooks"),
            ("events[0]", "payment_intent.succeeded"),
        ]
        assert "whsk_secret" not in repr(webhook)

    def test_list_with_filters(self, client, session, respond, webhook_payload):
        session.queue(respond(200, _page(webhook_payload)))
        client.webhooks.list(WebhookListParams(limit=3, url="https://example.com/hooks"))
        assert session.calls[0].params == [("limit", "3"), ("url", "https://example.com/hooks")]

    @pytest.mark.parametrize("action", ["enable", "disable"])
    def test_toggle(self, client, session, respond, webhook_payload, action):
        session.queue(respond(200, webhook_payload))
        getattr(client.webhooks, action)("wh_1")
        assert session.calls[0].url == f"{BASE}/webhooks/wh_1/{action}"

    def test_event_retrieve(self, client, session, respond):
        payload = {
            "id": "evt_1",
            "type": "payment_intent.succeeded",
            "data": {"id": "pi_123"},
            "created_at": 1700000000,
            "updated_at": 1700000000,
        }
        session.queue(respond(200, payload))
        event = client.events.retrieve("evt_1")
        assert event.resource == "payment_intent"
        assert event.data == {"id": "pi_123"}
