"""
Minimal script that uses the public API to create and retrieve a payment intent.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Tuple

from payrex import (
    ApiError,
    CaptureMethod,
    ConfigError,
    Currency,
    ErrorKind,
    Metadata,
    PaymentMethod,
    PayrexError,
    create_client,
    load_client_config,
)
from payrex.resources import CreatePaymentIntent


def _override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _build_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a payment intent using the SDK API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYREX_* settings",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument(
        "--api-key",
        help="Provide the secret API key without relying on environment data",
    )
    parser.add_argument(
        "--amount",
        type=int,
        default=10000,
        help="Amount in centavos (default: 10000, i.e. PHP 100.00)",
    )
    return parser.parse_args()


def _explain(error: ApiError) -> None:
    logging.error("Error type: %s", error.kind)
    logging.error("Message: %s", error.message)
    if error.status_code is not None:
        logging.error("Status code: %s", error.status_code)
    if error.request_id is not None:
        logging.error("Request id: %s", error.request_id)
    if error.kind is ErrorKind.AUTHENTICATION:
        logging.error("Check that your API key is correct")
    elif error.kind is ErrorKind.INVALID_REQUEST:
        logging.error("Check the request parameters")


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    overrides = _build_overrides(args.set or ())

    try:
        config = load_client_config(
            env_file=args.env_file,
            overrides=overrides,
            api_key=args.api_key,
        )
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_client(config=config)
    logging.info("Creating a payment intent against %s", config.base_url)

    params = CreatePaymentIntent(
        amount=args.amount,
        currency=Currency.PHP,
        payment_methods=[PaymentMethod.CARD, PaymentMethod.GCASH, PaymentMethod.MAYA],
        description="Example payment for Order #12345",
        capture_method=CaptureMethod.AUTOMATIC,
        metadata=Metadata(order_id="ORDER-12345", customer_email="customer@example.com"),
    )

    try:
        intent = client.payment_intents.create(params)
    except ApiError as exc:
        _explain(exc)
        return 1
    except PayrexError as exc:
        logging.error("Payment intent creation failed: %s", exc)
        return 1

    logging.info(
        "Created %s for %s (status %s)",
        intent.id,
        Currency.PHP.format_amount(intent.amount),
        intent.status,
    )

    try:
        retrieved = client.payment_intents.retrieve(intent.id)
    except PayrexError as exc:
        logging.error("Failed to retrieve payment intent: %s", exc)
        return 1

    logging.info("Retrieved %s, status %s", retrieved.id, retrieved.status)
    return 0


if __name__ == "__main__":
    sys.exit(main())
