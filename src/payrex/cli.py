"""
Command-line interface for exercising the PayRex API.

    payrex --env-file .env customers create --param name=Juan --param currency=PHP
    payrex payment_intents retrieve pi_123
    payrex webhooks list --param limit=5
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from typing import Any, Dict, Iterable, Sequence, Tuple

import requests

from .api import ConfigError, create_client, load_client_config
from .core.errors import ApiError, InvalidApiKeyError, PayrexError
from .core.responses import error_payload

__all__ = ["OPERATIONS", "build_parser", "main", "run_cli"]

OPERATIONS: Dict[str, Tuple[str, ...]] = {
    "payment_intents": ("create", "retrieve", "cancel", "capture"),
    "customers": ("create", "retrieve", "update", "delete", "list"),
    "billing_statements": (
        "create",
        "retrieve",
        "update",
        "delete",
        "list",
        "finalize",
        "send",
        "void",
        "mark_uncollectible",
    ),
    "billing_statement_line_items": ("create", "update", "delete"),
    "checkout_sessions": ("create", "retrieve", "expire"),
    "payments": ("retrieve", "update"),
    "payouts": ("list_transactions",),
    "refunds": ("create", "update"),
    "webhooks": (
        "create",
        "retrieve",
        "update",
        "delete",
        "list",
        "enable",
        "disable",
    ),
    "events": ("retrieve", "list"),
}

# Operations that take parameters; the rest only take an id, if anything.
_PARAMETER_OPERATIONS = frozenset({"create", "update", "capture", "list", "list_transactions"})
_ID_FREE_OPERATIONS = frozenset({"create", "list"})


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _key_value(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Values must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Key must not be empty")
    return key, val


def _collect_pairs(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    collected: dict[str, str] = {}
    for key, value in pairs:
        collected[key] = value
    return collected


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payrex",
        description="Call a single PayRex API operation and print the result as JSON",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYREX_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_key_value,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument("resource", choices=sorted(OPERATIONS), help="API resource")
    parser.add_argument("operation", help="Operation to perform on the resource")
    parser.add_argument("id", nargs="?", help="Resource id, for operations that need one")
    parser.add_argument(
        "--param",
        action="append",
        type=_key_value,
        metavar="KEY=VALUE",
        default=None,
        help="Request parameter; nest with brackets, e.g. metadata[order]=42",
    )
    return parser


def _to_json(result: Any) -> Any:
    if result is None:
        return {}
    raw = getattr(result, "raw", None)
    if raw:
        return raw
    if dataclasses.is_dataclass(result):
        return dataclasses.asdict(result)
    return result


def _invoke(client: Any, args: argparse.Namespace) -> Any:
    resource = getattr(client, args.resource)
    method = getattr(resource, args.operation)

    call_args: list[Any] = []
    if args.operation not in _ID_FREE_OPERATIONS:
        call_args.append(args.id)
    if args.operation in _PARAMETER_OPERATIONS:
        call_args.append(_collect_pairs(args.param or ()))
    return method(*call_args)


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.operation not in OPERATIONS[args.resource]:
        parser.error(
            f"{args.resource} supports: {', '.join(OPERATIONS[args.resource])}"
        )
    if args.operation not in _ID_FREE_OPERATIONS and not args.id:
        parser.error(f"{args.resource} {args.operation} requires a resource id")

    _configure_logging(args.log_level)
    overrides = _collect_pairs(args.set or ())

    try:
        config = load_client_config(env_file=args.env_file, overrides=overrides)
    except (ConfigError, InvalidApiKeyError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_client(config=config, session=requests.Session())
    logging.info("Calling %s.%s on %s", args.resource, args.operation, config.base_url)

    try:
        result = _invoke(client, args)
    except ApiError as exc:
        logging.error(
            "%s (status %s, request id %s): %s",
            args.operation,
            exc.status_code,
            exc.request_id,
            error_payload(exc) or exc.message,
        )
        return 1
    except PayrexError as exc:
        logging.error("%s failed: %s", args.operation, exc)
        return 1

    print(json.dumps(_to_json(result), indent=2, sort_keys=True, default=str))
    return 0


def main() -> None:
    raise SystemExit(run_cli())
