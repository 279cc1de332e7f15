"""
Configuration objects and helpers for the PayRex client.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlsplit

from .environment import build_environment
from .errors import ConfigError, InvalidApiKeyError

__all__ = [
    "API_BASE_URL",
    "VERSION",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "load_client_config",
]

VERSION = "0.1.0"
API_BASE_URL = "https://api.payrexhq.com/v1"

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY_SECONDS = 0.5
DEFAULT_USER_AGENT = f"payrex-python/{VERSION}"

_PARAMETER_TO_ENV_KEY = {
    "api_key": "PAYREX_API_KEY",
    "base_url": "PAYREX_API_BASE_URL",
    "timeout": "PAYREX_TIMEOUT_SECONDS",
    "max_retries": "PAYREX_MAX_RETRIES",
    "retry_delay": "PAYREX_RETRY_DELAY_SECONDS",
    "user_agent": "PAYREX_USER_AGENT",
    "test_mode": "PAYREX_TEST_MODE",
}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _parse_float(raw: str, key: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be a number, got '{raw}'") from exc


def _parse_int(raw: str, key: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got '{raw}'") from exc


def _parse_bool(raw: str, key: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be a boolean, got '{raw}'")


@dataclass(frozen=True)
class ClientParameters:
    """
    Explicit parameter bundle for constructing :class:`ClientConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_client_config`.
    """

    api_key: Optional[str] = field(default=None, repr=False)
    base_url: Optional[str] = None
    timeout: Optional[float | int | str] = None
    max_retries: Optional[int | str] = None
    retry_delay: Optional[float | int | str] = None
    user_agent: Optional[str] = None
    test_mode: Optional[bool | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = _stringify(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[ClientParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:
            raise TypeError(f"Unknown client parameter '{key}'") from exc
        overrides[env_key] = _stringify(value)
    return overrides


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable settings shared by every request a client makes.

    ``timeout`` and ``retry_delay`` are in seconds. ``retry_delay`` is the
    base of the exponential backoff: the ``k``-th retry waits
    ``retry_delay * 2 ** (k - 1)``.
    """

    api_key: str = field(repr=False)
    base_url: str = API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY_SECONDS
    user_agent: str = DEFAULT_USER_AGENT
    test_mode: bool = False
    authorization: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise InvalidApiKeyError("API key cannot be empty")
        if any(ch in self.api_key for ch in "\r\n"):
            raise InvalidApiKeyError("API key must not contain line breaks")

        parts = urlsplit(self.base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigError(f"Base URL must be an http(s) URL, got '{self.base_url}'")
        if self.timeout <= 0:
            raise ConfigError("Timeout must be greater than zero")
        if self.max_retries < 0:
            raise ConfigError("Max retries must not be negative")
        if self.retry_delay < 0:
            raise ConfigError("Retry delay must not be negative")
        if not self.user_agent or any(ch in self.user_agent for ch in "\r\n"):
            raise ConfigError("User agent must be a non-empty single line")

        # HTTP Basic: the secret key is the username, the password is empty.
        token = base64.b64encode(f"{self.api_key}:".encode("utf-8")).decode("ascii")
        object.__setattr__(self, "authorization", f"Basic {token}")

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        api_key = values.get("PAYREX_API_KEY")
        if api_key is None:
            raise InvalidApiKeyError("PAYREX_API_KEY must be provided")

        base_url = values.get("PAYREX_API_BASE_URL") or API_BASE_URL
        timeout = _parse_float(
            values.get("PAYREX_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)),
            "PAYREX_TIMEOUT_SECONDS",
        )
        max_retries = _parse_int(
            values.get("PAYREX_MAX_RETRIES", str(DEFAULT_MAX_RETRIES)),
            "PAYREX_MAX_RETRIES",
        )
        retry_delay = _parse_float(
            values.get("PAYREX_RETRY_DELAY_SECONDS", str(DEFAULT_RETRY_DELAY_SECONDS)),
            "PAYREX_RETRY_DELAY_SECONDS",
        )
        user_agent = values.get("PAYREX_USER_AGENT") or DEFAULT_USER_AGENT
        test_mode = _parse_bool(values.get("PAYREX_TEST_MODE", "false"), "PAYREX_TEST_MODE")

        return cls(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            retry_delay=retry_delay,
            user_agent=user_agent,
            test_mode=test_mode,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[ClientParameters] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float | int | str] = None,
        max_retries: Optional[int | str] = None,
        retry_delay: Optional[float | int | str] = None,
        user_agent: Optional[str] = None,
        test_mode: Optional[bool | str] = None,
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "api_key": api_key,
                "base_url": base_url,
                "timeout": timeout,
                "max_retries": max_retries,
                "retry_delay": retry_delay,
                "user_agent": user_agent,
                "test_mode": test_mode,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float | int | str] = None,
    max_retries: Optional[int | str] = None,
    retry_delay: Optional[float | int | str] = None,
    user_agent: Optional[str] = None,
    test_mode: Optional[bool | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    The configuration can be provided entirely through environment variables,
    a ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        max_retries=max_retries,
        retry_delay=retry_delay,
        user_agent=user_agent,
        test_mode=test_mode,
    )
