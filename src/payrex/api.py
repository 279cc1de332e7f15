"""
Public, high-level helpers for building a PayRex client.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .client import PayrexClient
from .core.config import ClientConfig, ClientParameters, ConfigError, load_client_config
from .core.environment import ClientEnvironment, build_environment

__all__ = [
    "ClientConfig",
    "ClientEnvironment",
    "ClientParameters",
    "ConfigError",
    "PayrexClient",
    "build_environment",
    "create_client",
    "load_client_config",
]


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
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
) -> PayrexClient:
    """
    Construct a :class:`PayrexClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from environment data.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            api_key,
            base_url,
            timeout,
            max_retries,
            retry_delay,
            user_agent,
            test_mode,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
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
    return PayrexClient(cfg, session=session)
