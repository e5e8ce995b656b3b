"""Content store connection configuration.

A `StoreConfig` is built once (explicitly or from the environment) and passed
to every store session. It is validated at construction so a missing endpoint
or credential fails fast instead of on the first request.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_TIMEOUT_SECONDS = 30.0

ENV_ENDPOINT = "DIRECTUS_URL"
ENV_CREDENTIAL = "DIRECTUS_STATIC_TOKEN"
ENV_TIMEOUT = "AWARDOPS_STORE_TIMEOUT"


class StoreConfigError(RuntimeError):
    """Raised when the content store connection is not configured."""


@dataclass(frozen=True)
class StoreConfig:
    """Connection settings for the content store.

    Attributes:
        endpoint: Base URL of the store (trailing slash is stripped).
        credential: Static bearer token attached to every request.
        timeout: Per-request timeout in seconds.
    """

    endpoint: str
    credential: str
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        endpoint = (self.endpoint or "").strip()
        credential = (self.credential or "").strip()

        if not endpoint:
            raise StoreConfigError(
                f"{ENV_ENDPOINT} is not defined. Please set it in your environment variables."
            )
        if not credential:
            raise StoreConfigError(
                f"{ENV_CREDENTIAL} is not defined. Please set it in your environment variables."
            )
        if self.timeout <= 0:
            raise StoreConfigError(f"Store timeout must be positive, got {self.timeout}")

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "endpoint", endpoint.rstrip("/"))
        object.__setattr__(self, "credential", credential)

    @classmethod
    def from_env(cls) -> StoreConfig:
        """Build configuration from environment variables.

        Raises:
            StoreConfigError: If endpoint or credential is missing, or the
                timeout is not a positive number.
        """
        raw_timeout = os.environ.get(ENV_TIMEOUT, "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_SECONDS
        except ValueError as e:
            raise StoreConfigError(f"{ENV_TIMEOUT} must be a number, got {raw_timeout!r}") from e

        return cls(
            endpoint=os.environ.get(ENV_ENDPOINT, ""),
            credential=os.environ.get(ENV_CREDENTIAL, ""),
            timeout=timeout,
        )
