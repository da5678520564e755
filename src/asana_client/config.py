"""Client configuration resolved from arguments, environment and ``.env``.

Resolution order (highest to lowest priority):
1. Explicit keyword override
2. Environment variable
3. .env file (python-dotenv)
4. Default value

Example:
    ```python
    from asana_client.config import ClientConfig

    # Reads ASANA_ACCESS_TOKEN etc. from the environment or a .env file
    config = ClientConfig.from_env()

    # Explicit values win over the environment
    config = ClientConfig.from_env(token="explicit-token", page_size=100)
    ```

Recognised variables: ``ASANA_ACCESS_TOKEN``, ``ASANA_BASE_URL``,
``ASANA_TIMEOUT``, ``ASANA_PAGE_SIZE``, ``ASANA_RETRY_AFTER_POLICY`` and
``ASANA_ENABLE`` (comma separated feature flags).

The access token is never logged.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock
from typing import Any

from dotenv import load_dotenv

from asana_client.errors import RetryAfterPolicy
from asana_client.pagination import DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://app.asana.com/api/1.0"
DEFAULT_TIMEOUT = 30.0

ENV_TOKEN = "ASANA_ACCESS_TOKEN"
ENV_BASE_URL = "ASANA_BASE_URL"
ENV_TIMEOUT = "ASANA_TIMEOUT"
ENV_PAGE_SIZE = "ASANA_PAGE_SIZE"
ENV_RETRY_AFTER_POLICY = "ASANA_RETRY_AFTER_POLICY"
ENV_ENABLE = "ASANA_ENABLE"

_dotenv_lock = Lock()
_dotenv_loaded: set[str] = set()


class ConfigurationError(ValueError):
    """Raised when a configuration value cannot be parsed.

    Attributes:
        env_var_name: The environment variable holding the bad value (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


def _ensure_dotenv_loaded(dotenv_path: str | Path | None) -> None:
    """Load a .env file once per path (thread-safe).

    Values already present in the environment are not overridden.
    """
    key = str(dotenv_path) if dotenv_path is not None else ""
    with _dotenv_lock:
        if key in _dotenv_loaded:
            return
        try:
            load_dotenv(dotenv_path=dotenv_path)
            logger.debug(f"Loaded .env file for client configuration ({dotenv_path or 'auto-discovered'})")
        except OSError as e:
            logger.warning(f"Failed to load .env file: {e}")
        _dotenv_loaded.add(key)


def _split_flags(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(flag.strip() for flag in value.split(",") if flag.strip())


def _parse(env_var_name: str, raw: str, parser: Any) -> Any:
    try:
        return parser(raw)
    except ValueError:
        raise ConfigurationError(
            f"Invalid value for {env_var_name}: {raw!r}", env_var_name=env_var_name
        ) from None


@dataclass(frozen=True)
class ClientConfig:
    """Settings for :class:`asana_client.AsanaClient`.

    Attributes:
        token: Personal access token or OAuth bearer token.
        base_url: API root, including the version prefix.
        timeout: Request timeout in seconds, passed to httpx.
        page_size: ``limit`` used by the ``all_*`` helpers.
        retry_after_policy: How Retry-After headers are read on errors.
        enable: Feature flags sent in Asana-Enable on every request.
    """

    token: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    page_size: int = DEFAULT_PAGE_SIZE
    retry_after_policy: RetryAfterPolicy = RetryAfterPolicy.SECONDS
    enable: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ConfigurationError(f"page_size must be positive, got {self.page_size}")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")

    def __repr__(self) -> str:
        token = "***" if self.token is not None else "None"
        return (
            f"ClientConfig(token={token}, base_url={self.base_url!r}, timeout={self.timeout}, "
            f"page_size={self.page_size}, retry_after_policy={self.retry_after_policy}, enable={self.enable})"
        )

    @classmethod
    def from_env(
        cls,
        *,
        dotenv_path: str | Path | None = None,
        load_dotenv: bool = True,
        **overrides: Any,
    ) -> "ClientConfig":
        """Resolve configuration from overrides, the environment and .env.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Set to False to skip .env loading entirely.
            **overrides: Explicit field values (highest priority).

        Raises:
            ConfigurationError: If a variable holds an unparseable value.
        """
        if load_dotenv:
            _ensure_dotenv_loaded(dotenv_path)

        values: dict[str, Any] = {}

        if os.environ.get(ENV_TOKEN):
            values["token"] = os.environ[ENV_TOKEN]
            logger.debug(f"Resolved access token from environment variable '{ENV_TOKEN}': ***")
        if os.environ.get(ENV_BASE_URL):
            values["base_url"] = os.environ[ENV_BASE_URL].rstrip("/")
        if os.environ.get(ENV_TIMEOUT):
            values["timeout"] = _parse(ENV_TIMEOUT, os.environ[ENV_TIMEOUT], float)
        if os.environ.get(ENV_PAGE_SIZE):
            values["page_size"] = _parse(ENV_PAGE_SIZE, os.environ[ENV_PAGE_SIZE], int)
        if os.environ.get(ENV_RETRY_AFTER_POLICY):
            values["retry_after_policy"] = _parse(
                ENV_RETRY_AFTER_POLICY, os.environ[ENV_RETRY_AFTER_POLICY].lower(), RetryAfterPolicy
            )
        if os.environ.get(ENV_ENABLE):
            values["enable"] = _split_flags(os.environ[ENV_ENABLE])

        values.update({key: value for key, value in overrides.items() if value is not None})
        if isinstance(values.get("enable"), (list, str)):
            enable = values["enable"]
            values["enable"] = _split_flags(enable) if isinstance(enable, str) else tuple(enable)

        return cls(**values)
