from dataclasses import dataclass
from functools import lru_cache
import logging
import os
from typing import TYPE_CHECKING

from pydantic_settings import BaseSettings, SettingsConfigDict

from paylib.logger import setup_logger

if TYPE_CHECKING:
    from paylib.backend import Backend


class Settings(BaseSettings):
    # API settings
    API_KEY: str = ""
    API_BASE_URL: str = "https://api.stripe.com/v1"
    HTTP_TIMEOUT: float = 80.0

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str | None = None

    model_config: SettingsConfigDict = SettingsConfigDict(  # type: ignore
        env_prefix="PAYLIB_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


def _log_file(name: str) -> str | None:
    if not settings.LOG_DIR:
        return None
    return os.path.join(settings.LOG_DIR, f"{name}.log")


_log_level = logging.getLevelName(settings.LOG_LEVEL.upper())
if not isinstance(_log_level, int):
    _log_level = logging.INFO

# Configure loggers
client_logger = setup_logger(
    name="paylib.client", log_file=_log_file("client"), level=_log_level
)
http_logger = setup_logger(
    name="paylib.http", log_file=_log_file("http"), level=_log_level
)


@dataclass(frozen=True)
class ClientConfig:
    """Credentials and backend shared by every client built without overrides."""

    api_key: str
    backend: "Backend"


_default_config: ClientConfig | None = None


def configure(
    api_key: str | None = None, backend: "Backend | None" = None
) -> ClientConfig:
    """
    Sets the process-wide default configuration.

    Call this once during startup, before any client is constructed without an
    explicit key or backend. Arguments left as None keep their current value
    (or the one derived from Settings when nothing was configured yet).

    Args:
        api_key (str | None): The secret API key sent with every request.
        backend (Backend | None): The network boundary used for every call.

    Returns:
        ClientConfig: The configuration now in effect.
    """
    global _default_config

    current = get_default_config() if (api_key is None or backend is None) else None
    _default_config = ClientConfig(
        api_key=api_key if api_key is not None else current.api_key,  # type: ignore[union-attr]
        backend=backend if backend is not None else current.backend,  # type: ignore[union-attr]
    )
    client_logger.info("Default client configuration updated")
    return _default_config


def get_default_config() -> ClientConfig:
    """
    Returns the process-wide default configuration.

    On first use without a prior configure() call, the API key is read from
    Settings and an HttpBackend is built from the API base URL and timeout.
    """
    global _default_config

    if _default_config is None:
        from paylib.backend import HttpBackend

        _default_config = ClientConfig(
            api_key=settings.API_KEY,
            backend=HttpBackend(
                base_url=settings.API_BASE_URL, timeout=settings.HTTP_TIMEOUT
            ),
        )
    return _default_config


def reset_default_config() -> None:
    """Drops the default configuration so the next read rebuilds it from Settings."""
    global _default_config
    _default_config = None


__all__ = [
    "Settings",
    "ClientConfig",
    "settings",
    "get_settings",
    "configure",
    "get_default_config",
    "reset_default_config",
    "client_logger",
    "http_logger",
]
