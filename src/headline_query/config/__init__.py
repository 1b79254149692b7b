"""Configuration module for headline queries."""

from headline_query.config.factory import create_client, create_from_config, create_session
from headline_query.config.loader import get_default_config_path, load_config
from headline_query.config.models import ClientConfig, HeadlineConfig, SessionConfig

__all__ = [
    "ClientConfig",
    "HeadlineConfig",
    "SessionConfig",
    "create_client",
    "create_from_config",
    "create_session",
    "get_default_config_path",
    "load_config",
]
