"""Configuration module for loading and accessing client settings."""

from firetruck.exceptions import ConfigurationError

from .client_config import DEFAULT_HEADERS, ClientConfig
from .loader import Config, config

__all__ = ["DEFAULT_HEADERS", "ClientConfig", "Config", "ConfigurationError", "config"]
