"""
KVS Configuration Settings

This module contains all configuration constants for the KVS server.
Every value can be overridden through the environment; command line
flags of ``kvs.server`` take precedence over both.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Server configuration settings."""

    # Network settings
    HOST: str = os.environ.get("KVS_HOST", "localhost")
    PORT: int = int(os.environ.get("KVS_PORT", "8080"))

    # Storage settings
    SHARD_COUNT: int = int(os.environ.get("KVS_SHARDS", "16"))

    # Logging settings
    DEBUG: bool = os.environ.get("KVS_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("KVS_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
