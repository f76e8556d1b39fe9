"""Configuration module for KVS."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
