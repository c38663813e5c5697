"""Configuration for hgts, loaded from the environment."""

from hgts.configuration.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
