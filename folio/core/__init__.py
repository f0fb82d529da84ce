"""Core: settings for the content store and its tooling."""

from folio.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
