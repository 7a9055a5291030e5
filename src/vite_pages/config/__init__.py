"""Configuration for vite-pages."""

from vite_pages.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
