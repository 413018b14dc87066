"""
Configuration package.

This package contains library configuration and settings.
"""

from booklibrary.core.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
