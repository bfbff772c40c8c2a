"""
Configuration management module.
"""

from .settings import Settings, get_settings, set_settings, DEFAULT_BASE_URL

__all__ = [
    'Settings',
    'get_settings',
    'set_settings',
    'DEFAULT_BASE_URL',
]
