"""Configuration package.

Single source of truth: ``RuntimeSettings`` via ``get_settings()``.
"""

from .runtime import RuntimeSettings, Transport, get_settings

__all__ = [
    "RuntimeSettings",
    "Transport",
    "get_settings",
]
