"""Configuration module using Pydantic Settings.

Usage:
    from behaviorprops.config import CodecSettings

    settings = CodecSettings(lenient_numeric_literals=False)
"""

from behaviorprops.config.settings import CodecSettings, get_settings

__all__ = [
    "CodecSettings",
    "get_settings",
]
