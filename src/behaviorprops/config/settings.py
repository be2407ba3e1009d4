"""Configuration settings using Pydantic Settings.

Usage:
    from behaviorprops.config import CodecSettings, get_settings

    # Load from environment variables (BEHAVIORPROPS_*)
    settings = get_settings()

    # Or override with explicit values
    strict = CodecSettings(lenient_numeric_literals=False)
"""

from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class CodecSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for literal parsing.

    Attributes:
        lenient_numeric_literals: Bad Number/Decimal literals log a warning and
            fall back to the kind's default. When False they raise.
        accept_bracketed_array_literals: Array literals may be written with
            their surrounding brackets (``[1,2]``) as well as bare (``1,2``).

    Environment Variables:
        BEHAVIORPROPS_LENIENT_NUMERIC_LITERALS
        BEHAVIORPROPS_ACCEPT_BRACKETED_ARRAY_LITERALS
    """

    model_config = SettingsConfigDict(
        env_prefix="BEHAVIORPROPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    lenient_numeric_literals: bool = True
    accept_bracketed_array_literals: bool = True


@cache
def get_settings() -> CodecSettings:
    """Process-wide settings, read from the environment once."""
    return CodecSettings()
