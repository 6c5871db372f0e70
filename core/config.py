# core/config.py
"""Centralized configuration for callgraph-model.

Settings are read from environment variables with the ``CALLGRAPH_``
prefix. Defaults produce compact JSON and INFO-level logging.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class CodecSettings(BaseSettings):
    """JSON encoding options.

    Environment variables:
        CALLGRAPH_CODEC_INDENT: indent width for dumps (default: unset, compact)
        CALLGRAPH_CODEC_ENSURE_ASCII: escape non-ASCII names (default: false)
    """

    indent: Optional[int] = None
    ensure_ascii: bool = False

    model_config = {"env_prefix": "CALLGRAPH_CODEC_"}


class AppSettings(BaseSettings):
    """Application-level configuration."""

    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    codec: CodecSettings = Field(default_factory=CodecSettings)

    model_config = {"env_prefix": "CALLGRAPH_"}


# Singleton instance, importable from anywhere
settings = AppSettings()
