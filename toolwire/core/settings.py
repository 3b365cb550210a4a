"""Adapter configuration module.

This module provides configuration for toolwire, read from environment
variables prefixed with ``TOOLWIRE_`` and an optional ``.env`` file.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AdapterSettings(BaseSettings):
    """Global settings for tool formatting.
    
    Attributes:
        strict: Strict value written to every converted tool when a call
            does not pass its own. None leaves converted tools untouched.
        log_level: Logging level name used by ``setup_logging``
        log_dir: Optional directory for rotating log files
    """
    
    strict: Optional[bool] = Field(None, description="Default strict mode for converted tools")
    log_level: str = Field("INFO", description="Logging level name")
    log_dir: Optional[str] = Field(None, description="Optional directory for log files")
    
    def __init__(self, env_file: Optional[str] = ".env", **kwargs):
        super().__init__(_env_file=env_file, **kwargs)
    
    model_config = SettingsConfigDict(
        env_prefix="TOOLWIRE_",
        case_sensitive=False,
        extra="ignore"
    )
