"""
Configuration for imageops.

Settings are grouped per concern (mask, resample, system) and can be
overridden through environment variables named
IMAGEOPS_<GROUP>__<FIELD>, e.g. IMAGEOPS_MASK__ANTIALIAS=true.
The mask and resample groups only fill in operation fields the pipeline
leaves unset; the transform functions never read them.
"""

import logging
import os
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from imageops.core.constants import MaskConstants, SystemConstants
from imageops.core.enums import Interpolation


class MaskSettings(BaseModel):
    """Alpha mask defaults for pipeline operations"""

    antialias: bool = Field(default=False, description="Soften mask edges by supersampling")
    supersampling: int = Field(
        default=MaskConstants.DEFAULT_SUPERSAMPLING,
        ge=MaskConstants.MIN_SUPERSAMPLING,
        le=MaskConstants.MAX_SUPERSAMPLING,
        description="Samples per pixel side when antialiasing",
    )


class ResampleSettings(BaseModel):
    """Resize defaults for pipeline operations"""

    interpolation: Interpolation = Field(
        default=Interpolation.BILINEAR, description="Interpolation used by scale/resize"
    )


class SystemSettings(BaseModel):
    """Process-wide settings"""

    log_level: str = Field(default=SystemConstants.LOG_LEVEL_DEFAULT)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseModel):
    """Top-level settings"""

    mask: MaskSettings = Field(default_factory=MaskSettings)
    resample: ResampleSettings = Field(default_factory=ResampleSettings)
    system: SystemSettings = Field(default_factory=SystemSettings)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Validated settings
        """
        environ = os.environ if environ is None else environ
        prefix = SystemConstants.ENV_PREFIX
        delimiter = SystemConstants.ENV_NESTED_DELIMITER

        data: Dict[str, Dict[str, Any]] = {}
        for key, value in environ.items():
            if not key.startswith(prefix):
                continue
            group, sep, field = key[len(prefix) :].lower().partition(delimiter)
            if not sep or group not in cls.model_fields:
                continue
            data.setdefault(group, {})[field] = value

        return cls.model_validate(data)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings.from_env()


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to use (defaults to get_settings())
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.system.log_level),
        format=SystemConstants.LOG_FORMAT,
    )
