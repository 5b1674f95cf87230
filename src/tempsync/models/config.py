"""Application configuration model."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, model_validator

from tempsync.exceptions import wrap_pydantic_error
from tempsync.utils.persistence import PydanticPersistence

from .enums import DispatchPolicy, SensorBackendType

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".tempsync" / "config.json"

# Environment variable -> (section, field)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "TEMPSYNC_LOWER_TEMP": ("color_map", "lower_temp"),
    "TEMPSYNC_UPPER_TEMP": ("color_map", "upper_temp"),
    "TEMPSYNC_BASE_VALUE": ("color_map", "base_value"),
    "TEMPSYNC_MAX_VALUE": ("color_map", "max_value"),
    "TEMPSYNC_POLL_INTERVAL": ("loop", "poll_interval"),
    "TEMPSYNC_DISPATCH_POLICY": ("loop", "dispatch_policy"),
    "TEMPSYNC_SENSOR_BACKEND": ("sensors", "backend"),
    "TEMPSYNC_OPENRGB_HOST": ("lighting", "host"),
    "TEMPSYNC_OPENRGB_PORT": ("lighting", "port"),
}


class ColorMapConfig(BaseModel):
    """Temperature range and channel bounds of the color scale.

    Immutable once constructed; the same instance is shared by the mapper
    and the loop for the lifetime of the process.
    """

    model_config = ConfigDict(frozen=True)

    lower_temp: float = Field(default=32.0, description="Temperature (C) where the scale starts")
    upper_temp: float = Field(default=85.0, description="Temperature (C) where red saturates")
    base_value: int = Field(default=10, ge=0, le=255, description="Channel value at or below lower_temp")
    max_value: int = Field(default=20, ge=0, le=255, description="Red channel saturation value")

    @model_validator(mode="after")
    def check_bounds(self) -> "ColorMapConfig":
        if not self.lower_temp < self.upper_temp:
            raise ValueError("lower_temp must be less than upper_temp")
        if self.base_value > self.max_value:
            raise ValueError("base_value must not exceed max_value")
        return self


class SensorConfig(BaseModel):
    """Temperature sensor backend settings."""

    backend: SensorBackendType = Field(
        default=SensorBackendType.HWMON, description="Sensor backend (hwmon or psutil)"
    )
    hwmon_path: Path = Field(
        default=Path("/sys/class/hwmon"), description="Root of the hwmon sysfs tree"
    )

    @field_serializer("hwmon_path")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)


class LightingConfig(BaseModel):
    """OpenRGB SDK server connection settings."""

    host: str = Field(default="127.0.0.1", description="OpenRGB SDK server address")
    port: int = Field(default=6742, ge=1, le=65535, description="OpenRGB SDK server port")
    client_name: str = Field(default="Temp Sync", description="Name announced to the server")


class LoopConfig(BaseModel):
    """Monitor loop timing and dispatch policy."""

    poll_interval: float = Field(default=0.5, gt=0, description="Seconds between polls")
    dispatch_policy: DispatchPolicy = Field(
        default=DispatchPolicy.ALWAYS,
        description="'always' pushes every tick, 'on_change' only when the temperature moved",
    )


class AppConfig(BaseModel):
    """Application configuration and settings."""

    color_map: ColorMapConfig = Field(default_factory=ColorMapConfig)
    sensors: SensorConfig = Field(default_factory=SensorConfig)
    lighting: LightingConfig = Field(default_factory=LightingConfig)
    loop: LoopConfig = Field(default_factory=LoopConfig)

    @classmethod
    def load_or_default(
        cls, path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None
    ) -> "AppConfig":
        """
        Load config from file or return default, then apply environment overrides.

        Args:
            path: Path to config file. If None, uses ~/.tempsync/config.json.
            environ: Environment mapping (defaults to os.environ)

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        config = PydanticPersistence.load_json_or_default(path, cls)
        return config.with_env_overrides(environ)

    def with_env_overrides(self, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Return a copy with TEMPSYNC_* environment variables applied."""
        environ = os.environ if environ is None else environ

        data = self.model_dump()
        applied = []
        for name, (section, field) in ENV_OVERRIDES.items():
            raw = environ.get(name)
            if raw is None or not raw.strip():
                continue
            data[section][field] = raw.strip()
            applied.append(name)

        if not applied:
            return self

        logger.debug(f"Applying environment overrides: {', '.join(applied)}")
        try:
            return type(self).model_validate(data)
        except ValidationError as e:
            raise wrap_pydantic_error(e, "environment") from e

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
