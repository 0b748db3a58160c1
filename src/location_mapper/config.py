"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="MAPPER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Location Mapper API"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("data"), description="Root directory for stored data files.")
    locations_file: Optional[Path] = Field(
        default=None,
        description="JSON snapshot of saved locations, relative to data_root unless absolute. Leave unset to keep locations in memory only.",
    )
    distance_metric: Literal["haversine", "planar"] = Field(
        default="haversine",
        description="Distance used for nearest-neighbor selection: great-circle km or planar degrees.",
    )
    log_level: str = Field(default="INFO")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("locations_file", mode="before")
    @classmethod
    def _expand_optional_path(cls, value: Any) -> Optional[Path]:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
