"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Renderer settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="MOCKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Preview canvas
    screen_width: float = Field(default=280, gt=0, description="Preview screen width")
    screen_height: float = Field(default=600, gt=0, description="Preview screen height")

    # Flow connectors
    corner_radius: float = Field(default=12, ge=0, description="Connector corner radius")
    label_char_width: float = Field(default=7.0, gt=0, description="Approximate label glyph width")

    # Native frames
    device_width: float = Field(default=393, gt=0, description="Device frame width")
    device_height: float = Field(default=852, gt=0, description="Device frame height")
    font_family: str = Field(default="Inter", min_length=1, description="Frame font family")

    # Validation
    max_spec_size: int = Field(default=512 * 1024, gt=0, description="Max spec document size (bytes)")
    max_spec_depth: int = Field(default=20, gt=0, description="Max spec JSON nesting depth")

    # Monitoring
    enable_metrics: bool = Field(default=True, description="Record Prometheus render metrics")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
