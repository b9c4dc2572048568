"""Configuration management for the data-structure engines."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_prefix="CORE_STRUCTURES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from environment variables
    )
    
    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render log events as JSON")
    
    # Monitoring
    enable_metrics: bool = Field(default=True, description="Enable Prometheus metrics")
    
    # LRU Cache Configuration
    lru_default_capacity: int = Field(
        default=1000,
        gt=0,
        description="Capacity used by create_cache() when none is given"
    )


# Global settings instance
settings = Settings()
