"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:8081", "http://localhost:19006"],
        description="Allowed CORS origins"
    )

    # === Velocity solver budget ===
    solver_max_iterations: int = Field(
        default=100, ge=1,
        description="Bisection iteration cap per segment"
    )
    solver_tolerance_w: float = Field(
        default=1e-4, gt=0,
        description="Power residual accepted as converged (W)"
    )
    solver_velocity_tolerance: float = Field(
        default=1e-6, gt=0,
        description="Bracket width accepted as converged (m/s)"
    )
    solver_initial_v_max: float = Field(
        default=30.0, gt=0,
        description="Initial upper velocity bound (m/s)"
    )
    solver_min_velocity: float = Field(
        default=0.1, ge=0,
        description="Lowest velocity ever returned (m/s)"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Info', etc."""
        return v.upper()

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
