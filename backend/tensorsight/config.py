"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from tensorsight.engine.config import EngineConfig


class Settings(BaseSettings):
    tensorsight_log_level: str = "info"

    # Initial slider positions
    default_kernel_size: int = 5
    default_sigma: float = 1.0

    # Eigenvalue display divisor
    display_scale: float = 1000.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def engine_config(self) -> EngineConfig:
        return EngineConfig(display_scale=self.display_scale)


settings = Settings()
