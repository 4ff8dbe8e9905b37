from pathlib import Path
from typing import Literal

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

# Load .env for local/dev environments only for values missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from PLUMA_* environment variables."""

    # Logging Configuration
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(default="INFO", description="Logging level")
    log_format: Literal["plain", "json"] = Field(default="plain", description="Logging format (plain or json)")

    # Refinement Configuration
    delta: float = Field(default=0.001, gt=0, description="Finite-difference step for gradients")
    resolution: int = Field(default=100, gt=0, description="Seed samples per scan line")
    sub_resolution: int = Field(default=200, gt=0, description="Point set cells along the shorter region side")
    step_size: float = Field(default=0.05, gt=0, description="Distance a point moves per refinement pass")
    iterations: int = Field(default=100, gt=0, description="Number of refinement passes")

    class Config:
        env_prefix = "PLUMA_"
        extra = "forbid"  # Explicitly forbid undeclared settings


# Instantiate singleton settings object
settings = Settings()
