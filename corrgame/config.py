from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Game configuration loaded from environment variables and optionally .env (local).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # -------------------------
    # Sample size (clamped, never rejected)
    # -------------------------
    default_sample_size: int = Field(50, alias="CORRGAME_SAMPLE_SIZE")
    min_sample_size: int = Field(10, alias="CORRGAME_MIN_SAMPLE_SIZE")
    max_sample_size: int = Field(1000, alias="CORRGAME_MAX_SAMPLE_SIZE")

    # -------------------------
    # Target correlation
    # The player-facing target is limited to +/- target_r_limit, then jittered
    # so a round can't be memorized. Generation itself stays strictly inside
    # (-1, 1) to keep y from collapsing onto a line.
    # -------------------------
    default_target_r: float = Field(0.5, alias="CORRGAME_TARGET_R")
    target_r_limit: float = Field(0.95, alias="CORRGAME_TARGET_R_LIMIT")
    target_jitter: float = Field(0.09, alias="CORRGAME_TARGET_JITTER")
    generation_rho_limit: float = Field(0.98, alias="CORRGAME_RHO_LIMIT")

    # -------------------------
    # Guess checking
    # -------------------------
    default_tolerance: float = Field(0.1, alias="CORRGAME_TOLERANCE")

    # Degenerate (zero-variance) samples are regenerated at most this many times
    max_generation_attempts: int = Field(5, alias="CORRGAME_MAX_ATTEMPTS")

    # Optional fixed seed for reproducible sessions
    seed: Optional[int] = Field(None, alias="CORRGAME_SEED")

    # -------------------------
    # Logging
    # -------------------------
    log_level: str = Field("WARNING", alias="CORRGAME_LOG_LEVEL")
    log_format: Literal["console", "json"] = Field("console", alias="CORRGAME_LOG_FORMAT")

    def model_post_init(self, __context) -> None:
        """
        Normalize bounds: a swapped min/max sample size pair is reordered, and
        limits are stored as magnitudes.
        """
        if self.min_sample_size > self.max_sample_size:
            self.min_sample_size, self.max_sample_size = self.max_sample_size, self.min_sample_size
        self.target_r_limit = abs(self.target_r_limit)
        self.target_jitter = abs(self.target_jitter)
        self.generation_rho_limit = abs(self.generation_rho_limit)
        self.default_tolerance = abs(self.default_tolerance)


settings = Settings()
