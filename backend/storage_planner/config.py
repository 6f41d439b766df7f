from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Storage consumed per minute of finished runtime, by resolution class
    standard_gb_per_minute: float = 7 / 60    # HD
    high_res_gb_per_minute: float = 16 / 60   # 4K

    # Alternate catalog JSON (tiers + enterprise rate schedule).
    # Empty means the bundled storage_planner/data/catalog.json.
    catalog_path: str = ""

    default_billing_period: str = "annual"
    log_level: str = "INFO"

    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
