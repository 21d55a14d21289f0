from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LANPRINT_", env_file=".env", extra="ignore")

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Shared secret for /api/*; None disables the check
    access_token: Optional[str] = None

    # Windows: explicit SumatraPDF.exe location
    sumatra_path: Optional[str] = None

    # Uploads
    upload_dir: Path = Path("uploads")
    max_upload_mb: int = 50
    cleanup_delay_s: float = 60.0

    # Requests asking for more copies are rejected
    max_copies: int = 100

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


def get_settings() -> Settings:
    return Settings()
