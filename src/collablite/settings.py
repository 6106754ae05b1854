"""Settings module. The values can be loaded from env"""
import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

base_path = Path(__file__).parent


class Settings(BaseSettings):
    """Settings class"""

    model_config = SettingsConfigDict(
        env_file=os.getenv("SETTINGS_CONFIG") or base_path.joinpath("prod.env"),
        extra="ignore",
    )

    # database
    database_dsn: str = "sqlite+aiosqlite:///./collablite.db"
    database_echo: bool = False
    create_tables: bool = True

    # logging
    log_level: str = "info"

    # general
    environment: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 4000
    service_name: str = "collablite-backend"

    # cors
    frontend_url: Optional[str] = None
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # graphql
    max_query_depth: int = 10

    # dataloaders
    dataloader_batch: bool = True
    dataloader_max_batch_size: Optional[int] = None

    @property
    def allowed_origins(self) -> List[str]:
        origins = list(self.cors_origins)
        if self.frontend_url and self.frontend_url not in origins:
            origins.append(self.frontend_url)
        return origins


@lru_cache
def get_settings() -> Settings:
    return Settings()
