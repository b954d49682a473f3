from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    default_size: int = 30
    scaling_factor: int = 5
    filter_type: str = "lanczos"
    svg_unit: int = 10
    output_dir: str = "."
    max_size: int = 1024
    allowed_origins: str = "*"
    host: str = "0.0.0.0"
    port: int = 8002
    verbose: bool = False

    model_config = SettingsConfigDict(
        env_prefix="POLKICON_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
