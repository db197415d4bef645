from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "INFO"
    reference_data_path: str = ""
    cors_origins: list[str] = ["http://localhost:3000"]
    default_carbon_price: float = 50.0

    class Config:
        env_file = ".env"
        env_prefix = "SUSTAIN_ROI_"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
