from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "LayoutLens"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    MAX_XML_SIZE: int = 50 * 1024 * 1024
    LOG_LEVEL: str = "INFO"

    class Config:
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
