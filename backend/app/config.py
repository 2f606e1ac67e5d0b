from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./paintapp.db"
    CORS_ORIGINS: List[str] = ["*"]
    SEED_DEFAULT_USERS: bool = True
    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
