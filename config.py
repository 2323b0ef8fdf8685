from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql://postgres:postgres@db:5432/bookstore"
    SECRET_KEY: str = "change_this_secret"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    JWT_ISSUER: str = "bookstore-api"
    JWT_AUDIENCE: str = "bookstore-api"
    FRONTEND_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    # Roles and demo accounts are created in the lifespan when enabled
    SEED_ON_STARTUP: bool = True

    @property
    def allow_origins(self) -> List[str]:
        return [origin.strip() for origin in self.FRONTEND_ORIGINS.split(",") if origin.strip()]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
