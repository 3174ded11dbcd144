from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ENV: str = Field(default="dev")  # dev|test|prod
    TZ: str = Field(default="America/Sao_Paulo")

    # Security
    JWT_SECRET: str = Field(default="change-me")
    JWT_ALG: str = Field(default="HS256")
    JWT_EXPIRES_MIN: int = Field(default=60 * 12)

    # DB
    DATABASE_URL: str = Field(default="postgresql+psycopg://app:app@db:5432/axion")

    # CORS
    CORS_ORIGINS: str = Field(default="http://localhost:5173,http://localhost")

    # Files
    EXPORT_DIR: str = Field(default="/app/data/exports")

    # Business defaults
    DEFAULT_TAX_RATE: float = Field(default=15.0)
    DEFAULT_COMPANY_NAME: str = Field(default="Empresa")
    DEFAULT_CURRENCY: str = Field(default="BRL")
    REPORTS_DEFAULT_DAYS: int = Field(default=30)
    SELLER_RANKING_DAYS: int = Field(default=30)

    # Seed (dev)
    SEED_DEMO: bool = Field(default=True)
    DEMO_ADMIN_LOGIN: str = Field(default="admin")
    DEMO_ADMIN_PASSWORD: str = Field(default="admin123")


settings = Settings()
