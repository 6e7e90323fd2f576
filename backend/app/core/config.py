from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ENV: str = Field(default="dev")  # dev|prod|test

    # Security
    JWT_SECRET: str = Field(default="change-me")
    JWT_ALG: str = Field(default="HS256")
    JWT_EXPIRES_MIN: int = Field(default=60 * 12)

    # DB
    DATABASE_URL: str = Field(default="postgresql+psycopg://app:app@db:5432/marketplace")

    # CORS, comma separated
    CORS_ORIGINS: str = Field(default="http://localhost:3000,http://localhost")

    # Invoices are rendered here and removed after download
    EXPORT_DIR: str = Field(default="/app/data/exports")

    # Marketplace
    PLATFORM_FEE_RATE: float = Field(default=0.10, ge=0, le=1)
    INVOICE_CURRENCY: str = Field(default="PKR")
    DEFAULT_PROJECT_TYPE: str = Field(default="Full Stack Project")

    # Seed (dev)
    SEED_DEMO: bool = Field(default=True)
    DEMO_PASSWORD: str = Field(default="demo123")

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
