import os
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = ""
    SECRET_KEY: str = ""
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 86400  # 24 hours

    # Yearly receipt columns shown on the members register
    RECEIPT_YEAR_START: int = 2024
    RECEIPT_YEAR_END: int = 2030
    RECEIPT_MAX_LENGTH: int = 50

    ALLOWED_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    model_config = SettingsConfigDict(
        env_file=os.path.join(os.path.dirname(__file__), ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def receipt_years(self) -> List[str]:
        return [str(year) for year in range(self.RECEIPT_YEAR_START, self.RECEIPT_YEAR_END + 1)]

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


settings = Settings()
