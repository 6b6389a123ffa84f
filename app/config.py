from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./study_abroad.db"
    ALLOWED_ORIGINS: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"

    # R2 settings - support both naming conventions
    R2_ACCESS_KEY: str = Field(default="", alias="R2_ACCESS_KEY_ID")
    R2_SECRET_KEY: str = Field(default="", alias="R2_SECRET_ACCESS_KEY")
    R2_BUCKET_URL: str = Field(default="", alias="R2_PUBLIC_URL")
    R2_ENDPOINT_URL: str = Field(default="", alias="R2_API_DEFAULT_VALUE")
    R2_BUCKET_NAME: Optional[str] = "images"

    MAX_IMAGE_SIZE_MB: float = 5

    JWT_SECRET_KEY: str = "your-secret-key-change-in-production"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env
        populate_by_name = True

settings = Settings()
