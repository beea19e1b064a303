from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./productcatalog.db"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 5073
    SERVICE_NAME: str = "product-catalog"
    LOG_LEVEL: str = "INFO"
    FRONTEND_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    SEED_DEMO_DATA: bool = True
    RESET_DB: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
