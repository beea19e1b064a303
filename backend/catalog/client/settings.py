from pydantic_settings import BaseSettings


class ClientSettings(BaseSettings):
    """Client-side settings, read from CATALOG_* environment variables."""

    API_BASE_URL: str = "http://localhost:5073/api"
    API_TIMEOUT: int = 10000  # milliseconds
    DEFAULT_CURRENCY: str = "LKR"
    ITEMS_PER_PAGE: int = 10
    ENABLE_REQUEST_LOGGING: bool = True
    ENABLE_DEBUG_LOGS: bool = True

    class Config:
        env_prefix = "CATALOG_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
