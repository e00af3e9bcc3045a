from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Menu choice that aborts a selection
    CANCEL_CHOICE: int = -1

    # Registration order of vendor adapters (search results merge in this order)
    FLIGHT_VENDORS: List[str] = ["Canada", "Turkish"]
    HOTEL_VENDORS: List[str] = ["Hilton", "Marriott"]

    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    model_config = SettingsConfigDict(env_prefix="TRIPDESK_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

settings = Settings()
