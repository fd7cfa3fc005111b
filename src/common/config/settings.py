"""Application settings and environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    # Persistence settings
    DATA_FILE_PATH: str = os.getenv("DATA_FILE_PATH", os.path.join("data", "ibook.json"))

    # Expiry settings
    TIMEZONE: str = os.getenv("TIMEZONE", "UTC")  # Decides what "today" is for expiry checks
    EXPIRING_SOON_DAYS: int = int(os.getenv("EXPIRING_SOON_DAYS", "7"))

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
