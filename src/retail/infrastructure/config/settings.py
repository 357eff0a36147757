"""Application settings read from environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR

    # Presentation settings
    RECEIPT_FORMAT: str = os.getenv("RETAIL_RECEIPT_FORMAT", "text")  # text, html
    REPORT_KIND: str = os.getenv("RETAIL_REPORT_KIND", "sales")  # sales, inventory


settings = Settings()
