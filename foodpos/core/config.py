# foodpos/core/config.py
import logging
import os
from decimal import Decimal

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


class Settings:
    PROJECT_NAME: str = "FoodPOS"

    DATABASE_URL: str = os.getenv("DATABASE_URL")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Business constants, overridable per deployment
    MAX_QUANTITY_PER_LINE: int = int(os.getenv("MAX_QUANTITY_PER_LINE", "100"))
    BANK_TRANSACTION_FEE: Decimal = Decimal(os.getenv("BANK_TRANSACTION_FEE", "1.00"))

settings = Settings()

# Validation Check
if not settings.DATABASE_URL:
    # Fallback for local testing if .env is missing (Use SQLite)
    logger.warning("DATABASE_URL not found. Using SQLite for local testing.")
    settings.DATABASE_URL = "sqlite:///./local_pos.db"
