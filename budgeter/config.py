import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR / 'budgeter.db'}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Dashboard and report defaults
    UPCOMING_BILLS_DAYS = int(os.getenv("UPCOMING_BILLS_DAYS", "7"))
    RECENT_TRANSACTIONS_LIMIT = int(os.getenv("RECENT_TRANSACTIONS_LIMIT", "5"))
    DEFAULT_TREND_MONTHS = int(os.getenv("DEFAULT_TREND_MONTHS", "6"))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    LOG_LEVEL = "WARNING"
