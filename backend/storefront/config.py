import os
from dotenv import load_dotenv

load_dotenv()

class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Page layout engine
    LAYOUT_STORAGE_KEY = os.getenv("LAYOUT_STORAGE_KEY", "store-page-layout")
    LAYOUT_AUTOSAVE_ENABLED = True
    LAYOUT_AUTOSAVE_DELAY = float(os.getenv("LAYOUT_AUTOSAVE_DELAY", "1.0"))
    LAYOUT_UNDO_DEPTH = int(os.getenv("LAYOUT_UNDO_DEPTH", "10"))
    LAYOUT_ACTIVITY_LIMIT = int(os.getenv("LAYOUT_ACTIVITY_LIMIT", "50"))
    LAYOUT_REMOTE_SYNC_URL = os.getenv("LAYOUT_REMOTE_SYNC_URL")

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///storefront-dev.db")

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    LAYOUT_AUTOSAVE_ENABLED = False
    LAYOUT_REMOTE_SYNC_URL = None

config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
