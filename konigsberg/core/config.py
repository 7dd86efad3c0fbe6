from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings): # load all key=value pairs from .env
    """ Load settings"""
    DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'data' / 'konigsberg.db'}"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "app_errors.log"
    MAX_MODIFICATIONS: int = 3 # bridge changes suggested for an unsolvable level
    SEED_LEVELS: bool = True # insert built-in levels on startup

    model_config = SettingsConfigDict(
        env_file = BASE_DIR/".env",
        env_file_encoding = "utf-8",
        extra = "ignore",
    )

settings = Settings()
