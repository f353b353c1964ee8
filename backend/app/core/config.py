import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Empty path keeps everything in memory for the lifetime of the process
    STORAGE_PATH: str = ""

    ADMIN_EMAIL: str = "admin@workplace.com"
    ADMIN_PASSWORD: str = "work123"
    ADMIN_FULL_NAME: str = "Admin"

    MIN_PASSWORD_LENGTH: int = 6
    SEARCH_DEBOUNCE_MS: int = 200

    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
