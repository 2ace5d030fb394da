import os
import pathlib
from dotenv import load_dotenv
from typing import List

ROOT_DIR = pathlib.Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=ROOT_DIR / ".env")


class Settings:
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY")
    GEMINI_BASE_URL: str = os.getenv(
        "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
    )
    PLANNER_MODEL: str = os.getenv("PLANNER_MODEL", "gemini-2.5-flash")
    PLACES_MODEL: str = os.getenv("PLACES_MODEL", "gemini-2.0-flash")
    MAP_MODEL: str = os.getenv("MAP_MODEL", "gemini-2.0-flash-lite")
    GEMINI_TIMEOUT: float = float(os.getenv("GEMINI_TIMEOUT", "60"))

    MONGO_URI: str = os.getenv("MONGO_URI")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "tripmate")

    JWT_SECRET: str = os.getenv("JWT_SECRET")
    JWT_EXPIRES_HOURS: int = int(os.getenv("JWT_EXPIRES_HOURS", "5"))
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "5000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def validate(self):
        missing_keys: List[str] = []
        if not self.GEMINI_API_KEY:
            missing_keys.append("GEMINI_API_KEY")
        if not self.MONGO_URI:
            missing_keys.append("MONGO_URI")
        if not self.JWT_SECRET:
            missing_keys.append("JWT_SECRET")
        if missing_keys:
            raise ValueError(f"Missing environment variables: {', '.join(missing_keys)}")
        return True


settings = Settings()
