from typing import Literal

from dotenv import load_dotenv
from pydantic import Field as Data
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Env(BaseSettings):
    """Environment Variables"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    STORE_BACKEND: Literal["mongo", "memory"] = Data(default="mongo")
    MONGO_URL: str = Data(default="mongodb://localhost:27017")
    MONGO_DATABASE: str = Data(default="wordwave")
    WORDS_COLLECTION: str = Data(default="words")
    MONGO_TIMEOUT_MS: int = Data(default=5000, gt=0)
    TRENDING_LIMIT: int = Data(default=5, ge=0, le=1000)
    ATOMIC_INCREMENTS: bool = Data(default=False)
    LOG_LEVEL: str = Data(default="INFO")
    HOST: str = Data(default="0.0.0.0")
    PORT: int = Data(default=8080)


env = Env()
