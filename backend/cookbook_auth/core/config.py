from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel
from dotenv import load_dotenv
from sqlalchemy.engine import URL
import os

load_dotenv()

DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[2] / "public"


def _env_flag(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _database_url_from_env() -> str:
    explicit = os.getenv("DATABASE_URL", "").strip()
    if explicit:
        return explicit

    # Fall back to the discrete MySQL variables when a host is given.
    if os.getenv("DB_HOST"):
        url = URL.create(
            "mysql+pymysql",
            username=os.getenv("DB_USER", "cookbook_user"),
            password=os.getenv("DB_PASS", "cookbook_pass"),
            host=os.getenv("DB_HOST", "localhost"),
            port=int(os.getenv("DB_PORT", "3306")),
            database=os.getenv("DB_NAME", "cookbook_db"),
        )
        return url.render_as_string(hide_password=False)

    return "sqlite:///./cookbook.db"


class Settings(BaseModel):
    database_url: str = _database_url_from_env()
    db_ssl_ca: str = os.getenv("DB_SSL_CA", "")
    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "10"))
    db_echo: bool = _env_flag(os.getenv("DB_ECHO"))

    # argon2 work factor
    hash_rounds: int = int(os.getenv("HASH_ROUNDS", "3"))
    hash_memory_cost: int = int(os.getenv("HASH_MEMORY_COST", "65536"))
    hash_parallelism: int = int(os.getenv("HASH_PARALLELISM", "4"))

    cors_origins: List[str] = _split_csv(os.getenv("CORS_ORIGINS", "*"))
    static_dir: str = os.getenv("STATIC_DIR", str(DEFAULT_STATIC_DIR))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
