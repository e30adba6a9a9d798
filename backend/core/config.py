# backend/core/config.py
import os
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv

# ================== ENV ==================

ROOT_DIR = Path(__file__).resolve().parents[2]
load_dotenv(ROOT_DIR / "backend/.env", override=True)

def env(*names: str, default: Optional[str] = None) -> str:
    for n in names:
        v = os.environ.get(n)
        if v is not None and str(v).strip() != "":
            return v
    if default is not None:
        return default
    raise KeyError(f"Missing required env var. Tried: {', '.join(names)}")

# ================== SERVER ==================

HOST = env("HOST", default="0.0.0.0")
PORT = int(env("PORT", default="5000"))

def get_cors_origins() -> List[str]:
    raw = env("CORS_ORIGINS", default="*")
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]

# ================== LOGGING ==================

LOG_LEVEL = env("LOG_LEVEL", default="INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ================== GENERATOR ==================

def parse_random_seed(raw: Optional[str]) -> Optional[int]:
    """
    Optional fixed seed for the idea generator.
    When set, every request gets its own Random(seed) so identical inputs give identical ideas.
    """
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"IDEA_RANDOM_SEED must be an integer, got {raw!r}")

# parsed at import so a bad value stops the server at boot
RANDOM_SEED = parse_random_seed(os.environ.get("IDEA_RANDOM_SEED"))

# ================== DATABASE ==================
# SQLite by default, MySQL when MYSQL_HOST is configured

def get_database_url() -> str:
    """Get database URL - supports DATABASE_URL, MySQL or SQLite."""
    database_url = os.environ.get("DATABASE_URL", "")
    if database_url:
        return database_url

    mysql_host = os.environ.get("MYSQL_HOST")
    if mysql_host:
        mysql_port = int(os.environ.get("MYSQL_PORT", "3306"))
        mysql_user = os.environ.get("MYSQL_USER", "root")
        mysql_password = os.environ.get("MYSQL_PASSWORD", "")
        mysql_db = os.environ.get("MYSQL_DB", "ideaforge")
        return f"mysql+aiomysql://{mysql_user}:{mysql_password}@{mysql_host}:{mysql_port}/{mysql_db}?charset=utf8mb4"

    db_path = ROOT_DIR / "backend" / "ideaforge.db"
    return f"sqlite+aiosqlite:///{db_path}"
