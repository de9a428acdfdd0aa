"""App configuration from environment."""
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Project root (holds hangul/, game/, storage/)
ROOT_DIR = Path(__file__).resolve().parent.parent.parent

# Load .env from backend directory; real environment wins
load_dotenv(str(ROOT_DIR / "backend" / ".env"))

# DB
DATA_DIR = Path(os.environ.get("KKOMAENTLE_DATA_DIR", str(ROOT_DIR / "backend" / "data")))
DATABASE_URL = os.environ.get("KKOMAENTLE_DATABASE_URL", f"sqlite:///{DATA_DIR / 'kkomaentle.db'}")
if DATABASE_URL.startswith("sqlite:///") and "KKOMAENTLE_DATABASE_URL" not in os.environ:
    DATA_DIR.mkdir(parents=True, exist_ok=True)

# Catalog: JSON file of {term, category, hint, description}; empty = built-in words
CATALOG_PATH = os.environ.get("KKOMAENTLE_CATALOG_PATH", "")

# Fixed seed for Endless mode selection (reproducible runs); empty = system randomness
_seed = os.environ.get("KKOMAENTLE_SEED", "").strip()
RANDOM_SEED = int(_seed) if _seed else None

LOG_LEVEL = os.environ.get("KKOMAENTLE_LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
