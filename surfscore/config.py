"""
Runtime configuration.

Values come from the process environment, optionally seeded from a ``.env``
file at the project root.  Nothing here is needed by the scoring core; it
only configures the data source and the web app.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict

ROOT_DIR = Path(__file__).resolve().parent.parent

logger = logging.getLogger(__name__)


def _parse_dotenv(text: str) -> Dict[str, str]:
    """Parse KEY=VALUE lines; blank lines, comments and malformed lines are skipped."""
    values: Dict[str, str] = {}
    for raw in text.splitlines():
        key, sep, val = raw.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        values[key] = val.strip().strip("\"'")
    return values


def _load_env_from_dotenv() -> None:
    """Seed ``os.environ`` from ``.env`` at the project root without overriding existing values."""
    dotenv_path = ROOT_DIR / ".env"
    if not dotenv_path.exists():
        return
    try:
        text = dotenv_path.read_text()
    except OSError as e:
        logger.warning("Could not read %s: %s", dotenv_path, e)
        return
    for key, val in _parse_dotenv(text).items():
        os.environ.setdefault(key, val)


# Load .env on import so SURF_* settings are available
_load_env_from_dotenv()

DEFAULT_DATA_PATH = ROOT_DIR / "data" / "conditions.csv"


def data_path() -> Path:
    """Location of the sample conditions CSV (``SURF_DATA_PATH`` overrides)."""
    override = os.getenv("SURF_DATA_PATH")
    return Path(override) if override else DEFAULT_DATA_PATH


def log_level() -> str:
    return os.getenv("SURF_LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    """Apply ``SURF_LOG_LEVEL`` to the root logger."""
    level = getattr(logging, log_level(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
