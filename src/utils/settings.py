"""Environment-backed configuration, optionally seeded from a .env file."""
import logging
import os
from pathlib import Path
from threading import Lock
from typing import Tuple

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000"
DEFAULT_API_TIMEOUT = 10.0
DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_LOG_LEVEL = "INFO"

ENV_KEYS = {
    "CONFERENCE_API_URL",
    "CONFERENCE_API_TIMEOUT",
    "ADMIN_USERNAME",
    "ADMIN_PASSWORD",
    "LOG_LEVEL",
}

_ENV_LOADED = False
_ENV_LOCK = Lock()


def _reset_env_cache() -> None:
    """Forget that .env was loaded so the next lookup reads it again."""
    global _ENV_LOADED
    _ENV_LOADED = False


def load_env(env_path: Path = Path(".env")) -> None:
    """
    Load known keys from a .env file into os.environ.

    Variables already present in the environment are left untouched.
    The file is only read once per process.
    """
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if _ENV_LOADED:
            return

        if env_path.exists():
            for raw_line in env_path.read_text(encoding="utf-8").splitlines():
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue

                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"\'')

                if key in ENV_KEYS and key not in os.environ:
                    os.environ[key] = value

        _ENV_LOADED = True


def get_api_base_url() -> str:
    """Base URL of the conference API, without a trailing slash."""
    load_env()
    return os.getenv("CONFERENCE_API_URL", DEFAULT_API_URL).rstrip("/")


def get_api_timeout() -> float:
    """Total request timeout in seconds for conference API calls."""
    load_env()
    raw = os.getenv("CONFERENCE_API_TIMEOUT")
    if not raw:
        return DEFAULT_API_TIMEOUT

    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Invalid CONFERENCE_API_TIMEOUT %r, using %s", raw, DEFAULT_API_TIMEOUT)
        return DEFAULT_API_TIMEOUT

    if timeout <= 0:
        logger.warning("Non-positive CONFERENCE_API_TIMEOUT %r, using %s", raw, DEFAULT_API_TIMEOUT)
        return DEFAULT_API_TIMEOUT

    return timeout


def get_admin_credentials() -> Tuple[str, str]:
    """Return (username, password) configured for the admin account."""
    load_env()
    return (
        os.getenv("ADMIN_USERNAME", DEFAULT_ADMIN_USERNAME),
        os.getenv("ADMIN_PASSWORD", ""),
    )


def get_log_level() -> str:
    load_env()
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
