"""Settings from environment variables, optionally loaded from a .env file."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_FILE = "contacts.json"
DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    file_path: str = DEFAULT_FILE
    default_region: str | None = None
    atomic_writes: bool = True
    log_level: str = DEFAULT_LOG_LEVEL


def load_env_file() -> None:
    """Load .env from the current dir, else from the repo root. Existing env vars win."""
    repo_root = Path(__file__).resolve().parent.parent.parent.parent
    for path in (Path.cwd() / ".env", repo_root / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    return default


def load_settings() -> Settings:
    """PHONEBOOK_FILE, PHONEBOOK_DEFAULT_REGION, PHONEBOOK_ATOMIC_WRITES, PHONEBOOK_LOG_LEVEL."""
    region = os.environ.get("PHONEBOOK_DEFAULT_REGION", "").strip().upper() or None
    return Settings(
        file_path=os.environ.get("PHONEBOOK_FILE", "").strip() or DEFAULT_FILE,
        default_region=region,
        atomic_writes=_env_bool("PHONEBOOK_ATOMIC_WRITES", True),
        log_level=os.environ.get("PHONEBOOK_LOG_LEVEL", "").strip().upper()
        or DEFAULT_LOG_LEVEL,
    )
