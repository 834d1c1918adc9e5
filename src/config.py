"""Settings for the task list, from the environment plus an optional .env.

Priority: real env var > .env entry > default.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

ENV_PREFIX = 'TASKLIST'
_KEYS = {'TASKLIST_FILE', 'TASKLIST_LOG_FILE', 'TASKLIST_LOG_LEVEL'}


@dataclass(frozen=True)
class Settings:
    tasks_file: Path
    log_file: Optional[Path]
    log_level: str


def _read_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=VALUE lines for the keys we know; anything else is ignored."""
    overrides: dict[str, str] = {}
    if not path.exists():
        return overrides
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        if k in _KEYS and v:
            overrides[k] = v
    return overrides


def load_settings(environ: Optional[Mapping[str, str]] = None,
                  dotenv_path: Optional[Path] = None) -> Settings:
    environ = os.environ if environ is None else environ
    dotenv = _read_dotenv(dotenv_path if dotenv_path is not None else Path('.env'))

    def lookup(key: str) -> Optional[str]:
        value = environ.get(key)
        if value is not None and value.strip():
            return value.strip()
        return dotenv.get(key)

    log_file = lookup(f'{ENV_PREFIX}_LOG_FILE')
    return Settings(
        tasks_file=Path(lookup(f'{ENV_PREFIX}_FILE') or 'tasklist.json').expanduser(),
        log_file=Path(log_file).expanduser() if log_file else None,
        log_level=(lookup(f'{ENV_PREFIX}_LOG_LEVEL') or 'INFO').upper(),
    )


_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS
