"""Client configuration.

- Centralizes environment variables (pydantic-settings) outside the CLI.
- Adapters (HTTP) and the CLI read the same settings object.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "redfish-inventory"


class LogLevel(str, Enum):
    """Levels accepted by `logging.basicConfig`."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra deps)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env, keeping other keys."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# redfish-inventory user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central settings.

    Read from `REDFISH_*` environment variables, the project `.env`, then the
    user `.env` (see `get_user_env_file`).
    """

    model_config = SettingsConfigDict(
        env_prefix="REDFISH_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    endpoint: str = Field(
        default="https://localhost",
        min_length=1,
        description="Base URL of the service (scheme and host).",
    )
    username: str | None = Field(
        default=None,
        description="User for HTTP basic auth.",
    )
    password: str | None = Field(
        default=None,
        description="Password for HTTP basic auth.",
    )
    verify_tls: bool = Field(
        default=False,
        description="Verify the server certificate (BMCs often ship self-signed ones).",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="redfish-inventory/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Logging level for the CLI (DEBUG, INFO, WARNING...).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value
