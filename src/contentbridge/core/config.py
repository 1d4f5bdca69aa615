from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from contentbridge.core.errors import ConfigurationError
from contentbridge.core.files import DEFAULT_COPY_CHUNK_BYTES

DEFAULT_HOME_DIRNAME = ".contentbridge"
DEFAULT_CHANNEL_NAME = "pdf_reader/file_handler"
DEFAULT_PROVIDER_AUTHORITY = "contentbridge.documents"

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class BridgePaths:
    project_root: Path
    home_dir: Path
    db_path: Path


@dataclass(frozen=True)
class BridgeSettings:
    channel_name: str = DEFAULT_CHANNEL_NAME
    provider_authority: str = DEFAULT_PROVIDER_AUTHORITY
    copy_chunk_bytes: int = DEFAULT_COPY_CHUNK_BYTES
    atomic_copy: bool = False


def load_paths(project_root: Path | None = None) -> BridgePaths:
    root = (project_root or Path.cwd()).expanduser().resolve()

    home_raw = os.getenv("CONTENT_BRIDGE_HOME")
    if home_raw:
        home_dir = Path(home_raw).expanduser().resolve()
    else:
        home_dir = root / DEFAULT_HOME_DIRNAME

    return BridgePaths(
        project_root=root,
        home_dir=home_dir,
        db_path=home_dir / "bridge.db",
    )


def _read_positive_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _read_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    raise ConfigurationError(f"{name} must be one of {sorted(_TRUE_WORDS | _FALSE_WORDS)}, got {raw!r}")


def _read_str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def load_settings() -> BridgeSettings:
    return BridgeSettings(
        channel_name=_read_str_env("CONTENT_BRIDGE_CHANNEL", DEFAULT_CHANNEL_NAME),
        provider_authority=_read_str_env("CONTENT_BRIDGE_AUTHORITY", DEFAULT_PROVIDER_AUTHORITY),
        copy_chunk_bytes=_read_positive_int_env("CONTENT_BRIDGE_COPY_CHUNK_BYTES", DEFAULT_COPY_CHUNK_BYTES),
        atomic_copy=_read_bool_env("CONTENT_BRIDGE_ATOMIC_COPY", False),
    )
