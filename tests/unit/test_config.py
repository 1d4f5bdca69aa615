from pathlib import Path

import pytest

from contentbridge.core.config import (
    DEFAULT_CHANNEL_NAME,
    DEFAULT_HOME_DIRNAME,
    load_paths,
    load_settings,
)
from contentbridge.core.errors import ConfigurationError
from contentbridge.core.files import DEFAULT_COPY_CHUNK_BYTES


def test_load_paths_defaults_under_project_root(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("CONTENT_BRIDGE_HOME", raising=False)
    paths = load_paths(tmp_path)
    assert paths.home_dir == tmp_path.resolve() / DEFAULT_HOME_DIRNAME
    assert paths.db_path == paths.home_dir / "bridge.db"


def test_load_paths_honours_home_override(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("CONTENT_BRIDGE_HOME", str(tmp_path / "elsewhere"))
    paths = load_paths(tmp_path / "project")
    assert paths.home_dir == (tmp_path / "elsewhere").resolve()


def test_load_settings_defaults(monkeypatch) -> None:
    for name in (
        "CONTENT_BRIDGE_CHANNEL",
        "CONTENT_BRIDGE_AUTHORITY",
        "CONTENT_BRIDGE_COPY_CHUNK_BYTES",
        "CONTENT_BRIDGE_ATOMIC_COPY",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.channel_name == DEFAULT_CHANNEL_NAME
    assert settings.copy_chunk_bytes == DEFAULT_COPY_CHUNK_BYTES
    assert settings.atomic_copy is False


def test_load_settings_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("CONTENT_BRIDGE_CHANNEL", "viewer/files")
    monkeypatch.setenv("CONTENT_BRIDGE_COPY_CHUNK_BYTES", "4096")
    monkeypatch.setenv("CONTENT_BRIDGE_ATOMIC_COPY", "yes")
    settings = load_settings()
    assert settings.channel_name == "viewer/files"
    assert settings.copy_chunk_bytes == 4096
    assert settings.atomic_copy is True


def test_invalid_chunk_size_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("CONTENT_BRIDGE_COPY_CHUNK_BYTES", "-5")
    assert load_settings().copy_chunk_bytes == DEFAULT_COPY_CHUNK_BYTES
    monkeypatch.setenv("CONTENT_BRIDGE_COPY_CHUNK_BYTES", "lots")
    assert load_settings().copy_chunk_bytes == DEFAULT_COPY_CHUNK_BYTES


def test_invalid_boolean_is_a_configuration_error(monkeypatch) -> None:
    monkeypatch.setenv("CONTENT_BRIDGE_ATOMIC_COPY", "sometimes")
    with pytest.raises(ConfigurationError):
        load_settings()
