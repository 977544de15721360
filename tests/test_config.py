"""Tests for layered sandbox configuration."""

from pathlib import Path

from sandbox_core.config import DEFAULT_USER_DATA_DIR, ConfigResolver, SandboxConfiguration
from sandbox_core.paths import CONFIG_FILE_NAME, UserDirs


def test_defaults_are_deterministic(tmp_path: Path) -> None:
    resolver = ConfigResolver(user_dirs=UserDirs(config_dir_override=tmp_path), env={})
    configuration = resolver.resolve()
    assert configuration == SandboxConfiguration()
    assert configuration.user_data_dir == DEFAULT_USER_DATA_DIR


def test_config_resolution_precedence(tmp_path: Path) -> None:
    user_dirs = UserDirs(config_dir_override=tmp_path)
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text('[sandbox]\nsession_id = "file"\nmachine_id = "file-machine"\n')

    resolver = ConfigResolver(
        user_dirs=user_dirs,
        overrides={"session_id": "cli"},
        env={"SANDBOX_SESSION_ID": "env"},
    )
    assert resolver.resolve_setting("session_id") == "cli"

    resolver = ConfigResolver(user_dirs=user_dirs, env={"SANDBOX_SESSION_ID": "env"})
    assert resolver.resolve_setting("session_id") == "env"

    resolver = ConfigResolver(user_dirs=user_dirs, env={})
    assert resolver.resolve_setting("session_id") == "file"
    assert resolver.resolve().machine_id == "file-machine"

    config_file.unlink()
    assert resolver.resolve_setting("session_id") == "sandbox-session"


def test_malformed_config_file_is_ignored(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILE_NAME).write_text("this is = = not toml")
    resolver = ConfigResolver(user_dirs=UserDirs(config_dir_override=tmp_path), env={})
    assert resolver.resolve() == SandboxConfiguration()


def test_log_level_is_lowercased(tmp_path: Path) -> None:
    resolver = ConfigResolver(
        user_dirs=UserDirs(config_dir_override=tmp_path),
        env={"SANDBOX_LOG_LEVEL": "DEBUG"},
    )
    assert resolver.resolve().log_level == "debug"
