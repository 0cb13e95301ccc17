"""Tests for probe configuration loading."""

from pathlib import Path

import pytest

from repo_probe.config import DEFAULT_TIMEOUT_SECONDS, TIMEOUT_ENV_VAR, ProbeConfig, load_probe_config


@pytest.fixture(autouse=True)
def _clear_timeout_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(TIMEOUT_ENV_VAR, raising=False)


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_probe_config(tmp_path) == ProbeConfig()


def test_none_config_dir_returns_defaults() -> None:
    config = load_probe_config(None)

    assert config.git_executable == "git"
    assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS


def test_reads_probe_table(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text(
        """
[probe]
git_executable = "/opt/git/bin/git"
timeout_seconds = 5
verbose = true

[probe.env]
GIT_CONFIG_NOSYSTEM = "1"
""",
        encoding="utf-8",
    )

    config = load_probe_config(tmp_path)

    assert config == ProbeConfig(
        git_executable="/opt/git/bin/git",
        timeout_seconds=5.0,
        env={"GIT_CONFIG_NOSYSTEM": "1"},
        verbose=True,
    )


def test_zero_timeout_disables_limit(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("[probe]\ntimeout_seconds = 0\n", encoding="utf-8")

    assert load_probe_config(tmp_path).timeout_seconds is None


def test_env_var_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "config.toml").write_text("[probe]\ntimeout_seconds = 5\n", encoding="utf-8")
    monkeypatch.setenv(TIMEOUT_ENV_VAR, "12.5")

    assert load_probe_config(tmp_path).timeout_seconds == 12.5


def test_env_var_none_disables_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(TIMEOUT_ENV_VAR, "none")

    assert load_probe_config(None).timeout_seconds is None


@pytest.mark.parametrize("value", ["soon", "-1"])
def test_invalid_env_timeout_raises(value: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(TIMEOUT_ENV_VAR, value)

    with pytest.raises(ValueError):
        load_probe_config(None)


def test_string_verbose_is_rejected(tmp_path: Path) -> None:
    """A quoted "false" must not switch verbose output on."""
    (tmp_path / "config.toml").write_text('[probe]\nverbose = "false"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="probe.verbose"):
        load_probe_config(tmp_path)


def test_non_table_probe_key_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("probe = 1\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"\[probe\] must be a table"):
        load_probe_config(tmp_path)


def test_non_table_env_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text('[probe]\nenv = "GIT_DIR=x"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="probe.env must be a table"):
        load_probe_config(tmp_path)


def test_non_string_env_value_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("[probe.env]\nGIT_TRACE = 1\n", encoding="utf-8")

    with pytest.raises(ValueError, match="probe.env.GIT_TRACE"):
        load_probe_config(tmp_path)


def test_non_string_git_executable_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("[probe]\ngit_executable = 1\n", encoding="utf-8")

    with pytest.raises(ValueError, match="probe.git_executable"):
        load_probe_config(tmp_path)


@pytest.mark.parametrize("value", ["nan", "inf"])
def test_non_finite_env_timeout_is_rejected(value: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(TIMEOUT_ENV_VAR, value)

    with pytest.raises(ValueError, match="finite"):
        load_probe_config(None)


def test_non_finite_file_timeout_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("[probe]\ntimeout_seconds = nan\n", encoding="utf-8")

    with pytest.raises(ValueError, match="finite"):
        load_probe_config(tmp_path)
