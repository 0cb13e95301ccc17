import math
import os
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

DEFAULT_TIMEOUT_SECONDS = 30.0
TIMEOUT_ENV_VAR = "REPO_PROBE_TIMEOUT"


@dataclass(frozen=True)
class ProbeConfig:
    """Settings for running git on behalf of a probe.

    Example config.toml:
      [probe]
      git_executable = "/usr/local/bin/git"
      timeout_seconds = 10
      verbose = false

      [probe.env]
      GIT_CONFIG_NOSYSTEM = "1"
    """

    git_executable: str = "git"
    timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS
    env: dict[str, str] = field(default_factory=dict)
    verbose: bool = False


def _parse_timeout(raw: object) -> float | None:
    if isinstance(raw, bool):
        raise ValueError(f"Invalid timeout: {raw!r}")
    if isinstance(raw, str):
        text = raw.strip().lower()
        if text in ("", "none"):
            return None
        try:
            raw = float(text)
        except ValueError:
            raise ValueError(f"Invalid timeout: {raw!r}") from None
    if not isinstance(raw, int | float):
        raise ValueError(f"Invalid timeout: {raw!r}")
    if not math.isfinite(raw):
        raise ValueError(f"Timeout must be finite: {raw!r}")
    if raw < 0:
        raise ValueError(f"Timeout must not be negative: {raw!r}")
    if raw == 0:
        return None
    return float(raw)


def load_probe_config(config_dir: Path | None) -> ProbeConfig:
    """Load config.toml from the given directory if present; otherwise return defaults.

    The REPO_PROBE_TIMEOUT environment variable overrides timeout_seconds.
    "none" or "0" disables the timeout.

    Raises:
        ValueError: If a value in config.toml has the wrong type, or a timeout
            value cannot be interpreted
    """
    config = ProbeConfig()

    if config_dir is not None:
        cfg_path = config_dir / "config.toml"
        if cfg_path.exists():
            data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
            table = data.get("probe", {})
            if not isinstance(table, dict):
                raise ValueError(f"{cfg_path}: [probe] must be a table, got {table!r}")
            config = _config_from_table(table)

    env_timeout = os.environ.get(TIMEOUT_ENV_VAR)
    if env_timeout is not None:
        config = replace(config, timeout_seconds=_parse_timeout(env_timeout))

    return config


def _config_from_table(table: dict) -> ProbeConfig:
    timeout = DEFAULT_TIMEOUT_SECONDS
    if "timeout_seconds" in table:
        timeout = _parse_timeout(table["timeout_seconds"])

    env_table = table.get("env", {})
    if not isinstance(env_table, dict):
        raise ValueError(f"probe.env must be a table, got {env_table!r}")
    env = {}
    for key, value in env_table.items():
        if not isinstance(value, str):
            raise ValueError(f"probe.env.{key} must be a string, got {value!r}")
        env[key] = value

    git_executable = table.get("git_executable", "git")
    if not isinstance(git_executable, str) or not git_executable:
        raise ValueError(
            f"probe.git_executable must be a non-empty string, got {git_executable!r}"
        )

    verbose = table.get("verbose", False)
    if not isinstance(verbose, bool):
        raise ValueError(f"probe.verbose must be true or false, got {verbose!r}")

    return ProbeConfig(
        git_executable=git_executable,
        timeout_seconds=timeout,
        env=env,
        verbose=verbose,
    )
