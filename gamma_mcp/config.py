# gamma_mcp/config.py
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

from gamma_mcp.lib.headers import compose_headers, merge_headers

DEFAULT_API_BASE = "https://public-api.gamma.app/v0.2"
DEFAULT_ENV_FILE = ".env"


class ConfigError(ValueError):
    """Raised at startup when a configuration value cannot be used."""


def _env_float(values: Mapping[str, str], name: str, default: float) -> float:
    raw = values.get(name)
    if raw is None or not str(raw).strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


def _env_headers(values: Mapping[str, str], name: str = "GAMMA_HEADERS") -> Dict[str, str]:
    raw = values.get(name)
    if raw is None or not str(raw).strip():
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{name} must be a JSON object: {e}")
    if not isinstance(data, dict):
        raise ConfigError(f"{name} must be a JSON object, got {type(data).__name__}")
    return {str(k): str(v) for k, v in data.items()}


@dataclass(frozen=True)
class Config:
    # Gamma API
    api_key: str
    api_base: str
    header_overrides: Dict[str, str] = field(default_factory=dict)
    # Polling (seconds)
    poll_interval: float = 3.0
    poll_timeout: float = 300.0
    http_timeout: float = 30.0
    # Output handling
    output_dir: Path = Path("output")
    # Logging
    log_level: str = "INFO"

    @property
    def generations_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/generations"

    def headers(self) -> Dict[str, str]:
        """Effective header set for every Gamma API call."""
        return compose_headers(self.api_key, self.header_overrides)

    def has_credentials(self) -> bool:
        keys = {k.lower() for k in self.header_overrides}
        return bool(self.api_key.strip()) or "x-api-key" in keys or "authorization" in keys


def _read_env_file(env_file: Optional[str]) -> Dict[str, str]:
    path = Path(env_file) if env_file else Path(DEFAULT_ENV_FILE)
    if not path.is_file():
        if env_file:
            raise ConfigError(f"settings file not found: {path}")
        return {}
    return {k: v for k, v in dotenv_values(path).items() if v is not None}


def load_config(
    *,
    env: Optional[Mapping[str, str]] = None,
    env_file: Optional[str] = None,
    api_key: Optional[str] = None,
    api_base: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
    poll_interval_ms: Optional[float] = None,
    poll_timeout_ms: Optional[float] = None,
    http_timeout: Optional[float] = None,
    output_dir: Optional[str] = None,
    log_level: Optional[str] = None,
) -> Config:
    """
    Build the process configuration once.

    Layers, lowest to highest: defaults, settings file, environment, and the
    explicit keyword arguments (CLI flags). Header overrides merge per name.
    """
    env = os.environ if env is None else env
    env_file = env_file or env.get("GAMMA_ENV_FILE")

    values: Dict[str, str] = {}
    file_values = _read_env_file(env_file)
    values.update(file_values)
    values.update({k: v for k, v in env.items() if k.startswith("GAMMA_") or k == "LOG_LEVEL"})

    merged_headers = merge_headers(
        _env_headers(file_values),
        _env_headers(env),
        dict(headers or {}),
    )

    interval = _env_float(values, "GAMMA_POLL_INTERVAL_MS", 3000) if poll_interval_ms is None else poll_interval_ms
    timeout = _env_float(values, "GAMMA_POLL_TIMEOUT_MS", 300000) if poll_timeout_ms is None else poll_timeout_ms
    http_t = _env_float(values, "GAMMA_HTTP_TIMEOUT", 30) if http_timeout is None else http_timeout
    if interval < 0 or timeout <= 0 or http_t <= 0:
        raise ConfigError("poll interval must be >= 0; poll and http timeouts must be > 0")

    return Config(
        api_key = (api_key if api_key is not None else values.get("GAMMA_API_KEY", "")).strip(),
        api_base = api_base or values.get("GAMMA_API_BASE") or DEFAULT_API_BASE,
        header_overrides = merged_headers,
        poll_interval = interval / 1000.0,
        poll_timeout = timeout / 1000.0,
        http_timeout = http_t,
        output_dir = Path(output_dir or values.get("GAMMA_OUTPUT_DIR") or "output"),
        log_level = (log_level or values.get("LOG_LEVEL") or "INFO").upper(),
    )
