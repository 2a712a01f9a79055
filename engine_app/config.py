"""Configuration helpers for the outfit engine app."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_WEATHER_API_URL = "https://api.open-meteo.com/v1/forecast"


@dataclass
class EngineConfig:
    """Configuration values for the engine facade and its weather provider.

    The pure scoring core takes these values as plain arguments; only the
    application layer reads them from the environment.
    """

    combination_cap: int = 50
    default_limit: int = 5
    draws_per_template: int = 1
    random_seed: Optional[int] = None
    default_climate_profile: str = "new_york"
    weather_api_url: str = DEFAULT_WEATHER_API_URL
    weather_timeout_seconds: float = 5.0
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default; environment variables (upper-cased keys, prefixed ``ENGINE_``)
        win over file values.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("ENGINE_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = f"ENGINE_{key.upper()}"
            return os.getenv(env_key, yaml_config.get(key, default))

        seed = get_value("random_seed")
        return cls(
            combination_cap=int(get_value("combination_cap", "50") or 50),
            default_limit=int(get_value("default_limit", "5") or 5),
            draws_per_template=int(get_value("draws_per_template", "1") or 1),
            random_seed=int(seed) if seed not in (None, "") else None,
            default_climate_profile=str(get_value("default_climate_profile", "new_york") or "new_york"),
            weather_api_url=str(get_value("weather_api_url", DEFAULT_WEATHER_API_URL) or DEFAULT_WEATHER_API_URL),
            weather_timeout_seconds=float(get_value("weather_timeout_seconds", "5.0") or 5.0),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
