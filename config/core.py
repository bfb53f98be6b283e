import os
from dataclasses import dataclass
from typing import Dict, List, Optional


class ConfigError(Exception):
    pass


WEEKS_PER_MONTH = 4.33
DEFAULT_HORIZON_MONTHS = 60
DEFAULT_EXPORT_DIR = "data/exports"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def _strip_quotes(value: str) -> str:
    if (value.startswith('"') and value.endswith('"')) or (
        value.startswith("'") and value.endswith("'")
    ):
        return value[1:-1]
    return value


def load_env_file(path: str, override: bool = False) -> None:
    if not path or not os.path.exists(path):
        return
    with open(path, "r", encoding="utf-8") as handle:
        for line in handle:
            raw = line.strip()
            if not raw or raw.startswith("#") or "=" not in raw:
                continue
            key, value = raw.split("=", 1)
            key = key.strip()
            value = _strip_quotes(value.strip())
            if override or key not in os.environ:
                os.environ[key] = value


@dataclass(frozen=True)
class EngineConfig:
    horizon_months: int = DEFAULT_HORIZON_MONTHS
    weeks_per_month: float = WEEKS_PER_MONTH
    export_dir: str = DEFAULT_EXPORT_DIR
    log_level: str = "INFO"


def safe_config_summary(config: EngineConfig) -> Dict[str, str]:
    return {
        "ROI_HORIZON_MONTHS": str(config.horizon_months),
        "ROI_WEEKS_PER_MONTH": str(config.weeks_per_month),
        "ROI_EXPORT_DIR": config.export_dir,
        "ROI_LOG_LEVEL": config.log_level,
    }


def _parse_int(env: Dict[str, str], key: str, default: int, errors: List[str]) -> int:
    raw = env.get(key, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        errors.append(f"{key} must be an integer (got {raw!r})")
        return default


def _parse_float(env: Dict[str, str], key: str, default: float, errors: List[str]) -> float:
    raw = env.get(key, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        errors.append(f"{key} must be a number (got {raw!r})")
        return default


def load_config(env_path: str = ".env", env: Optional[Dict[str, str]] = None) -> EngineConfig:
    if env is None:
        load_env_file(env_path)
        env = dict(os.environ)

    errors: List[str] = []
    horizon = _parse_int(env, "ROI_HORIZON_MONTHS", DEFAULT_HORIZON_MONTHS, errors)
    weeks_per_month = _parse_float(env, "ROI_WEEKS_PER_MONTH", WEEKS_PER_MONTH, errors)
    export_dir = env.get("ROI_EXPORT_DIR", "") or DEFAULT_EXPORT_DIR
    log_level = (env.get("ROI_LOG_LEVEL", "") or "INFO").upper()

    if horizon < 0:
        errors.append("ROI_HORIZON_MONTHS must be >= 0")
    if weeks_per_month <= 0:
        errors.append("ROI_WEEKS_PER_MONTH must be positive")
    if log_level not in LOG_LEVELS:
        errors.append("ROI_LOG_LEVEL must be one of: " + ", ".join(sorted(LOG_LEVELS)))

    if errors:
        raise ConfigError("Invalid configuration: " + "; ".join(errors))

    return EngineConfig(
        horizon_months=horizon,
        weeks_per_month=weeks_per_month,
        export_dir=export_dir,
        log_level=log_level,
    )
