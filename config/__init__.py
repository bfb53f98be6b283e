from config.core import (
    ConfigError,
    DEFAULT_EXPORT_DIR,
    DEFAULT_HORIZON_MONTHS,
    EngineConfig,
    WEEKS_PER_MONTH,
    load_config,
    load_env_file,
    safe_config_summary,
)
from config.assumptions import Assumptions, DEFAULT_ASSUMPTIONS

__all__ = [
    "ConfigError",
    "DEFAULT_EXPORT_DIR",
    "DEFAULT_HORIZON_MONTHS",
    "EngineConfig",
    "WEEKS_PER_MONTH",
    "load_config",
    "load_env_file",
    "safe_config_summary",
    "Assumptions",
    "DEFAULT_ASSUMPTIONS",
]
