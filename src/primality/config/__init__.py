from .loader import ConfigError, load_config
from .models import AppConfig, CheckerConfig, LoggingConfig, LogSinkConfig

# Config exports are intentionally small.
__all__ = ["AppConfig", "CheckerConfig", "ConfigError", "LogSinkConfig", "LoggingConfig", "load_config"]
