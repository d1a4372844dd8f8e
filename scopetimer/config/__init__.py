from .app_config import AppConfig
from .log_config import LogConfig
from .timer_config import ConsoleUnit, TimerConfig, get_timer_config, set_timer_config

__all__ = [
    "AppConfig",
    "LogConfig",
    "TimerConfig",
    "ConsoleUnit",
    "get_timer_config",
    "set_timer_config",
]
