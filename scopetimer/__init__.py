#!filepath: scopetimer/__init__.py

from .utils.logger import Logging, logs
from .config.app_config import AppConfig
from .observability.report import ResultSlot, ReportTarget, TimerMode
from .observability.timer import ScopeTimer, timed

__version__ = "0.1.0"

# alias 简化调用
CodeTimer = ScopeTimer

__all__ = [
    "logs", "Logging",
    "AppConfig",
    "ScopeTimer", "CodeTimer", "timed",
    "ResultSlot", "ReportTarget", "TimerMode",
]
