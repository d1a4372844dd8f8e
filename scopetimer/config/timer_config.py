# scopetimer/config/timer_config.py
from enum import Enum

from pydantic import BaseModel, Field


class ConsoleUnit(str, Enum):
    """
    控制台输出的单位后缀。

    数值本身始终是秒：
    - SECONDS   : 后缀 "s"（修正后的默认行为）
    - LEGACY_NS : 后缀 "ns"（兼容旧输出，数值仍然是秒）
    """

    SECONDS = "s"
    LEGACY_NS = "ns"


class TimerConfig(BaseModel):
    default_label: str = "CodeTimer"
    precision: int = Field(default=6, ge=0, le=9)  # post-comma precision
    console_unit: ConsoleUnit = ConsoleUnit.SECONDS


_ACTIVE_TIMER_CONFIG = TimerConfig()


def get_timer_config() -> TimerConfig:
    return _ACTIVE_TIMER_CONFIG


def set_timer_config(cfg: TimerConfig) -> TimerConfig:
    """
    安装进程级 TimerConfig，返回旧配置（方便测试里恢复）。
    已构造的 ScopeTimer 不受影响：配置在构造时读取。
    """
    global _ACTIVE_TIMER_CONFIG
    previous = _ACTIVE_TIMER_CONFIG
    _ACTIVE_TIMER_CONFIG = cfg
    return previous
