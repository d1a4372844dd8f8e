#!filepath: scopetimer/config/app_config.py
import os

import yaml
from pydantic import BaseModel

from .log_config import LogConfig
from .timer_config import TimerConfig, set_timer_config
from scopetimer import logs


def default_config_path() -> str:
    """
    返回随包发布的默认配置：
    scopetimer/config/app_config.py → scopetimer/config/base.yml
    """
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig
    timer: TimerConfig

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置
        - 默认使用 scopetimer/config/base.yml
        - 不依赖当前工作目录
        """
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        return cls(**raw)

    def apply(self) -> "AppConfig":
        """把 log 段交给 logs，把 timer 段设为当前生效的计时器配置。"""
        logs.apply_config(self.log)
        set_timer_config(self.timer)
        logs.debug(f"[Config] timer={self.timer.model_dump()}")
        return self
