#!filepath: scopetimer/utils/logger.py
import os
import sys
import json
from functools import wraps
from loguru import logger
from typing import Callable, Optional


class Logging:
    """
    日志模块（loguru 封装）
    ---------------------------------------
    - stderr 控制台日志（默认 WARNING，不污染 stdout 上的计时输出）
    - 可选文件日志：按日期切割 + 保留周期
    - 包含函数级日志装饰器
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        self._configure()

    def _configure(self) -> None:
        """
        配置全局 logger
        """
        logger.remove()

        logger.add(
            sink=sys.stderr,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
        )

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                enqueue=True,  # 多进程安全
                backtrace=True,
                diagnose=True,
            )

        logger.debug("-----------Logger initialized successfully.-----------")

    def apply_config(self, cfg) -> None:
        """按 LogConfig 重新配置 sink。"""
        self.log_dir = cfg.dir
        self.rotation = cfg.rotation
        self.retention = cfg.retention
        self.level = cfg.level
        self._configure()

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_outputs: bool = False,
        log_time: bool = True,
    ) -> Callable:
        """
        异常记录后继续抛出；log_time=True 时用 ScopeTimer（结果槽模式）记录耗时。
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                from scopetimer.observability.timer import ScopeTimer

                if log_inputs:
                    logger.info(
                        f"[CALL] {func.__name__} args={args}, kwargs={json.dumps(kwargs, ensure_ascii=False, default=str)}"
                    )

                def _log_time(cost: float) -> None:
                    if log_time:
                        logger.info(f"[TIME] {func.__name__} took {cost:.6f}s")

                try:
                    with ScopeTimer.into(_log_time):
                        result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_outputs:
                    logger.info(f"[RETURN] {func.__name__} result={result}")

                return result

            return wrapper

        return decorator


# 默认全局 logs（可通过 logs.apply_config 重新配置）
logs = Logging()
