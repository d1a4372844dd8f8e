#!filepath: scopetimer/observability/timer.py
from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Optional, TextIO

from scopetimer import logs
from scopetimer.config.timer_config import TimerConfig, get_timer_config
from scopetimer.observability import clock
from scopetimer.observability.report import (
    Reporter,
    ReportTarget,
    TimerMode,
    format_line,
    round_elapsed,
    write_line,
)
from scopetimer.utils.errors import TimerStateError


class ScopeTimer:
    """
    作用域计时器：构造即开始，离开作用域即停止，并且只报告一次。

    用法：
        with ScopeTimer():              # "CodeTimer finished in 0.000012 s"
            ...

        with ScopeTimer("sub scope"):   # "sub scope finished in ..."
            ...

        result = ResultSlot()
        with ScopeTimer(result):        # 只写入 result.value，不输出
            ...

    Parameters
    ----------
    target : None | str | ResultSlot | Callable[[float], None] | ReportTarget
        决定报告方式，构造后不可更改
    config : TimerConfig, optional
        默认读取当前生效的进程级配置
    stream : TextIO, optional
        控制台模式的输出流，默认 sys.stdout

    不要依赖垃圾回收来停止计时器：请使用 with、stop() 或 @timed。
    """

    def __init__(
        self,
        target: Any = None,
        *,
        config: Optional[TimerConfig] = None,
        stream: Optional[TextIO] = None,
    ):
        self._config = config if config is not None else get_timer_config()
        self._target = ReportTarget.resolve(target, self._config.default_label)
        self._sink: Optional[Reporter] = self._target.sink
        self._stream = stream
        self._entered = False
        self._stopped: Optional[float] = None
        self.elapsed: Optional[float] = None

        # 最后一步：开始计时
        self._started = clock.now()

    # ---------------------------------------------------------
    # 具名构造
    # ---------------------------------------------------------
    @classmethod
    def named(cls, label: str, **kwargs) -> "ScopeTimer":
        return cls(ReportTarget.named(label), **kwargs)

    @classmethod
    def into(cls, slot: Reporter, **kwargs) -> "ScopeTimer":
        cfg = kwargs.get("config") or get_timer_config()
        return cls(ReportTarget.slot(slot, cfg.default_label), **kwargs)

    # ---------------------------------------------------------
    # 状态
    # ---------------------------------------------------------
    @property
    def label(self) -> str:
        return self._target.label

    @property
    def mode(self) -> TimerMode:
        return self._target.mode

    @property
    def started(self) -> float:
        return self._started

    @property
    def stopped(self) -> Optional[float]:
        return self._stopped

    @property
    def running(self) -> bool:
        return self._stopped is None

    # ---------------------------------------------------------
    # 生命周期
    # ---------------------------------------------------------
    def __enter__(self) -> "ScopeTimer":
        if self._entered or not self.running:
            raise TimerStateError(f"ScopeTimer '{self.label}' cannot be reused")
        self._entered = True
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        # stop() 可能已在块内手动调用
        if self.running:
            self.stop()
        return False

    def stop(self) -> float:
        """停止计时并报告，返回取整后的耗时（秒）。"""
        if not self.running:
            raise TimerStateError(f"ScopeTimer '{self.label}' already stopped")

        self._stopped = clock.now()
        self.elapsed = round_elapsed(self._stopped - self._started, self._config.precision)
        self._report(self.elapsed)
        return self.elapsed

    def _report(self, elapsed: float) -> None:
        if self.mode is TimerMode.EXTERNAL_SLOT:
            sink, self._sink = self._sink, None
            logs.debug(f"[ScopeTimer] slot <- {elapsed}")
            try:
                sink(elapsed)
            except Exception:
                logs.exception(f"[ScopeTimer] result slot rejected value {elapsed}")
            return

        line = format_line(
            self.label,
            elapsed,
            self._config.precision,
            self._config.console_unit.value,
        )
        logs.debug(f"[ScopeTimer] {line}")
        write_line(line, self._stream)

    def __repr__(self) -> str:
        state = "running" if self.running else f"stopped elapsed={self.elapsed}"
        return f"ScopeTimer(label={self.label!r}, mode={self.mode.value}, {state})"


def timed(target: Any = None, **timer_kwargs) -> Callable:
    """
    函数级计时装饰器，每次调用使用一个新的 ScopeTimer。
    必须带括号使用：@timed() / @timed("load") / @timed(slot)

    target 为 None 时 label 取函数的 __qualname__。
    """

    def decorator(func: Callable):
        label = target if target is not None else func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            with ScopeTimer(label, **timer_kwargs):
                return func(*args, **kwargs)

        return wrapper

    return decorator
