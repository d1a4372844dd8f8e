#!filepath: scopetimer/observability/report.py
from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, TextIO

from scopetimer import logs
from scopetimer.utils.errors import ReportTargetError

Reporter = Callable[[float], None]


class TimerMode(str, Enum):
    DEFAULT_LABEL = "default_label"
    NAMED_LABEL = "named_label"
    EXTERNAL_SLOT = "external_slot"


@dataclass
class ResultSlot:
    """
    调用方持有的结果槽。

    计时器只写入一次，不接管生命周期；slot 应定义在被测作用域之外：

        result = ResultSlot()
        with ScopeTimer(result):
            ...
        result.value  # elapsed seconds
    """

    value: float = 0.0

    def __call__(self, elapsed: float) -> None:
        self.value = elapsed

    def __float__(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class ReportTarget:
    """
    三种互斥的报告方式（构造时确定）：
    - DEFAULT_LABEL : 默认 label，输出到控制台
    - NAMED_LABEL   : 指定 label，输出到控制台
    - EXTERNAL_SLOT : 写入调用方的结果槽，无控制台输出
    """

    mode: TimerMode
    label: str
    sink: Optional[Reporter] = None

    @classmethod
    def default(cls, label: str) -> "ReportTarget":
        return cls(TimerMode.DEFAULT_LABEL, label)

    @classmethod
    def named(cls, label: str) -> "ReportTarget":
        if not isinstance(label, str):
            raise ReportTargetError(f"label must be str, got {type(label).__name__}")
        return cls(TimerMode.NAMED_LABEL, label)

    @classmethod
    def slot(cls, sink: Reporter, label: str = "") -> "ReportTarget":
        if not callable(sink):
            raise ReportTargetError(
                f"result slot must be a ResultSlot or callable, got {type(sink).__name__}"
            )
        return cls(TimerMode.EXTERNAL_SLOT, label, sink)

    @classmethod
    def resolve(cls, target: Any, default_label: str) -> "ReportTarget":
        """按参数形态选择报告方式。"""
        if target is None:
            return cls.default(default_label)
        if isinstance(target, ReportTarget):
            return target
        if isinstance(target, str):
            return cls.named(target)
        if callable(target):
            return cls.slot(target, default_label)
        raise ReportTargetError(
            f"cannot build a ScopeTimer from {type(target).__name__}; "
            "expected None, a label (str), a ResultSlot or a callable"
        )


def round_elapsed(raw: float, precision: int) -> float:
    factor = 10.0 ** precision
    return round(raw * factor) / factor


def format_line(label: str, elapsed: float, precision: int, unit: str) -> str:
    return f"{label} finished in {elapsed:.{precision}f} {unit}"


def write_line(line: str, stream: Optional[TextIO] = None) -> None:
    """
    输出一行到控制台，失败只记日志，不抛出：
    计时器可能正处在异常展开过程中。
    """
    # sys.stdout 在调用时解析（pytest capsys / CliRunner 会替换它）
    out = stream if stream is not None else sys.stdout
    try:
        print(line, file=out, flush=True)
    except Exception:
        logs.exception(f"[ScopeTimer] failed to write report line: {line!r}")
