# scopetimer/observability/clock.py
"""Timing base for ScopeTimer: monotonic, process-wide."""
import time

NANOSECOND = 1e-9


def now() -> float:
    """
    当前时刻的时间戳（秒，浮点，纳秒分辨率）。

    纪元是任意的，只有两次读数的差值有意义。
    """
    return NANOSECOND * time.perf_counter_ns()
