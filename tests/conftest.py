# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from scopetimer.config.timer_config import TimerConfig, set_timer_config


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def reset_timer_config():
    yield
    set_timer_config(TimerConfig())


@pytest.fixture
def captured_logs():
    """临时添加一个 sink 捕获 Loguru 输出"""
    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), level="DEBUG")
    yield captured
    try:
        logger.remove(sink_id)
    except ValueError:
        # 测试里 apply_config 可能已经 remove 掉了
        pass


@pytest.fixture
def fake_clock(monkeypatch):
    """
    Factory fixture：按顺序返回给定的时间戳。

    Usage:
        fake_clock(10.0, 10.25)
        with ScopeTimer(...):  # started=10.0, stopped=10.25
    """
    from scopetimer.observability import clock

    def _install(*stamps: float):
        it = iter(stamps)
        monkeypatch.setattr(clock, "now", lambda: next(it))

    return _install
