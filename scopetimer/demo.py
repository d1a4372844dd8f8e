#!filepath: scopetimer/demo.py
"""
ScopeTimer 演示程序。

- "int main" 计时器覆盖整个函数，所以最后一个输出
- "sub scope" 只测量内层作用域
- 第三个计时器写入结果槽，不输出，结果由演示程序自己打印
"""
import math
from typing import Optional, TextIO

from scopetimer.config.timer_config import get_timer_config
from scopetimer.observability.report import ResultSlot, format_line, write_line
from scopetimer.observability.timer import ScopeTimer


def run_demo(iterations: int = 100_000, stream: Optional[TextIO] = None) -> float:
    cfg = get_timer_config()

    with ScopeTimer("int main", stream=stream):
        # 只是用来消耗 CPU 的数字
        value = 0.99999

        for _ in range(iterations):
            value = value ** value

        with ScopeTimer("sub scope", stream=stream):
            for _ in range(iterations):
                value = math.sqrt(value)

        t3_result = ResultSlot()
        with ScopeTimer(t3_result):
            for _ in range(iterations):
                value = math.tanh(1.0 / value)

        write_line(
            format_line("timer3", t3_result.value, cfg.precision, cfg.console_unit.value),
            stream,
        )

    return t3_result.value
