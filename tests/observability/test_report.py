#!filepath: tests/observability/test_report.py
import io

import pytest

from scopetimer.observability.report import (
    ReportTarget,
    ResultSlot,
    TimerMode,
    format_line,
    round_elapsed,
    write_line,
)
from scopetimer.utils.errors import ReportTargetError


def test_resolve_none_uses_default_label():
    t = ReportTarget.resolve(None, "CodeTimer")

    assert t.mode is TimerMode.DEFAULT_LABEL
    assert t.label == "CodeTimer"
    assert t.sink is None


def test_resolve_str_is_named_label():
    t = ReportTarget.resolve("sub scope", "CodeTimer")

    assert t.mode is TimerMode.NAMED_LABEL
    assert t.label == "sub scope"


def test_resolve_slot_and_callable():
    slot = ResultSlot()
    assert ReportTarget.resolve(slot, "CodeTimer").mode is TimerMode.EXTERNAL_SLOT

    seen = []
    t = ReportTarget.resolve(seen.append, "CodeTimer")
    assert t.mode is TimerMode.EXTERNAL_SLOT
    assert t.sink == seen.append


def test_resolve_passes_target_through():
    t = ReportTarget.named("x")
    assert ReportTarget.resolve(t, "CodeTimer") is t


@pytest.mark.parametrize("bad", [42, 1.5, ["a"], b"bytes"])
def test_resolve_rejects_other_shapes(bad):
    with pytest.raises(ReportTargetError):
        ReportTarget.resolve(bad, "CodeTimer")


def test_report_target_error_is_type_error():
    with pytest.raises(TypeError):
        ReportTarget.named(123)

    with pytest.raises(TypeError):
        ReportTarget.slot("not callable")


def test_result_slot_write():
    slot = ResultSlot()
    assert slot.value == 0.0

    slot(0.003214)

    assert slot.value == 0.003214
    assert float(slot) == 0.003214


def test_round_elapsed_matches_python_round():
    for raw in (0.0, 1e-9, 0.0034567891, 0.0100004999, 1.23456789, 12.5000004):
        assert round_elapsed(raw, 6) == round(raw * 1e6) / 1e6


def test_round_elapsed_is_idempotent():
    for raw in (0.0034567891, 0.0100004999, 1.23456789, 0.000000499):
        once = round_elapsed(raw, 6)
        assert round_elapsed(once, 6) == once


def test_round_elapsed_other_precision():
    assert round_elapsed(0.0034567891, 3) == 0.003
    assert round_elapsed(2.4, 0) == 2.0


def test_format_line_pads_to_precision():
    # 与 C++ std::to_string 一致：固定 6 位小数
    assert format_line("CodeTimer", 0.0032, 6, "s") == "CodeTimer finished in 0.003200 s"
    assert format_line("A", 1.0, 3, "ns") == "A finished in 1.000 ns"


def test_write_line_to_stream():
    buf = io.StringIO()
    write_line("A finished in 0.000001 s", buf)

    assert buf.getvalue() == "A finished in 0.000001 s\n"


def test_write_line_defaults_to_stdout(capsys):
    write_line("B finished in 0.000001 s")

    assert capsys.readouterr().out == "B finished in 0.000001 s\n"


class _BrokenStream:
    def write(self, s):
        raise OSError("stream closed")

    def flush(self):
        raise OSError("stream closed")


def test_write_line_swallows_stream_errors(captured_logs):
    write_line("lost line", _BrokenStream())

    output = "\n".join(captured_logs)
    assert "[ScopeTimer] failed to write report line" in output


def test_write_line_swallows_closed_stream(captured_logs):
    buf = io.StringIO()
    buf.close()

    write_line("lost line", buf)

    assert "failed to write report line" in "\n".join(captured_logs)
