# scopetimer/utils/errors.py
class TimerError(RuntimeError):
    """
    ScopeTimer 误用的基类。
    """


class TimerStateError(TimerError):
    """
    Raised when a timer is stopped twice or re-entered after it stopped.
    Started -> Stopped 是单向的，Stopped 之后不能复用。
    """


class ReportTargetError(TimerError, TypeError):
    """
    构造参数既不是 label(str)，也不是结果槽(ResultSlot / callable)。
    """
