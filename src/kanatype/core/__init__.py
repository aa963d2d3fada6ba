"""
核心抽象層

定義語言無關的判定器基類、資料模型、統計與事件。
"""

from .events import JudgeEvent, JudgeEventHandler
from .exceptions import InvalidKeyError, KanatypeError
from .judge_interface import TypingJudge
from .keys import normalize_key
from .models import InputResult, TypingStatistics, TypingStatus
from .statistics import build_statistics, compute_accuracy, compute_progress

__all__ = [
    "TypingJudge",
    "InputResult",
    "TypingStatistics",
    "TypingStatus",
    "JudgeEvent",
    "JudgeEventHandler",
    "KanatypeError",
    "InvalidKeyError",
    "normalize_key",
    "build_statistics",
    "compute_accuracy",
    "compute_progress",
]
