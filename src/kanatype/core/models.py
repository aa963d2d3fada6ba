"""
判定資料模型

定義判定器對外公開的值物件：狀態、單次輸入結果、統計資訊。
這些物件皆為不可變 (frozen)，觀察者拿到的永遠是呼叫結束後的快照。
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


class TypingStatus(Enum):
    """判定器狀態：WAITING → TYPING → COMPLETED"""
    WAITING = "waiting"
    TYPING = "typing"
    COMPLETED = "completed"


@dataclass(frozen=True)
class InputResult:
    """
    單次按鍵的判定結果（同時也是輸入歷史的一筆紀錄）

    Attributes:
        is_correct: 是否為正確輸入
        expected_char: 判定前期待的字元；已完成時為空字串
        input_char: 實際輸入的字元
        position: 判定後的單位索引（モーラ / 字元位置）
    """
    is_correct: bool
    expected_char: str
    input_char: str
    position: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TypingStatistics:
    """
    打字統計

    Attributes:
        correct_count: 正確輸入次數
        incorrect_count: 錯誤輸入次數
        total_input_count: 總輸入次數（完成後的輸入不計）
        accuracy: 正確率 (0-100)，尚未輸入時為 100
    """
    correct_count: int
    incorrect_count: int
    total_input_count: int
    accuracy: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
