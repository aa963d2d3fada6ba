"""
統計計算模組

由判定器狀態推導正確率與進度，皆為純函式。
"""

import math
from typing import Sequence

from .models import TypingStatistics


def round_half_up(value: float) -> int:
    """四捨五入到整數（0.5 一律進位，與 Python 內建 round 的銀行家捨入不同）"""
    return int(math.floor(value + 0.5))


def compute_accuracy(correct_count: int, incorrect_count: int) -> int:
    """
    計算正確率

    尚未輸入任何字元時回傳 100。

    Args:
        correct_count: 正確次數
        incorrect_count: 錯誤次數

    Returns:
        int: 0 ~ 100
    """
    total = correct_count + incorrect_count
    if total == 0:
        return 100
    return round_half_up(correct_count / total * 100)


def compute_progress(patterns: Sequence[str], unit_index: int, offset: int) -> int:
    """
    計算進度

    分母為「目前」作用中羅馬字樣式的總長度（樣式切換後會重新計算），
    分子為已完成樣式的長度加上目前樣式內的偏移量。

    Args:
        patterns: 各單位目前的羅馬字樣式
        unit_index: 目前單位索引
        offset: 目前樣式內的偏移量

    Returns:
        int: 0 ~ 100；總長度為 0 時回傳 0
    """
    total_chars = sum(len(p) for p in patterns)
    if total_chars == 0:
        return 0

    consumed = sum(len(p) for p in patterns[:unit_index])
    if unit_index < len(patterns):
        consumed += offset
    return min(100, round_half_up(consumed / total_chars * 100))


def build_statistics(correct_count: int, incorrect_count: int) -> TypingStatistics:
    return TypingStatistics(
        correct_count=correct_count,
        incorrect_count=incorrect_count,
        total_input_count=correct_count + incorrect_count,
        accuracy=compute_accuracy(correct_count, incorrect_count),
    )
