"""
羅馬字樣式解析模組

根據使用者目前已輸入的部分羅馬字，決定每個モーラ要採用哪一種打法。
"""

from __future__ import annotations

from typing import List, Sequence

from .config import HATSUON, ROMAJI_TABLE, VOWELS, RomajiEntry
from .segmenter import Mora


def select_best_pattern(mora: Mora, partial_input: str) -> str:
    """
    依目前的部分輸入選擇最適合的打法

    回傳第一個以 partial_input 開頭的候選；都不符合時回傳預設打法。
    預設打法只用來組出錯誤報告中的「期待字元」，不代表輸入有效，
    呼叫端仍需檢查回傳值是否以 partial_input 開頭。

    Args:
        mora: 目前的モーラ
        partial_input: 該モーラ已輸入的部分加上本次按鍵

    Returns:
        str: 候選打法
    """
    for candidate in mora.candidates:
        if candidate.startswith(partial_input):
            return candidate
    return mora.default_pattern


def is_valid_input(mora: Mora, partial_input: str) -> bool:
    """部分輸入是否為某個候選打法的前綴"""
    return any(candidate.startswith(partial_input) for candidate in mora.candidates)


def find_matching_patterns(partial_input: str) -> List[RomajiEntry]:
    """
    搜尋對照表中所有可能以 partial_input 開頭的項目

    Args:
        partial_input: 部分羅馬字輸入

    Returns:
        List[RomajiEntry]: 依對照表順序排列
    """
    return [
        entry for entry in ROMAJI_TABLE
        if any(pattern.startswith(partial_input) for pattern in entry.patterns)
    ]


def is_geminate_consonant(char: str) -> bool:
    """可作為促音（っ）重複子音的字元：非母音、非 n 的 ASCII 英文字母"""
    return len(char) == 1 and char.isascii() and char.isalpha() and char.lower() not in VOWELS and char.lower() != "n"


def geminate_letter(next_mora: Mora, next_pattern: str) -> str:
    """
    取得促音可借用的下一個モーラ子音

    Returns:
        str: 子音字母；下一個モーラ不適用促音時回傳空字串
    """
    if next_mora.is_special or not next_pattern:
        return ""
    letter = next_pattern[0]
    return letter if is_geminate_consonant(letter) else ""


def can_begin(mora: Mora, char: str) -> bool:
    """該モーラ是否能以 char 作為第一個按鍵開始（不含促音的借用規則）"""
    if mora.is_special:
        return mora.default_pattern == char
    return select_best_pattern(mora, char).startswith(char)


def allows_single_n(mora: Mora, char: str) -> bool:
    """
    「ん」只打一個 n 之後，char 是否可能是下一個モーラ的開頭

    下一個按鍵為母音、y 或 n 時，單一 n 會與な行、にゃ行、ん本身混淆，不接受。
    下一個モーラ實際能否以 char 開始，由判定器另外檢查。
    """
    if mora.text != HATSUON or "n" not in mora.candidates:
        return False
    return char not in VOWELS and char not in ("y", "n")


def initial_patterns(morae: Sequence[Mora]) -> List[str]:
    """
    建立初始的作用中樣式列表

    一般モーラ取預設打法。促音（っ）後接可重複子音的モーラ時，
    以該子音作為樣式（例如「って」→ ["t", "te"]），否則取對照表預設值。
    由後往前計算，因此連續的促音也會得到正確的子音。

    Args:
        morae: モーラ序列

    Returns:
        List[str]: 與 morae 等長的樣式列表
    """
    patterns = [mora.default_pattern for mora in morae]
    for i in range(len(morae) - 2, -1, -1):
        if not morae[i].is_sokuon:
            continue
        letter = geminate_letter(morae[i + 1], patterns[i + 1])
        if letter:
            patterns[i] = letter
    return patterns
