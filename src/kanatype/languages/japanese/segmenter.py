"""
日文分段器實作模組

將練習用的假名文字切成モーラ (Mora) 序列。
以對照表做貪婪最長一致：每個位置依序嘗試 3、2、1 個字元，
比對的是「整個對照表」的單位集合，不回溯。

切出的序列與羅馬字樣式列表一一對應（索引對齊），
因此顯示層可以直接用 tokenize() 的結果當作標籤。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from kanatype.utils.logger import get_logger

from .config import MAX_UNIT_LENGTH, SOKUON, SPECIAL_GLYPHS, TABLE_UNITS, candidates_for, lookup
from .utils import is_japanese_char

logger = get_logger("segmenter.japanese")


class MoraKind(Enum):
    """モーラ種類"""
    KANA = "kana"          # 一般假名（1 字元）
    YOUON = "youon"        # 拗音（2 字元，例如 きゃ）
    SPECIAL = "special"    # 需完全一致的符號（換行、長音、標點、空白）
    LITERAL = "literal"    # 對照表外的字元，原樣比對


@dataclass(frozen=True)
class Mora:
    """
    練習文字的最小單位

    Attributes:
        text: 原始文字片段
        candidates: 可接受的羅馬字打法（第一個為預設）
        kind: 種類
    """
    text: str
    candidates: Tuple[str, ...]
    kind: MoraKind

    @property
    def is_special(self) -> bool:
        return self.kind is MoraKind.SPECIAL

    @property
    def is_sokuon(self) -> bool:
        return self.text == SOKUON

    @property
    def default_pattern(self) -> str:
        return self.candidates[0]


def make_mora(unit: str) -> Mora:
    """由單一單位建立 Mora（對照表內或控制字元或原樣字元）"""
    entry = lookup(unit)
    if entry is not None:
        if entry.is_special:
            kind = MoraKind.SPECIAL
        elif len(unit) > 1:
            kind = MoraKind.YOUON
        else:
            kind = MoraKind.KANA
        return Mora(text=unit, candidates=entry.patterns, kind=kind)

    kind = MoraKind.SPECIAL if unit in SPECIAL_GLYPHS else MoraKind.LITERAL
    return Mora(text=unit, candidates=candidates_for(unit), kind=kind)


def segment(text: str) -> List[Mora]:
    """
    將文字切成モーラ序列

    Args:
        text: 已正規化的假名 / ASCII 文字

    Returns:
        List[Mora]: モーラ序列；所有 Mora.text 串接後等於輸入
    """
    morae: List[Mora] = []
    i = 0
    while i < len(text):
        for length in range(MAX_UNIT_LENGTH, 0, -1):
            unit = text[i:i + length]
            if len(unit) == length and unit in TABLE_UNITS:
                morae.append(make_mora(unit))
                i += length
                break
        else:
            char = text[i]
            if is_japanese_char(char) and char not in SPECIAL_GLYPHS:
                logger.debug(f"對照表外的假名，以原樣比對: {char!r}")
            morae.append(make_mora(char))
            i += 1
    return morae


class JapaneseSegmenter:
    """
    日文分段器

    功能:
    - 將假名文字分割為モーラ
    - 提供與羅馬字樣式索引對齊的標籤列表與原文位置
    """

    def segment(self, text: str) -> List[Mora]:
        if not text:
            return []
        return segment(text)

    def tokenize(self, text: str) -> List[str]:
        """
        將文字分割為モーラ標籤列表

        Args:
            text: 輸入文字

        Returns:
            List[str]: 每個モーラ的原始文字
        """
        return [mora.text for mora in self.segment(text)]

    def get_token_indices(self, text: str) -> List[Tuple[int, int]]:
        """
        取得每個モーラ在原始文字中的 (start, end) 位置

        Args:
            text: 輸入文字

        Returns:
            List[Tuple[int, int]]: 連續且不重疊的區間
        """
        indices = []
        current_pos = 0
        for mora in self.segment(text):
            end = current_pos + len(mora.text)
            indices.append((current_pos, end))
            current_pos = end
        return indices
