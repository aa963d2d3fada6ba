"""
日文語言支援模組

提供假名分段、羅馬字對照表、打法解析與打字判定。
"""

from .config import ROMAJI_TABLE, RomajiEntry, candidates_for, lookup
from .judge import JapaneseTypingJudge, create
from .resolver import find_matching_patterns, initial_patterns, is_valid_input, select_best_pattern
from .segmenter import JapaneseSegmenter, Mora, MoraKind, segment

__all__ = [
    "JapaneseTypingJudge",
    "create",
    "JapaneseSegmenter",
    "Mora",
    "MoraKind",
    "segment",
    "ROMAJI_TABLE",
    "RomajiEntry",
    "candidates_for",
    "lookup",
    "select_best_pattern",
    "is_valid_input",
    "find_matching_patterns",
    "initial_patterns",
]
