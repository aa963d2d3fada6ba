"""
日文羅馬字對照表模組

定義每個假名單位（モーラ）可接受的羅馬字打法。
列表第一個為預設（畫面上顯示）的打法，其餘皆為可接受的替代打法。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class RomajiEntry:
    """
    對照表的一筆資料

    Attributes:
        kana: 假名單位（1 或 2 個字元）
        patterns: 可接受的羅馬字打法，依顯示優先順序排列
        is_special: 是否為需完全一致的特殊符號（長音、標點）
    """
    kana: str
    patterns: Tuple[str, ...]
    is_special: bool = False

    def __post_init__(self):
        if not self.kana:
            raise ValueError("kana cannot be empty")
        if not self.patterns:
            raise ValueError(f"patterns for {self.kana!r} cannot be empty")
        if len(set(self.patterns)) != len(self.patterns):
            raise ValueError(f"patterns for {self.kana!r} must not contain duplicates")


def _entries(*rows) -> Tuple[RomajiEntry, ...]:
    return tuple(RomajiEntry(kana, tuple(patterns.split())) for kana, patterns in rows)


# =============================================================================
# 1. 拗音 (Youon) 與外來音
# =============================================================================
YOUON_ENTRIES = _entries(
    ("きゃ", "kya"), ("きぃ", "kyi"), ("きゅ", "kyu"), ("きぇ", "kye"), ("きょ", "kyo"),
    ("しゃ", "sha sya"), ("しぃ", "syi"), ("しゅ", "shu syu"), ("しぇ", "she sye"), ("しょ", "sho syo"),
    ("ちゃ", "cha tya cya"), ("ちぃ", "tyi cyi"), ("ちゅ", "chu tyu cyu"), ("ちぇ", "che tye cye"),
    ("ちょ", "cho tyo cyo"),
    ("にゃ", "nya"), ("にぃ", "nyi"), ("にゅ", "nyu"), ("にぇ", "nye"), ("にょ", "nyo"),
    ("ひゃ", "hya"), ("ひぃ", "hyi"), ("ひゅ", "hyu"), ("ひぇ", "hye"), ("ひょ", "hyo"),
    ("みゃ", "mya"), ("みぃ", "myi"), ("みゅ", "myu"), ("みぇ", "mye"), ("みょ", "myo"),
    ("りゃ", "rya"), ("りぃ", "ryi"), ("りゅ", "ryu"), ("りぇ", "rye"), ("りょ", "ryo"),
    ("ぎゃ", "gya"), ("ぎぃ", "gyi"), ("ぎゅ", "gyu"), ("ぎぇ", "gye"), ("ぎょ", "gyo"),
    ("じゃ", "ja jya zya"), ("じぃ", "jyi zyi"), ("じゅ", "ju jyu zyu"), ("じぇ", "je jye zye"),
    ("じょ", "jo jyo zyo"),
    ("ぢゃ", "dya"), ("ぢぃ", "dyi"), ("ぢゅ", "dyu"), ("ぢぇ", "dye"), ("ぢょ", "dyo"),
    ("びゃ", "bya"), ("びぃ", "byi"), ("びゅ", "byu"), ("びぇ", "bye"), ("びょ", "byo"),
    ("ぴゃ", "pya"), ("ぴぃ", "pyi"), ("ぴゅ", "pyu"), ("ぴぇ", "pye"), ("ぴょ", "pyo"),
    ("ふぁ", "fa"), ("ふぃ", "fi fyi"), ("ふぇ", "fe fye"), ("ふぉ", "fo"), ("ふゅ", "fyu"),
    ("てぃ", "thi"), ("てゅ", "thu"), ("でぃ", "dhi"), ("でゅ", "dhu"),
    ("とぅ", "twu"), ("どぅ", "dwu"),
    ("うぃ", "wi whi"), ("うぇ", "we whe"), ("うぉ", "who"),
    ("ゔぁ", "va"), ("ゔぃ", "vi"), ("ゔぇ", "ve"), ("ゔぉ", "vo"),
    ("つぁ", "tsa"), ("つぃ", "tsi"), ("つぇ", "tse"), ("つぉ", "tso"),
)

# =============================================================================
# 2. 清音・濁音・半濁音
# =============================================================================
KANA_ENTRIES = _entries(
    ("あ", "a"), ("い", "i"), ("う", "u wu"), ("え", "e"), ("お", "o"),
    ("か", "ka ca"), ("き", "ki"), ("く", "ku cu qu"), ("け", "ke"), ("こ", "ko co"),
    ("さ", "sa"), ("し", "shi si ci"), ("す", "su"), ("せ", "se ce"), ("そ", "so"),
    ("た", "ta"), ("ち", "chi ti"), ("つ", "tsu tu"), ("て", "te"), ("と", "to"),
    ("な", "na"), ("に", "ni"), ("ぬ", "nu"), ("ね", "ne"), ("の", "no"),
    ("は", "ha"), ("ひ", "hi"), ("ふ", "fu hu"), ("へ", "he"), ("ほ", "ho"),
    ("ま", "ma"), ("み", "mi"), ("む", "mu"), ("め", "me"), ("も", "mo"),
    ("や", "ya"), ("ゆ", "yu"), ("よ", "yo"),
    ("ら", "ra"), ("り", "ri"), ("る", "ru"), ("れ", "re"), ("ろ", "ro"),
    ("わ", "wa"), ("ゐ", "wyi"), ("ゑ", "wye"), ("を", "wo"),
    ("ん", "nn n xn"),
    ("が", "ga"), ("ぎ", "gi"), ("ぐ", "gu"), ("げ", "ge"), ("ご", "go"),
    ("ざ", "za"), ("じ", "ji zi"), ("ず", "zu"), ("ぜ", "ze"), ("ぞ", "zo"),
    ("だ", "da"), ("ぢ", "di"), ("づ", "du"), ("で", "de"), ("ど", "do"),
    ("ば", "ba"), ("び", "bi"), ("ぶ", "bu"), ("べ", "be"), ("ぼ", "bo"),
    ("ぱ", "pa"), ("ぴ", "pi"), ("ぷ", "pu"), ("ぺ", "pe"), ("ぽ", "po"),
    ("ゔ", "vu"),
    # 小書き仮名（単独入力）
    ("ぁ", "la xa"), ("ぃ", "li xi"), ("ぅ", "lu xu"), ("ぇ", "le xe"), ("ぉ", "lo xo"),
    ("ゃ", "lya xya"), ("ゅ", "lyu xyu"), ("ょ", "lyo xyo"), ("ゎ", "lwa xwa"),
    ("っ", "ltu xtu ltsu xtsu"),
)

# =============================================================================
# 3. 特殊符號（完全一致）
# =============================================================================
SPECIAL_ENTRIES = (
    RomajiEntry("ー", ("-",), is_special=True),
    RomajiEntry("、", (",",), is_special=True),
    RomajiEntry("。", (".",), is_special=True),
)

ROMAJI_TABLE: Tuple[RomajiEntry, ...] = YOUON_ENTRIES + KANA_ENTRIES + SPECIAL_ENTRIES

_TABLE_INDEX: Dict[str, RomajiEntry] = {entry.kana: entry for entry in ROMAJI_TABLE}

TABLE_UNITS: FrozenSet[str] = frozenset(_TABLE_INDEX)
MAX_UNIT_LENGTH = 3

# 不在對照表內、但仍需視為特殊符號的控制字元
SPECIAL_GLYPHS: FrozenSet[str] = frozenset({"\n", "ー", "-", "、", ",", "。", ".", " "})

SOKUON = "っ"
HATSUON = "ん"
VOWELS: FrozenSet[str] = frozenset("aiueo")


def lookup(unit: str) -> Optional[RomajiEntry]:
    """依假名單位查詢對照表，找不到回傳 None"""
    return _TABLE_INDEX.get(unit)


def candidates_for(unit: str) -> Tuple[str, ...]:
    """
    取得假名單位的候選打法

    Args:
        unit: 假名單位

    Returns:
        Tuple[str, ...]: 依優先順序排列的候選打法（至少一個）。
                         不在對照表內的字元原樣回傳，例如 "\\n" -> ("\\n",)
    """
    entry = _TABLE_INDEX.get(unit)
    if entry is None:
        return (unit,)
    return entry.patterns
