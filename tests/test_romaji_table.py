"""
測試羅馬字對照表

驗證：
1. 每個項目至少一個候選、無重複
2. 預設（第一個）打法
3. 對照表外字元的處理
"""

import pytest

from kanatype.languages.japanese.config import (
    ROMAJI_TABLE,
    SPECIAL_GLYPHS,
    TABLE_UNITS,
    RomajiEntry,
    candidates_for,
    lookup,
)


class TestTableIntegrity:
    """對照表資料完整性"""

    def test_entries_non_empty_and_unique(self):
        """測試每筆資料的打法非空且不重複"""
        for entry in ROMAJI_TABLE:
            assert entry.patterns, f"{entry.kana} 沒有候選打法"
            assert len(set(entry.patterns)) == len(entry.patterns), f"{entry.kana} 有重複候選"

    def test_units_are_unique(self):
        """測試假名單位不重複"""
        assert len(TABLE_UNITS) == len(ROMAJI_TABLE)

    def test_units_are_short(self):
        """測試假名單位長度為 1 或 2"""
        assert all(1 <= len(entry.kana) <= 2 for entry in ROMAJI_TABLE)

    def test_special_entries_are_single_keystroke(self):
        """測試特殊符號只需一個按鍵"""
        specials = [entry for entry in ROMAJI_TABLE if entry.is_special]
        assert {entry.kana for entry in specials} == {"ー", "、", "。"}
        for entry in specials:
            assert len(entry.patterns) == 1
            assert len(entry.patterns[0]) == 1

    def test_entry_validation(self):
        """測試 RomajiEntry 的驗證"""
        with pytest.raises(ValueError):
            RomajiEntry("か", ())
        with pytest.raises(ValueError):
            RomajiEntry("か", ("ka", "ka"))
        with pytest.raises(ValueError):
            RomajiEntry("", ("ka",))


class TestCandidates:
    """候選打法查詢"""

    def test_shi_variants(self):
        """測試 し 的打法順序"""
        assert candidates_for("し") == ("shi", "si", "ci")

    def test_hatsuon_prefers_double_n(self):
        """測試 ん 預設為 nn"""
        patterns = candidates_for("ん")
        assert patterns[0] == "nn"
        assert patterns[1] == "n"

    def test_youon(self):
        """測試拗音"""
        assert candidates_for("きゃ") == ("kya",)
        assert candidates_for("じゃ")[0] == "ja"
        assert "sya" in candidates_for("しゃ")

    def test_voiced_and_semi_voiced(self):
        """測試濁音與半濁音"""
        assert candidates_for("が") == ("ga",)
        assert candidates_for("ぱ") == ("pa",)

    def test_special_glyphs(self):
        """測試特殊符號的打法"""
        assert candidates_for("ー") == ("-",)
        assert candidates_for("、") == (",",)
        assert candidates_for("。") == (".",)

    def test_unmapped_characters_pass_through(self):
        """測試對照表外的字元原樣回傳"""
        assert candidates_for("\n") == ("\n",)
        assert candidates_for(" ") == (" ",)
        assert candidates_for("x") == ("x",)
        assert candidates_for("漢") == ("漢",)

    def test_lookup(self):
        """測試查詢對照表"""
        assert lookup("か").patterns == ("ka", "ca")
        assert lookup("漢") is None

    def test_special_glyph_set(self):
        """測試特殊符號集合"""
        for glyph in ("\n", "ー", "-", "、", ",", "。", ".", " "):
            assert glyph in SPECIAL_GLYPHS
