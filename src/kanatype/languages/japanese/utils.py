"""
日文工具模組

提供假名字元判斷等輔助函式。
"""


def is_hiragana(char: str) -> bool:
    """
    判斷字元是否為平假名 (0x3041 - 0x309F)

    Args:
        char: 單個字元

    Returns:
        bool: 是否為平假名
    """
    if not char or len(char) != 1:
        return False
    return 0x3041 <= ord(char) <= 0x309F


def is_katakana(char: str) -> bool:
    """判斷字元是否為片假名 (0x30A0 - 0x30FF)；長音符「ー」也落在此範圍"""
    if not char or len(char) != 1:
        return False
    return 0x30A0 <= ord(char) <= 0x30FF


def is_japanese_char(char: str) -> bool:
    """
    判斷字元是否為日文假名 (平假名、片假名)

    注意：漢字 (Kanji) 與中文重疊，此處不包含漢字判斷。
    """
    return is_hiragana(char) or is_katakana(char)
