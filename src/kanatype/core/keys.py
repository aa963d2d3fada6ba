"""
按鍵名稱正規化

上游的鍵盤事件來源會送出「可列印字元」或少數控制鍵名稱。
判定器只接受單一字元，控制鍵在這裡轉換（例如 Enter → 換行）。
實體掃描碼到按鍵名稱的轉換不在本套件範圍內。
"""

from typing import Dict, Optional

CONTROL_KEYS: Dict[str, str] = {
    "Enter": "\n",
    "NumpadEnter": "\n",
    "Return": "\n",
    "Space": " ",
    "Spacebar": " ",
}


def normalize_key(key: Optional[str]) -> Optional[str]:
    """
    將按鍵名稱轉為判定用字元

    Args:
        key: 按鍵名稱，例如 "a"、"A"、"Enter"、"Shift"

    Returns:
        Optional[str]: 單一字元；修飾鍵等非打字按鍵回傳 None
    """
    if not key:
        return None
    if key in CONTROL_KEYS:
        return CONTROL_KEYS[key]
    if len(key) == 1 and (key.isprintable() or key == "\n"):
        return key
    return None
