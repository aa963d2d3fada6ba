"""
例外定義

打錯字不是例外：錯誤輸入一律以 is_correct=False 的結果回傳。
這裡只定義呼叫端的程式錯誤。
"""


class KanatypeError(Exception):
    """kanatype 的基底例外"""


class InvalidKeyError(KanatypeError, ValueError):
    """judge() 收到的不是單一字元"""

    def __init__(self, key: object):
        self.key = key
        super().__init__(f"judge() expects a single character, got {key!r}")
