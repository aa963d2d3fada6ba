"""
全域配置模組

提供統一的配置類別，控制日誌、計時與判定規則。

使用方式:
    from kanatype import JapaneseTypingJudge

    # 簡單開啟 verbose 模式
    judge = JapaneseTypingJudge("ありがとう", verbose=True)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("kanatype").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Dict, Optional

from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)
    else:
        # 不主動設定，讓使用者可以透過標準 logging 控制
        pass


@dataclass
class JudgeConfig:
    """
    判定器配置類別

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        accept_single_n: 「ん」後接子音時，是否接受只打一個 n（預設關閉）
        accept_sokuon_alternatives: 促音的子音不符合下一個モーラ目前的打法時，
            是否改用下一個モーラ其他以該子音開頭的打法（例如「まっちゃ」打 mattya）
        case_sensitive: 逐字判定器 (EnglishTypingJudge) 是否區分大小寫

    使用範例:
        config = JudgeConfig(accept_single_n=True)
        judge = JapaneseTypingJudge("ほんとう", config)
    """

    # 日誌控制
    verbose: bool = False

    # 計時回呼
    on_timing: Optional[Callable[[str, float], None]] = None

    # 判定規則
    accept_single_n: bool = False
    accept_sokuon_alternatives: bool = False
    case_sensitive: bool = False

    def __post_init__(self):
        """初始化後設定 logger"""
        configure_logging(self.verbose)

    def merged(self, **overrides: Any) -> "JudgeConfig":
        """回傳套用覆寫值後的新配置；值為 None 的覆寫會被忽略"""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown config option(s): {', '.join(sorted(unknown))}")
        changes: Dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return replace(self, **changes)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = JudgeConfig(verbose=False)
