"""
kanatype - 日文羅馬字打字判定引擎 (Japanese Romaji Typing Judge)

核心概念：
- 練習文字以假名提供，切成モーラ後對應到一組可接受的羅馬字打法
- 每次實體按鍵呼叫一次 judge()，依已輸入的按鍵決定使用者採用哪一種打法
- 促音「っ」共用下一個モーラ的子音，特殊符號（換行、長音、標點）必須完全一致

官方入口（穩定 API）：
- `kanatype.create`
- `kanatype.JapaneseTypingJudge`
- `kanatype.EnglishTypingJudge`
"""

# =============================================================================
# Judge 層（官方入口）
# =============================================================================
from kanatype.languages.english import EnglishTypingJudge
from kanatype.languages.japanese import JapaneseTypingJudge, create

# =============================================================================
# 資料模型與配置
# =============================================================================
from kanatype.config import DEFAULT_CONFIG, JudgeConfig
from kanatype.core.events import JudgeEvent, JudgeEventHandler
from kanatype.core.exceptions import InvalidKeyError, KanatypeError
from kanatype.core.models import InputResult, TypingStatistics, TypingStatus

# =============================================================================
# 日誌工具
# =============================================================================
from kanatype.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Judges
    "create",
    "JapaneseTypingJudge",
    "EnglishTypingJudge",
    # Models / config
    "InputResult",
    "TypingStatistics",
    "TypingStatus",
    "JudgeConfig",
    "DEFAULT_CONFIG",
    "JudgeEvent",
    "JudgeEventHandler",
    "KanatypeError",
    "InvalidKeyError",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"
