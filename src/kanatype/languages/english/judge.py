"""
英文（逐字）打字判定器 (EnglishTypingJudge)

用於拉丁字母練習文字：每個字元就是一個期待按鍵，不做羅馬字轉換。
預設不區分大小寫。
"""

from __future__ import annotations

from typing import Callable, Optional

from kanatype.config import JudgeConfig
from kanatype.core.events import JudgeEventHandler
from kanatype.core.judge_interface import TypingJudge
from kanatype.core.models import InputResult, TypingStatus
from kanatype.core.statistics import round_half_up


class EnglishTypingJudge(TypingJudge):
    _judge_name = "english"

    def __init__(
        self,
        target_text: str,
        config: Optional[JudgeConfig] = None,
        *,
        on_event: Optional[JudgeEventHandler] = None,
        verbose: Optional[bool] = None,
        on_timing: Optional[Callable[[str, float], None]] = None,
        case_sensitive: Optional[bool] = None,
    ):
        self._init_judge(
            config,
            on_event,
            verbose=verbose,
            on_timing=on_timing,
            case_sensitive=case_sensitive,
        )
        self._target_text = target_text
        self._position = 0
        if not target_text:
            self._status = TypingStatus.COMPLETED
        self._logger.info(f"EnglishTypingJudge initialized: {target_text!r}")

    @property
    def target_text(self) -> str:
        return self._target_text

    @property
    def current_position(self) -> int:
        return self._position

    @property
    def expected_char(self) -> Optional[str]:
        if self._position >= len(self._target_text):
            return None
        return self._target_text[self._position]

    @property
    def progress(self) -> int:
        if not self._target_text:
            return 0
        return round_half_up(self._position / len(self._target_text) * 100)

    def _matches(self, expected: str, input_char: str) -> bool:
        if self._config.case_sensitive:
            return input_char == expected
        return input_char.lower() == expected.lower()

    def judge(self, input_char: str) -> InputResult:
        self._validate_key(input_char)
        with self._deferred_events():
            return self._judge_char(input_char)

    def _judge_char(self, input_char: str) -> InputResult:
        self._start_if_waiting()

        expected = self.expected_char
        if expected is None:
            return self._reject_after_completion(input_char, self._position)

        is_correct = self._matches(expected, input_char)
        result = InputResult(
            is_correct=is_correct,
            expected_char=expected,
            input_char=input_char,
            position=self._position,
        )
        if is_correct:
            self._position += 1
            self._logger.debug(f"正確: {input_char!r} (位置: {self._position - 1})")
        else:
            self._logger.debug(f"不正確: 期待={expected!r} 輸入={input_char!r} (位置: {self._position})")

        self._record(result)

        if self._position >= len(self._target_text):
            self._mark_completed()
        return result

    def reset(self) -> None:
        self._position = 0
        self._reset_counters()
        if not self._target_text:
            self._status = TypingStatus.COMPLETED
        self._logger.debug("已重置")
        self._emit({"type": "reset", "position": 0})

    def skip_to(self, position: int) -> bool:
        """
        將游標移到指定位置（除錯用）

        Returns:
            bool: 位置超出範圍時回傳 False 且不做任何變更
        """
        if not 0 <= position <= len(self._target_text):
            self._logger.warning(f"skip_to 位置超出範圍: {position}")
            return False
        self._position = position
        self._logger.debug(f"已跳到位置 {position}")
        return True
