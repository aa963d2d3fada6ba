"""
打字判定器抽象基類

定義所有判定器共用的狀態（計數、歷史、狀態機）、日誌、計時與事件發送。
子類別只需實作「單一按鍵如何比對」與「如何重建初始狀態」。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from kanatype.config import DEFAULT_CONFIG, JudgeConfig
from kanatype.core.events import JudgeEvent, JudgeEventHandler
from kanatype.core.exceptions import InvalidKeyError
from kanatype.core.keys import normalize_key
from kanatype.core.models import InputResult, TypingStatistics, TypingStatus
from kanatype.core.statistics import build_statistics
from kanatype.utils.logger import TimingContext, get_logger


class TypingJudge(ABC):
    """
    打字判定器抽象基類 (Abstract Base Class)

    職責:
    - 持有計數、輸入歷史與狀態 (WAITING → TYPING → COMPLETED)
    - 提供統計、事件回呼與日誌功能
    - 統一「完成後輸入」的處理：不變更計數，只追加一筆稽核紀錄
    - 一次 judge() 產生的事件先排隊，狀態全部更新後才送出

    生命週期:
    - 每個練習段落建立一個判定器
    - 每次實體按鍵呼叫一次 judge()，呼叫端需自行序列化
    - reset() 回到建構完成時的狀態
    """

    _judge_name: str = "base"

    def _init_judge(
        self,
        config: Optional[JudgeConfig] = None,
        on_event: Optional[JudgeEventHandler] = None,
        **overrides,
    ) -> None:
        self._config = (config or DEFAULT_CONFIG).merged(**overrides)
        self._on_event = on_event
        self._event_queue: Optional[List[JudgeEvent]] = None
        self._logger = get_logger(f"judge.{self._judge_name}")

        self._status = TypingStatus.WAITING
        self._correct_count = 0
        self._incorrect_count = 0
        self._history: List[InputResult] = []

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._config.on_timing,
        )

    # =========================================================================
    # 子類別實作
    # =========================================================================

    @abstractmethod
    def judge(self, input_char: str) -> InputResult:
        pass

    @abstractmethod
    def reset(self) -> None:
        pass

    @property
    @abstractmethod
    def expected_char(self) -> Optional[str]:
        pass

    @property
    @abstractmethod
    def progress(self) -> int:
        pass

    # =========================================================================
    # 共用觀察者
    # =========================================================================

    @property
    def config(self) -> JudgeConfig:
        return self._config

    @property
    def status(self) -> TypingStatus:
        return self._status

    @property
    def is_completed(self) -> bool:
        return self._status is TypingStatus.COMPLETED

    @property
    def statistics(self) -> TypingStatistics:
        return build_statistics(self._correct_count, self._incorrect_count)

    @property
    def input_history(self) -> Tuple[InputResult, ...]:
        return tuple(self._history)

    def judge_key(self, key: Optional[str]) -> Optional[InputResult]:
        """
        以按鍵名稱判定（"a"、"Enter" 等）

        Returns:
            Optional[InputResult]: 非打字按鍵（修飾鍵等）回傳 None 且不留紀錄
        """
        char = normalize_key(key)
        if char is None:
            self._logger.debug(f"略過非打字按鍵: {key!r}")
            return None
        return self.judge(char)

    # =========================================================================
    # 子類別共用的狀態操作
    # =========================================================================

    def _validate_key(self, input_char: str) -> None:
        if not isinstance(input_char, str) or len(input_char) != 1:
            raise InvalidKeyError(input_char)

    def _start_if_waiting(self) -> None:
        if self._status is TypingStatus.WAITING:
            self._status = TypingStatus.TYPING
            self._logger.debug("開始輸入")

    def _reject_after_completion(self, input_char: str, position: int) -> InputResult:
        self._logger.warning(f"已完成，忽略輸入 {input_char!r}")
        result = InputResult(
            is_correct=False,
            expected_char="",
            input_char=input_char,
            position=position,
        )
        self._history.append(result)
        self._emit({
            "type": "post_completion",
            "is_correct": False,
            "expected_char": "",
            "input_char": input_char,
            "position": position,
        })
        return result

    def _record(self, result: InputResult) -> InputResult:
        if result.is_correct:
            self._correct_count += 1
        else:
            self._incorrect_count += 1
        self._history.append(result)
        self._emit({
            "type": "input",
            "is_correct": result.is_correct,
            "expected_char": result.expected_char,
            "input_char": result.input_char,
            "position": result.position,
        })
        return result

    def _mark_completed(self) -> None:
        self._status = TypingStatus.COMPLETED
        stats = self.statistics
        self._logger.info(
            f"輸入完成 (correct={stats.correct_count}, "
            f"incorrect={stats.incorrect_count}, accuracy={stats.accuracy})"
        )
        self._emit({
            "type": "completed",
            "correct_count": stats.correct_count,
            "incorrect_count": stats.incorrect_count,
            "accuracy": stats.accuracy,
        })

    def _reset_counters(self) -> None:
        self._status = TypingStatus.WAITING
        self._correct_count = 0
        self._incorrect_count = 0
        self._history = []

    @contextmanager
    def _deferred_events(self) -> Iterator[None]:
        """
        在區塊內暫存事件，區塊正常結束後依序送出

        回呼因此只會看到呼叫結束後的一致狀態；區塊拋出例外時事件會被丟棄。
        """
        self._event_queue = []
        try:
            yield
        finally:
            queued, self._event_queue = self._event_queue, None
        for event in queued:
            self._dispatch(event)

    def _emit(self, event: JudgeEvent) -> None:
        if self._on_event is None:
            return
        event.setdefault("judge", self._judge_name)
        if self._event_queue is not None:
            self._event_queue.append(event)
            return
        self._dispatch(event)

    def _dispatch(self, event: JudgeEvent) -> None:
        try:
            self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")
