"""
日文打字判定器 (JapaneseTypingJudge)

將假名練習文字轉為羅馬字打法，並逐鍵判定使用者的輸入。
同一個假名可能有多種打法（し = shi / si / ci），判定器會依照已輸入的按鍵
決定使用者採用哪一種，並即時切換顯示中的樣式。

使用方式:
    from kanatype import JapaneseTypingJudge

    judge = JapaneseTypingJudge("しって")
    for key in "sitte":
        result = judge.judge(key)
    assert judge.is_completed
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from kanatype.config import JudgeConfig
from kanatype.core.events import JudgeEventHandler
from kanatype.core.judge_interface import TypingJudge
from kanatype.core.models import InputResult, TypingStatus
from kanatype.core.statistics import compute_progress

from .resolver import (
    allows_single_n,
    can_begin,
    initial_patterns,
    is_geminate_consonant,
    select_best_pattern,
)
from .segmenter import JapaneseSegmenter, Mora


class JapaneseTypingJudge(TypingJudge):
    """
    日文打字判定器

    判定規則（每次按鍵）:
    1. 已完成：不變更位置與計數，只追加一筆 is_correct=False 的紀錄
    2. 特殊符號（換行、長音、標點、空白）：必須完全一致
    3. 促音「っ」且尚未輸入：按鍵等於下一個モーラ樣式的第一個字元即通過，
       該字元不會從下一個モーラ扣除（下一個モーラ仍需再打一次）
    4. 一般モーラ：以「已輸入部分 + 本次按鍵」選擇最適合的打法，
       打法改變時覆寫作用中樣式；只會往前切換，不會讓已接受的按鍵失效

    選用規則（JudgeConfig，預設關閉）:
    - accept_single_n: 「ん」後接子音時只打一個 n
    - accept_sokuon_alternatives: 促音可改用下一個モーラ其他以該子音開頭的打法

    建立方式:
        JapaneseTypingJudge(text) 或 kanatype.create(text)
    """

    _judge_name = "japanese"

    def __init__(
        self,
        target_text: str,
        config: Optional[JudgeConfig] = None,
        *,
        on_event: Optional[JudgeEventHandler] = None,
        verbose: Optional[bool] = None,
        on_timing: Optional[Callable[[str, float], None]] = None,
        accept_single_n: Optional[bool] = None,
        accept_sokuon_alternatives: Optional[bool] = None,
    ):
        self._init_judge(
            config,
            on_event,
            verbose=verbose,
            on_timing=on_timing,
            accept_single_n=accept_single_n,
            accept_sokuon_alternatives=accept_sokuon_alternatives,
        )

        with self._log_timing("JapaneseTypingJudge.__init__"):
            self._target_text = target_text
            self._segmenter = JapaneseSegmenter()
            self._morae: Tuple[Mora, ...] = tuple(self._segmenter.segment(target_text))
            self._restore_initial_state()

        self._logger.info(f"JapaneseTypingJudge initialized: {target_text!r} ({len(self._morae)} morae)")
        self._logger.debug(f"  [Patterns] {self._patterns}")

    def _restore_initial_state(self) -> None:
        self._patterns: List[str] = initial_patterns(self._morae)
        self._mora_index = 0
        self._pattern_offset = 0
        self._progress_mark = 0
        self._reset_counters()
        if not self._morae:
            self._status = TypingStatus.COMPLETED

    # =========================================================================
    # 觀察者
    # =========================================================================

    @property
    def target_text(self) -> str:
        return self._target_text

    @property
    def morae(self) -> Tuple[Mora, ...]:
        return self._morae

    @property
    def mora_texts(self) -> Tuple[str, ...]:
        """與 romaji_patterns 索引對齊的顯示標籤"""
        return tuple(mora.text for mora in self._morae)

    @property
    def romaji_patterns(self) -> Tuple[str, ...]:
        return tuple(self._patterns)

    @property
    def current_mora_index(self) -> int:
        return self._mora_index

    @property
    def current_pattern_offset(self) -> int:
        return self._pattern_offset

    @property
    def current_mora(self) -> Optional[Mora]:
        if self._mora_index >= len(self._morae):
            return None
        return self._morae[self._mora_index]

    @property
    def current_pattern(self) -> Optional[str]:
        if self._mora_index >= len(self._patterns):
            return None
        return self._patterns[self._mora_index]

    @property
    def expected_char(self) -> Optional[str]:
        pattern = self.current_pattern
        if pattern is None or self._pattern_offset >= len(pattern):
            return None
        return pattern[self._pattern_offset]

    @property
    def progress(self) -> int:
        # 切換成較長的樣式會讓分母變大，以最高值保證進度不倒退
        return max(self._progress_mark, compute_progress(self._patterns, self._mora_index, self._pattern_offset))

    @property
    def typed_romaji(self) -> str:
        """已通過的羅馬字（依目前的作用中樣式）"""
        typed = "".join(self._patterns[:self._mora_index])
        pattern = self.current_pattern
        if pattern is not None:
            typed += pattern[:self._pattern_offset]
        return typed

    @property
    def remaining_romaji(self) -> str:
        """尚未輸入的羅馬字（依目前的作用中樣式）"""
        pattern = self.current_pattern
        if pattern is None:
            return ""
        return pattern[self._pattern_offset:] + "".join(self._patterns[self._mora_index + 1:])

    # =========================================================================
    # 判定
    # =========================================================================

    def judge(self, input_char: str) -> InputResult:
        """
        判定一個按鍵

        Args:
            input_char: 單一字元（換行鍵以 "\\n" 表示）

        Returns:
            InputResult: 本次判定結果（同時追加到 input_history）

        Raises:
            InvalidKeyError: input_char 不是單一字元
        """
        self._validate_key(input_char)
        with self._deferred_events():
            return self._judge_char(input_char)

    def _judge_char(self, input_char: str) -> InputResult:
        self._start_if_waiting()

        if self._mora_index >= len(self._morae):
            return self._reject_after_completion(input_char, self._mora_index)

        expected = self._patterns[self._mora_index][self._pattern_offset]
        is_correct = self._judge_current(input_char)

        if not is_correct:
            self._logger.debug(
                f"不正確: {self._morae[self._mora_index].text!r} 期待={expected!r} 輸入={input_char!r}"
            )

        result = self._record(InputResult(
            is_correct=is_correct,
            expected_char=expected,
            input_char=input_char,
            position=self._mora_index,
        ))
        self._progress_mark = self.progress

        if self._mora_index >= len(self._morae):
            self._mark_completed()

        return result

    def _judge_current(self, input_char: str) -> bool:
        mora = self._morae[self._mora_index]

        if mora.is_special:
            return self._judge_special(input_char)

        if mora.is_sokuon and self._pattern_offset == 0:
            next_pattern = self._geminate_pattern(self._mora_index, input_char)
            if next_pattern is not None:
                self._accept_geminate(input_char, next_pattern)
                return True

        return self._judge_ordinary(mora, input_char)

    def _judge_special(self, input_char: str) -> bool:
        expected = self._patterns[self._mora_index][0]
        if input_char != expected:
            return False
        self._logger.debug(f"特殊符號通過: {self._morae[self._mora_index].text!r}")
        self._advance_mora()
        return True

    def _geminate_pattern(self, index: int, input_char: str) -> Optional[str]:
        """
        促音借用子音時，下一個モーラ應採用的樣式

        Returns:
            Optional[str]: 下一個モーラ的樣式；不成立時回傳 None
        """
        next_index = index + 1
        if next_index >= len(self._morae):
            return None

        active = self._patterns[next_index]
        if active.startswith(input_char):
            return active

        next_mora = self._morae[next_index]
        if (
            self._config.accept_sokuon_alternatives
            and not next_mora.is_special
            and is_geminate_consonant(input_char)
        ):
            candidate = select_best_pattern(next_mora, input_char)
            if candidate.startswith(input_char):
                return candidate
        return None

    def _accept_geminate(self, input_char: str, next_pattern: str) -> None:
        index = self._mora_index
        if self._patterns[index + 1] != next_pattern:
            self._switch_pattern(index + 1, next_pattern)
        if self._patterns[index] != input_char:
            self._switch_pattern(index, input_char)
        self._logger.debug(f"促音通過: {input_char!r} (下一個モーラ: {next_pattern!r})")
        self._advance_mora()

    def _judge_ordinary(self, mora: Mora, input_char: str) -> bool:
        index = self._mora_index
        pattern = self._patterns[index]
        partial_input = pattern[:self._pattern_offset] + input_char
        best_pattern = select_best_pattern(mora, partial_input)

        if best_pattern.startswith(partial_input):
            if best_pattern != pattern:
                self._switch_pattern(index, best_pattern)
            self._pattern_offset += 1
            if self._pattern_offset >= len(best_pattern):
                self._logger.debug(f"モーラ完成: {best_pattern!r} -> {mora.text!r}")
                self._advance_mora()
            return True

        if self._single_n_applies(mora, pattern, input_char):
            self._switch_pattern(index, "n")
            self._advance_mora()
            return self._judge_current(input_char)

        return False

    def _single_n_applies(self, mora: Mora, pattern: str, input_char: str) -> bool:
        if not self._config.accept_single_n:
            return False
        if self._pattern_offset != 1 or pattern != "nn":
            return False
        if not allows_single_n(mora, input_char):
            return False
        return self._can_begin_at(self._mora_index + 1, input_char)

    def _can_begin_at(self, index: int, input_char: str) -> bool:
        """不變更狀態，檢查第 index 個モーラ能否以 input_char 開始"""
        if index >= len(self._morae):
            return False
        mora = self._morae[index]
        if mora.is_special:
            return self._patterns[index][0] == input_char
        if mora.is_sokuon and self._geminate_pattern(index, input_char) is not None:
            return True
        return can_begin(mora, input_char)

    def _switch_pattern(self, index: int, new_pattern: str) -> None:
        old_pattern = self._patterns[index]
        self._logger.debug(f"切換羅馬字樣式: {old_pattern!r} -> {new_pattern!r}")
        self._patterns[index] = new_pattern
        self._emit({
            "type": "pattern_switch",
            "position": index,
            "mora": self._morae[index].text,
            "old_pattern": old_pattern,
            "new_pattern": new_pattern,
        })

    def _advance_mora(self) -> None:
        self._mora_index += 1
        self._pattern_offset = 0

    # =========================================================================
    # 重置
    # =========================================================================

    def reset(self) -> None:
        """回到建構完成時的狀態（樣式依對照表重建）"""
        self._restore_initial_state()
        self._logger.debug("已重置")
        self._emit({"type": "reset", "position": 0})


def create(target_text: str, **kwargs) -> JapaneseTypingJudge:
    """建立日文打字判定器（JapaneseTypingJudge 的簡寫）"""
    return JapaneseTypingJudge(target_text, **kwargs)
