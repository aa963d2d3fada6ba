"""
事件模型（Event Model）

判定器不依賴任何 UI 反應式框架。
顯示層若需要在按鍵判定、樣式切換、完成時更新畫面，請使用事件回呼（event handler）。

回呼拋出的例外會被記錄（logger.exception）但不會中斷判定。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class JudgeEvent(TypedDict, total=False):
    type: Literal["input", "pattern_switch", "completed", "reset", "post_completion"]
    judge: str

    # input / post_completion
    is_correct: bool
    expected_char: str
    input_char: str
    position: int

    # pattern_switch
    mora: str
    old_pattern: str
    new_pattern: str

    # completed
    correct_count: int
    incorrect_count: int
    accuracy: int


JudgeEventHandler = Callable[[JudgeEvent], None]
