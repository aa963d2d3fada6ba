"""
測試事件回呼、按鍵正規化、配置與日誌工具
"""

import logging

import pytest

from kanatype import EnglishTypingJudge, JapaneseTypingJudge, JudgeConfig
from kanatype.core.keys import normalize_key
from kanatype.utils.logger import TimingContext, get_logger


def observe(judge_class, text, **kwargs):
    """建立判定器，並讓回呼在收到事件時讀取判定器的狀態"""
    seen = []
    holder = {}

    def handler(event):
        judge = holder["judge"]
        stats = judge.statistics
        seen.append({
            "type": event["type"],
            "total_input_count": stats.total_input_count,
            "history": len(judge.input_history),
            "is_completed": judge.is_completed,
            "progress": judge.progress,
        })

    holder["judge"] = judge_class(text, on_event=handler, **kwargs)
    return holder["judge"], seen


class TestEvents:
    """事件回呼"""

    def test_event_sequence(self):
        """測試事件順序與內容"""
        events = []
        judge = JapaneseTypingJudge("し", on_event=events.append)
        judge.judge("s")
        judge.judge("i")

        assert [e["type"] for e in events] == ["input", "pattern_switch", "input", "completed"]
        switch = events[1]
        assert switch["mora"] == "し"
        assert switch["old_pattern"] == "shi"
        assert switch["new_pattern"] == "si"
        assert all(e["judge"] == "japanese" for e in events)

    def test_handler_sees_state_after_judge(self):
        """測試回呼讀到的是 judge() 完成後的狀態"""
        judge, seen = observe(JapaneseTypingJudge, "し")
        judge.judge("s")
        judge.judge("i")

        assert [s["type"] for s in seen] == ["input", "pattern_switch", "input", "completed"]
        assert seen[0]["total_input_count"] == 1
        assert seen[0]["history"] == 1
        assert not seen[0]["is_completed"]
        for snapshot in seen[1:]:
            assert snapshot["total_input_count"] == 2
            assert snapshot["history"] == 2
            assert snapshot["is_completed"]
            assert snapshot["progress"] == 100

    def test_handler_sees_sokuon_switch_after_judge(self):
        """測試促音切換樣式時，回呼讀到已更新的計數"""
        judge, seen = observe(JapaneseTypingJudge, "まっちゃ", accept_sokuon_alternatives=True)
        for key in "mat":
            judge.judge(key)

        switches = [s for s in seen if s["type"] == "pattern_switch"]
        assert switches
        assert all(s["total_input_count"] == 3 for s in switches)
        assert all(s["history"] == 3 for s in switches)

    def test_english_handler_sees_completion(self):
        """測試逐字判定器最後一鍵的事件已看到完成狀態"""
        judge, seen = observe(EnglishTypingJudge, "ab")
        judge.judge("a")
        judge.judge("b")

        assert [s["type"] for s in seen] == ["input", "input", "completed"]
        assert not seen[0]["is_completed"]
        assert seen[1]["is_completed"]
        assert seen[1]["total_input_count"] == 2

    def test_post_completion_and_reset_events(self):
        """測試完成後輸入與重置事件"""
        events = []
        judge = JapaneseTypingJudge("", on_event=events.append)
        judge.judge("a")
        judge.reset()
        assert [e["type"] for e in events] == ["post_completion", "reset"]

    def test_invalid_key_emits_nothing(self):
        """測試無效按鍵不送出事件"""
        events = []
        judge = JapaneseTypingJudge("あ", on_event=events.append)
        with pytest.raises(ValueError):
            judge.judge("ab")
        assert events == []
        assert judge.judge("a").is_correct
        assert [e["type"] for e in events] == ["input", "completed"]

    def test_failing_handler_does_not_break_judging(self, caplog):
        """測試回呼拋出例外時判定照常進行並記錄錯誤"""
        def handler(event):
            raise RuntimeError("boom")

        judge = JapaneseTypingJudge("あ", on_event=handler)
        with caplog.at_level(logging.ERROR):
            result = judge.judge("a")

        assert result.is_correct
        assert judge.is_completed
        assert any("on_event" in record.getMessage() for record in caplog.records)


class TestNormalizeKey:
    """按鍵名稱正規化"""

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("a", "a"),
            ("A", "A"),
            ("-", "-"),
            ("Enter", "\n"),
            ("NumpadEnter", "\n"),
            ("Space", " "),
            (" ", " "),
            ("Shift", None),
            ("ArrowLeft", None),
            ("", None),
            (None, None),
        ],
    )
    def test_normalize(self, key, expected):
        """測試可打字按鍵轉為字元，其餘回傳 None"""
        assert normalize_key(key) == expected


class TestJudgeConfig:
    """判定器配置"""

    def test_defaults(self):
        """測試預設值：額外規則皆為關閉"""
        config = JudgeConfig()
        assert not config.accept_single_n
        assert not config.accept_sokuon_alternatives
        assert not config.case_sensitive
        assert not config.verbose

    def test_merged_overrides(self):
        """測試覆寫值產生新配置，原配置不變"""
        config = JudgeConfig()
        merged = config.merged(accept_single_n=True, verbose=None)
        assert merged is not config
        assert merged.accept_single_n
        assert not config.accept_single_n

    def test_merged_without_changes(self):
        """測試沒有覆寫值時回傳原配置"""
        config = JudgeConfig()
        assert config.merged(verbose=None) is config

    def test_unknown_option(self):
        """測試未知選項拋出 TypeError"""
        with pytest.raises(TypeError):
            JudgeConfig().merged(colour=True)


class TestLogging:
    """日誌與計時"""

    def test_logger_names(self):
        """測試 logger 名稱都在 kanatype 之下"""
        assert get_logger("judge.japanese").name == "kanatype.judge.japanese"
        assert get_logger("kanatype.segmenter").name == "kanatype.segmenter"
        assert get_logger().name == "kanatype"

    def test_timing_context_callback(self):
        """測試 TimingContext 呼叫計時回呼"""
        calls = []
        with TimingContext("op", callback=lambda op, elapsed: calls.append((op, elapsed))) as ctx:
            pass
        assert calls == [("op", ctx.elapsed)]
        assert ctx.elapsed >= 0

    def test_on_timing_from_judge(self):
        """測試判定器建構時呼叫 on_timing"""
        calls = []
        JapaneseTypingJudge("あ", on_timing=lambda op, elapsed: calls.append(op))
        assert calls == ["JapaneseTypingJudge.__init__"]

    def test_pattern_switch_is_logged(self, caplog):
        """測試打法切換寫入 DEBUG 日誌"""
        judge = JapaneseTypingJudge("し")
        with caplog.at_level(logging.DEBUG, logger="kanatype"):
            judge.judge("s")
            judge.judge("i")
        assert any("shi" in record.getMessage() and "si" in record.getMessage() for record in caplog.records)

    def test_post_completion_warning(self, caplog):
        """測試完成後輸入寫入 WARNING 日誌"""
        judge = JapaneseTypingJudge("")
        with caplog.at_level(logging.WARNING, logger="kanatype"):
            judge.judge("a")
        assert any(record.levelno == logging.WARNING for record in caplog.records)
