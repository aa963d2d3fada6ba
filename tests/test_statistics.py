"""
測試統計計算
"""

from kanatype.core.models import TypingStatistics
from kanatype.core.statistics import build_statistics, compute_accuracy, compute_progress, round_half_up


class TestAccuracy:
    def test_no_input_is_perfect(self):
        """測試沒有輸入時正確率為 100"""
        assert compute_accuracy(0, 0) == 100

    def test_rounding_half_up(self):
        """測試正確率四捨五入"""
        assert compute_accuracy(1, 7) == 13   # 12.5
        assert compute_accuracy(2, 1) == 67   # 66.67
        assert compute_accuracy(1, 2) == 33   # 33.33

    def test_bounds(self):
        """測試正確率上下限"""
        assert compute_accuracy(0, 5) == 0
        assert compute_accuracy(5, 0) == 100

    def test_round_half_up(self):
        """測試 round_half_up"""
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(2.4999) == 2


class TestProgress:
    def test_empty(self):
        """測試空樣式列表的進度為 0"""
        assert compute_progress([], 0, 0) == 0

    def test_partial(self):
        """測試部分進度"""
        assert compute_progress(["t", "te"], 0, 0) == 0
        assert compute_progress(["t", "te"], 1, 0) == 33
        assert compute_progress(["t", "te"], 1, 1) == 67

    def test_complete(self):
        """測試完成時進度為 100"""
        assert compute_progress(["t", "te"], 2, 0) == 100


class TestBuildStatistics:
    def test_fields(self):
        """測試統計欄位"""
        stats = build_statistics(3, 1)
        assert stats == TypingStatistics(
            correct_count=3,
            incorrect_count=1,
            total_input_count=4,
            accuracy=75,
        )
        assert stats.to_dict()["accuracy"] == 75
