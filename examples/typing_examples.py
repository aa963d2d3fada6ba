"""
日文打字判定範例 (Japanese Typing Judge Examples)

本檔案展示 JapaneseTypingJudge 的核心功能：
1. 基礎用法 - 逐鍵判定與統計
2. 打法切換 - し = shi / si / ci
3. 促音 - 共用下一個モーラ的子音
4. 事件回呼 - 顯示層更新
"""

import sys
from pathlib import Path

root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / "src"))

from kanatype import JapaneseTypingJudge, create


def print_case(title, judge, keys):
    print(f"--- {title} ---")
    print(f"練習文字 (Target):  {judge.target_text!r}")
    print(f"預設打法 (Default): {''.join(judge.romaji_patterns)!r}")
    marks = "".join("o" if judge.judge(key).is_correct else "x" for key in keys)
    print(f"輸入 (Keys):        {keys!r}")
    print(f"判定 (Marks):       {marks}")
    print(f"採用打法 (Used):    {''.join(judge.romaji_patterns)!r}")
    stats = judge.statistics
    print(f"完成 / 進度 / 正確率: {judge.is_completed} / {judge.progress}% / {stats.accuracy}%")
    print()


# =============================================================================
# 範例 1: 基礎用法
# =============================================================================
def example_1_basic_usage():
    print("=" * 60)
    print("範例 1: 基礎用法 (Basic Usage)")
    print("=" * 60)
    print_case("ありがとう + Enter", create("ありがとう\n"), "arigatou\n")
    print_case("打錯後重打", create("ねこ。"), "nwekxo.")


# =============================================================================
# 範例 2: 打法切換
# =============================================================================
def example_2_pattern_switch():
    print("=" * 60)
    print("範例 2: 打法切換 (Pattern Switch)")
    print("=" * 60)
    print_case("訓令式", JapaneseTypingJudge("しゃしんをとる"), "syasinnwotoru")
    print_case("單一 n", JapaneseTypingJudge("ほんとう", accept_single_n=True), "hontou")


# =============================================================================
# 範例 3: 促音
# =============================================================================
def example_3_sokuon():
    print("=" * 60)
    print("範例 3: 促音 (Sokuon)")
    print("=" * 60)
    print_case("重複子音", JapaneseTypingJudge("きって"), "kitte")
    print_case("單獨輸入 っ", JapaneseTypingJudge("きって"), "kiltute")
    print_case("まっちゃ (cha)", JapaneseTypingJudge("まっちゃ"), "maccha")
    print_case(
        "まっちゃ (tya)",
        JapaneseTypingJudge("まっちゃ", accept_sokuon_alternatives=True),
        "mattya",
    )


# =============================================================================
# 範例 4: 事件回呼
# =============================================================================
def example_4_events():
    print("=" * 60)
    print("範例 4: 事件回呼 (Events)")
    print("=" * 60)

    def on_event(event):
        if event["type"] == "pattern_switch":
            print(f"  [switch] {event['mora']}: {event['old_pattern']} -> {event['new_pattern']}")
        elif event["type"] == "completed":
            print(f"  [done] accuracy={event['accuracy']}")

    judge = JapaneseTypingJudge("ちかてつ", on_event=on_event)
    for key in "tikatetu":
        judge.judge(key)
    print()


if __name__ == "__main__":
    example_1_basic_usage()
    example_2_pattern_switch()
    example_3_sokuon()
    example_4_events()
