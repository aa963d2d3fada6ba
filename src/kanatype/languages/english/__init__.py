"""
英文（逐字）練習模組
"""

from .judge import EnglishTypingJudge

__all__ = [
    "EnglishTypingJudge",
]
