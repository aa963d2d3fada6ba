"""
日誌與計時工具

本套件預設不輸出任何日誌（根 logger 掛 NullHandler）。
需要觀察判定過程時，使用 verbose=True 或標準 logging 控制：

    import logging
    logging.getLogger("kanatype").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "kanatype"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None


def get_logger(name: str = "") -> logging.Logger:
    """
    取得套件內的子 logger

    Args:
        name: 子 logger 名稱，例如 "judge.japanese"

    Returns:
        logging.Logger: 名稱為 "kanatype.<name>" 的 logger
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為套件根 logger 掛上一個 StreamHandler（重複呼叫只更新等級與格式）

    Args:
        level: 日誌等級
        fmt: 輸出格式

    Returns:
        logging.Logger: 套件根 logger
    """
    global _handler
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler()
        logger.addHandler(_handler)
    _handler.setFormatter(logging.Formatter(fmt))
    _handler.setLevel(level)
    logger.setLevel(level)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級日誌（每次按鍵的判定細節）"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時相關日誌"""
    setup_logger(level=logging.DEBUG)
    timing_logger = get_logger("timing")
    timing_logger.setLevel(logging.DEBUG)
    return timing_logger


class TimingContext:
    """
    計時上下文管理器

    使用範例:
        with TimingContext("segment", logger, logging.DEBUG):
            ...

    Attributes:
        elapsed: 離開上下文後的耗時（秒）
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.3f} ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    函式計時裝飾器

    Args:
        operation: 顯示名稱，預設為函式的 __qualname__
        level: 日誌等級
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, get_logger("timing"), level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
