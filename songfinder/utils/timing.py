"""
SongFinder Timing Utilities
구간 / 함수 실행 시간 로깅
"""

import logging
import time
from functools import wraps
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Timer:
    """
    with 블록 시간 측정

    name이 있으면 종료 시 "{name} done in 12.3ms" 형식으로 기록
    (블록 안에서 예외가 나면 "failed")
    """

    def __init__(self, name: str = "", level: int = logging.DEBUG):
        self.name = name
        self.level = level
        self.elapsed: float = 0.0
        self._start: Optional[float] = None

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self._start
        if self.name:
            status = "failed" if exc_type is not None else "done"
            logger.log(self.level, f"{self.name} {status} in {self.elapsed_ms:.1f}ms")


def timed(func: Callable) -> Callable:
    """함수 실행 시간을 DEBUG로 기록하는 데코레이터"""
    @wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        with Timer(func.__qualname__):
            return func(*args, **kwargs)
    return wrapper
