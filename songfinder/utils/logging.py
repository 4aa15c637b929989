"""
SongFinder Logging Configuration
로깅 설정
"""

import logging
import sys
from typing import Union


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    로깅 설정

    여러 번 호출해도 핸들러는 한 번만 붙고, 레벨만 갱신된다.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        # 표준 출력(터미널)으로 로그 보냄
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    logging.getLogger().setLevel(level)
