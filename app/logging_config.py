"""
로깅 설정
loguru 기본 sink를 설정된 레벨로 교체합니다.
"""

import sys

from loguru import logger

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """앱 시작 시 한 번만 호출"""
    global _configured
    if _configured:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "{extra} | {message}"
        ),
    )
    _configured = True
