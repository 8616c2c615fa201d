"""Logging configuration."""

from __future__ import annotations

import logging
import re
import sys

_SERVICE_KEY_PATTERN = re.compile(r"(serviceKey=)[^&\s\"']+")


def mask_service_key(text: str) -> str:
    """URL/메시지에 포함된 serviceKey 값을 가립니다."""
    return _SERVICE_KEY_PATTERN.sub(r"\1***", text)


class ServiceKeyMaskFilter(logging.Filter):
    """로그 레코드의 serviceKey 마스킹."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = mask_service_key(message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def setup_logging(level: str = "INFO") -> None:
    """애플리케이션 로깅을 설정합니다."""
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(ServiceKeyMaskFilter())

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[handler],
    )

    # httpx는 요청 URL 전체(serviceKey 포함)를 INFO로 남김
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
