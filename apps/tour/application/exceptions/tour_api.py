"""한국관광공사 API 호출 예외.

원격 호출 실패는 모두 TourApiError 계열로 전달됩니다.
컨트롤러는 흐름 제어에서 이들을 구분하지 않고 메시지만 노출합니다.
"""

from __future__ import annotations

from typing import Any

from tour.application.exceptions.base import ApplicationError


class TourApiError(ApplicationError):
    """Tour API 호출 실패."""

    def __init__(
        self,
        message: str = "관광 정보 API 호출에 실패했습니다.",
        status_code: int | None = None,
        response_data: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class TourApiKeyError(TourApiError):
    """API 키가 설정되지 않음 (재시도 불가)."""

    def __init__(self, message: str = "API 키가 설정되지 않았습니다.") -> None:
        super().__init__(message)


class TourApiRateLimitError(TourApiError):
    """호출 제한 초과 (HTTP 429)."""

    def __init__(self, message: str = "API 호출 제한을 초과했습니다.") -> None:
        super().__init__(message, status_code=429)


class TourApiNetworkError(TourApiError):
    """네트워크 오류 / 타임아웃."""

    def __init__(self, message: str = "네트워크 오류가 발생했습니다.") -> None:
        super().__init__(message)


class TourApiResponseError(TourApiError):
    """응답 형식 오류 (빈 응답, HTML, JSON 파싱 실패, 헤더 누락)."""


class TourApiResultError(TourApiError):
    """응답 헤더의 resultCode가 성공이 아님."""

    def __init__(
        self,
        result_code: str,
        result_msg: str,
        status_code: int | None = None,
        response_data: Any = None,
    ) -> None:
        super().__init__(f"API 오류: {result_msg}", status_code, response_data)
        self.result_code = result_code
        self.result_msg = result_msg
