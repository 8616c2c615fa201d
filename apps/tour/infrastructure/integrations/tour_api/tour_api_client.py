"""한국관광공사 공공 API Client.

국문 관광정보 서비스(KorService2) HTTP 클라이언트.

API 문서: https://www.data.go.kr/data/15101578/openapi.do

엔드포인트:
- areaCode2: 지역코드 조회
- areaBasedList2: 지역 기반 목록
- searchKeyword2: 키워드 검색
- detailCommon2 / detailIntro2 / detailImage2: 상세 정보
- detailPetTour2: 반려동물 동반 정보

인증:
- serviceKey 쿼리 파라미터 (공공데이터포털 발급)

응답 형식:
    {"response": {"header": {"resultCode": "0000", "resultMsg": "OK"},
                  "body": {"items": {"item": [...]}, "totalCount": 123}}}
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

import httpx

from tour.application.exceptions import (
    TourApiError,
    TourApiKeyError,
    TourApiNetworkError,
    TourApiRateLimitError,
    TourApiResponseError,
    TourApiResultError,
)
from tour.application.ports.tour_source import TourListPage, TourSourcePort
from tour.domain.constants import PAGE_SIZE, RESULT_CODE_OK
from tour.domain.entities import (
    AreaCode,
    PetTourInfo,
    TourDetail,
    TourImage,
    TourIntro,
    TourItem,
)

logger = logging.getLogger(__name__)

TOUR_API_BASE_URL = "https://apis.data.go.kr/B551011/KorService2"
DEFAULT_TIMEOUT = 30.0  # 공공 API 응답이 느릴 수 있음
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAYS = (1.0, 2.0, 4.0)


def extract_items(body: dict[str, Any] | None) -> list[dict[str, Any]]:
    """응답 body에서 항목 목록 추출.

    item이 단일 객체, 배열, 누락, 빈 문자열("items": "")인 경우를 모두 목록으로 정규화합니다.
    """
    if not isinstance(body, dict):
        return []
    items = body.get("items")
    if not isinstance(items, dict):
        return []
    item = items.get("item")
    if isinstance(item, list):
        return [i for i in item if isinstance(i, dict)]
    if isinstance(item, dict):
        return [item]
    return []


def _total_count(body: dict[str, Any]) -> int | None:
    value = body.get("totalCount")
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


class TourApiClient(TourSourcePort):
    """한국관광공사 API 클라이언트.

    재시도 정책 (지수 백오프):
    - 네트워크 오류 / 타임아웃 / 5xx → 최대 max_retries회 재시도
    - API 키 누락, 429, 5xx 미만 상태 코드 → 즉시 실패
    """

    def __init__(
        self,
        api_key: str | None,
        http_client: httpx.AsyncClient,
        base_url: str = TOUR_API_BASE_URL,
        mobile_app: str = "MyTrip",
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        retry_delays: Sequence[float] = DEFAULT_RETRY_DELAYS,
    ):
        """초기화.

        Args:
            api_key: 공공데이터포털 서비스 키
            http_client: HTTP 클라이언트 (외부 주입)
            base_url: API Base URL
            mobile_app: MobileApp 파라미터 값
            timeout: 요청 타임아웃 (초)
            max_retries: 최대 재시도 횟수
            retry_delays: 재시도 대기 시간 (초), 횟수보다 짧으면 마지막 값 반복
        """
        self._api_key = api_key
        self._client = http_client
        self._base_url = base_url.rstrip("/")
        self._mobile_app = mobile_app
        self._timeout = timeout
        self._max_retries = max_retries
        self._retry_delays = tuple(retry_delays)

    # ------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------

    async def area_based_list(
        self,
        area_code: str,
        content_type_id: str | None = None,
        page: int = 1,
        page_size: int = PAGE_SIZE,
        sigungu_code: str | None = None,
        cat1: str | None = None,
        cat2: str | None = None,
        cat3: str | None = None,
        modified_time: str | None = None,
        arrange: str | None = None,
    ) -> TourListPage:
        """지역 기반 목록 조회."""
        body = await self._call(
            "areaBasedList2",
            {
                "areaCode": area_code,
                "contentTypeId": content_type_id,
                "sigunguCode": sigungu_code,
                "cat1": cat1,
                "cat2": cat2,
                "cat3": cat3,
                "modifiedtime": modified_time,
                "arrange": arrange,
                "numOfRows": page_size,
                "pageNo": page,
            },
        )
        return self._to_list_page(body, page, page_size)

    async def search_keyword(
        self,
        keyword: str,
        area_code: str | None = None,
        content_type_id: str | None = None,
        page: int = 1,
        page_size: int = PAGE_SIZE,
        cat1: str | None = None,
        cat2: str | None = None,
        cat3: str | None = None,
        arrange: str | None = None,
    ) -> TourListPage:
        """키워드 검색."""
        body = await self._call(
            "searchKeyword2",
            {
                "keyword": keyword,
                "areaCode": area_code,
                "contentTypeId": content_type_id,
                "cat1": cat1,
                "cat2": cat2,
                "cat3": cat3,
                "arrange": arrange,
                "numOfRows": page_size,
                "pageNo": page,
            },
        )
        return self._to_list_page(body, page, page_size)

    async def area_codes(self, page_size: int = 50) -> list[AreaCode]:
        """지역코드 목록 (시/도)."""
        body = await self._call("areaCode2", {"numOfRows": page_size, "pageNo": 1})
        codes = (AreaCode.from_api(raw) for raw in extract_items(body))
        return [c for c in codes if c is not None]

    # ------------------------------------------------------------
    # Detail
    # ------------------------------------------------------------

    async def detail_common(self, content_id: str) -> TourDetail | None:
        """공통 정보 조회."""
        body = await self._call("detailCommon2", {"contentId": content_id})
        items = extract_items(body)
        return TourDetail.from_api(items[0]) if items else None

    async def detail_intro(self, content_id: str, content_type_id: str) -> TourIntro | None:
        """소개(운영) 정보 조회."""
        body = await self._call(
            "detailIntro2",
            {"contentId": content_id, "contentTypeId": content_type_id},
        )
        items = extract_items(body)
        return TourIntro.from_api(items[0]) if items else None

    async def detail_image(self, content_id: str) -> list[TourImage]:
        """이미지 목록 조회."""
        body = await self._call(
            "detailImage2",
            {"contentId": content_id, "imageYN": "Y", "numOfRows": 50, "pageNo": 1},
        )
        images = (TourImage.from_api(raw) for raw in extract_items(body))
        return [i for i in images if i is not None]

    async def detail_pet_tour(self, content_id: str) -> PetTourInfo | None:
        """반려동물 동반 정보 조회 (0~1건)."""
        body = await self._call("detailPetTour2", {"contentId": content_id})
        items = extract_items(body)
        if not items:
            return None
        return PetTourInfo.from_api(items[0], content_id=content_id)

    async def close(self) -> None:
        """리소스 정리 (클라이언트는 외부에서 관리)."""
        pass

    # ------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------

    def _to_list_page(self, body: dict[str, Any], page: int, page_size: int) -> TourListPage:
        raw_items = extract_items(body)
        items: list[TourItem] = []
        for raw in raw_items:
            item = TourItem.from_api(raw)
            if item is None:
                logger.debug("Skipping malformed tour item", extra={"item": raw})
                continue
            items.append(item)
        return TourListPage(
            items=items,
            page=page,
            page_size=page_size,
            raw_count=len(raw_items),
            total_count=_total_count(body),
        )

    def _build_params(self, params: dict[str, Any]) -> dict[str, str]:
        if not self._api_key:
            raise TourApiKeyError(
                "한국관광공사 API 키가 설정되지 않았습니다. TOUR_API_KEY 환경변수를 확인하세요."
            )
        query = {
            "serviceKey": self._api_key,
            "MobileOS": "ETC",
            "MobileApp": self._mobile_app,
            "_type": "json",
        }
        for key, value in params.items():
            if value is None or value == "":
                continue
            query[key] = str(value)
        return query

    async def _call(self, endpoint: str, params: dict[str, Any]) -> dict[str, Any]:
        """API 호출 (재시도 포함).

        Returns:
            response.body (없으면 빈 dict)
        """
        query = self._build_params(params)
        log_ctx = {"endpoint": endpoint}

        for attempt in range(self._max_retries + 1):
            try:
                return await self._call_once(endpoint, query)
            except TourApiError as e:
                log_ctx_with_error = {
                    **log_ctx,
                    "attempt": attempt + 1,
                    "max_retries": self._max_retries,
                    "status_code": e.status_code,
                    "error": e.message,
                }
                if self._is_retryable(e) and attempt < self._max_retries:
                    delay = self._retry_delay(attempt)
                    logger.warning(
                        "Tour API call failed, retrying",
                        extra={**log_ctx_with_error, "retry_delay_seconds": delay},
                    )
                    await asyncio.sleep(delay)
                    continue
                logger.error("Tour API call failed permanently", extra=log_ctx_with_error)
                raise

        # range가 비어 있을 수 없으므로 도달하지 않음
        raise TourApiError("재시도 횟수를 초과했습니다.")

    async def _call_once(self, endpoint: str, query: dict[str, str]) -> dict[str, Any]:
        try:
            response = await self._client.get(
                f"{self._base_url}/{endpoint}",
                params=query,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as e:
            raise TourApiNetworkError("요청 시간이 초과되었습니다.") from e
        except httpx.HTTPError as e:
            raise TourApiNetworkError() from e

        status = response.status_code
        if status == 429:
            raise TourApiRateLimitError()

        text = response.text
        if not text.strip():
            raise TourApiResponseError("빈 응답을 받았습니다.", status)

        # 키 오류 시 HTML/XML 에러 페이지가 내려옴
        if text.lstrip().startswith("<"):
            raise TourApiResponseError(
                "HTML 응답을 받았습니다. API 키를 확인해주세요.",
                status,
                text[:200],
            )

        try:
            data = response.json()
        except ValueError:
            raise TourApiResponseError(
                f"응답을 파싱할 수 없습니다. (상태: {status})",
                status,
                text[:500],
            ) from None

        if not response.is_success:
            raise TourApiError(f"API 호출 실패: {response.reason_phrase}", status, data)

        envelope = data.get("response") if isinstance(data, dict) else None
        header = envelope.get("header") if isinstance(envelope, dict) else None
        if not isinstance(header, dict):
            raise TourApiResponseError("잘못된 응답 형식입니다.", status, data)

        result_code = str(header.get("resultCode", ""))
        if result_code != RESULT_CODE_OK:
            raise TourApiResultError(
                result_code=result_code,
                result_msg=str(header.get("resultMsg", "")),
                status_code=status,
                response_data=data,
            )

        body = envelope.get("body")
        return body if isinstance(body, dict) else {}

    def _retry_delay(self, attempt: int) -> float:
        if not self._retry_delays:
            return 0.0
        return self._retry_delays[min(attempt, len(self._retry_delays) - 1)]

    @staticmethod
    def _is_retryable(error: TourApiError) -> bool:
        if isinstance(error, (TourApiKeyError, TourApiRateLimitError)):
            return False
        if error.status_code is not None and error.status_code < 500:
            return False
        return True
