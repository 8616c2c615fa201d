"""좌표 정규화.

한국관광공사 API의 mapx/mapy 값을 WGS84 좌표로 변환합니다.

API는 레코드마다 좌표 형식이 다릅니다:
- 이미 WGS84 소수 (예: "126.978", "37.5665")
- KATEC 정수형 고정소수점 (예: "1269780000", "375665000")

분류(classify)와 변환(convert)을 순수 함수로 분리하고,
변환 결과는 한국 영역 범위로 다시 검증합니다.
"""

from __future__ import annotations

import logging
import math
from enum import Enum

from tour.domain.value_objects import Coordinates

logger = logging.getLogger(__name__)

# 한국 영역 (경도 124~132, 위도 33~43)
MIN_LONGITUDE = 124.0
MAX_LONGITUDE = 132.0
MIN_LATITUDE = 33.0
MAX_LATITUDE = 43.0

# 고정소수점 형식 판별 기준 / 배율
FIXED_POINT_THRESHOLD = 1_000_000
FIXED_POINT_SCALE = 10_000_000


class CoordinateFormat(str, Enum):
    """원본 좌표 형식."""

    ALREADY_NORMALIZED = "already_normalized"
    FIXED_POINT_ENCODED = "fixed_point_encoded"
    UNRECOGNIZED = "unrecognized"


def _in_korea(longitude: float, latitude: float) -> bool:
    return (
        MIN_LONGITUDE <= longitude <= MAX_LONGITUDE
        and MIN_LATITUDE <= latitude <= MAX_LATITUDE
    )


def classify_coordinates(x: float, y: float) -> CoordinateFormat:
    """숫자 좌표쌍의 형식 판별.

    Args:
        x: 경도 후보 (mapx)
        y: 위도 후보 (mapy)

    Returns:
        좌표 형식
    """
    if _in_korea(x, y):
        return CoordinateFormat.ALREADY_NORMALIZED
    if x > FIXED_POINT_THRESHOLD and y > FIXED_POINT_THRESHOLD:
        return CoordinateFormat.FIXED_POINT_ENCODED
    return CoordinateFormat.UNRECOGNIZED


def convert_coordinates(
    x: float,
    y: float,
    fmt: CoordinateFormat,
) -> tuple[float, float] | None:
    """형식에 맞춰 (경도, 위도)로 변환.

    UNRECOGNIZED이면 None.
    """
    if fmt is CoordinateFormat.ALREADY_NORMALIZED:
        return x, y
    if fmt is CoordinateFormat.FIXED_POINT_ENCODED:
        return x / FIXED_POINT_SCALE, y / FIXED_POINT_SCALE
    return None


def _parse(value: str | float | None) -> float | None:
    if value is None:
        return None
    text = str(value).strip()
    if not text or text == "0":
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def normalize_coordinates(
    mapx: str | float | None,
    mapy: str | float | None,
) -> Coordinates | None:
    """mapx/mapy → WGS84 좌표.

    예외를 던지지 않으며, 유효한 위치가 없으면 None을 반환합니다.

    Example:
        >>> normalize_coordinates("1269780000", "375665000")
        Coordinates(latitude=37.5665, longitude=126.978)
    """
    x = _parse(mapx)
    y = _parse(mapy)
    if x is None or y is None:
        logger.debug("Missing or non-numeric coordinates", extra={"mapx": mapx, "mapy": mapy})
        return None

    fmt = classify_coordinates(x, y)
    converted = convert_coordinates(x, y, fmt)
    if converted is None:
        logger.debug("Unrecognized coordinate format", extra={"mapx": mapx, "mapy": mapy})
        return None

    longitude, latitude = converted
    if not _in_korea(longitude, latitude):
        logger.warning(
            "Coordinates out of range",
            extra={"mapx": mapx, "mapy": mapy, "format": fmt.value},
        )
        return None

    return Coordinates(latitude=latitude, longitude=longitude)


def is_valid_coordinate(mapx: str | float | None, mapy: str | float | None) -> bool:
    """좌표 유효 여부."""
    return normalize_coordinates(mapx, mapy) is not None
