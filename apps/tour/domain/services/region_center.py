"""지역별 중심 좌표.

지역코드(areaCode)에 해당하는 지도 중심 좌표를 제공합니다.
"""

from __future__ import annotations

from tour.domain.value_objects import Coordinates

# 서울
DEFAULT_CENTER = Coordinates(latitude=37.5665, longitude=126.9780)

REGION_CENTERS: dict[str, Coordinates] = {
    "1": Coordinates(latitude=37.5665, longitude=126.9780),  # 서울
    "2": Coordinates(latitude=37.4563, longitude=126.7052),  # 인천
    "3": Coordinates(latitude=36.3504, longitude=127.3845),  # 대전
    "4": Coordinates(latitude=35.8714, longitude=128.6014),  # 대구
    "5": Coordinates(latitude=35.1595, longitude=126.8526),  # 광주
    "6": Coordinates(latitude=35.1796, longitude=129.0756),  # 부산
    "7": Coordinates(latitude=35.5384, longitude=129.3114),  # 울산
    "8": Coordinates(latitude=36.4800, longitude=127.2890),  # 세종
    "31": Coordinates(latitude=37.2636, longitude=127.0286),  # 경기
    "32": Coordinates(latitude=37.8228, longitude=128.1555),  # 강원
    "33": Coordinates(latitude=36.6357, longitude=127.4917),  # 충북
    "34": Coordinates(latitude=36.5184, longitude=126.8000),  # 충남
    "35": Coordinates(latitude=35.8242, longitude=127.1480),  # 전북
    "36": Coordinates(latitude=34.8161, longitude=126.4629),  # 전남
    "37": Coordinates(latitude=36.5760, longitude=128.5056),  # 경북
    "38": Coordinates(latitude=35.2383, longitude=128.6924),  # 경남
    "39": Coordinates(latitude=33.4996, longitude=126.5312),  # 제주
    "99": DEFAULT_CENTER,  # 전체
}


def get_region_center(area_code: str | None) -> Coordinates:
    """지역코드의 중심 좌표 (알 수 없으면 서울)."""
    if not area_code:
        return DEFAULT_CENTER
    return REGION_CENTERS.get(area_code.strip(), DEFAULT_CENTER)


def all_region_codes() -> list[str]:
    return list(REGION_CENTERS)
