"""정렬 옵션."""

from enum import Enum


class SortOption(str, Enum):
    """관광지 목록 정렬 방식."""

    LATEST = "latest"  # 수정일 내림차순
    NAME = "name"  # 이름 오름차순
