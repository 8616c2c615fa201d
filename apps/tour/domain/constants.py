"""Domain Constants.

도메인 레이어의 상수 정의.
"""

# 페이지당 항목 수
PAGE_SIZE = 20

# 최대 페이지 수 (무한 로딩 방지)
MAX_PAGES = 100

# 지역 필터가 없을 때 지역 기반 목록에 사용할 지역코드 (서울)
DEFAULT_AREA_CODE = "1"

# 한 배치에서 조회할 반려동물 정보 최대 건수
PET_LOOKUP_CAP = 20

# 반려동물 동반 가능으로 보는 chkpetleash 값
PET_ALLOWED_VALUES = frozenset({"가능", "Y", "yes"})

# 반려동물 크기 필터 옵션
PET_SIZE_OPTIONS = ("소형", "중형", "대형")

# API 성공 결과 코드
RESULT_CODE_OK = "0000"
