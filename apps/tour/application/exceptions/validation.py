"""검증 관련 예외."""

from tour.application.exceptions.base import ApplicationError


class InvalidContentTypeError(ApplicationError):
    """유효하지 않은 관광 타입 ID."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        super().__init__(f"Invalid content_type_id '{value}'. Allowed values: {allowed}.")


class InvalidSortOptionError(ApplicationError):
    """유효하지 않은 정렬 옵션."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        super().__init__(f"Invalid sort '{value}'. Must be one of: {allowed}")


class InvalidPetSizeError(ApplicationError):
    """유효하지 않은 반려동물 크기."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        super().__init__(f"Invalid pet size '{value}'. Allowed values: {allowed}.")


class InvalidPageError(ApplicationError):
    """유효하지 않은 페이지 번호."""

    def __init__(self, page: int, max_pages: int) -> None:
        super().__init__(f"Invalid page {page}. Must be between 1 and {max_pages}.")


class TourNotFoundError(ApplicationError):
    """관광지를 찾을 수 없음."""

    def __init__(self, content_id: str) -> None:
        super().__init__(f"Tour not found: {content_id}")
