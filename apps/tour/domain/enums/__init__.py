"""Domain Enums."""

from tour.domain.enums.content_type import ContentType
from tour.domain.enums.sort_option import SortOption

__all__ = ["ContentType", "SortOption"]
