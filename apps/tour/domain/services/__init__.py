"""Domain Services."""

from tour.domain.services.coordinate_normalizer import (
    CoordinateFormat,
    classify_coordinates,
    convert_coordinates,
    is_valid_coordinate,
    normalize_coordinates,
)
from tour.domain.services.region_center import all_region_codes, get_region_center

__all__ = [
    "CoordinateFormat",
    "classify_coordinates",
    "convert_coordinates",
    "is_valid_coordinate",
    "normalize_coordinates",
    "get_region_center",
    "all_region_codes",
]
