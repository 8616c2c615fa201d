"""Domain Value Objects."""

from tour.domain.value_objects.coordinates import Coordinates

__all__ = ["Coordinates"]
