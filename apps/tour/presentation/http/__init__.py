"""HTTP Presentation."""

from tour.presentation.http.router import router

__all__ = ["router"]
