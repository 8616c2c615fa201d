"""Application Commands."""

from tour.application.commands.tour_list_controller import TourListController

__all__ = ["TourListController"]
