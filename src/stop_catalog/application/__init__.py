"""Application layer - use cases over the domain ports."""

from stop_catalog.application.stop_repository import StopRepository

__all__ = ["StopRepository"]
