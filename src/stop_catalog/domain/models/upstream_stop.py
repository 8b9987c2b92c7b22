"""Upstream stop record as returned by the transit data service."""

from pydantic import BaseModel, ConfigDict

from stop_catalog.domain.models.stop import Stop


class UpstreamStop(BaseModel):
    """Raw stop attributes from the upstream GraphQL API."""

    model_config = ConfigDict(frozen=True)

    name: str
    lat: float
    lon: float

    def to_stop(self, stop_id: str) -> Stop:
        """Map the upstream field names onto a Stop with the given identifier."""
        return Stop(id=stop_id, name=self.name, latitude=self.lat, longitude=self.lon)
