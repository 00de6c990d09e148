"""Geographic coordinate schema."""

from pydantic import BaseModel, ConfigDict, Field


class LatLng(BaseModel):
    """A latitude/longitude pair in degrees.

    Longitude is not normalized, so values outside [-180, 180] are kept as given.
    """

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lon: float = Field(..., description="Longitude in degrees")

    def __init__(self, lat: float, lon: float) -> None:
        super().__init__(lat=lat, lon=lon)

    @classmethod
    def from_tuple(cls, value: tuple[float, float]) -> "LatLng":
        """Create a coordinate from a ``(lat, lon)`` tuple."""
        lat, lon = value
        return cls(lat, lon)

    def to_tuple(self) -> tuple[float, float]:
        return (self.lat, self.lon)
