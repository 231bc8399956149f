"""Static destination lookup tables."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """Latitude and longitude of a destination's reference city."""

    latitude: float
    longitude: float


DESTINATION_COORDINATES: dict[str, Coordinates] = {
    "Japan": Coordinates(35.6762, 139.6503),
    "Thailand": Coordinates(13.7563, 100.5018),
    "Mexico": Coordinates(19.4326, -99.1332),
    "Italy": Coordinates(41.9028, 12.4964),
    "India": Coordinates(28.6139, 77.209),
    "France": Coordinates(48.8566, 2.3522),
    "Morocco": Coordinates(34.0209, -6.8416),
    "Peru": Coordinates(-12.0464, -77.0428),
    "South Korea": Coordinates(37.5665, 126.978),
    "Spain": Coordinates(40.4168, -3.7038),
    "Turkey": Coordinates(39.9334, 32.8597),
    "Vietnam": Coordinates(21.0278, 105.8342),
    "Greece": Coordinates(37.9838, 23.7275),
    "Brazil": Coordinates(-15.7939, -47.8828),
    "Colombia": Coordinates(4.711, -74.0721),
}

TROPICAL_WARM_DESTINATIONS = frozenset(
    {"Thailand", "India", "Vietnam", "Colombia", "Mexico"}
)

SOUTHERN_HEMISPHERE_DESTINATIONS = frozenset({"Brazil"})

NORTHERN_SUMMER_MONTHS = frozenset({6, 7, 8})
NORTHERN_WINTER_MONTHS = frozenset({12, 1, 2})


def coordinates_for(destination: str) -> Coordinates | None:
    """Return coordinates for a destination, if it is mapped."""
    return DESTINATION_COORDINATES.get(destination)
