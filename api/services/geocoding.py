"""Place name -> coordinates lookup backed by OpenStreetMap Nominatim."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Mapping, Optional, Union

from geopy.adapters import RequestsAdapter
from geopy.exc import GeopyError
from geopy.geocoders import Nominatim

from .errors import GeocodingError, LocationNotFoundError
from .models import Coordinates

logger = logging.getLogger(__name__)

DEFAULT_DOMAIN = "nominatim.openstreetmap.org"
DEFAULT_USER_AGENT = "natal-chart-engine/0.1"


def _geocoder() -> Nominatim:
    return Nominatim(
        user_agent=os.getenv("GEOCODER_USER_AGENT", DEFAULT_USER_AGENT),
        domain=os.getenv("GEOCODER_DOMAIN", DEFAULT_DOMAIN),
        timeout=float(os.getenv("GEOCODER_TIMEOUT", "10")),
        adapter_factory=RequestsAdapter,
    )


def geocode(query: str) -> Optional[Coordinates]:
    """Return the best match for ``query`` or ``None`` when nothing matches."""

    try:
        loc = _geocoder().geocode(query, exactly_one=True)
    except GeopyError as exc:
        logger.exception("geocode_failed", extra={"query": query})
        raise GeocodingError("geocode", f"Geocoding failed for '{query}': {exc}") from exc

    if loc is None:
        logger.info("geocode_no_match", extra={"query": query})
        return None
    return Coordinates(latitude=loc.latitude, longitude=loc.longitude, formatted_address=loc.address)


def _coordinates_from_json(text: str) -> Optional[Coordinates]:
    if not text.strip().startswith("{"):
        return None
    try:
        parsed = json.loads(text)
    except ValueError:
        return None
    if not isinstance(parsed, dict):
        return None
    lat, lon = parsed.get("latitude"), parsed.get("longitude")
    if isinstance(lat, (int, float)) and isinstance(lon, (int, float)) and not isinstance(lat, bool) and not isinstance(lon, bool):
        return Coordinates(float(lat), float(lon), parsed.get("formattedAddress") or parsed.get("formatted_address"))
    return None


def resolve_location(location: Union[str, Coordinates, Mapping[str, Any]]) -> Coordinates:
    """Turn a coordinates object or a free-text place into ``Coordinates``.

    A string holding a JSON object with numeric ``latitude``/``longitude``
    is used as-is; any other string is geocoded.
    """

    if isinstance(location, Coordinates):
        return location
    if isinstance(location, Mapping):
        return Coordinates(float(location["latitude"]), float(location["longitude"]))

    coords = _coordinates_from_json(location)
    if coords is not None:
        return coords

    coords = geocode(location)
    if coords is None:
        raise LocationNotFoundError(location)
    return coords
