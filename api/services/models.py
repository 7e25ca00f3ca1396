"""Immutable value types shared by the chart derivation services.

Everything here is created fresh per chart request from one ephemeris
snapshot and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ZodiacPlacement:
    sign: str
    sign_key: str
    degree_in_sign: float


@dataclass(frozen=True)
class CelestialBody:
    id: int
    name: str
    key: str


@dataclass(frozen=True)
class PlanetPosition:
    body: CelestialBody
    longitude: float
    latitude: float
    speed: float  # deg/day, negative while retrograde

    @property
    def is_retrograde(self) -> bool:
        return self.speed < 0


@dataclass(frozen=True)
class AspectDefinition:
    name: str
    key: str
    angle: float
    orb: float
    level: str  # "major" | "minor"


@dataclass(frozen=True)
class DetectedAspect:
    point1: str
    point2: str
    definition: AspectDefinition
    orb: float
    point1_key: Optional[str] = None
    point2_key: Optional[str] = None

    @property
    def orb_used(self) -> float:
        return self.definition.orb


@dataclass(frozen=True)
class ChartAngle:
    kind: str
    longitude: float
    placement: ZodiacPlacement


@dataclass(frozen=True)
class ChartAngles:
    ascendant: ChartAngle
    descendant: ChartAngle
    midheaven: ChartAngle
    imum_coeli: ChartAngle


@dataclass(frozen=True)
class PlacedPlanet:
    position: PlanetPosition
    placement: ZodiacPlacement
    house: int


@dataclass(frozen=True)
class HouseCusp:
    number: int
    longitude: float
    placement: ZodiacPlacement


@dataclass(frozen=True)
class EphemerisSnapshot:
    """Raw ephemeris output for one moment and place.

    ``cusps`` holds 12 longitudes, house 1 first.
    """

    julian_day: float
    cusps: Tuple[float, ...]
    positions: Tuple[PlanetPosition, ...]
    ascendant: float
    midheaven: float
    house_system: Optional[str] = None


@dataclass(frozen=True)
class NatalChartReport:
    julian_day: float
    planets: Tuple[PlacedPlanet, ...]
    houses: Tuple[HouseCusp, ...]
    aspects: Tuple[DetectedAspect, ...]
    angles: ChartAngles
    sun_sign: str
    house_system: Optional[str] = None


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float
    formatted_address: Optional[str] = None
