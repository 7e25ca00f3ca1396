from datetime import date
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional, List, Union

from ..services.constants import DEFAULT_HOUSE_SYSTEM


class BirthDateTime(BaseModel):
    year: int = Field(..., ge=1800, le=2200, description="Year (e.g. 1990)")
    month: int = Field(..., ge=1, le=12, description="Month (1-12)")
    day: int = Field(..., ge=1, le=31, description="Day of month (1-31)")
    hour: int = Field(..., ge=0, le=23, description="Hour in local time (0-23)")
    minute: int = Field(..., ge=0, le=59, description="Minute (0-59)")

    @model_validator(mode="after")
    def _check_calendar_date(self):
        date(self.year, self.month, self.day)  # ValueError -> 422
        return self


class CoordinatesIn(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class NatalChartRequest(BaseModel):
    datetime: BirthDateTime
    location: Union[CoordinatesIn, str] = Field(
        ..., description="Coordinates, or a place such as 'New York, USA'"
    )
    house_system: str = DEFAULT_HOUSE_SYSTEM

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "datetime": {"year": 1990, "month": 8, "day": 18, "hour": 14, "minute": 32},
                "location": "Hyderabad, India",
                "house_system": "Placidus",
            }
        }
    )

    @model_validator(mode="after")
    def _check_location(self):
        if isinstance(self.location, str) and not self.location.strip():
            raise ValueError("location must not be empty")
        return self


class CoordinatesRequest(BaseModel):
    location: str = Field(..., min_length=1, description="Place such as 'London, UK'")


class CoordinatesResponse(BaseModel):
    latitude: float
    longitude: float
    formatted_address: Optional[str] = None


class PlanetOut(BaseModel):
    name: str
    key: str
    sign: str
    sign_key: str
    degree: str
    longitude: float
    latitude: float
    speed: float
    house: int
    is_retrograde: bool


class HouseOut(BaseModel):
    number: int
    sign: str
    sign_key: str
    degree: str
    cusp_degree: float


class AspectOut(BaseModel):
    point1: str
    point1_key: Optional[str] = None
    point2: str
    point2_key: Optional[str] = None
    aspect: str
    aspect_key: str
    aspect_level: str
    orb: float
    orb_used: float


class ChartAngleOut(BaseModel):
    sign: str
    sign_key: str
    degree: str
    longitude: float


class ChartAnglesOut(BaseModel):
    ascendant: ChartAngleOut
    descendant: ChartAngleOut
    midheaven: ChartAngleOut
    imum_coeli: ChartAngleOut


class BirthDataOut(BaseModel):
    datetime: BirthDateTime
    location: str
    latitude: float
    longitude: float
    house_system: str
    timezone: str
    utc: str
    julian_day: float


class MetaOut(BaseModel):
    engine: str = "natal-chart-engine"
    engine_version: str
    zodiac: str = "tropical"
    house_system: str
    backend: Optional[str] = None


class NatalChartResponse(BaseModel):
    chart_id: str
    meta: MetaOut
    planets: List[PlanetOut]
    houses: List[HouseOut]
    aspects: List[AspectOut]
    chart_angles: ChartAnglesOut
    sun_sign: str
    birth_data: BirthDataOut
