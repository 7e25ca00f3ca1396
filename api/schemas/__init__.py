from .charts import (
    BirthDateTime,
    CoordinatesIn,
    NatalChartRequest,
    NatalChartResponse,
    CoordinatesRequest,
    CoordinatesResponse,
    PlanetOut,
    HouseOut,
    AspectOut,
    ChartAngleOut,
    ChartAnglesOut,
    BirthDataOut,
    MetaOut,
)
