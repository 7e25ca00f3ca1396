from fastapi import APIRouter, HTTPException
from hashlib import sha256
from ..schemas import (
    NatalChartRequest,
    NatalChartResponse,
    PlanetOut,
    HouseOut,
    AspectOut,
    ChartAngleOut,
    ChartAnglesOut,
    BirthDataOut,
    MetaOut,
)
from ..services import ephem
from ..services.errors import ChartInputError, CollaboratorError
from ..services.models import ChartAngle, Coordinates
from ..services.natal import NatalChartResult, compute_natal_chart
from ..services.zodiac import format_degree

router = APIRouter(prefix="/v1/charts", tags=["charts"])


def _angle_out(angle: ChartAngle) -> ChartAngleOut:
    return ChartAngleOut(
        sign=angle.placement.sign,
        sign_key=angle.placement.sign_key,
        degree=format_degree(angle.placement.degree_in_sign),
        longitude=round(angle.longitude, 6),
    )


def build_response(req: NatalChartRequest, result: NatalChartResult) -> NatalChartResponse:
    report, coords = result.report, result.coordinates

    planets = [
        PlanetOut(
            name=p.position.body.name,
            key=p.position.body.key,
            sign=p.placement.sign,
            sign_key=p.placement.sign_key,
            degree=format_degree(p.placement.degree_in_sign),
            longitude=round(p.position.longitude, 6),
            latitude=round(p.position.latitude, 6),
            speed=round(p.position.speed, 6),
            house=p.house,
            is_retrograde=p.position.is_retrograde,
        )
        for p in report.planets
    ]
    houses = [
        HouseOut(
            number=h.number,
            sign=h.placement.sign,
            sign_key=h.placement.sign_key,
            degree=format_degree(h.placement.degree_in_sign),
            cusp_degree=round(h.longitude, 6),
        )
        for h in report.houses
    ]
    aspects = [
        AspectOut(
            point1=a.point1,
            point1_key=a.point1_key,
            point2=a.point2,
            point2_key=a.point2_key,
            aspect=a.definition.name,
            aspect_key=a.definition.key,
            aspect_level=a.definition.level,
            orb=a.orb,
            orb_used=a.orb_used,
        )
        for a in report.aspects
    ]
    angles = report.angles

    location_label = coords.formatted_address or (
        req.location if isinstance(req.location, str) else f"{coords.latitude}, {coords.longitude}"
    )
    utc_iso = result.utc.replace(microsecond=0).isoformat().replace("+00:00", "Z")

    seed = f"{utc_iso}|{coords.latitude:.6f}|{coords.longitude:.6f}|{report.house_system}"
    chart_id = "cht_" + sha256(seed.encode()).hexdigest()[:24]

    return NatalChartResponse(
        chart_id=chart_id,
        meta=MetaOut(
            engine_version=ephem.ENGINE_VERSION,
            house_system=report.house_system,
            backend=ephem.backend_name(),
        ),
        planets=planets,
        houses=houses,
        aspects=aspects,
        chart_angles=ChartAnglesOut(
            ascendant=_angle_out(angles.ascendant),
            descendant=_angle_out(angles.descendant),
            midheaven=_angle_out(angles.midheaven),
            imum_coeli=_angle_out(angles.imum_coeli),
        ),
        sun_sign=report.sun_sign,
        birth_data=BirthDataOut(
            datetime=req.datetime,
            location=location_label,
            latitude=coords.latitude,
            longitude=coords.longitude,
            house_system=report.house_system,
            timezone=result.timezone,
            utc=utc_iso,
            julian_day=report.julian_day,
        ),
    )


@router.post("/natal", response_model=NatalChartResponse)
def natal_chart(req: NatalChartRequest):
    location = req.location
    if not isinstance(location, str):
        location = Coordinates(location.latitude, location.longitude)
    dt = req.datetime
    try:
        result = compute_natal_chart(
            dt.year, dt.month, dt.day, dt.hour, dt.minute, location, req.house_system
        )
    except ChartInputError as exc:
        raise HTTPException(status_code=400, detail=exc.to_detail()) from exc
    except CollaboratorError as exc:
        raise HTTPException(status_code=502, detail=exc.to_detail()) from exc
    return build_response(req, result)
