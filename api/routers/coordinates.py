from fastapi import APIRouter, HTTPException

from ..schemas import CoordinatesRequest, CoordinatesResponse
from ..services.errors import ChartInputError, CollaboratorError
from ..services.geocoding import resolve_location

router = APIRouter(prefix="/v1/coordinates", tags=["coordinates"])


@router.post("", response_model=CoordinatesResponse)
def get_coordinates(req: CoordinatesRequest):
    try:
        coords = resolve_location(req.location)
    except ChartInputError as exc:
        raise HTTPException(status_code=404, detail=exc.to_detail()) from exc
    except CollaboratorError as exc:
        raise HTTPException(status_code=502, detail=exc.to_detail()) from exc
    return CoordinatesResponse(
        latitude=coords.latitude,
        longitude=coords.longitude,
        formatted_address=coords.formatted_address,
    )
