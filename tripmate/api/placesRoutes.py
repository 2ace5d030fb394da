from fastapi import APIRouter, HTTPException

from .TravelSchemas import FindPlacesRequest, FindPlacesResponse
from ..services.gemini import GeminiError
from ..services.places import places_service
from ..settings.logging import app_logger

router = APIRouter(prefix="/api/find-places", tags=["places"])


@router.post("", response_model=FindPlacesResponse)
def find_places(payload: FindPlacesRequest):
    if not payload.state or not payload.district or not payload.language:
        raise HTTPException(status_code=400, detail="Please provide state, district, and language.")

    start_coords = None
    if payload.startLocation and payload.startLocation.strip():
        start_coords = places_service.find_start_coordinates(payload.startLocation.strip())

    try:
        places_html = places_service.find_places_html(payload.state, payload.district, payload.language)
    except GeminiError as e:
        app_logger.error("Error in AI place finder route processing: %s", e)
        raise HTTPException(status_code=500, detail="Error finding tourist places.")

    return {
        "placesHtml": places_html,
        "startLat": start_coords["lat"] if start_coords else None,
        "startLon": start_coords["lon"] if start_coords else None,
    }
