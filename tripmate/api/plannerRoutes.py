from fastapi import APIRouter, HTTPException

from .TravelSchemas import PlanTripRequest, PlanTripResponse
from ..services.gemini import GeminiError
from ..services.planner import planner_service
from ..settings.logging import app_logger
from ..utils.jsonify import transform_frontend_to_backend_format_trip

router = APIRouter(prefix="/api/plan-trip", tags=["planner"])


@router.post("", response_model=PlanTripResponse)
def plan_trip(payload: PlanTripRequest):
    data = payload.model_dump()
    if not all(data.get(field) for field in ("interests", "days", "budget", "language")):
        raise HTTPException(status_code=400, detail="Please provide interests, days, budget, and language.")

    if not planner_service.llm.config.api_key:
        raise HTTPException(status_code=500, detail="AI service API key is not configured.")

    trip_params = transform_frontend_to_backend_format_trip(data)["trip_params"]
    app_logger.info("Received trip plan request with params: %s", trip_params)

    try:
        itinerary = planner_service.generate_itinerary(trip_params)
    except GeminiError as e:
        app_logger.error("Error in AI planner route: %s", e)
        raise HTTPException(status_code=500, detail="Error generating your travel plan.")

    return {"itinerary": itinerary}
