from typing import Any, Dict, List
from fastapi import APIRouter, HTTPException

from .TravelSchemas import (
    GuideAnswerResponse,
    GuideQuestionRequest,
    HistoryRequest,
    HistoryResponse,
    LocationResult,
    LocationSearchRequest,
    WeatherRequest,
)
from ..services.gemini import GeminiError
from ..services.mapGuide import map_guide_service
from ..settings.logging import app_logger

router = APIRouter(prefix="/api/map", tags=["map"])


@router.post("/search", response_model=List[LocationResult])
def search(payload: LocationSearchRequest):
    if not payload.query or not payload.query.strip():
        raise HTTPException(status_code=400, detail="Please provide a search query.")
    try:
        location = map_guide_service.search_location(payload.query.strip())
    except GeminiError as e:
        app_logger.error("Error in map search route: %s", e)
        raise HTTPException(status_code=500, detail="Error processing search.")
    return [location] if location else []


@router.post("/query", response_model=GuideAnswerResponse)
def query(payload: GuideQuestionRequest):
    if not payload.question or not payload.question.strip():
        raise HTTPException(status_code=400, detail="Please provide a question.")
    try:
        answer = map_guide_service.answer_question(payload.question.strip(), (payload.place or "").strip())
    except GeminiError as e:
        app_logger.error("Error in tour guide route: %s", e)
        raise HTTPException(status_code=500, detail="Error answering your question.")
    return {"answer": answer}


@router.post("/history", response_model=HistoryResponse)
def history(payload: HistoryRequest):
    if not payload.name or not payload.name.strip():
        raise HTTPException(status_code=400, detail="Please provide a place name.")
    try:
        summary = map_guide_service.place_history(payload.name.strip())
    except GeminiError as e:
        app_logger.error("Error in history route: %s", e)
        raise HTTPException(status_code=500, detail="Error fetching historical information.")
    return {"history": summary}


@router.post("/weather")
def weather(payload: WeatherRequest) -> Dict[str, Any]:
    if payload.lat is None or payload.lon is None:
        raise HTTPException(status_code=400, detail="Please provide lat and lon.")
    try:
        data = map_guide_service.current_weather(payload.lat, payload.lon, (payload.name or "").strip())
    except GeminiError as e:
        app_logger.error("Error in weather route: %s", e)
        raise HTTPException(status_code=500, detail="Error fetching weather.")
    if data is None:
        raise HTTPException(status_code=404, detail="Weather data not found")
    return data
