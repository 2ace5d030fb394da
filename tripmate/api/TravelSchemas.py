from pydantic import BaseModel
from typing import Optional, Union


class PlanTripRequest(BaseModel):
    """Input schema for itinerary generation request"""
    interests: Optional[str] = None
    days: Optional[Union[int, str]] = None
    budget: Optional[Union[int, float, str]] = None
    location: Optional[str] = None
    language: Optional[str] = None


class PlanTripResponse(BaseModel):
    itinerary: str


class LocationSearchRequest(BaseModel):
    query: Optional[str] = None


class LocationResult(BaseModel):
    """Geocoded place as shown on the map"""
    name: str
    lat: float
    lon: float
    imageUrl: str


class GuideQuestionRequest(BaseModel):
    question: Optional[str] = None
    place: Optional[str] = None


class GuideAnswerResponse(BaseModel):
    answer: str


class HistoryRequest(BaseModel):
    name: Optional[str] = None


class HistoryResponse(BaseModel):
    history: str


class WeatherRequest(BaseModel):
    lat: Optional[float] = None
    lon: Optional[float] = None
    name: Optional[str] = None


class FindPlacesRequest(BaseModel):
    state: Optional[str] = None
    district: Optional[str] = None
    startLocation: Optional[str] = None
    language: Optional[str] = None


class FindPlacesResponse(BaseModel):
    placesHtml: str
    startLat: Optional[float] = None
    startLon: Optional[float] = None
