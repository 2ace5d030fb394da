from typing import Any, Dict, Optional
from .gemini import GeminiClient, map_llm
from ..prompts.TravelTemplates import MapPrompts
from ..settings.logging import app_logger as logger
from ..utils.jsonify import is_coordinate, placeholder_image_url
from ..utils.normalizer import extract_json, strip_markup


class MapGuideService:
    """Geocoding, tour-guide answers, place histories and weather for the map view."""

    def __init__(self, llm: GeminiClient):
        self.llm = llm

    def search_location(self, query: str) -> Optional[Dict[str, Any]]:
        raw = self.llm.generate(MapPrompts.GEOCODE_TEMPLATE.format(query=query))
        location = extract_json(raw)

        if location is None or location.get("error"):
            logger.info("No location found for query %r", query)
            return None
        if not is_coordinate(location.get("lat")) or not is_coordinate(location.get("lon")):
            logger.warning("Geocoding result for %r has invalid lat/lon: %s", query, location)
            return None

        name = location.get("name")
        if not isinstance(name, str) or not name.strip():
            name = query
        return {
            **location,
            "name": name,
            "imageUrl": placeholder_image_url(name),
        }

    def answer_question(self, question: str, place: str = "") -> str:
        context = f"The traveller is currently exploring {place}. " if place else ""
        raw = self.llm.generate(MapPrompts.TOUR_GUIDE_TEMPLATE.format(context=context, question=question))
        return strip_markup(raw)

    def place_history(self, name: str) -> str:
        raw = self.llm.generate(MapPrompts.HISTORY_TEMPLATE.format(name=name))
        return strip_markup(raw)

    def current_weather(self, lat: float, lon: float, name: str = "") -> Optional[Dict[str, Any]]:
        place = f" ({name})" if name else ""
        raw = self.llm.generate(MapPrompts.WEATHER_TEMPLATE.format(lat=lat, lon=lon, place=place))
        weather = extract_json(raw)
        if weather is None or weather.get("error"):
            logger.info("No weather data for %s, %s", lat, lon)
            return None
        return weather


# Initialize service
map_guide_service = MapGuideService(llm=map_llm)
