from typing import Dict, Optional
from .gemini import GeminiClient, GeminiError, places_llm
from ..prompts.TravelTemplates import PlacesPrompts
from ..settings.logging import app_logger as logger
from ..utils.jsonify import is_coordinate
from ..utils.normalizer import extract_json, strip_markup


class PlacesService:

    def __init__(self, llm: GeminiClient):
        self.llm = llm

    def find_start_coordinates(self, start_location: str) -> Optional[Dict[str, float]]:
        """
        Geocode the user's starting point.

        Never raises: any upstream or parsing failure is logged and reported
        as ``None`` so the places lookup can still go ahead.
        """
        try:
            raw = self.llm.generate(PlacesPrompts.START_COORDINATES_TEMPLATE.format(location=start_location))
        except GeminiError as e:
            logger.error("Exception during coordinate fetching for %r: %s", start_location, e)
            return None

        coords = extract_json(raw)
        if coords and not coords.get("error") and is_coordinate(coords.get("lat")) and is_coordinate(coords.get("lon")):
            logger.info("Found coordinates for %r: %s", start_location, coords)
            return {"lat": coords["lat"], "lon": coords["lon"]}

        reason = "AI reported not found" if coords and coords.get("error") else "Invalid/missing lat/lon or parse failure"
        logger.warning(
            "Could not get valid coordinates for start location %r. Reason: %s. AI Response: %s",
            start_location, reason, raw[:100]
        )
        return None

    def build_places_prompt(self, state: str, district: str, language: str) -> str:
        return "\n".join([
            PlacesPrompts.persona,
            PlacesPrompts.task.format(district=district, state=state),
            PlacesPrompts.format_condition.format(language=language),
        ])

    def find_places_html(self, state: str, district: str, language: str) -> str:
        raw = self.llm.generate(self.build_places_prompt(state, district, language))
        return strip_markup(raw)


# Initialize service
places_service = PlacesService(llm=places_llm)
