from typing import Any, Dict
from .gemini import GeminiClient, planner_llm
from ..prompts.TravelTemplates import PlannerPrompts
from ..settings.logging import app_logger as logger
from ..utils.normalizer import strip_markup


class PlannerService:

    def __init__(self, llm: GeminiClient):
        self.llm = llm

    def build_dynamic_trip_prompt(self, trip_params: Dict[str, Any]) -> str:
        language = trip_params.get("language", "English")
        location = trip_params.get("location", "")

        prompt_parts = [
            PlannerPrompts.persona,
            PlannerPrompts.PREFERENCES_TEMPLATE.format(
                interests=trip_params.get("interests", ""),
                days=trip_params.get("days", ""),
                budget=trip_params.get("budget", ""),
                language=language,
            ),
        ]

        if location:
            prompt_parts.append(PlannerPrompts.LOCATION_FOCUS_TEMPLATE.format(location=location))
        else:
            location_names = "; ".join(
                f"{loc['name']}, {loc['state']}" for loc in PlannerPrompts.FAMOUS_LOCATIONS
            )
            prompt_parts.append(PlannerPrompts.SUGGESTIONS_TEMPLATE.format(location_names=location_names))

        prompt_parts.append(PlannerPrompts.FORMAT_TEMPLATE.format(language=language))
        return "\n\n".join(prompt_parts)

    def generate_itinerary(self, trip_params: Dict[str, Any]) -> str:
        prompt = self.build_dynamic_trip_prompt(trip_params)
        raw_html = self.llm.generate(prompt, enable_search=False)
        logger.info("Raw LLM response (itinerary): %s", raw_html[:200])
        return strip_markup(raw_html)


# Initialize service
planner_service = PlannerService(llm=planner_llm)
