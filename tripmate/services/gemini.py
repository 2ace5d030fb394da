from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict
from ..settings.config import settings
from ..settings.logging import app_logger as logger
import requests


class GeminiError(Exception):
    """Base error for the generation API client"""


class GeminiConfigError(GeminiError):
    """The client is missing configuration, usually the API key"""


class GeminiServiceError(GeminiError):
    """The generation API could not be reached or returned an error status"""


class GeminiConfig(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    api_key: Optional[str] = None
    model_id: str
    search_enabled: bool = False
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout: float = 60


class GeminiClient:

    def __init__(self, config: GeminiConfig):
        self.config = config

    @property
    def endpoint(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/models/{self.config.model_id}:generateContent"

    def build_payload(self, prompt: str, enable_search: bool) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
        if enable_search:
            payload["tools"] = [{"google_search": {}}]
        return payload

    def generate(self, prompt: str, enable_search: Optional[bool] = None) -> str:
        """
        Send a prompt to the model and return the text of the first candidate.

        Args:
            prompt: The full prompt text
            enable_search: Ground the answer with Google Search. Defaults to the
                client's configured ``search_enabled``.

        Returns:
            The generated text, or an empty string when the response was
            blocked or had no usable candidate.

        Raises:
            GeminiConfigError: No API key is configured
            GeminiServiceError: Transport failure or non-success status
        """
        if not self.config.api_key:
            raise GeminiConfigError("Gemini API key is not configured.")

        if enable_search is None:
            enable_search = self.config.search_enabled

        try:
            response = requests.post(
                self.endpoint,
                params={"key": self.config.api_key},
                json=self.build_payload(prompt, enable_search),
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            logger.error("Gemini request to %s failed: %s", self.config.model_id, e)
            raise GeminiServiceError("Failed to get a response from the AI service.") from e

        if not response.ok:
            try:
                error_body = response.json()
            except ValueError:
                error_body = response.text[:500]
            logger.error("Gemini API Error (%s): %s", response.status_code, error_body)
            raise GeminiServiceError("Failed to get a response from the AI service.")

        try:
            data = response.json()
        except ValueError:
            logger.warning("Gemini returned a non-JSON body: %s", response.text[:200])
            return ""

        return self.extract_text(data, prompt)

    @staticmethod
    def extract_text(data: Dict[str, Any], prompt: str = "") -> str:
        if not isinstance(data, dict):
            logger.warning("Invalid response structure from AI service. Data: %s", str(data)[:200])
            return ""

        candidates = data.get("candidates")
        if isinstance(candidates, list) and candidates and isinstance(candidates[0], dict):
            content = candidates[0].get("content") or {}
            texts = [
                part["text"]
                for part in content.get("parts") or []
                if isinstance(part, dict) and isinstance(part.get("text"), str)
            ]
            if texts:
                return "".join(texts)

        block_reason = (data.get("promptFeedback") or {}).get("blockReason")
        if block_reason:
            logger.warning("Gemini response blocked: %s for prompt: %s...", block_reason, prompt[:100])
            return ""

        logger.warning("Invalid response structure from AI service. Data: %s", str(data)[:200])
        return ""


def _client(model_id: str, search_enabled: bool) -> GeminiClient:
    return GeminiClient(
        GeminiConfig(
            api_key=settings.GEMINI_API_KEY,
            model_id=model_id,
            search_enabled=search_enabled,
            base_url=settings.GEMINI_BASE_URL,
            timeout=settings.GEMINI_TIMEOUT,
        )
    )


# Initialize clients
planner_llm = _client(settings.PLANNER_MODEL, search_enabled=False)
places_llm = _client(settings.PLACES_MODEL, search_enabled=True)
map_llm = _client(settings.MAP_MODEL, search_enabled=True)
