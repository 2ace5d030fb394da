import pytest

from tripmate.services.gemini import GeminiServiceError, map_llm


def test_search_returns_location_with_image(client, fake_llm):
    llm = fake_llm(map_llm, 'Here it is: {"name": "Hampi", "lat": 15.335, "lon": 76.46,} [1]')

    response = client.post("/api/map/search", json={"query": "Hampi"})

    assert response.status_code == 200
    assert response.json() == [{
        "name": "Hampi",
        "lat": 15.335,
        "lon": 76.46,
        "imageUrl": "https://placehold.co/600x400/cccccc/ffffff?text=Hampi",
    }]
    assert '"Hampi" in India' in llm.calls[0]["prompt"]


@pytest.mark.parametrize("ai_text", [
    '{"error": "Location not found"}',
    "Location not found",
    '{"name": "Atlantis", "lat": "unknown", "lon": null}',
    '{"name": "Atlantis", "lat": NaN, "lon": Infinity}',
    "",
])
def test_search_without_usable_location_is_empty(client, fake_llm, ai_text):
    fake_llm(map_llm, ai_text)
    response = client.post("/api/map/search", json={"query": "Atlantis"})
    assert response.status_code == 200
    assert response.json() == []


def test_search_falls_back_to_query_for_non_string_name(client, fake_llm):
    fake_llm(map_llm, '{"name": 42, "lat": 15.335, "lon": 76.46}')

    response = client.post("/api/map/search", json={"query": "Hampi"})

    assert response.status_code == 200
    assert response.json()[0]["name"] == "Hampi"
    assert response.json()[0]["imageUrl"].endswith("text=Hampi")


def test_search_requires_query(client):
    assert client.post("/api/map/search", json={"query": "  "}).status_code == 400


def test_search_upstream_failure(client, fake_llm):
    fake_llm(map_llm, GeminiServiceError("Failed to get a response from the AI service."))
    response = client.post("/api/map/search", json={"query": "Hampi"})
    assert response.status_code == 500
    assert response.json()["detail"] == "Error processing search."


def test_query_returns_clean_answer(client, fake_llm):
    llm = fake_llm(map_llm, "<p>Visit at sunrise [3].</p>")

    response = client.post("/api/map/query", json={"question": "When to visit?", "place": "Hampi"})

    assert response.status_code == 200
    assert response.json() == {"answer": "<p>Visit at sunrise .</p>"}
    assert "exploring Hampi" in llm.calls[0]["prompt"]


def test_query_requires_question(client):
    assert client.post("/api/map/query", json={"place": "Hampi"}).status_code == 400


def test_history_returns_clean_summary(client, fake_llm):
    fake_llm(map_llm, "```html\n<p>Capital of the Vijayanagara Empire [1, 4].</p>\n```")

    response = client.post("/api/map/history", json={"name": "Hampi"})

    assert response.status_code == 200
    assert response.json() == {"history": "<p>Capital of the Vijayanagara Empire .</p>"}


def test_history_requires_name(client):
    assert client.post("/api/map/history", json={}).status_code == 400


def test_weather_returns_extracted_payload(client, fake_llm):
    llm = fake_llm(map_llm, '```json\n{"temperature": 31.5, "condition": "Sunny", "humidity": 40,}\n```')

    response = client.post("/api/map/weather", json={"lat": 15.335, "lon": 76.46, "name": "Hampi"})

    assert response.status_code == 200
    assert response.json() == {"temperature": 31.5, "condition": "Sunny", "humidity": 40}
    assert "latitude 15.335, longitude 76.46 (Hampi)" in llm.calls[0]["prompt"]


@pytest.mark.parametrize("ai_text", ['{"error": "not found"}', "Weather unavailable", ""])
def test_weather_not_found(client, fake_llm, ai_text):
    fake_llm(map_llm, ai_text)
    response = client.post("/api/map/weather", json={"lat": 15.3, "lon": 76.4})
    assert response.status_code == 404
    assert response.json()["detail"] == "Weather data not found"


def test_weather_requires_coordinates(client):
    assert client.post("/api/map/weather", json={"lat": 15.3}).status_code == 400
