class PlannerPrompts:
    persona = (
        "You are an expert travel agent for India. Generate a personalized, day-by-day travel plan."
    )
    PREFERENCES_TEMPLATE = (
        "**User Preferences:**\n"
        "- Interests: {interests}\n"
        "- Duration: {days} days\n"
        "- Budget: Approximately ₹{budget}\n"
        "- Language: {language}"
    )
    LOCATION_FOCUS_TEMPLATE = (
        "**IMPORTANT:** Focus exclusively on **{location}**. All activities must be in this area."
    )
    SUGGESTIONS_TEMPLATE = (
        "**Suggestions:** You can choose from these famous places: {location_names}."
    )
    FORMAT_TEMPLATE = (
        "**Formatting Instructions:**\n"
        "1. Response must be strictly RAW HTML (no markdown code blocks like ```).\n"
        "2. Use <h2> for the title, <h3> for days, and <ul><li> for activities.\n"
        "3. Use descriptive <li> tags for activities.\n"
        "4. **Language:** The entire response MUST be in {language}."
    )
    FAMOUS_LOCATIONS = [
        {"state": "Uttar Pradesh", "name": "Taj Mahal"},
        {"state": "Rajasthan", "name": "Hawa Mahal"},
        {"state": "Tamil Nadu", "name": "Meenakshi Temple"},
        {"state": "Maharashtra", "name": "Gateway of India"},
        {"state": "Kerala", "name": "Alleppey Backwaters"},
        {"state": "West Bengal", "name": "Victoria Memorial"},
        {"state": "Karnataka", "name": "Hampi"},
    ]


class MapPrompts:
    GEOCODE_TEMPLATE = (
        "You are a geocoding assistant. Find coordinates for: \"{query}\" in India.\n"
        "Response MUST be a single JSON object:\n"
        "{{ \"name\": \"...\", \"lat\": ..., \"lon\": ... }}\n"
        "If not found: {{ \"error\": \"Location not found\" }}"
    )
    TOUR_GUIDE_TEMPLATE = (
        "You are a friendly and knowledgeable Indian tour guide. {context}"
        "Answer the traveller's question concisely and accurately: \"{question}\".\n"
        "Format the answer as simple HTML using <p> and <ul><li> tags only. "
        "Do not include markdown or citation markers."
    )
    HISTORY_TEMPLATE = (
        "You are a historian specialising in Indian heritage. Write a short historical summary of \"{name}\". "
        "Cover its origins, key historical events and its cultural significance today in 2 to 3 paragraphs.\n"
        "Format the summary as simple HTML using <p> tags only. Do not include markdown or citation markers."
    )
    WEATHER_TEMPLATE = (
        "You are a weather assistant. Report the current weather at latitude {lat}, longitude {lon}{place}.\n"
        "Your entire response MUST be ONLY a single, valid JSON object like this:\n"
        "{{\"temperature\": 31.5, \"condition\": \"Partly cloudy\", \"humidity\": 62, \"windSpeed\": 11, "
        "\"summary\": \"Warm and humid afternoon.\"}}\n"
        "Temperature is in degrees Celsius and wind speed in km/h.\n"
        "If the weather cannot be determined, respond ONLY with: {{\"error\": \"not found\"}}."
    )


class PlacesPrompts:
    START_COORDINATES_TEMPLATE = (
        "You are a precise geocoding assistant. Find the latitude and longitude for the location: \"{location}\".\n"
        "Your entire response MUST be ONLY a single, valid JSON object like this: {{\"lat\": 12.34, \"lon\": 78.90}}.\n"
        "Do NOT include any introduction, explanation, markdown, or other text.\n"
        "If the location is ambiguous or cannot be found, respond ONLY with: {{\"error\": \"not found\"}}."
    )
    persona = (
        "You are an expert Indian travel guide. A user wants to find tourist places."
    )
    task = (
        "Your task is to identify and describe up to 15 interesting tourist spots within the "
        "**{district} district, {state}, India**.\n"
        "For each place, provide a concise description highlighting what makes it interesting, "
        "and its approximate latitude and longitude."
    )
    format_condition = (
        "**Instructions:**\n"
        "1. Format your entire response strictly in HTML.\n"
        "2. For each place, create a container div with the class \"place-card\".\n"
        "3. **Crucially:** Add 'data-lat' and 'data-lon' attributes to the \"place-card\" div containing the "
        "approximate latitude and longitude respectively. "
        "Example: <div class=\"place-card\" data-lat=\"13.08\" data-lon=\"80.27\">\n"
        "4. Inside the card, use an <h4> tag for the place name.\n"
        "5. Use one or more <p> tags for the description.\n"
        "6. If you cannot find specific tourist spots for the district, provide general info about the "
        "district/state, or return a single <p> tag with a friendly message explaining that specific "
        "information isn't available (do not include data-lat/lon in this case).\n"
        "7. Do not include any markdown like ``` or citation markers like [1] or [6, 17].\n"
        "8. **IMPORTANT:** Generate the entire HTML response (place names, descriptions, attributes, and any "
        "messages) **exclusively in the requested language: {language}**."
    )
