"""Static mapping from provider condition codes to display glyphs.

Codes follow the OpenWeatherMap condition list: 2xx thunderstorm, 3xx drizzle,
5xx rain, 6xx snow, 7xx atmosphere, 800 clear, 80x clouds.
"""

from typing import Dict, Optional, Tuple

FALLBACK_EMOJI = "🌈"

THUNDERSTORM = "⛈️"
DRIZZLE = "🌦️"
RAIN = "🌧️"
FREEZING_RAIN = "🌨️"
SNOW = "❄️"
FOG = "🌫️"
DUST = "💨"
VOLCANIC_ASH = "🌋"
SQUALL = "🌬️"
TORNADO = "🌪️"
CLEAR = "☀️"
FEW_CLOUDS = "🌤️"
SCATTERED_CLOUDS = "⛅"
CLOUDS = "☁️"

ATMOSPHERE_EMOJI: Dict[int, str] = {
    701: FOG,  # mist
    711: DUST,  # smoke
    721: FOG,  # haze
    731: DUST,  # sand/dust whirls
    741: FOG,  # fog
    751: DUST,  # sand
    761: DUST,  # dust
    762: VOLCANIC_ASH,
    771: SQUALL,
    781: TORNADO,
}

CLOUD_EMOJI: Dict[int, str] = {
    800: CLEAR,
    801: FEW_CLOUDS,
    802: SCATTERED_CLOUDS,
    803: CLOUDS,
    804: CLOUDS,
}

# Checked in order; thunderstorm precedes rain so "thunderstorm with rain" stays a storm.
KEYWORD_EMOJI: Tuple[Tuple[str, str], ...] = (
    ("clear", CLEAR),
    ("cloud", CLOUDS),
    ("thunderstorm", THUNDERSTORM),
    ("rain", RAIN),
    ("snow", SNOW),
    ("fog", FOG),
)


def emoji_for_code(condition_id: Optional[int]) -> Optional[str]:

    if condition_id is None:
        return None
    if condition_id in CLOUD_EMOJI:
        return CLOUD_EMOJI[condition_id]
    if condition_id in ATMOSPHERE_EMOJI:
        return ATMOSPHERE_EMOJI[condition_id]
    if condition_id == 511:
        return FREEZING_RAIN
    group = condition_id // 100
    if group == 2:
        return THUNDERSTORM
    if group == 3:
        return DRIZZLE
    if group == 5:
        return RAIN
    if group == 6:
        return SNOW
    return None


def emoji_for_description(description: Optional[str]) -> str:

    text = (description or "").lower()
    for keyword, emoji in KEYWORD_EMOJI:
        if keyword in text:
            return emoji
    return FALLBACK_EMOJI


def condition_emoji(condition_id: Optional[int], description: Optional[str] = None) -> str:
    """Pick a glyph by condition code, falling back to description keywords."""

    return emoji_for_code(condition_id) or emoji_for_description(description)
