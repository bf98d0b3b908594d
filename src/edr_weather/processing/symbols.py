"""
FMI weather symbol helpers.

Derives symbols from cloud cover and maps them to descriptions and
activity suggestions.
"""

from typing import Optional

from ..core import constants
from ..models import ActivitySuggestion


def weather_symbol_from_cloud_cover(cloud_cover: Optional[float]) -> int:
    """
    Derive a weather symbol from total cloud cover (%).

    Used when the forecast has no symbol of its own: clear (1), partly cloudy (2)
    or cloudy (22). A missing cover counts as clear.
    """
    if cloud_cover is None:
        return 1
    if cloud_cover < constants.CLEAR_SKY_MAX_CLOUD:
        return 1
    if cloud_cover < constants.PARTLY_CLOUDY_MAX_CLOUD:
        return 2
    return 22


def describe_weather_symbol(symbol_code: Optional[float]) -> str:
    """Map an FMI weather symbol code (1-99) to a short description."""
    if symbol_code is None:
        return "Unknown"
    code = int(symbol_code)
    if code == 1:
        return "Clear"
    if 2 <= code <= 21:
        return "Partly Cloudy"
    if 22 <= code <= 41:
        return "Cloudy"
    if 42 <= code <= 51:
        return "Foggy"
    if 52 <= code <= 61:
        return "Rainy"
    if 62 <= code <= 71:
        return "Snowy"
    if 72 <= code <= 82:
        return "Light Rain"
    if 83 <= code <= 99:
        return "Thunderstorm"
    return "Unknown"


# Symbol code ranges, inclusive
THUNDER_SYMBOLS = range(61, 65)
SNOW_SYMBOLS = (range(41, 44), range(51, 54))
RAIN_SYMBOLS = (range(21, 24), range(31, 34))
SLEET_SYMBOLS = (range(71, 74), range(81, 84))
FOG_SYMBOLS = range(91, 93)

STAY_INDOORS = ActivitySuggestion("🏠", "Stay Indoors", "Read a book, watch movies, or play board games")


def _in_ranges(code: int, ranges) -> bool:
    return any(code in r for r in ranges)


def activity_suggestion(symbol_code: Optional[float], temperature: Optional[float]) -> Optional[ActivitySuggestion]:
    """
    Suggest an activity for a weather symbol and temperature (°C).

    Thunder, sleet and fog decide on the symbol alone; snow, rain, clear and
    partly cloudy skies also depend on the temperature band. Any other code
    is treated as cloudy.

    Returns:
        ActivitySuggestion, or None when the symbol or temperature is missing
    """
    if symbol_code is None or temperature is None:
        return None
    code = int(symbol_code)
    t = temperature

    if code in THUNDER_SYMBOLS:
        return STAY_INDOORS

    if _in_ranges(code, SNOW_SYMBOLS):
        if t < 0:
            return ActivitySuggestion("⛷️", "Skiing", "Perfect conditions for skiing or snowboarding")
        if t <= 2:
            return ActivitySuggestion("☃️", "Snowman", "Great weather for building a snowman")
        return ActivitySuggestion("🏠", "Stay Cozy", "Slushy conditions - best to stay warm indoors")

    if _in_ranges(code, RAIN_SYMBOLS):
        if t >= 15:
            return ActivitySuggestion("🏊", "Swimming", "Warm rain - good for swimming or water activities")
        if t > 5:
            return ActivitySuggestion("☂️", "Indoor Activities", "Take an umbrella or enjoy indoor activities")
        return ActivitySuggestion("🏠", "Stay Cozy", "Cold and rainy - stay warm indoors")

    if _in_ranges(code, SLEET_SYMBOLS):
        return ActivitySuggestion("🏠", "Stay Indoors", "Unpleasant weather - best to stay inside")

    if code in FOG_SYMBOLS:
        return ActivitySuggestion("☕", "Café Visit", "Enjoy a warm drink at a cozy café")

    if code == 1:
        if t >= 25:
            return ActivitySuggestion("🏖️", "Beach Day", "Perfect weather for the beach")
        if t >= 15:
            return ActivitySuggestion("🚴", "Cycling", "Great day for outdoor cycling")
        if t >= 5:
            return ActivitySuggestion("🚶", "Walking", "Nice weather for a walk in the park")
        if t < 0:
            return ActivitySuggestion("⛸️", "Ice Skating", "Cold and clear - perfect for ice skating")
        return ActivitySuggestion("🧥", "Outdoor Walk", "Bundle up and enjoy the fresh air")

    if code == 2:
        if t >= 20:
            return ActivitySuggestion("⚽", "Sports", "Great weather for outdoor sports")
        if t >= 10:
            return ActivitySuggestion("🏃", "Jogging", "Perfect conditions for a run")
        if t >= 0:
            return ActivitySuggestion("🚶", "Walking", "Nice day for a walk")
        return ActivitySuggestion("⛷️", "Winter Sports", "Good conditions for winter activities")

    if t >= 15:
        return ActivitySuggestion("🎾", "Outdoor Activities", "Comfortable weather for various outdoor activities")
    if t >= 5:
        return ActivitySuggestion("🚶", "Light Activity", "Cool but okay for moderate outdoor activities")
    if t >= 0:
        return ActivitySuggestion("☕", "Casual Outing", "Chilly - dress warm for outdoor activities")
    return ActivitySuggestion("🏠", "Indoor Activities", "Cold weather - consider indoor activities")
