"""
Reference locations: Nordic cities and Gulf of Finland coastal stations.
"""

from typing import List

from .models import City, WeatherStation


CITIES: List[City] = [
    City("Helsinki", "Finland", 24.9384, 60.1699),
    City("Espoo", "Finland", 24.6522, 60.2055),
    City("Tampere", "Finland", 23.7610, 61.4978),
    City("Vantaa", "Finland", 25.0378, 60.2934),
    City("Oulu", "Finland", 25.4714, 65.0121),
    City("Turku", "Finland", 22.2666, 60.4518),
    City("Jyväskylä", "Finland", 25.7333, 62.2426),
    City("Lahti", "Finland", 25.6612, 60.9827),
    City("Kuopio", "Finland", 27.6782, 62.8924),
    City("Pori", "Finland", 21.7972, 61.4847),
    City("Stockholm", "Sweden", 18.0686, 59.3293),
    City("Oslo", "Norway", 10.7522, 59.9139),
    City("Copenhagen", "Denmark", 12.5683, 55.6761),
    City("Reykjavik", "Iceland", -21.8174, 64.1466),
]

GULF_OF_FINLAND_STATIONS: List[WeatherStation] = [
    WeatherStation("100932", "Hanko Russarö", 22.9487, 59.7736),
    WeatherStation("100946", "Hanko Tulliniemi", 22.9125, 59.8086),
    WeatherStation("100969", "Inkoo Bågaskär", 24.0141, 59.9311),
    WeatherStation("100997", "Kirkkonummi Mäkiluoto", 24.3502, 59.9198),
    WeatherStation("100996", "Helsinki Harmaja", 24.9754, 60.1051),
    WeatherStation("101022", "Porvoo Kalbådagrund", 25.5988, 59.9857),
    WeatherStation("101023", "Porvoo Emäsalo", 25.6255, 60.2038),
    WeatherStation("101039", "Loviisa Orrengrund", 26.4476, 60.2748),
    WeatherStation("101042", "Kotka Haapasaari", 27.1848, 60.2868),
]


def default_city() -> City:
    """Helsinki."""
    return CITIES[0]


def search_cities(query: str) -> List[City]:
    """Case-insensitive substring match on city name or country."""
    lower_query = query.lower()
    return [
        city for city in CITIES
        if lower_query in city.name.lower() or lower_query in city.country.lower()
    ]


def find_city(name: str) -> City:
    """
    Find a city by exact name, ignoring case.

    Raises:
        KeyError: If no city matches
    """
    for city in CITIES:
        if city.name.lower() == name.lower():
            return city
    raise KeyError(f"Unknown city: {name}")
