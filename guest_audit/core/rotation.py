"""
Weekly feature rotation.

The feature area inspected on a given run is a pure function of the
calendar date, so no rotation pointer has to be stored between runs.
"""

from datetime import date
from typing import Dict, Tuple

FEATURE_AREAS: Tuple[str, ...] = ("Flights", "Hotels", "Cruise", "Offers")

FEATURE_PATHS: Dict[str, str] = {
    "Flights": "/flights",
    "Hotels": "/hotels",
    "Cruise": "/cruise",
    "Offers": "/travel-offers",
}

FALLBACK_PATH = "/explore"


def week_number(d: date) -> int:
    """Номер недели: floor(дней с 1 января / 7) + 1."""
    days = (d - date(d.year, 1, 1)).days
    return days // 7 + 1


def select_feature_area(d: date) -> str:
    return FEATURE_AREAS[week_number(d) % len(FEATURE_AREAS)]


def feature_path(area: str) -> str:
    return FEATURE_PATHS.get(area, FALLBACK_PATH)
