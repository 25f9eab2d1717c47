"""
Text and numeric helpers used by the factor scorers.

Covers salary range extraction, perk keyword detection,
great-circle distance and date spans.
"""

import math
import re
import unicodedata
from datetime import date
from typing import Optional

from recruit_match.data.models import GeoPoint
from recruit_match.utils.constants import (
    EARTH_RADIUS_KM,
    PERK_KEYWORDS,
)

_NUMBER_PATTERN = re.compile(r"\d+(?:[.,]\d+)*")
_DECIMAL_SUFFIX = re.compile(r"[.,](\d+)$")

DAYS_PER_YEAR = 365.25


def round_score(value: float) -> int:
    """Round half up to the nearest integer (0.5 -> 1, 66.5 -> 67)."""
    # Trim float noise first so 84.4999999999 from weighted sums rounds to 85
    return int(math.floor(round(value, 9) + 0.5))


def normalize_text(text: Optional[str]) -> str:
    """Lowercase, trim and strip accents."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.lower().strip()


def has_recognized_perk(text: Optional[str]) -> bool:
    """Check whether a benefits text names a recognized perk."""
    normalized = normalize_text(text).replace("-", " ")
    return any(keyword in normalized for keyword in PERK_KEYWORDS)


def parse_amount(token: str) -> float:
    """
    Parse a number written with thousands and/or decimal separators.

    A trailing group of exactly three digits is read as thousands, so
    "8.000" and "8,000" are 8000 while "8.000,50" and "1,234.56" keep
    their decimals.
    """
    suffix = _DECIMAL_SUFFIX.search(token)
    if suffix and len(suffix.group(1)) != 3:
        integer_part = re.sub(r"[.,]", "", token[: suffix.start()])
        return float(f"{integer_part}.{suffix.group(1)}")
    return float(re.sub(r"[.,]", "", token))


def parse_salary_range(text: Optional[str]) -> Optional[tuple[float, float]]:
    """
    Extract a (min, max) salary pair from free text.

    Uses the first two numbers found. A single number yields min == max,
    and a reversed pair is put in order.

    Returns:
        The pair, or None when no positive amount can be extracted.
    """
    if not text:
        return None

    amounts = [parse_amount(token) for token in _NUMBER_PATTERN.findall(text)[:2]]
    if not amounts:
        return None

    low, high = min(amounts), max(amounts)
    if high <= 0:
        return None
    return low, high


def haversine_km(origin: GeoPoint, destination: GeoPoint) -> float:
    """Great-circle distance between two points in kilometres."""
    lat1, lng1 = math.radians(origin.lat), math.radians(origin.lng)
    lat2, lng2 = math.radians(destination.lat), math.radians(destination.lng)

    d_lat = lat2 - lat1
    d_lng = lng2 - lng1

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def years_between(start: Optional[date], end: date) -> float:
    """Elapsed years between two dates; missing or negative spans are 0."""
    if start is None:
        return 0.0
    days = (end - start).days
    return max(0.0, days / DAYS_PER_YEAR)
