# terraweave/utils.py
from datetime import datetime, timezone
from urllib.parse import quote_plus

from .mock_data import (MOCK_CITY_TEMPS, DEFAULT_CITY_TEMPS, LANDSAT_YEARS, LANDSAT_IMAGE_URL,
                        LANDSAT_ANALYSIS, MOCK_SOURCE)


def compute_anomaly(current, historical):
    return round(float(current) - float(historical), 1)


def trend_for(anomaly):
    if anomaly > 0:
        return "increasing"
    if anomaly < 0:
        return "decreasing"
    return "stable"


def mock_city_climate(city):
    """Anomaly for ``city`` from the fixed lookup table; unknown cities get the defaults."""
    current, historical = MOCK_CITY_TEMPS.get((city or "").strip().lower(), DEFAULT_CITY_TEMPS)
    anomaly = compute_anomaly(current, historical)
    return {
        "city": city,
        "current_temp": current,
        "historical_avg": historical,
        "anomaly": f"{anomaly:.1f}",
        "trend": trend_for(anomaly),
        "source": MOCK_SOURCE,
    }


def mock_landsat_analysis(location):
    images = {
        str(year): LANDSAT_IMAGE_URL.format(location=quote_plus(location), year=year)
        for year in LANDSAT_YEARS
    }
    return {
        "location": location,
        "images": images,
        "analysis": dict(LANDSAT_ANALYSIS, recommendations=list(LANDSAT_ANALYSIS["recommendations"])),
        "source": MOCK_SOURCE,
    }


def utc_now_iso():
    return datetime.now(timezone.utc).isoformat()
