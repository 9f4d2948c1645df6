from typing import Optional

import requests

from errors import ApiError, ErrorKind

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_CITY = "Montreal"


def fetch_weather(api_key: Optional[str], lat: Optional[float] = None, lon: Optional[float] = None) -> dict:
    if not api_key:
        raise ApiError(ErrorKind.UNAVAILABLE, "Weather service not configured")

    params = {"appid": api_key, "units": "metric"}
    if lat is not None and lon is not None:
        params.update({"lat": lat, "lon": lon})
    else:
        params["q"] = DEFAULT_CITY

    try:
        r = requests.get(OPENWEATHER_URL, params=params, timeout=8)
    except requests.RequestException as e:
        raise ApiError(ErrorKind.UPSTREAM, "Failed to fetch weather data", e)
    if r.status_code != 200:
        raise ApiError(
            ErrorKind.UPSTREAM,
            "Failed to fetch weather data",
            RuntimeError(f"OpenWeather responded {r.status_code}"),
        )
    try:
        return r.json()
    except ValueError as e:
        raise ApiError(ErrorKind.UPSTREAM, "Failed to fetch weather data", e)
