#!/usr/bin/env python3
"""
Geographic utilities for the weather tools.
Resolves a city query to coordinates with the OpenWeatherMap geocoding API.
"""

import logging

from config import Config
from utils.payload import read_json, require_list, require_number
from utils.results import GeoLocation, HttpFailure, NotFound

logger = logging.getLogger(__name__)


async def geocode_city(client, query, api_key):
    """
    Geocode a WeatherQuery using the OpenWeatherMap direct geocoding endpoint.
    Returns a GeoLocation, NotFound when the provider has no match, or
    HttpFailure for a non-success status. Malformed payloads raise
    PayloadShapeError.
    """
    url = Config.endpoint("/geo/1.0/direct", geo=True)
    params = {
        "q": query.to_param(),
        "limit": Config.GEOCODE_LIMIT,
        "appid": api_key,
    }
    r = await client.get(url, params=params)
    if not r.is_success:
        logger.warning(f"Geocoding failed for '{query.to_param()}': {r.status_code}")
        return HttpFailure(r.status_code, stage="geo")

    matches = require_list(read_json(r))
    if not matches:
        return NotFound()

    item = matches[0]
    return GeoLocation(
        latitude=require_number(item, "lat"),
        longitude=require_number(item, "lon"),
    )
