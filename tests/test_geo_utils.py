import asyncio
from decimal import Decimal

import httpx
import pytest

from utils.geo_utils import geocode_city
from utils.results import GeoLocation, HttpFailure, NotFound, PayloadShapeError, WeatherQuery

GEO_PATH = "/geo/1.0/direct"


def test_geocode_returns_first_match(fake_api):
    fake_api.routes[GEO_PATH] = httpx.Response(
        200,
        json=[{"lat": 51.1801, "lon": 71.446}, {"lat": 1, "lon": 2}],
    )
    result = asyncio.run(
        geocode_city(fake_api.client(), WeatherQuery("Astana", "KZ"), "secret")
    )

    assert result == GeoLocation(Decimal("51.1801"), Decimal("71.446"))
    params = fake_api.requests[0].url.params
    assert params["q"] == "Astana,KZ"
    assert params["limit"] == "1"
    assert params["appid"] == "secret"


def test_geocode_empty_array_is_not_found(fake_api):
    fake_api.routes[GEO_PATH] = httpx.Response(200, json=[])
    result = asyncio.run(geocode_city(fake_api.client(), WeatherQuery("Nowhere"), "k"))
    assert result == NotFound()


def test_geocode_non_success_status(fake_api):
    fake_api.routes[GEO_PATH] = httpx.Response(401, json={"cod": 401})
    result = asyncio.run(geocode_city(fake_api.client(), WeatherQuery("Astana"), "k"))
    assert result == HttpFailure(401, stage="geo")


def test_geocode_missing_coordinates_is_shape_error(fake_api):
    fake_api.routes[GEO_PATH] = httpx.Response(200, json=[{"name": "Astana", "lat": 51.1}])
    with pytest.raises(PayloadShapeError):
        asyncio.run(geocode_city(fake_api.client(), WeatherQuery("Astana"), "k"))


def test_geocode_string_coordinates_are_rejected(fake_api):
    fake_api.routes[GEO_PATH] = httpx.Response(200, json=[{"lat": "51.1", "lon": "71.4"}])
    with pytest.raises(PayloadShapeError):
        asyncio.run(geocode_city(fake_api.client(), WeatherQuery("Astana"), "k"))
