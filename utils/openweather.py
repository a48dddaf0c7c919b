#!/usr/bin/env python3
"""
OpenWeatherMap client for the weather tools.

Each fetch returns an outcome from utils/results.py. Failures are classified
in this order: missing credential, non-success HTTP status, payload shape or
any other fault. Nothing raised inside a fetch escapes it; unexpected faults
are logged and returned as InternalFailure.
"""

import logging

from config import Config
from utils.forecast import dedupe_days, forecast_sample, sort_chronologically
from utils.geo_utils import geocode_city
from utils.http_client import get_http_client
from utils.payload import read_json, require_list, require_number, require_text
from utils.results import (
    AlertRecord,
    CurrentConditions,
    EmptyResult,
    GeoLocation,
    HttpFailure,
    InternalFailure,
    MissingCredential,
    PayloadShapeError,
    ProductTierFailure,
    Success,
)

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    """Fetches current weather, forecasts and alerts for a WeatherQuery."""

    def __init__(self, api_key=None, http_client=None, sort_samples=None):
        self.api_key = api_key
        self._http_client = http_client
        if sort_samples is None:
            sort_samples = Config.FORECAST_SORT_SAMPLES
        self.sort_samples = sort_samples

    @classmethod
    def from_config(cls, http_client=None):
        """Build a client using the API key from Config."""
        return cls(api_key=Config.get_weather_api_key(), http_client=http_client)

    @property
    def client(self):
        if self._http_client is not None:
            return self._http_client
        return get_http_client()

    def has_credential(self):
        """True when a non-blank API key is configured."""
        return bool(self.api_key and self.api_key.strip())

    async def _get(self, path, params, tracker=None):
        if tracker is not None:
            tracker.add_api_call()
        params = {**params, "appid": self.api_key}
        return await self.client.get(Config.endpoint(path), params=params)

    async def current(self, query, tracker=None):
        """Current conditions from /data/2.5/weather."""
        if not self.has_credential():
            return MissingCredential()
        try:
            r = await self._get(
                "/data/2.5/weather",
                {"q": query.to_param(), "units": Config.UNITS},
                tracker,
            )
            if not r.is_success:
                return HttpFailure(r.status_code)

            data = read_json(r)
            return Success(
                CurrentConditions(
                    description=require_text(data, "weather", 0, "description"),
                    temperature=require_number(data, "main", "temp"),
                )
            )
        except Exception as e:
            logger.exception("Failed to get current weather")
            return InternalFailure(e)

    async def forecast(self, query, tracker=None):
        """Up to FORECAST_DAYS daily samples from /data/2.5/forecast."""
        if not self.has_credential():
            return MissingCredential()
        try:
            r = await self._get(
                "/data/2.5/forecast",
                {"q": query.to_param(), "units": Config.UNITS},
                tracker,
            )
            if not r.is_success:
                return HttpFailure(r.status_code)

            items = require_list(read_json(r), "list")
            if self.sort_samples:
                items = sort_chronologically(items)
            summary = dedupe_days(
                items, limit=Config.FORECAST_DAYS, to_sample=forecast_sample
            )
            if not summary:
                return EmptyResult()
            return Success(summary)
        except Exception as e:
            logger.exception("Failed to get weather forecast")
            return InternalFailure(e)

    async def locate(self, query, tracker=None):
        """First stage of the alerts lookup."""
        if tracker is not None:
            tracker.add_api_call()
        return await geocode_city(self.client, query, self.api_key)

    async def alerts_at(self, location, tracker=None):
        """Second stage of the alerts lookup: One Call 3.0 by coordinates."""
        r = await self._get(
            "/data/3.0/onecall",
            {
                "lat": str(location.latitude),
                "lon": str(location.longitude),
                "units": Config.UNITS,
            },
            tracker,
        )
        if r.status_code == 401:
            return ProductTierFailure()
        if not r.is_success:
            return HttpFailure(r.status_code)

        data = read_json(r)
        if not isinstance(data, dict):
            raise PayloadShapeError("one call response is not an object")
        if "alerts" not in data:
            return EmptyResult()
        raw_alerts = require_list(data, "alerts")
        if not raw_alerts:
            return EmptyResult()
        return Success(
            tuple(
                AlertRecord(
                    event=require_text(alert, "event"),
                    description=require_text(alert, "description"),
                )
                for alert in raw_alerts
            )
        )

    async def alerts(self, query, tracker=None):
        """Geocode the query, then read alerts from One Call 3.0."""
        if not self.has_credential():
            return MissingCredential()
        try:
            location = await self.locate(query, tracker)
            if not isinstance(location, GeoLocation):
                return location
            return await self.alerts_at(location, tracker)
        except Exception as e:
            logger.exception("Failed to get weather alerts")
            return InternalFailure(e)
