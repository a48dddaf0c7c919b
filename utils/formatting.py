#!/usr/bin/env python3
"""
Response rendering for the weather tools.
Pure functions from a fetch outcome to the string returned to the MCP host.
"""

from utils.results import (
    EmptyResult,
    HttpFailure,
    InternalFailure,
    MissingCredential,
    NotFound,
    ProductTierFailure,
    Success,
)

API_KEY_NOT_SET = "API key not set."
LOCATION_NOT_FOUND = "Location not found."
NO_FORECAST = "No forecast data available."
NO_ALERTS = "No weather alerts currently."
PAID_KEY_REQUIRED = (
    "Weather alerts feature requires a paid OpenWeatherMap API key (One Call 3.0)."
)


def format_temperature(value):
    """Celsius with the provider's own precision."""
    return f"{value}°C"


def _render_common(outcome, operation, http_label):
    """Outcomes shared by every operation; None when not one of them."""
    if isinstance(outcome, MissingCredential):
        return API_KEY_NOT_SET
    if isinstance(outcome, InternalFailure):
        return f"Internal error while fetching {operation}."
    if isinstance(outcome, HttpFailure):
        if outcome.stage == "geo":
            return f"Error fetching geo data: {outcome.status}"
        return f"Error fetching {http_label}: {outcome.status}"
    return None


def render_current(city, outcome):
    """Render a current-weather outcome for the requested city."""
    common = _render_common(outcome, "weather", "weather")
    if common is not None:
        return common
    if isinstance(outcome, Success):
        conditions = outcome.payload
        return (
            f"Current weather in {city}: {conditions.description}, "
            f"{format_temperature(conditions.temperature)}"
        )
    raise TypeError(f"unexpected outcome for current weather: {outcome!r}")


def render_forecast(city, outcome):
    """Render a forecast outcome, one line per day."""
    common = _render_common(outcome, "forecast", "forecast")
    if common is not None:
        return common
    if isinstance(outcome, EmptyResult):
        return NO_FORECAST
    if isinstance(outcome, Success):
        lines = [
            f"{s.date_stamp}: {s.description}, {format_temperature(s.temperature)}"
            for s in outcome.payload
        ]
        return f"Weather forecast for {city}:\n" + "\n".join(lines)
    raise TypeError(f"unexpected outcome for forecast: {outcome!r}")


def render_alerts(outcome):
    """Render an alerts outcome, one line per alert."""
    common = _render_common(outcome, "alerts", "weather alerts")
    if common is not None:
        return common
    if isinstance(outcome, NotFound):
        return LOCATION_NOT_FOUND
    if isinstance(outcome, ProductTierFailure):
        return PAID_KEY_REQUIRED
    if isinstance(outcome, EmptyResult):
        return NO_ALERTS
    if isinstance(outcome, Success):
        lines = [f"* {a.event}: {a.description}" for a in outcome.payload]
        return "Weather alerts:\n" + "\n".join(lines)
    raise TypeError(f"unexpected outcome for alerts: {outcome!r}")
