#!/usr/bin/env python3
"""
Weather tools for the MCP server.
Provides current weather, forecast, and alert lookups by city name.
"""

from typing import Optional

from mcp.server.fastmcp import FastMCP

from utils.formatting import render_alerts, render_current, render_forecast
from utils.openweather import OpenWeatherClient
from utils.performance_tracker import track_tool_call
from utils.results import WeatherQuery


async def current_weather_report(weather, city, country_code=None):
    query = WeatherQuery(city, country_code)
    async with track_tool_call("get_current_weather", query.to_param()) as tracker:
        outcome = await weather.current(query, tracker)
        tracker.set_outcome(outcome)
    return render_current(city, outcome)


async def forecast_report(weather, city, country_code=None):
    query = WeatherQuery(city, country_code)
    async with track_tool_call("get_weather_forecast", query.to_param()) as tracker:
        outcome = await weather.forecast(query, tracker)
        tracker.set_outcome(outcome)
    return render_forecast(city, outcome)


async def alerts_report(weather, city, country_code=None):
    query = WeatherQuery(city, country_code)
    async with track_tool_call("get_weather_alerts", query.to_param()) as tracker:
        outcome = await weather.alerts(query, tracker)
        tracker.set_outcome(outcome)
    return render_alerts(outcome)


def register_weather_tools(app: FastMCP, weather: OpenWeatherClient = None):
    """Register the weather tools with the FastMCP app."""
    weather = weather or OpenWeatherClient.from_config()

    @app.tool()
    async def get_current_weather(city: str, country_code: Optional[str] = None) -> str:
        """Gets current weather conditions for the specified city.

        Args:
            city: The city name to get weather for
            country_code: Optional country code (e.g., 'US', 'UK')
        """
        return await current_weather_report(weather, city, country_code)

    @app.tool()
    async def get_weather_forecast(city: str, country_code: Optional[str] = None) -> str:
        """Gets weather forecast for the specified city (3-day minimum).

        Args:
            city: The city name to get forecast for
            country_code: Optional country code (e.g., 'US', 'UK')
        """
        return await forecast_report(weather, city, country_code)

    @app.tool()
    async def get_weather_alerts(city: str, country_code: Optional[str] = None) -> str:
        """Gets weather alerts/warnings for the specified city.

        Args:
            city: The city name to get alerts for
            country_code: Optional country code (e.g., 'US', 'UK')
        """
        return await alerts_report(weather, city, country_code)

    return weather
