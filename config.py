#!/usr/bin/env python3
"""
Configuration module for the Weather Tools MCP server.
Centralizes the OpenWeatherMap API key, endpoints, and server settings.
"""

import os


def env_flag(name, default=False):
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Configuration class for weather tool settings."""

    # API Keys
    WEATHER_API_KEY = os.getenv("WEATHER_API_KEY")

    # OpenWeatherMap Settings
    OPENWEATHER_API_BASE = os.getenv(
        "OPENWEATHER_API_BASE", "https://api.openweathermap.org"
    )
    OPENWEATHER_GEO_BASE = os.getenv(
        "OPENWEATHER_GEO_BASE", "http://api.openweathermap.org"
    )
    UNITS = "metric"
    GEOCODE_LIMIT = 1
    FORECAST_DAYS = 3  # Free tier returns 5 days in 3-hour steps
    FORECAST_SORT_SAMPLES = env_flag("FORECAST_SORT_SAMPLES")

    # HTTP Settings
    HTTP_TIMEOUT = 20.0
    HTTP_CONNECT_TIMEOUT = 10.0
    USER_AGENT = "WeatherMCP/1.0"

    # Server Settings
    SERVER_HOST = os.getenv("SERVER_HOST", "localhost")
    SERVER_PORT = int(os.getenv("SERVER_PORT", "8000"))
    MCP_TRANSPORT = os.getenv("MCP_TRANSPORT", "stdio")

    # File Paths
    LOG_DIR = os.getenv("LOG_DIR", "logs")
    PERFORMANCE_LOG_FILE = os.getenv("PERFORMANCE_LOG_FILE", "performance_logs.jsonl")
    TRACK_PERFORMANCE = env_flag("TRACK_PERFORMANCE")

    @classmethod
    def get_weather_api_key(cls):
        """Get the OpenWeatherMap API key."""
        return cls.WEATHER_API_KEY

    @classmethod
    def has_weather_api_key(cls):
        """Check if an OpenWeatherMap API key is configured."""
        key = cls.get_weather_api_key()
        return bool(key and key.strip())

    @classmethod
    def endpoint(cls, path, geo=False):
        """Build a full OpenWeatherMap URL for the given path."""
        base = cls.OPENWEATHER_GEO_BASE if geo else cls.OPENWEATHER_API_BASE
        return f"{base.rstrip('/')}/{path.lstrip('/')}"
