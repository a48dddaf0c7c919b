#!/usr/bin/env python3
"""
Tool registry for the weather MCP server.
Centralizes tool registration and management.
"""

from mcp.server.fastmcp import FastMCP

from tools.weather import register_weather_tools


def register_all_tools(app: FastMCP, weather=None):
    """Register all weather tools with the FastMCP app."""

    # Current weather, forecast, alerts
    return register_weather_tools(app, weather)
