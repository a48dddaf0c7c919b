#!/usr/bin/env python3
"""
MCP Weather Tools Server.

Exposes current weather, forecast, and alert lookups backed by the
OpenWeatherMap API:
- Configuration centralized in config.py
- Provider client and rendering in utils/ package
- Tool registration in tools/ package

ENV:
  WEATHER_API_KEY -> OpenWeatherMap API key
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from rich.console import Console

from config import Config
from tools.tool_registry import register_all_tools
from tools.weather import alerts_report, current_weather_report, forecast_report
from utils.http_client import close_http_client
from utils.performance_tracker import get_performance_stats, print_summary

logger = logging.getLogger("mcp.tools")

# stdout carries MCP protocol messages on the stdio transport
console = Console(stderr=True)

app = FastMCP("weather-tools", host=Config.SERVER_HOST, port=Config.SERVER_PORT)
weather = register_all_tools(app)


def setup_logging(daemon_mode=False):
    """Log to LOG_DIR/mcp_server.log, and to stderr unless in daemon mode."""
    logs_dir = Path(Config.LOG_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / "mcp_server.log"
    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(detailed_formatter)
    handlers = [file_handler]
    if not daemon_mode:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(detailed_formatter)
        handlers.append(console_handler)

    logging.basicConfig(level=logging.INFO, handlers=handlers, force=True)
    logger.setLevel(logging.INFO)
    # httpx logs full request URLs at INFO, which include the appid key
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return log_file


async def self_test(city, country_code=None):
    """Run each tool once and print the results."""
    try:
        result = await current_weather_report(weather, city, country_code)
        console.print(f"[bold][TEST][/bold] {result}")

        forecast = await forecast_report(weather, city, country_code)
        console.print(f"[bold][TEST_FORECAST][/bold] {forecast}")

        alerts = await alerts_report(weather, city, country_code)
        console.print(f"[bold][TEST_ALERTS][/bold] {alerts}")
    finally:
        await close_http_client()
    if Config.TRACK_PERFORMANCE:
        print_summary(get_performance_stats(days=1), console)


async def run_server(transport, daemon_mode=False, log_file=None):
    """Run the MCP server until interrupted."""
    if not daemon_mode:
        console.print(f"MCP Weather Server starting ({transport})")
        if transport != "stdio":
            console.print(f"Listening on http://{Config.SERVER_HOST}:{Config.SERVER_PORT}")
        console.print(f"Logs: {log_file}")
        tools = await app.list_tools()
        console.print(f"Tools loaded: {len(tools)}")
        if Config.has_weather_api_key():
            console.print("OpenWeatherMap: API key configured")
        else:
            console.print("[yellow]OpenWeatherMap: API key not set[/yellow]")
    logger.info(f"MCP Weather Server starting (transport={transport})")
    logger.info(f"Daemon mode: {daemon_mode}")
    if not Config.has_weather_api_key():
        logger.warning("WEATHER_API_KEY is not set; tools will report 'API key not set.'")

    try:
        if transport == "stdio":
            await app.run_stdio_async()
        else:
            await app.run_streamable_http_async()
    except KeyboardInterrupt:
        logger.info("Server shutting down...")
        if not daemon_mode:
            console.print("\nServer shutting down...")
    except Exception as e:
        logger.exception(f"Server error: {e}")
        if not daemon_mode:
            console.print(f"\n[red]Server error: {e}[/red]")
    finally:
        await close_http_client()


def main(argv=None):
    parser = argparse.ArgumentParser(description="MCP Weather Server")
    parser.add_argument(
        "--daemon", action="store_true", help="Run in daemon mode (no UI)"
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "streamable-http"],
        default=Config.MCP_TRANSPORT,
        help="MCP transport to serve on",
    )
    parser.add_argument(
        "--self-test",
        metavar="CITY",
        help="Query all tools once for CITY and exit",
    )
    parser.add_argument("--country", help="Country code used with --self-test")
    args = parser.parse_args(argv)

    log_file = setup_logging(args.daemon)
    if args.self_test:
        asyncio.run(self_test(args.self_test, args.country))
        return
    asyncio.run(run_server(args.transport, args.daemon, log_file))


if __name__ == "__main__":
    main()
