#!/usr/bin/env python3
"""
Performance tracking utilities for the weather tools.
Tracks timing, provider calls, and outcomes of each tool call.
"""

import json
import logging
import os
import time
from contextlib import asynccontextmanager
from dataclasses import asdict, dataclass
from datetime import datetime

from config import Config

logger = logging.getLogger(__name__)


@dataclass
class ToolCallMetrics:
    """Container for tool call metrics."""

    tool: str
    start_time: float
    query: str = ""
    end_time: float = 0.0
    duration_seconds: float = 0.0
    api_calls: int = 0
    outcome: str = ""
    errors: int = 0

    def to_dict(self):
        """Convert to dictionary for JSON serialization."""
        return {
            **asdict(self),
            "start_time_iso": datetime.fromtimestamp(self.start_time).isoformat(),
            "end_time_iso": (
                datetime.fromtimestamp(self.end_time).isoformat()
                if self.end_time
                else None
            ),
            "duration_formatted": f"{self.duration_seconds:.2f}s",
        }


class PerformanceTracker:
    """Collects metrics for a single tool call."""

    def __init__(self, tool, query="", log_file=None):
        self.metrics = ToolCallMetrics(tool=tool, start_time=time.time(), query=query)
        self._log_file = log_file or default_log_file()

    def add_api_call(self):
        """Increment provider call counter."""
        self.metrics.api_calls += 1

    def set_outcome(self, outcome):
        """Record the outcome class name of the fetch."""
        self.metrics.outcome = type(outcome).__name__
        if self.metrics.outcome == "InternalFailure":
            self.add_error()

    def add_error(self):
        """Increment error counter."""
        self.metrics.errors += 1

    def finish(self):
        """Finalize metrics and calculate duration."""
        self.metrics.end_time = time.time()
        self.metrics.duration_seconds = self.metrics.end_time - self.metrics.start_time

    def save_to_file(self):
        """Save metrics to JSONL log file."""
        try:
            directory = os.path.dirname(self._log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self._log_file, "a") as f:
                f.write(json.dumps(self.metrics.to_dict()) + "\n")
        except OSError as e:
            logger.warning(f"Could not save performance metrics: {e}")


def default_log_file():
    return os.path.join(Config.LOG_DIR, Config.PERFORMANCE_LOG_FILE)


@asynccontextmanager
async def track_tool_call(tool, query="", enabled=None, log_file=None):
    """Async context manager for tool call tracking."""
    tracker = PerformanceTracker(tool, query, log_file=log_file)
    if enabled is None:
        enabled = Config.TRACK_PERFORMANCE
    try:
        yield tracker
    finally:
        tracker.finish()
        logger.info(
            f"{tool}('{query}') -> {tracker.metrics.outcome or 'unknown'} "
            f"in {tracker.metrics.duration_seconds:.2f}s "
            f"({tracker.metrics.api_calls} API calls)"
        )
        if enabled:
            tracker.save_to_file()


def get_performance_stats(days=7, log_file=None):
    """Get performance statistics from recent logs."""
    log_file = log_file or default_log_file()

    if not os.path.exists(log_file):
        return {"error": "No performance logs found"}

    cutoff_time = time.time() - (days * 24 * 60 * 60)
    stats = {
        "total_calls": 0,
        "avg_duration": 0.0,
        "total_api_calls": 0,
        "total_errors": 0,
        "by_tool": {},
    }

    durations = []

    try:
        with open(log_file, "r") as f:
            for line in f:
                try:
                    data = json.loads(line.strip())
                except json.JSONDecodeError:
                    continue
                if data.get("start_time", 0) < cutoff_time:
                    continue
                stats["total_calls"] += 1
                durations.append(data.get("duration_seconds", 0))
                stats["total_api_calls"] += data.get("api_calls", 0)
                stats["total_errors"] += data.get("errors", 0)
                tool = data.get("tool", "unknown")
                stats["by_tool"][tool] = stats["by_tool"].get(tool, 0) + 1

        if durations:
            stats["avg_duration"] = sum(durations) / len(durations)

    except OSError as e:
        return {"error": f"Could not read performance logs: {e}"}

    return stats


def print_summary(stats, console=None):
    """Print a formatted summary of performance statistics."""
    from rich.console import Console
    from rich.table import Table

    console = console or Console(stderr=True)

    table = Table(
        title="Performance Summary", show_header=True, header_style="bold magenta"
    )
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    if "error" in stats:
        table.add_row("Error", stats["error"], style="red")
        console.print(table)
        return

    table.add_row("Tool Calls", str(stats["total_calls"]))
    table.add_row("Avg Duration", f"{stats['avg_duration']:.2f}s")
    table.add_row("API Calls", str(stats["total_api_calls"]))
    if stats["total_errors"] > 0:
        table.add_row("Errors", str(stats["total_errors"]), style="red")
    for tool, count in sorted(stats["by_tool"].items()):
        table.add_row(f"  {tool}", str(count))
    console.print(table)
