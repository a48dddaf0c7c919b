#!/usr/bin/env python3
"""
Field extraction helpers for OpenWeatherMap JSON payloads.
Responses are parsed with ``parse_float=Decimal`` so numbers keep their
textual form when rendered.
"""

from decimal import Decimal

from utils.results import PayloadShapeError


def read_json(response):
    """Decode a provider response, keeping floats as Decimal."""
    return response.json(parse_float=Decimal)


def get_path(data, *path):
    """Walk nested dicts/lists, raising PayloadShapeError on a missing step."""
    current = data
    for step in path:
        try:
            current = current[step]
        except (KeyError, IndexError, TypeError) as e:
            joined = ".".join(str(p) for p in path)
            raise PayloadShapeError(f"missing field '{joined}'") from e
    return current


def require_number(data, *path):
    """Numeric field at path, as a Decimal."""
    value = get_path(data, *path)
    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
        joined = ".".join(str(p) for p in path)
        raise PayloadShapeError(f"field '{joined}' is not a number: {value!r}")
    return Decimal(value)


def require_text(data, *path):
    """String field at path."""
    value = get_path(data, *path)
    if not isinstance(value, str):
        joined = ".".join(str(p) for p in path)
        raise PayloadShapeError(f"field '{joined}' is not a string: {value!r}")
    return value


def require_list(data, *path):
    """List field at path; the whole payload when no path is given."""
    value = get_path(data, *path)
    if not isinstance(value, list):
        joined = ".".join(str(p) for p in path) or "<root>"
        raise PayloadShapeError(f"field '{joined}' is not a list")
    return value
