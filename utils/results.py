#!/usr/bin/env python3
"""
Result types for the weather tools.

Every fetch returns one of the outcome classes below instead of raising.
The renderers in utils/formatting.py turn an outcome into the final string.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


class PayloadShapeError(ValueError):
    """Provider JSON is missing a required field or has the wrong type."""


@dataclass(frozen=True)
class WeatherQuery:
    city: str
    country_code: Optional[str] = None

    def to_param(self):
        """Value for the provider's ``q`` parameter."""
        if self.country_code is None:
            return self.city
        return f"{self.city},{self.country_code}"


@dataclass(frozen=True)
class GeoLocation:
    latitude: Decimal
    longitude: Decimal


@dataclass(frozen=True)
class CurrentConditions:
    description: str
    temperature: Decimal


@dataclass(frozen=True)
class ForecastSample:
    date_stamp: str
    description: str
    temperature: Decimal


@dataclass(frozen=True)
class AlertRecord:
    event: str
    description: str


@dataclass(frozen=True)
class Success:
    payload: object


@dataclass(frozen=True)
class MissingCredential:
    pass


@dataclass(frozen=True)
class HttpFailure:
    """Non-success HTTP status from the provider."""

    status: int
    stage: str = "data"  # "geo" when raised by the geocoding step


@dataclass(frozen=True)
class ProductTierFailure:
    """One Call 3.0 rejected the key (HTTP 401)."""


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class EmptyResult:
    pass


@dataclass(frozen=True)
class InternalFailure:
    error: Exception = field(compare=False)

