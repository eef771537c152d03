"""Weather provider abstractions and implementations."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

import requests
from pydantic import BaseModel, ValidationError

LOGGER = logging.getLogger(__name__)

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
FORECAST_HORIZON_SECONDS = 24 * 60 * 60


class _WeatherCondition(BaseModel):
    main: str = "unknown"
    description: str = "unknown"
    icon: str = ""


class _Wind(BaseModel):
    speed: float = 0.0


class _CurrentMain(BaseModel):
    temp: float
    humidity: float = 0.0


class _CurrentResponse(BaseModel):
    main: _CurrentMain
    wind: _Wind = _Wind()
    weather: List[_WeatherCondition] = []


class _ForecastMain(BaseModel):
    temp: float


class _ForecastEntry(BaseModel):
    dt: int
    main: _ForecastMain


class _ForecastResponse(BaseModel):
    list: List[_ForecastEntry] = []


@dataclass
class WeatherReport:
    """Current conditions plus the day's forecast high, in Fahrenheit."""

    temperature: float
    high_temperature: float
    condition: str
    description: str
    humidity: float = 0.0
    wind_speed: float = 0.0
    icon: str = ""


class WeatherProvider(ABC):
    """Abstract weather provider interface."""

    @abstractmethod
    def get_forecast(self, zip_code: str) -> Optional[WeatherReport]:
        """Return today's weather for a US zip code, or ``None`` when unavailable."""


class OpenWeatherProvider(WeatherProvider):
    """OpenWeatherMap provider in imperial units with schema validation.

    Failures never raise: they are logged and reported as ``None`` so that
    suggestions fall back to weather-agnostic scoring.
    """

    def __init__(self, api_key: str | None = None, timeout_seconds: float = 5.0, country_code: str = "US") -> None:
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.country_code = country_code

    def _get(self, endpoint: str, zip_code: str) -> dict:
        params = {
            "zip": f"{zip_code},{self.country_code}",
            "units": "imperial",
            "appid": self.api_key,
        }
        response = requests.get(f"{OPENWEATHER_BASE_URL}/{endpoint}", params=params, timeout=self.timeout_seconds)
        response.raise_for_status()
        return response.json()

    def _forecast_high(self, zip_code: str, fallback: float, now: float) -> float:
        try:
            forecast = _ForecastResponse.model_validate(self._get("forecast", zip_code))
        except (requests.RequestException, ValidationError, ValueError) as exc:
            LOGGER.warning("Forecast unavailable, using current temperature as high", extra={"error": str(exc)})
            return fallback
        horizon = now + FORECAST_HORIZON_SECONDS
        upcoming = [entry.main.temp for entry in forecast.list if entry.dt < horizon]
        return max(upcoming) if upcoming else fallback

    def get_forecast(self, zip_code: str) -> Optional[WeatherReport]:
        if not zip_code:
            raise ValueError("zip_code is required for weather lookups")

        if not self.api_key:
            LOGGER.info("No weather API key configured; skipping weather lookup")
            return None

        try:
            current = _CurrentResponse.model_validate(self._get("weather", zip_code))
        except (requests.Timeout, requests.RequestException) as exc:
            LOGGER.error("Weather API unreachable", exc_info=exc)
            return None
        except (ValidationError, ValueError) as exc:
            LOGGER.error("Weather payload schema validation failed", exc_info=exc)
            return None

        condition = current.weather[0] if current.weather else _WeatherCondition()
        high = self._forecast_high(zip_code, fallback=current.main.temp, now=time.time())
        return WeatherReport(
            temperature=round(current.main.temp),
            high_temperature=round(high),
            condition=condition.main,
            description=condition.description,
            humidity=current.main.humidity,
            wind_speed=round(current.wind.speed),
            icon=condition.icon,
        )


class MockWeatherProvider(WeatherProvider):
    """Offline deterministic weather provider for tests."""

    def __init__(self, report: WeatherReport | None = None) -> None:
        self.report = report

    def get_forecast(self, zip_code: str) -> Optional[WeatherReport]:
        LOGGER.info("Returning mock forecast")
        return self.report


__all__ = ["WeatherReport", "WeatherProvider", "OpenWeatherProvider", "MockWeatherProvider"]
