"""Weather agent that maps forecasts into a temperature category."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from logic.weather_classifier import classify_temperature
from models.taxonomy import TEMPERATURE_THRESHOLDS_F
from stylist_app.logging_config import get_logger, log_event, operation_context
from tools.weather_provider import WeatherProvider

LOGGER = get_logger(__name__)


class WeatherAgent:
    """Fetches the day's weather and classifies its forecast high."""

    def __init__(self, provider: WeatherProvider) -> None:
        self.provider = provider

    def get_weather_profile(self, zip_code: str) -> Dict[str, object]:
        """Return the raw report, its category (or ``None``) and a debug summary."""

        with operation_context("agent:weather.get_weather_profile") as correlation_id:
            report = self.provider.get_forecast(zip_code)
            category: Optional[str] = classify_temperature(report.high_temperature) if report else None

            if report:
                user_facing_summary = (
                    f"{report.temperature:.0f}°F now, high {report.high_temperature:.0f}°F, "
                    f"{report.condition}. Feels {category}."
                )
            else:
                user_facing_summary = "Weather unavailable; suggestions ignore temperature."

            response = {
                "raw_report": report,
                "temperature_category": category,
                "user_facing_summary": user_facing_summary,
                "debug_summary": {
                    "thresholds_f": {
                        "cold": f"<{TEMPERATURE_THRESHOLDS_F['cold']}",
                        "cool": f"<{TEMPERATURE_THRESHOLDS_F['cool']}",
                        "warm": f"<{TEMPERATURE_THRESHOLDS_F['warm']}",
                        "hot": f">={TEMPERATURE_THRESHOLDS_F['warm']}",
                    },
                    "classified_from": "high_temperature" if report else None,
                },
            }

            log_event(
                LOGGER,
                level=logging.INFO,
                event="agent_call_completed",
                agent="weather",
                method="get_weather_profile",
                correlation_id=correlation_id,
                temperature_category=category,
                weather_available=report is not None,
            )
            return response

    def temperature_category(self, zip_code: str) -> Optional[str]:
        return self.get_weather_profile(zip_code)["temperature_category"]  # type: ignore[return-value]


__all__ = ["WeatherAgent"]
