"""Stylist app bootstrap."""

from __future__ import annotations

from stylist_app.config import StylistConfig
from stylist_app.logging_config import configure_logging, get_logger
from agents.outfit_stylist_agent import OutfitStylistAgent
from agents.weather_agent import WeatherAgent
from tools.wardrobe_store import SQLiteWardrobeStore, WardrobeStore
from tools.weather_provider import OpenWeatherProvider, WeatherProvider

LOGGER = get_logger(__name__)


class StylistApp:
    """Wires together the store, weather lookup and outfit stylist."""

    def __init__(
        self,
        config: StylistConfig | None = None,
        store: WardrobeStore | None = None,
        weather_provider: WeatherProvider | None = None,
    ) -> None:
        self.config = config or StylistConfig.from_env()
        configure_logging(self.config.log_level)

        self.store = store or SQLiteWardrobeStore(self.config.database_path)
        self.weather_provider = weather_provider or OpenWeatherProvider(api_key=self.config.weather_api_key)
        self.weather_agent = WeatherAgent(provider=self.weather_provider)
        self.stylist = OutfitStylistAgent(
            config=self.config,
            store=self.store,
            weather_agent=self.weather_agent,
        )
        LOGGER.info("Stylist app initialised", extra={"environment": self.config.environment or "local"})


__all__ = ["StylistApp"]
