import json
import logging
from typing import Any, Callable, Dict, Optional

import httpx

from ..core.config import CliConfig
from ..core.exceptions import (
    ConfigurationError,
    DecodeError,
    HttpError,
    NetworkError,
    WeatherServiceError,
)
from ..domain.services import WeatherService
from ..domain.value_objects import Units
from ..domain.weather import WeatherReport

logger = logging.getLogger(__name__)


class OpenWeatherMapService(WeatherService):

    def __init__(
        self,
        api_key: str,
        units: Units = Units.METRIC,
        lang: str = "en",
        base_url: str = "https://api.openweathermap.org/data/2.5/weather",
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:

        self._api_key = api_key
        self._units = units
        self._lang = lang
        self._base_url = base_url
        self._http_client = http_client

    def build_params(self, city: str) -> Dict[str, str]:

        return {
            "q": city,
            "appid": self._api_key,
            "units": self._units.value,
            "mode": "json",
            "lang": self._lang,
        }

    async def _request_weather(
        self, client: httpx.AsyncClient, city: str
    ) -> WeatherReport:

        try:
            response = await client.get(self._base_url, params=self.build_params(city))
        except httpx.TransportError as e:
            raise NetworkError(f"Network error while requesting weather: {e}")

        logger.debug("Received response %s for city %s", response.status_code, city)
        logger.debug("Response body: %s", response.text)

        if not response.is_success:
            raise HttpError(response.status_code, city, _provider_message(response))

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"Response body is not valid JSON: {e}")
        return WeatherReport.from_openweathermap(payload, units=self._units)

    async def get_current_weather(self, city: str) -> WeatherReport:

        try:
            if self._http_client is None:
                async with httpx.AsyncClient() as client:
                    return await self._request_weather(client, city)

            return await self._request_weather(self._http_client, city)
        except WeatherServiceError:
            raise
        except httpx.HTTPError as e:
            raise NetworkError(f"Network error while requesting weather: {e}")


def _provider_message(response: httpx.Response) -> Optional[str]:
    try:
        body: Any = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None


WeatherServiceFactory = Callable[[CliConfig, Optional[httpx.AsyncClient]], WeatherService]


WEATHER_SERVICE_FACTORIES: Dict[str, WeatherServiceFactory] = {
    "openweathermap": lambda config, client=None: OpenWeatherMapService(
        config.api_key,
        units=config.units,
        lang=config.lang,
        base_url=config.base_url,
        http_client=client,
    )
}


def create_weather_service(
    provider: str,
    config: CliConfig,
    http_client: Optional[httpx.AsyncClient] = None,
) -> WeatherService:

    factory = WEATHER_SERVICE_FACTORIES.get(provider)
    if not factory:
        raise ConfigurationError(f"Unsupported weather service provider '{provider}'.")
    return factory(config, http_client)
