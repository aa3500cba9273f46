import logging

from ..core.exceptions import ValidationError, WeatherServiceError
from ..domain.services import WeatherService
from ..domain.weather import WeatherReport

logger = logging.getLogger(__name__)


class WeatherApplicationService:

    def __init__(self, weather_service: WeatherService):
        self._weather_service = weather_service

    async def get_weather_by_city(self, city: str) -> WeatherReport:

        try:
            if not city or not city.strip():
                raise ValidationError("City name cannot be empty")
            city = city.strip()

            report = await self._weather_service.get_current_weather(city)
            logger.info(
                "Weather fetched for city %s (%s, %s)",
                city,
                report.city,
                report.country or "?",
            )
            return report
        except (ValidationError, WeatherServiceError):
            raise
        except Exception as e:
            logger.exception(f"Error getting weather for city {city}")
            raise WeatherServiceError(f"Failed to get weather for city: {e}")
