from abc import ABC, abstractmethod

from .weather import WeatherReport


class WeatherService(ABC):

    @abstractmethod
    async def get_current_weather(self, city: str) -> WeatherReport:

        pass
