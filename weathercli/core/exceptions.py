from typing import Optional


class WeatherCliError(Exception):

    pass


class ConfigurationError(WeatherCliError):

    pass


class ValidationError(WeatherCliError):

    pass


class WeatherServiceError(WeatherCliError):

    pass


class NetworkError(WeatherServiceError):

    pass


class HttpError(WeatherServiceError):

    def __init__(
        self, status_code: int, city: str, provider_message: Optional[str] = None
    ) -> None:
        self.status_code = status_code
        self.city = city
        self.provider_message = provider_message
        if status_code == 404:
            text = f"City '{city}' not found (HTTP 404)"
        else:
            text = f"Weather provider returned HTTP {status_code} for city '{city}'"
        if provider_message:
            text += f": {provider_message}"
        super().__init__(text)


class DecodeError(WeatherServiceError):

    pass
