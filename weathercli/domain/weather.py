from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..core.exceptions import DecodeError
from ..utils.time import from_unix
from .value_objects import Units


def _section(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = payload.get(key)
    if not isinstance(value, Mapping):
        raise DecodeError(f"Response is missing the '{key}' block")
    return value


def _require_float(block: Mapping[str, Any], key: str, path: str) -> float:
    value = block.get(key)
    if value is None or isinstance(value, bool):
        raise DecodeError(f"Response is missing numeric field '{path}'")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise DecodeError(f"Field '{path}' is not a number: {value!r}")
    if not math.isfinite(number):
        raise DecodeError(f"Field '{path}' is not a finite number: {value!r}")
    return number


def _require_int(block: Mapping[str, Any], key: str, path: str) -> int:
    value = _require_float(block, key, path)
    try:
        return int(value)
    except (OverflowError, ValueError):
        raise DecodeError(f"Field '{path}' is not a finite number: {value!r}")


def _require_time(
    block: Mapping[str, Any], key: str, path: str, shift: Optional[int]
) -> datetime:
    timestamp = _require_int(block, key, path)
    try:
        return from_unix(timestamp, shift)
    except (OverflowError, OSError, ValueError):
        raise DecodeError(f"Field '{path}' is not a valid timestamp: {timestamp}")


def _optional_int(block: Mapping[str, Any], key: str, path: str) -> Optional[int]:
    if block.get(key) is None:
        return None
    return _require_int(block, key, path)


@dataclass(frozen=True)
class WeatherReport:
    city: str
    country: str
    temperature: float
    feels_like: float
    humidity: int
    wind_speed: float
    pressure: int
    sunrise: datetime
    sunset: datetime
    description: str
    condition_id: Optional[int] = None
    icon: Optional[str] = None
    units: Units = Units.METRIC

    @property
    def temperature_scales(self) -> tuple[float, float]:
        return self.units.to_celsius_fahrenheit(self.temperature)

    @property
    def feels_like_scales(self) -> tuple[float, float]:
        return self.units.to_celsius_fahrenheit(self.feels_like)

    @classmethod
    def from_openweathermap(
        cls, payload: Any, units: Units = Units.METRIC
    ) -> "WeatherReport":
        """Decode an OpenWeatherMap ``/weather`` payload.

        Raises :class:`DecodeError` when any displayed field is missing, so a
        report is either complete or not built at all.
        """

        if not isinstance(payload, Mapping):
            raise DecodeError("Response body is not a JSON object")

        main = _section(payload, "main")
        wind = _section(payload, "wind")
        sys_block = _section(payload, "sys")

        name = payload.get("name")
        if not isinstance(name, str) or not name.strip():
            raise DecodeError("Response is missing the city 'name'")

        conditions = payload.get("weather")
        if not isinstance(conditions, list) or not conditions:
            raise DecodeError("Response has no 'weather' conditions")
        condition = conditions[0]
        if not isinstance(condition, Mapping) or not isinstance(
            condition.get("description"), str
        ):
            raise DecodeError("Weather condition has no 'description'")

        shift = _optional_int(payload, "timezone", "timezone")
        country = sys_block.get("country")
        icon = condition.get("icon")

        return cls(
            city=name.strip(),
            country=country.strip() if isinstance(country, str) else "",
            temperature=_require_float(main, "temp", "main.temp"),
            feels_like=_require_float(main, "feels_like", "main.feels_like"),
            humidity=_require_int(main, "humidity", "main.humidity"),
            wind_speed=_require_float(wind, "speed", "wind.speed"),
            pressure=_require_int(main, "pressure", "main.pressure"),
            sunrise=_require_time(sys_block, "sunrise", "sys.sunrise", shift),
            sunset=_require_time(sys_block, "sunset", "sys.sunset", shift),
            description=condition["description"],
            condition_id=_optional_int(condition, "id", "weather[0].id"),
            icon=icon if isinstance(icon, str) else None,
            units=units,
        )
