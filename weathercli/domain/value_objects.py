from __future__ import annotations

from enum import Enum
from typing import Tuple


class Units(str, Enum):
    """Unit systems accepted by the provider's ``units`` parameter."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def wind_label(self) -> str:
        return "m/s" if self is Units.METRIC else "mph"

    def to_celsius_fahrenheit(self, value: float) -> Tuple[float, float]:
        if self is Units.METRIC:
            return value, value * 9.0 / 5.0 + 32.0
        return (value - 32.0) * 5.0 / 9.0, value
