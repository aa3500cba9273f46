from __future__ import annotations

from rich.markup import escape
from rich.text import Text

from weathercli.domain.weather import WeatherReport
from weathercli.presentation.conditions import condition_emoji
from weathercli.utils.time import format_clock


def format_report(report: WeatherReport) -> str:
    """Render a report as ``rich`` console markup with a fixed field order."""

    emoji = condition_emoji(report.condition_id, report.description)
    place = f"[blue]{escape(report.city)}[/blue]"
    if report.country:
        place += f", [blue]{escape(report.country)}[/blue]"

    lines = [
        "[green]🌍[/green] Weather Report [green]🌍[/green]",
        f"{emoji} {place}",
        "",
        "[yellow]📊[/yellow] Weather Conditions:",
        _field("Status", f"[yellow]{escape(report.description)}[/yellow]"),
        _field("Temperature", _fmt_scales(report.temperature_scales)),
        _field("Feels like", _fmt_scales(report.feels_like_scales)),
        "",
        "[cyan]🌬️[/cyan] Additional Details:",
        _field("Humidity", f"{report.humidity}%"),
        _field("Wind speed", f"{report.wind_speed:.1f} {report.units.wind_label}"),
        _field("Pressure", f"{report.pressure} hPa"),
        "",
        "[magenta]🌅[/magenta] Celestial Events:",
        _field("Sunrise", format_clock(report.sunrise)),
        _field("Sunset", format_clock(report.sunset)),
    ]
    return "\n".join(lines)


def render_plain(report: WeatherReport) -> str:
    """Same text as :func:`format_report` with every style removed."""

    return Text.from_markup(format_report(report), emoji=False).plain


def _field(label: str, value: str) -> str:
    return f"   [green]{label}[/green]: {value}"


def _fmt_scales(scales: tuple[float, float]) -> str:
    celsius, fahrenheit = scales
    return f"{celsius:.1f}°C / {fahrenheit:.1f}°F"
