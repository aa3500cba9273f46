from weathercli.domain.value_objects import Units
from weathercli.domain.weather import WeatherReport
from weathercli.presentation import formatter

EXPECTED_KYIV = "\n".join(
    [
        "🌍 Weather Report 🌍",
        "☁️ Kyiv, UA",
        "",
        "📊 Weather Conditions:",
        "   Status: broken clouds",
        "   Temperature: 12.4°C / 54.3°F",
        "   Feels like: 11.4°C / 52.5°F",
        "",
        "🌬️ Additional Details:",
        "   Humidity: 71%",
        "   Wind speed: 3.6 m/s",
        "   Pressure: 1018 hPa",
        "",
        "🌅 Celestial Events:",
        "   Sunrise: 07:14",
        "   Sunset: 18:01",
    ]
)


def test_render_plain_full_layout(payload):
    report = WeatherReport.from_openweathermap(payload)

    assert formatter.render_plain(report) == EXPECTED_KYIV


def test_format_report_uses_color_markup(payload):
    report = WeatherReport.from_openweathermap(payload)

    result = formatter.format_report(report)

    assert "[green]🌍[/green] Weather Report [green]🌍[/green]" in result
    assert "[blue]Kyiv[/blue], [blue]UA[/blue]" in result
    assert "   [green]Status[/green]: [yellow]broken clouds[/yellow]" in result
    assert "[magenta]🌅[/magenta] Celestial Events:" in result


def test_rendering_is_deterministic(payload):
    first = WeatherReport.from_openweathermap(payload)
    second = WeatherReport.from_openweathermap(payload)

    assert formatter.format_report(first) == formatter.format_report(second)
    assert formatter.render_plain(first).encode() == formatter.render_plain(
        second
    ).encode()


def test_every_field_has_its_display_position(payload):
    report = WeatherReport.from_openweathermap(payload)

    lines = formatter.render_plain(report).splitlines()

    labels = [line.split(":")[0].strip() for line in lines if line.startswith("   ")]
    assert labels == [
        "Status",
        "Temperature",
        "Feels like",
        "Humidity",
        "Wind speed",
        "Pressure",
        "Sunrise",
        "Sunset",
    ]


def test_country_omitted_when_unknown(payload):
    del payload["sys"]["country"]
    report = WeatherReport.from_openweathermap(payload)

    assert "☁️ Kyiv\n" in formatter.render_plain(report)


def test_imperial_report_shows_both_scales_and_mph(payload):
    payload["main"]["temp"] = 50.0
    payload["main"]["feels_like"] = 41.0
    payload["wind"]["speed"] = 8.05
    report = WeatherReport.from_openweathermap(payload, units=Units.IMPERIAL)

    result = formatter.render_plain(report)

    assert "Temperature: 10.0°C / 50.0°F" in result
    assert "Feels like: 5.0°C / 41.0°F" in result
    assert "Wind speed: 8.1 mph" in result


def test_provider_text_is_escaped(payload):
    payload["name"] = "[bold]Kyiv"
    payload["weather"][0]["description"] = "clear [red]sky"
    report = WeatherReport.from_openweathermap(payload)

    result = formatter.render_plain(report)

    assert "[bold]Kyiv" in result
    assert "Status: clear [red]sky" in result


def test_unknown_condition_uses_fallback_glyph(payload):
    payload["weather"][0] = {"id": 999, "description": "mystery"}
    report = WeatherReport.from_openweathermap(payload)

    assert formatter.render_plain(report).splitlines()[1] == "🌈 Kyiv, UA"
