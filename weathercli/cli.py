"""Command line entrypoint: ``weathercli [CITY]``."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from weathercli import __version__
from weathercli.application.weather_service import WeatherApplicationService
from weathercli.core.config import CliConfig, get_config, log_level_from_env
from weathercli.core.exceptions import WeatherCliError
from weathercli.domain.value_objects import Units
from weathercli.domain.weather import WeatherReport
from weathercli.infrastructure.external_services import create_weather_service
from weathercli.observability.logging import configure_logging
from weathercli.presentation.formatter import format_report

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1

app = typer.Typer(add_completion=False, help="Show current weather for a city.")
console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def build_http_client() -> httpx.AsyncClient:

    return httpx.AsyncClient()


async def fetch_report(config: CliConfig, city: str) -> WeatherReport:

    async with build_http_client() as client:
        service = create_weather_service(
            config.weather_service_provider, config, http_client=client
        )
        return await WeatherApplicationService(service).get_weather_by_city(city)


def _resolve_config(units: Optional[Units], lang: Optional[str]) -> CliConfig:

    config = get_config()
    if units is not None:
        config = replace(config, units=units)
    if lang:
        config = replace(config, lang=lang)
    return config


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"weathercli {__version__}")
        raise typer.Exit()


@app.command()
def weather(
    city: Optional[str] = typer.Argument(
        None, help="City name. Defaults to Kyiv.", show_default=False
    ),
    units: Optional[Units] = typer.Option(
        None,
        "--units",
        "-u",
        case_sensitive=False,
        help="Unit system requested from the provider (default: metric).",
    ),
    lang: Optional[str] = typer.Option(
        None, "--lang", "-l", help="Language of the condition description."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log diagnostics to stderr."
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Fetch current weather for CITY and print a colorized report."""

    try:
        configure_logging(logging.DEBUG if verbose else log_level_from_env())
        config = _resolve_config(units, lang)
        target = city if city is not None else config.default_city
        logger.debug("Requesting weather for %s in %s units", target, config.units.value)
        report = asyncio.run(fetch_report(config, target))
    except WeatherCliError as exc:
        logger.debug("Weather request failed", exc_info=True)
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_FAILURE)

    console.print(format_report(report))


def main() -> None:

    app()


if __name__ == "__main__":
    main()
