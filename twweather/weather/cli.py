import click

from ..integrations.common import IntegrationAPIError
from ..settings import Settings
from .exceptions import WeatherError
from .services import get_weather_report


@click.group(name="weather", help="Weather forecasts")
def cli() -> None:
    pass


@cli.command(help="Print the forecast report for the configured location as JSON")
@click.pass_obj
async def forecast(settings: Settings) -> None:
    try:
        report = await get_weather_report(settings)
    except (WeatherError, IntegrationAPIError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(report.model_dump_json(by_alias=True, indent=2))
