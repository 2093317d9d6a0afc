import asyncio

import structlog

from ..integrations.cwa.client import CWAClient
from ..integrations.cwa.types import ForecastRecords
from ..integrations.moenv.client import MOENVClient
from ..integrations.moenv.types import StationReading
from ..settings import Settings
from ..utils import timed
from .exceptions import ConfigurationError
from .merge import build_report
from .types import WeatherReport

logger = structlog.get_logger()

# Enough to cover every monitoring station in a single page
AQI_PAGE_SIZE = 1000


async def get_weather_report(settings: Settings) -> WeatherReport:
    """
    Build the weather report for the configured location.

    The forecast and the air quality readings are loaded concurrently. Errors
    from the forecast request are raised, while the air quality readings are
    best effort and only affect the reported AQI.
    """

    if not settings.cwa_api_key:
        raise ConfigurationError("Set CWA_API_KEY in the environment or .env file")

    air_quality = asyncio.create_task(load_air_quality(settings))
    try:
        records = await load_forecast(settings, api_key=settings.cwa_api_key)
    except BaseException:
        # Stop the AQI request, the report can't be built without a forecast
        air_quality.cancel()
        raise

    readings = await air_quality

    return build_report(
        records, readings=readings, preferred_station=settings.preferred_station
    )


async def load_forecast(settings: Settings, *, api_key: str) -> ForecastRecords:
    async with CWAClient(api_key=api_key, timeout=settings.http_timeout) as client:
        with timed("Loaded forecast", location=settings.location_name):
            return await client.get_forecast(location_name=settings.location_name)


async def load_air_quality(settings: Settings) -> list[StationReading] | None:
    """
    Load the latest AQI readings, or None if they're not available for any
    reason. The request is skipped entirely if no MOENV API key is set.
    """

    if not settings.moenv_api_key:
        return None

    try:
        async with MOENVClient(
            api_key=settings.moenv_api_key, timeout=settings.http_timeout
        ) as client:
            with timed("Loaded AQI readings"):
                return await client.get_aqi_readings(limit=AQI_PAGE_SIZE)
    except Exception as e:
        logger.warning("Unable to load AQI readings", error=str(e))
        return None
