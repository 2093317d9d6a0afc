"""
Combine a CWA forecast and MOENV station readings into a weather report.
"""

from collections.abc import Iterable, Sequence

from ..integrations.cwa.types import ForecastRecords, WeatherElement
from ..integrations.moenv.types import StationReading
from .exceptions import ForecastFormatError, LocationNotFound
from .types import AIR_QUALITY_UNAVAILABLE, ForecastInterval, WeatherReport

# Element name -> (interval field, display suffix)
ELEMENT_FIELDS: dict[str, tuple[str, str]] = {
    "Wx": ("weather", ""),
    "PoP": ("rain", "%"),
    "MinT": ("min_temp", "°C"),
    "MaxT": ("max_temp", "°C"),
    "CI": ("comfort", ""),
    "WS": ("wind_speed", ""),
    "RH": ("humidity", "%"),
}


def select_station(
    readings: Iterable[StationReading], *, county: str, preferred_station: str
) -> StationReading | None:
    """
    Pick the reading for the preferred station in the county, falling back to
    the first reading for the county.
    """

    candidates = [reading for reading in readings if reading.county == county]
    for reading in candidates:
        if reading.sitename == preferred_station:
            return reading

    return candidates[0] if candidates else None


def resolve_air_quality(
    readings: Iterable[StationReading] | None,
    *,
    county: str,
    preferred_station: str,
) -> str:
    """
    The AQI to report for the county. The station value is passed through
    as-is, and "N/A" is used when there's no usable reading.
    """

    if readings is None:
        return AIR_QUALITY_UNAVAILABLE

    station = select_station(
        readings, county=county, preferred_station=preferred_station
    )
    if station and station.aqi:
        return station.aqi

    return AIR_QUALITY_UNAVAILABLE


def validate_alignment(elements: Sequence[WeatherElement]) -> None:
    """
    Ensure all elements cover the same time periods, in the same order.
    """

    if not elements:
        raise ForecastFormatError("Forecast has no weather elements")

    reference, *others = elements
    for element in others:
        if len(element.time) != len(reference.time):
            raise ForecastFormatError(
                f"Element {element.element_name} has {len(element.time)} time "
                f"periods, expected {len(reference.time)}"
            )

        for index, (entry, expected) in enumerate(zip(element.time, reference.time)):
            if (entry.start_time, entry.end_time) != (
                expected.start_time,
                expected.end_time,
            ):
                raise ForecastFormatError(
                    f"Element {element.element_name} is not aligned with "
                    f"{reference.element_name} at period {index}"
                )


def build_forecasts(
    elements: Sequence[WeatherElement], *, air_quality: str
) -> list[ForecastInterval]:
    validate_alignment(elements)

    forecasts: list[ForecastInterval] = []
    for entries in zip(*(element.time for element in elements)):
        values: dict[str, str] = {}
        for element, entry in zip(elements, entries):
            # Unknown elements are ignored
            if field := ELEMENT_FIELDS.get(element.element_name):
                name, suffix = field
                values[name] = f"{entry.parameter.parameter_name}{suffix}"

        forecasts.append(
            ForecastInterval(
                start_time=entries[0].start_time,
                end_time=entries[0].end_time,
                air_quality=air_quality,
                **values,
            )
        )

    return forecasts


def build_report(
    records: ForecastRecords,
    *,
    readings: Iterable[StationReading] | None,
    preferred_station: str,
) -> WeatherReport:
    """
    Build the report for the first location in the forecast records.

    The same AQI value is used for every forecast interval, as the AQI
    dataset only holds the latest hourly reading per station.
    """

    if not records.location:
        raise LocationNotFound("No location in forecast response")

    location = records.location[0]
    air_quality = resolve_air_quality(
        readings,
        county=location.location_name,
        preferred_station=preferred_station,
    )

    return WeatherReport(
        city=location.location_name,
        update_time=records.dataset_description,
        forecasts=build_forecasts(location.weather_element, air_quality=air_quality),
    )
