class WeatherError(Exception):
    """Base exception for errors while building a weather report."""

    pass


class ConfigurationError(WeatherError):
    """A setting required to build the report is missing."""

    pass


class LocationNotFound(WeatherError):
    """The forecast provider has no data for the configured location."""

    pass


class ForecastFormatError(WeatherError):
    """The forecast elements can't be combined into forecast intervals."""

    pass
