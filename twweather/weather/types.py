from pydantic import BaseModel, ConfigDict

from ..integrations.common import to_camel

# Reported when no air quality reading is available for the location
AIR_QUALITY_UNAVAILABLE = "N/A"


class APIModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ForecastInterval(APIModel):
    """
    A single forecast period. All values are formatted for display, e.g.
    "30%" for the chance of rain and "24°C" for temperatures.
    """

    start_time: str
    end_time: str
    weather: str = ""
    rain: str = ""
    min_temp: str = ""
    max_temp: str = ""
    comfort: str = ""
    wind_speed: str = ""
    humidity: str = ""
    air_quality: str = AIR_QUALITY_UNAVAILABLE


class WeatherReport(APIModel):
    city: str
    update_time: str
    forecasts: list[ForecastInterval]  # Chronological


class WeatherResponse(APIModel):
    success: bool = True
    data: WeatherReport
