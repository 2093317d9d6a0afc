"""
Response types for the CWA open data API, dataset F-C0032-001 (36 hour
general weather forecast).
"""

from pydantic import BaseModel, ConfigDict

from ..common import to_camel


class CWAModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Parameter(CWAModel):
    parameter_name: str
    parameter_value: str | None = None
    parameter_unit: str | None = None


class TimeEntry(CWAModel):
    start_time: str
    end_time: str
    parameter: Parameter


class WeatherElement(CWAModel):
    element_name: str  # Wx, PoP, MinT, MaxT, CI, ...
    time: list[TimeEntry]


class Location(CWAModel):
    location_name: str
    weather_element: list[WeatherElement] = []


class ForecastRecords(CWAModel):
    dataset_description: str = ""
    location: list[Location] = []


class ForecastResponse(CWAModel):
    success: str | None = None
    records: ForecastRecords
