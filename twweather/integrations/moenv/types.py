"""
Response types for the MOENV open data API, dataset aqx_p_432 (hourly air
quality index per monitoring station).
"""

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict

# Stations under maintenance may report null instead of an empty string
Text = Annotated[str, BeforeValidator(lambda value: "" if value is None else value)]


class StationReading(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    sitename: Text = ""
    county: Text = ""
    aqi: Text = ""
    siteid: str | None = None
    pollutant: str | None = None
    status: str | None = None
    publishtime: str | None = None


class AQIResponse(BaseModel):
    records: list[StationReading] = []
