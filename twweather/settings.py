"""
Application settings.

Settings are read from the environment once at startup and stored on the
application. Request handlers get them through the `CurrentSettings`
dependency instead of reading the environment themselves.
"""

import os
from collections.abc import Mapping
from typing import Annotated

from fastapi import Depends, Request
from pydantic import BaseModel, ConfigDict

DEFAULT_LOCATION = "高雄市"
DEFAULT_PREFERRED_STATION = "前金"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: int = 3000
    cwa_api_key: str | None = None
    moenv_api_key: str | None = None
    location_name: str = DEFAULT_LOCATION
    preferred_station: str = DEFAULT_PREFERRED_STATION
    http_timeout: float = 10.0
    environment: str = "development"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from environment variables. Blank values are treated
        as if the variable was not set at all.
        """

        if environ is None:
            environ = os.environ

        names = {
            "host": "HOST",
            "port": "PORT",
            "cwa_api_key": "CWA_API_KEY",
            "moenv_api_key": "MOENV_API_KEY",
            "location_name": "WEATHER_LOCATION",
            "preferred_station": "AQI_PREFERRED_STATION",
            "http_timeout": "HTTP_TIMEOUT",
            "environment": "APP_ENV",
            "log_level": "LOG_LEVEL",
        }

        values: dict[str, str] = {}
        for field, name in names.items():
            if value := environ.get(name, "").strip():
                values[field] = value

        return cls.model_validate(values)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


CurrentSettings = Annotated[Settings, Depends(get_settings)]
