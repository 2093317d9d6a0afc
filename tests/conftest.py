from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Iterator
from typing import Any

import httpx
import pytest
import respx
from fastapi import FastAPI

from twweather.integrations.cwa.client import API_URL as CWA_API_URL
from twweather.integrations.cwa.client import FORECAST_DATASET
from twweather.integrations.moenv.client import API_URL as MOENV_API_URL
from twweather.integrations.moenv.client import AQI_DATASET
from twweather.server import create_app
from twweather.settings import Settings

CWA_FORECAST_URL = f"{CWA_API_URL}/v1/rest/datastore/{FORECAST_DATASET}"
MOENV_AQI_URL = f"{MOENV_API_URL}/{AQI_DATASET}"

PERIODS = [
    ("2026-10-16 18:00:00", "2026-10-17 06:00:00"),
    ("2026-10-17 06:00:00", "2026-10-17 18:00:00"),
    ("2026-10-17 18:00:00", "2026-10-18 06:00:00"),
]

ForecastPayloadFactory = Callable[..., dict[str, Any]]


############
# Settings #
############


@pytest.fixture
def cwa_api_key() -> str | None:
    return "cwa-key"


@pytest.fixture
def moenv_api_key() -> str | None:
    return "moenv-key"


@pytest.fixture
def location_name() -> str:
    return "高雄市"


@pytest.fixture
def preferred_station() -> str:
    return "前金"


@pytest.fixture
def settings(
    cwa_api_key: str | None,
    moenv_api_key: str | None,
    location_name: str,
    preferred_station: str,
) -> Settings:
    return Settings(
        cwa_api_key=cwa_api_key,
        moenv_api_key=moenv_api_key,
        location_name=location_name,
        preferred_station=preferred_station,
        http_timeout=1.0,
    )


########
# APIs #
########


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


#####################
# Upstream payloads #
#####################


@pytest.fixture
def upstream() -> Iterator[respx.MockRouter]:
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def make_forecast_payload(location_name: str) -> ForecastPayloadFactory:
    def factory(
        elements: dict[str, list[str]],
        *,
        periods: list[tuple[str, str]] = PERIODS,
        name: str = location_name,
    ) -> dict[str, Any]:
        return {
            "success": "true",
            "records": {
                "datasetDescription": "三十六小時天氣預報",
                "location": [
                    {
                        "locationName": name,
                        "weatherElement": [
                            {
                                "elementName": element_name,
                                "time": [
                                    {
                                        "startTime": start,
                                        "endTime": end,
                                        "parameter": {"parameterName": value},
                                    }
                                    for (start, end), value in zip(periods, values)
                                ],
                            }
                            for element_name, values in elements.items()
                        ],
                    }
                ],
            },
        }

    return factory


@pytest.fixture
def forecast_payload(make_forecast_payload: ForecastPayloadFactory) -> dict[str, Any]:
    return make_forecast_payload(
        {
            "Wx": ["多雲", "晴時多雲", "多雲時陰"],
            "PoP": ["10", "20", "30"],
            "MinT": ["24", "25", "24"],
            "CI": ["舒適", "舒適至悶熱", "舒適"],
            "MaxT": ["28", "31", "29"],
        }
    )


@pytest.fixture
def aqi_payload() -> dict[str, Any]:
    return {
        "records": [
            {"sitename": "板橋", "county": "新北市", "aqi": "38"},
            {"sitename": "左營", "county": "高雄市", "aqi": "61"},
            {"sitename": "前金", "county": "高雄市", "aqi": "57"},
        ]
    }


@pytest.fixture
def forecast_route(
    upstream: respx.MockRouter, forecast_payload: dict[str, Any]
) -> respx.Route:
    return upstream.get(CWA_FORECAST_URL).mock(
        return_value=httpx.Response(200, json=forecast_payload)
    )


@pytest.fixture
def aqi_route(upstream: respx.MockRouter, aqi_payload: dict[str, Any]) -> respx.Route:
    return upstream.get(MOENV_AQI_URL).mock(
        return_value=httpx.Response(200, json=aqi_payload)
    )
