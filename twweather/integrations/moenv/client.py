import pydantic

from ..common import BaseAPIClient
from .exceptions import MOENVAPIError, MOENVConnectionError
from .types import AQIResponse, StationReading

API_URL = "https://data.moenv.gov.tw/api/v2"

# Air quality index, updated hourly
AQI_DATASET = "aqx_p_432"


class MOENVClient(BaseAPIClient):
    """
    A client for the Ministry of Environment open data API.
    """

    base_url = API_URL
    connection_error = MOENVConnectionError

    async def get_aqi_readings(
        self, *, limit: int = 1000, sort: str = "ImportDate desc"
    ) -> list[StationReading]:
        """
        Get the latest AQI reading for every monitoring station, newest first.
        """

        response = await self._get(
            f"/{AQI_DATASET}",
            params={
                "api_key": self.api_key,
                "limit": str(limit),
                "sort": sort,
                "format": "JSON",
            },
        )

        if not response.is_success:
            raise MOENVAPIError(
                f"AQI request failed: {response.status_code} - "
                f"{self._error_details(response)}"
            )

        try:
            return self._decode_json(response, AQIResponse).records
        except pydantic.ValidationError as exc:
            raise MOENVAPIError(f"Unexpected AQI response from MOENV: {exc}") from exc
