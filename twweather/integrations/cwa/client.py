import httpx
import pydantic
import structlog

from ..common import BaseAPIClient
from .exceptions import CWAAPIError, CWAConnectionError, CWAResponseError
from .types import ForecastRecords, ForecastResponse

logger = structlog.get_logger()

API_URL = "https://opendata.cwa.gov.tw/api"

# General weather forecast, today and tomorrow in 12 hour intervals
FORECAST_DATASET = "F-C0032-001"


class CWAClient(BaseAPIClient):
    """
    A client for the Central Weather Administration open data API.
    """

    base_url = API_URL
    connection_error = CWAConnectionError

    async def get_forecast(self, *, location_name: str) -> ForecastRecords:
        """
        Get the 36 hour forecast for a county or city, e.g. 高雄市.

        The returned records may contain no locations if the provider has no
        data for the given name.
        """

        response = await self._get(
            f"/v1/rest/datastore/{FORECAST_DATASET}",
            params={"Authorization": self.api_key, "locationName": location_name},
        )
        self._raise_for_status(response)

        try:
            return self._decode_json(response, ForecastResponse).records
        except pydantic.ValidationError as exc:
            raise CWAResponseError(
                f"Unexpected forecast response from CWA: {exc}"
            ) from exc

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return

        details = self._error_details(response)
        message = "Unable to fetch data"
        if isinstance(details, dict) and details.get("message"):
            message = str(details["message"])

        logger.error(
            "CWA request failed", status_code=response.status_code, message=message
        )
        raise CWAAPIError(
            status_code=response.status_code, message=message, details=details
        )
