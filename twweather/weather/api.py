from typing import Any

import structlog
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from ..integrations.cwa.exceptions import CWAAPIError, CWAResponseError
from ..responses import error_response
from ..settings import CurrentSettings
from .exceptions import ConfigurationError, ForecastFormatError, LocationNotFound
from .services import get_weather_report
from .types import WeatherResponse

logger = structlog.get_logger()

router = APIRouter(prefix="/api/weather", tags=["weather"])

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"description": "No forecast for the location"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Unable to build report"},
}


@router.get("/kaohsiung", response_model=WeatherResponse, responses=ERROR_RESPONSES)
async def kaohsiung_weather(
    settings: CurrentSettings,
) -> WeatherResponse | JSONResponse:
    """
    Get the 36 hour forecast for the configured location, with the latest air
    quality index for its preferred monitoring station.
    """

    try:
        report = await get_weather_report(settings)

    except ConfigurationError as e:
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            error="Server configuration error",
            message=str(e),
        )

    except LocationNotFound:
        return error_response(
            status.HTTP_404_NOT_FOUND,
            error="No data",
            message="Unable to retrieve weather data",
        )

    except CWAAPIError as e:
        return error_response(
            e.status_code, error="API error", message=e.message, details=e.details
        )

    except (CWAResponseError, ForecastFormatError) as e:
        logger.error("Invalid forecast data", error=str(e))
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, error="Server error", message=str(e)
        )

    except Exception:
        logger.exception("Unable to fetch weather data")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            error="Server error",
            message="Unable to fetch weather data, please try again later",
        )

    return WeatherResponse(data=report)
