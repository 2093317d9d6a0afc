from ..common.exceptions import IntegrationAPIError, IntegrationConnectionError


class MOENVAPIError(IntegrationAPIError):
    """MOENV-specific API error."""

    pass


class MOENVConnectionError(MOENVAPIError, IntegrationConnectionError):
    """The MOENV API could not be reached, or did not respond in time."""

    pass
