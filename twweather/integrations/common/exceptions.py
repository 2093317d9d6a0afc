"""Common exception classes for integrations."""


class IntegrationAPIError(Exception):
    """Base exception for all integration API errors."""

    pass


class IntegrationConnectionError(IntegrationAPIError):
    """The API could not be reached, or did not respond in time."""

    pass
