"""
Custom notifier exceptions.
"""


class NotifierError(Exception):
    """Base exception for build status notifier errors."""
    pass


class ConfigurationError(NotifierError):
    """Job SCM configuration cannot be mapped to a Bitbucket repository."""
    pass


class ResolutionError(NotifierError):
    """Built commit could not be found for a resolved repository."""
    pass


class DeliveryError(NotifierError):
    """Sending the build status failed."""
    pass


class APIError(DeliveryError):
    """External API call failed."""
    pass


class BitbucketAPIError(APIError):
    """Bitbucket API call returned an error response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
