"""Custom exceptions for ondas.

All exceptions include an HTTP status_code attribute for easy
integration with web frameworks like FastAPI.
"""


class OndasError(Exception):
    """Base exception for ondas.

    Attributes:
        status_code: HTTP status code for API error responses.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MirrorError(OndasError):
    """A radio directory mirror could not serve a search.

    Attributes:
        mirror: Base URL of the mirror that failed.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)

    def __init__(self, message: str, mirror: str) -> None:
        self.mirror = mirror
        super().__init__(message)


class MirrorRequestError(MirrorError):
    """Request to a mirror failed.

    Raised on timeouts, connection errors and non-2xx responses.
    """


class MirrorResponseError(MirrorError):
    """Mirror answered with a body that is not a JSON station array."""


class ConfigurationError(OndasError):
    """Search configuration is unusable.

    Raised when a finder is created without any mirror to query.
    """

    status_code: int = 500  # Internal Server Error
