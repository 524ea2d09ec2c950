# api_errors.py - exceptions raised by the request helpers
from requests.exceptions import RequestException

# Whatever the session raises (connection errors, timeouts, HTTPError from
# raise_for_status) reaches the caller unwrapped.
TransportError = RequestException


class EasyAPIError(Exception):
    pass


class ConfigurationError(EasyAPIError):
    """A request helper was called before initialize_api()."""


class MissingTokenError(EasyAPIError):
    def __init__(self, message: str = "Authorization token is missing."):
        super().__init__(message)
