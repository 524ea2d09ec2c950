# api_client.py - minimal HTTP client wrapper around requests
"""
Request helpers for a single API base URL.

    from api_client import initialize_api, get_data, post_data

    initialize_api("https://api.example.com")
    products = get_data("/products", {"category": "shoes"})
    created = post_data("/products", {"name": "Runner"}, handle_error=print)

Authenticated helpers read the bearer token from the token store on every
call and send it with a fixed 10s timeout. If ``handle_error`` is given it is
called with the transport exception, which is then re-raised anyway.
"""
from typing import Any, Callable, Optional

import requests
from requests.exceptions import RequestException

from api_errors import ConfigurationError, MissingTokenError
from utils.logger import get_logger, redact_headers
from utils.multipart import MultipartForm
from utils.settings import APISettings, token_file_from_env
from utils.token_store import FileTokenStore, read_token

logger = get_logger("easyapi")

AUTH_TIMEOUT = 10  # seconds
MULTIPART_CONTENT_TYPE = "multipart/form-data"

ErrorHandler = Callable[[Exception], Any]


class APIClient:
    def __init__(self, base_url, token_provider=None, session=None, timeout=None):
        self.base_url = base_url.rstrip('/')
        self.session = session if session is not None else requests.Session()
        if token_provider is None:
            token_provider = FileTokenStore(token_file_from_env())
        self.token_provider = token_provider
        self.timeout = timeout
        self.auth_timeout = AUTH_TIMEOUT

    def _url(self, endpoint):
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _auth_config(self, content_type=None):
        token = read_token(self.token_provider)
        if not token:
            raise MissingTokenError()
        headers = {}
        if content_type:
            headers["Content-Type"] = content_type
        headers["Authorization"] = f"Bearer {token}"
        return {"headers": headers, "timeout": self.auth_timeout}

    def _send(self, method, endpoint, handle_error=None, **kwargs):
        url = self._url(endpoint)
        logger.debug("%s %s headers=%s", method.upper(), url, redact_headers(kwargs.get("headers")))
        try:
            resp = getattr(self.session, method)(url, **kwargs)
            resp.raise_for_status()
            if not 200 <= resp.status_code < 300:
                raise requests.HTTPError(f"{resp.status_code} Unexpected status for url: {url}", response=resp)
        except RequestException as e:
            logger.warning("%s %s failed: %s", method.upper(), url, e)
            _notify(handle_error, e)
            raise
        return _unwrap(resp)

    def get_data(self, endpoint, params=None, handle_error: Optional[ErrorHandler] = None):
        """GET without authorization; ``params`` go out as the query string."""
        return self._send("get", endpoint, handle_error, params=params, timeout=self.timeout)

    def get_data_with_token(self, endpoint, handle_error: Optional[ErrorHandler] = None):
        config = self._auth_config(MULTIPART_CONTENT_TYPE)
        return self._send("get", endpoint, handle_error, **config)

    def post_data(self, endpoint, data, handle_error: Optional[ErrorHandler] = None):
        config = self._auth_config()
        return self._send("post", endpoint, handle_error, json=data, **config)

    def post_data_with_file(self, endpoint, form, handle_error: Optional[ErrorHandler] = None):
        """
        POST a multipart form.

        The body is encoded here so the Content-Type header (with its boundary)
        is set explicitly on the request.
        """
        config = self._auth_config()
        body, content_type = _as_form(form).encode()
        config["headers"] = {"Content-Type": content_type, **config["headers"]}
        return self._send("post", endpoint, handle_error, data=body, **config)

    def update_data(self, endpoint, body, handle_error: Optional[ErrorHandler] = None):
        config = self._auth_config()
        return self._send("put", endpoint, handle_error, json=body, **config)

    def update_data_with_file(self, endpoint, form, handle_error: Optional[ErrorHandler] = None):
        """
        PUT a multipart form.

        No Content-Type is set here: requests picks the encoding from the
        data/files it is given.
        """
        config = self._auth_config()
        return self._send("put", endpoint, handle_error, **_as_form(form).as_requests_kwargs(), **config)

    def delete_data(self, endpoint, handle_error: Optional[ErrorHandler] = None):
        config = self._auth_config()
        return self._send("delete", endpoint, handle_error, **config)


def _as_form(form):
    if isinstance(form, MultipartForm):
        return form
    if isinstance(form, dict):
        return MultipartForm(fields=form)
    raise TypeError(f"expected MultipartForm or dict, got {type(form).__name__}")


def _notify(handle_error, error):
    # the handler only observes; it cannot swallow or replace the error
    if handle_error is None:
        return
    try:
        handle_error(error)
    except Exception:
        logger.exception("handle_error raised while handling %r", error)


def _unwrap(resp):
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


# ---------------- DEFAULT CLIENT ----------------
_client: Optional[APIClient] = None


def initialize_api(base_url, token_provider=None, session=None, timeout=None) -> APIClient:
    """Create the client used by the module-level helpers (replaces any previous one)."""
    global _client
    _client = APIClient(base_url, token_provider=token_provider, session=session, timeout=timeout)
    logger.debug("API client initialized for %s", _client.base_url)
    return _client


def initialize_api_from_env(environ=None, session=None) -> APIClient:
    settings = APISettings.from_env(environ)
    return initialize_api(
        settings.base_url,
        token_provider=FileTokenStore(settings.token_file),
        session=session,
        timeout=settings.timeout,
    )


def get_client() -> APIClient:
    if _client is None:
        raise ConfigurationError("API client is not initialized; call initialize_api(base_url) first.")
    return _client


def get_data(endpoint, params=None, handle_error=None):
    return get_client().get_data(endpoint, params, handle_error)


def get_data_with_token(endpoint, handle_error=None):
    return get_client().get_data_with_token(endpoint, handle_error)


def post_data(endpoint, data, handle_error=None):
    return get_client().post_data(endpoint, data, handle_error)


def post_data_with_file(endpoint, form, handle_error=None):
    return get_client().post_data_with_file(endpoint, form, handle_error)


def update_data(endpoint, body, handle_error=None):
    return get_client().update_data(endpoint, body, handle_error)


def update_data_with_file(endpoint, form, handle_error=None):
    return get_client().update_data_with_file(endpoint, form, handle_error)


def delete_data(endpoint, handle_error=None):
    return get_client().delete_data(endpoint, handle_error)
