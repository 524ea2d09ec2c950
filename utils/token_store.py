# utils/token_store.py - where authenticated calls read their bearer token from
"""
Token providers.

Anything with a ``get_token()`` method returning the current token (or None)
can back an APIClient. The client asks on every authenticated call, so a
token written by a login flow is picked up without rebuilding the client.
"""
import json
import os
from pathlib import Path
from typing import Optional, Protocol, Union

from utils.logger import get_logger

logger = get_logger("easyapi")

TOKEN_KEY = "token"


class TokenProvider(Protocol):
    def get_token(self) -> Optional[str]:
        ...


class FileTokenStore:
    """
    Small persistent key-value store backed by a JSON file.

    The file holds an object such as {"token": "..."}; other keys are kept
    as-is when the token is written or cleared.
    """

    def __init__(self, path: Union[str, Path], key: str = TOKEN_KEY):
        self.path = Path(path).expanduser()
        self.key = key

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            logger.warning("Could not read token store %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get_token(self) -> Optional[str]:
        value = self._load().get(self.key)
        if not isinstance(value, str) or not value:
            return None
        return value

    def set_token(self, token: str):
        data = self._load()
        data[self.key] = token
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as fh:
            json.dump(data, fh)

    def clear_token(self):
        data = self._load()
        if data.pop(self.key, None) is None:
            return
        with self.path.open("w", encoding="utf-8") as fh:
            json.dump(data, fh)


class EnvTokenStore:
    def __init__(self, var: str = "EASYAPI_TOKEN"):
        self.var = var

    def get_token(self) -> Optional[str]:
        return os.environ.get(self.var) or None


class StaticTokenProvider:
    def __init__(self, token: Optional[str]):
        self.token = token

    def get_token(self) -> Optional[str]:
        return self.token or None


def read_token(provider) -> Optional[str]:
    """Ask a provider (object with get_token, or a plain callable) for the token."""
    if provider is None:
        return None
    if hasattr(provider, "get_token"):
        return provider.get_token()
    return provider()
