# utils/settings.py - environment-driven config (override via env if you prefer)
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "http://127.0.0.1:8000"
DEFAULT_TOKEN_FILE = "~/.easyapi/token.json"


def token_file_from_env(environ=None) -> str:
    env = os.environ if environ is None else environ
    return env.get("EASYAPI_TOKEN_FILE", DEFAULT_TOKEN_FILE)


@dataclass
class APISettings:
    base_url: str = DEFAULT_BASE_URL
    token_file: str = DEFAULT_TOKEN_FILE
    timeout: Optional[float] = None  # seconds, plain (unauthenticated) reads only

    @classmethod
    def from_env(cls, environ=None) -> "APISettings":
        env = os.environ if environ is None else environ
        raw_timeout = (env.get("EASYAPI_TIMEOUT") or "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else None
        except ValueError:
            raise ValueError(f"EASYAPI_TIMEOUT must be a number of seconds, got {raw_timeout!r}") from None
        return cls(
            base_url=env.get("EASYAPI_BASE_URL", DEFAULT_BASE_URL),
            token_file=token_file_from_env(env),
            timeout=timeout,
        )
