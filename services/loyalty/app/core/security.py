import hmac

from fastapi import Depends
from fastapi.security import APIKeyHeader

from app.core.config import Settings, get_settings
from app.core.errors import UnauthorizedError

API_KEY_HEADER = "X-API-Key"

api_key_scheme = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


def require_api_key(
    api_key: str | None = Depends(api_key_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    """Validate the shared secret sent by API clients.

    Raises an HTTP 401 error when the header is missing or does not match the
    configured key. An unconfigured key rejects every request.
    """

    if api_key is None:
        raise UnauthorizedError("API Key is missing.")

    expected = settings.API_KEY
    if not api_key or not expected:
        raise UnauthorizedError("Invalid API Key.")
    if not hmac.compare_digest(api_key.encode(), expected.encode()):
        raise UnauthorizedError("Invalid API Key.")

    return api_key


__all__ = ["API_KEY_HEADER", "require_api_key"]
