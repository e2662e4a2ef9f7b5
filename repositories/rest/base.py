import logging
from typing import Any, NoReturn

import requests

from repositories.errors import BackendError

from .util import TokenProvider

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def error_message(resp: requests.Response) -> str | None:
    try:
        body = resp.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None

    for key in ('message', 'error'):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value

    return None


class RestBaseRepository:
    def __init__(self, base_url: str, token_provider: TokenProvider | None, timeout: float | None = None) -> None:
        self.base_url = base_url
        self.token_provider = token_provider
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT

    def auth_headers(self) -> dict[str, str]:
        if self.token_provider is None:
            return {}

        return {'Authorization': f'Bearer {self.token_provider.get_token()}'}

    def authenticated_get(self, url: str, params: dict[str, str] | None = None) -> requests.Response:
        return requests.get(url, params=params, headers=self.auth_headers(), timeout=self.timeout)

    def authenticated_post(
        self,
        url: str,
        body: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> requests.Response:
        if files is not None:
            return requests.post(url, files=files, headers=self.auth_headers(), timeout=self.timeout)

        return requests.post(url, json=body, headers=self.auth_headers(), timeout=self.timeout)

    def authenticated_put(self, url: str, body: dict[str, Any]) -> requests.Response:
        return requests.put(url, json=body, headers=self.auth_headers(), timeout=self.timeout)

    def authenticated_delete(self, url: str) -> requests.Response:
        return requests.delete(url, headers=self.auth_headers(), timeout=self.timeout)

    def unexpected_error(self, resp: requests.Response) -> NoReturn:
        message = error_message(resp)
        logger.warning('Unexpected response from %s: %s %s', resp.url, resp.status_code, message)
        raise BackendError(resp.status_code, message, response=resp)
