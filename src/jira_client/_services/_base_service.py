from logging import getLogger
from typing import Any, Dict, Union

from httpx import (
    URL,
    AsyncClient,
    Client,
    ConnectError,
    ConnectTimeout,
    Headers,
    HTTPStatusError,
    Response,
    TimeoutException,
)
from tenacity import (
    RetryCallState,
    retry,
    retry_base,
    stop_after_attempt,
    wait_exponential,
)

from .._config import Config
from .._utils import LOGGER_NAME, JiraUrl, RequestSpec, user_agent_value
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import HEADER_USER_AGENT
from ..models.exceptions import EnrichedException

IDEMPOTENT_METHODS = frozenset({"GET", "PUT", "DELETE"})
BODY_METHODS = frozenset({"POST", "PUT"})


def is_retryable_exception(exception: BaseException, method: str) -> bool:
    # the request never reached the server
    if isinstance(exception, (ConnectError, ConnectTimeout)):
        return True

    # past this point the server may have processed the request
    if method.upper() not in IDEMPOTENT_METHODS:
        return False
    if isinstance(exception, TimeoutException):
        return True
    if isinstance(exception, EnrichedException):
        return 500 <= exception.status_code < 600
    return False


class retry_if_retryable_request(retry_base):
    """Retry a failed ``request``/``request_async`` call when it is safe to replay."""

    def __call__(self, retry_state: RetryCallState) -> bool:
        outcome = retry_state.outcome
        if outcome is None or not outcome.failed:
            return False

        exception = outcome.exception()
        if exception is None:
            return False

        if "method" in retry_state.kwargs:
            method = retry_state.kwargs["method"]
        else:
            method = retry_state.args[1]
        return is_retryable_exception(exception, method)


class BaseService:
    MAX_ATTEMPTS = 3

    def __init__(self, config: Config) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config

        self._url = JiraUrl(self._config.base_url, self._config.api_version)

        client_kwargs = {
            **get_httpx_client_kwargs(),  # SSL, timeout, redirects
            "base_url": self._url.api_root,
            "headers": Headers(self.default_headers),
        }

        self._client = Client(**client_kwargs)
        self._client_async = AsyncClient(**client_kwargs)

        super().__init__()

    def build_url(self, path: str) -> str:
        return self._url.build_url(path)

    @retry(
        retry=retry_if_retryable_request(),
        stop=stop_after_attempt(MAX_ATTEMPTS),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    def request(
        self,
        method: str,
        url: Union[URL, str],
        **kwargs: Any,
    ) -> Response:
        self._logger.debug(f"Request: {method} {url}")

        response = self._client.request(method, url, **kwargs)

        try:
            response.raise_for_status()
        except HTTPStatusError as e:
            # include the http response in the error message
            response.close()
            raise EnrichedException(e) from e

        return response

    @retry(
        retry=retry_if_retryable_request(),
        stop=stop_after_attempt(MAX_ATTEMPTS),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def request_async(
        self,
        method: str,
        url: Union[URL, str],
        **kwargs: Any,
    ) -> Response:
        self._logger.debug(f"Request: {method} {url}")

        response = await self._client_async.request(method, url, **kwargs)

        try:
            response.raise_for_status()
        except HTTPStatusError as e:
            # include the http response in the error message
            await response.aclose()
            raise EnrichedException(e) from e

        return response

    def send(self, spec: RequestSpec) -> Response:
        return self.request(spec.method, url=spec.url, **self._request_kwargs(spec))

    async def send_async(self, spec: RequestSpec) -> Response:
        return await self.request_async(
            spec.method, url=spec.url, **self._request_kwargs(spec)
        )

    def _request_kwargs(self, spec: RequestSpec) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "params": spec.params,
            "follow_redirects": spec.follow_redirects,
        }
        # POST and PUT carry their body even when empty
        if spec.method in BODY_METHODS or spec.json:
            kwargs["json"] = spec.json
        return kwargs

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            HEADER_USER_AGENT: user_agent_value(),
            **self.auth_headers,
        }

    @property
    def auth_headers(self) -> dict[str, str]:
        header = f"Bearer {self._config.secret}"
        return {"Authorization": header}
