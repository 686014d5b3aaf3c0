from ._endpoint import Endpoint
from ._logs import LOGGER_NAME, setup_logging
from ._request_spec import HttpMethod, RequestSpec
from ._url import JiraUrl
from ._user_agent import user_agent_value

__all__ = [
    "Endpoint",
    "HttpMethod",
    "JiraUrl",
    "LOGGER_NAME",
    "RequestSpec",
    "setup_logging",
    "user_agent_value",
]
