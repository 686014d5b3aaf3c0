"""Python client for the Jira REST API version resource.

Usage:
    ```python
    from jira_client import JiraClient

    client = JiraClient(base_url="https://example.atlassian.net", secret="...")
    version = client.versions.create({"name": "v1.0", "projectId": 10000})
    ```
"""

from ._config import Config
from ._jira_client import JiraClient
from ._services import VersionsService
from ._utils import RequestSpec
from .models import (
    BaseUrlMissingError,
    EnrichedException,
    SecretMissingError,
    VersionRequestOptions,
)

__all__ = [
    "BaseUrlMissingError",
    "Config",
    "EnrichedException",
    "JiraClient",
    "RequestSpec",
    "SecretMissingError",
    "VersionRequestOptions",
    "VersionsService",
]
