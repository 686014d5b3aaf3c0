from ._endpoint import Endpoint


class JiraUrl:
    def __init__(self, base_url: str, api_version: str) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_version = api_version

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_root(self) -> str:
        return f"{self._base_url}/rest/api/{self._api_version}"

    def build_url(self, path: str) -> str:
        """Resolve a path relative to the REST API root to an absolute URL."""
        return f"{self.api_root}{Endpoint(path)}"
