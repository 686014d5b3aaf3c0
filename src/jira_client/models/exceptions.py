from httpx import HTTPStatusError


class EnrichedException(Exception):
    """An HTTP error that carries the failed request and the response body.

    Raised by the transport whenever the Jira REST API answers with an error
    status. The original ``httpx.HTTPStatusError`` is kept as ``__cause__``.
    """

    def __init__(self, error: HTTPStatusError) -> None:
        self.status_code = error.response.status_code
        self.url = str(error.request.url)
        self.http_method = error.request.method
        self.response_content = (
            error.response.text if error.response.content else "No content"
        )

        super().__init__(
            f"\nRequest URL: {self.url}"
            f"\nHTTP Method: {self.http_method}"
            f"\nStatus Code: {self.status_code}"
            f"\nResponse Content: {self.response_content}"
        )
