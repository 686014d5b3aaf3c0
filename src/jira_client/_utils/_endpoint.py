class Endpoint(str):
    """A relative API path with exactly one leading slash.

    The rest of the path is kept as passed, trailing slash included.

    Examples:
        >>> Endpoint("version/10000")
        '/version/10000'
        >>> Endpoint("/version/10000/")
        '/version/10000/'
    """

    def __new__(cls, endpoint: str) -> "Endpoint":
        return super().__new__(cls, f"/{endpoint.lstrip('/')}")
