from .errors import BaseUrlMissingError, SecretMissingError
from .exceptions import EnrichedException
from .versions import VersionRequestOptions

__all__ = [
    "BaseUrlMissingError",
    "EnrichedException",
    "SecretMissingError",
    "VersionRequestOptions",
]
