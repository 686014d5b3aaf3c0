from .versions_service import VersionsService

__all__ = [
    "VersionsService",
]
