from functools import cached_property
from logging import getLogger
from os import environ as env
from typing import Optional

from dotenv import load_dotenv

from ._config import Config
from ._services import VersionsService
from ._utils import LOGGER_NAME, setup_logging
from ._utils.constants import (
    DEFAULT_API_VERSION,
    ENV_ACCESS_TOKEN,
    ENV_API_VERSION,
    ENV_BASE_URL,
)
from .models.errors import BaseUrlMissingError, SecretMissingError

load_dotenv()


class JiraClient:
    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        secret: Optional[str] = None,
        api_version: Optional[str] = None,
        debug: bool = False,
    ) -> None:
        base_url_value = base_url or env.get(ENV_BASE_URL)
        secret_value = secret or env.get(ENV_ACCESS_TOKEN)
        api_version_value = (
            api_version or env.get(ENV_API_VERSION) or DEFAULT_API_VERSION
        )

        if not base_url_value:
            raise BaseUrlMissingError()
        if not secret_value:
            raise SecretMissingError()

        self._config = Config(
            base_url=base_url_value,
            secret=secret_value,
            api_version=api_version_value,
        )

        setup_logging(debug)
        log = getLogger(LOGGER_NAME)

        log.debug("CONFIG:")
        log.debug(f"{self._config.model_dump(exclude={'secret'})}\n")

    @cached_property
    def versions(self) -> VersionsService:
        return VersionsService(self._config)
