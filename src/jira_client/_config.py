from pydantic import BaseModel, HttpUrl, field_validator

from ._utils.constants import DEFAULT_API_VERSION


class Config(BaseModel):
    base_url: str
    secret: str
    api_version: str = DEFAULT_API_VERSION

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: str) -> str:
        # https://{site}.atlassian.net or the root of a self-hosted server
        url_value = HttpUrl(url=value)
        assert url_value.host, "Invalid URL"
        return str(value).rstrip("/")
