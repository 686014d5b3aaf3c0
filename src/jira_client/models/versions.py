from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class VersionRequestOptions(BaseModel):
    """Arguments shared by the operations addressing a single version.

    ``fields`` and ``expand`` default to ``None`` (absent). Absent and empty
    lists both leave the corresponding query parameter out of the request.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        frozen=True,
    )

    version_id: Union[str, int] = Field(alias="versionId")
    fields: Optional[List[str]] = None
    expand: Optional[List[str]] = None
