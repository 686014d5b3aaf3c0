from typing import Any, Dict, List, Mapping, Optional, Union

from httpx import Response

from .._config import Config
from .._utils import HttpMethod, RequestSpec
from .._utils.constants import QUERY_EXPAND, QUERY_FIELDS
from ..models import VersionRequestOptions
from ._base_service import BaseService


class VersionsService(BaseService):
    """Service for the Jira project version resource (``/rest/api/2/version``).

    Versions are the releases a project tracks issues against through the
    ``fixVersions`` and ``versions`` fields. Every operation first builds a
    :class:`RequestSpec` and then hands it to the transport unchanged.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)
        self._base_path = "/version"

    def create(self, version: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Create a version.

        Args:
            version (Dict[str, Any]): The version payload, sent as-is. It must at
                least name the version and its project (``name`` and ``projectId``
                or ``project``).

        Returns:
            Optional[Dict[str, Any]]: The created version, as returned by Jira.

        Examples:
            ```python
            from jira_client import JiraClient

            client = JiraClient()

            client.versions.create({"name": "v1.0", "projectId": 10000})
            ```
        """
        spec = self._create_spec(version)
        return self._parse(self.send(spec))

    async def create_async(self, version: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Asynchronously create a version.

        Args:
            version (Dict[str, Any]): The version payload, sent as-is.

        Returns:
            Optional[Dict[str, Any]]: The created version, as returned by Jira.
        """
        spec = self._create_spec(version)
        return self._parse(await self.send_async(spec))

    def retrieve(
        self,
        version_id: Union[str, int],
        *,
        fields: Optional[List[str]] = None,
        expand: Optional[List[str]] = None,
    ) -> Optional[Dict[str, Any]]:
        """Retrieve a version by its id.

        Args:
            version_id (Union[str, int]): The id of the version.
            fields (Optional[List[str]]): Restrict the response to these fields.
            expand (Optional[List[str]]): Relations to expand, e.g. ``operations``.

        Returns:
            Optional[Dict[str, Any]]: The version.
        """
        spec = self._build_spec(
            VersionRequestOptions(version_id=version_id, fields=fields, expand=expand),
            "",
            "GET",
        )
        return self._parse(self.send(spec))

    async def retrieve_async(
        self,
        version_id: Union[str, int],
        *,
        fields: Optional[List[str]] = None,
        expand: Optional[List[str]] = None,
    ) -> Optional[Dict[str, Any]]:
        """Asynchronously retrieve a version by its id.

        Args:
            version_id (Union[str, int]): The id of the version.
            fields (Optional[List[str]]): Restrict the response to these fields.
            expand (Optional[List[str]]): Relations to expand.

        Returns:
            Optional[Dict[str, Any]]: The version.
        """
        spec = self._build_spec(
            VersionRequestOptions(version_id=version_id, fields=fields, expand=expand),
            "",
            "GET",
        )
        return self._parse(await self.send_async(spec))

    def update(
        self,
        version_id: Union[str, int],
        version: Dict[str, Any],
        *,
        expand: Optional[List[str]] = None,
    ) -> Optional[Dict[str, Any]]:
        """Update a version.

        Only the properties present in ``version`` are changed.

        Args:
            version_id (Union[str, int]): The id of the version.
            version (Dict[str, Any]): The properties to change, sent as-is.
            expand (Optional[List[str]]): Relations to expand in the response.

        Returns:
            Optional[Dict[str, Any]]: The updated version.
        """
        spec = self._build_spec(
            VersionRequestOptions(version_id=version_id, expand=expand),
            "",
            "PUT",
            body=version,
        )
        return self._parse(self.send(spec))

    async def update_async(
        self,
        version_id: Union[str, int],
        version: Dict[str, Any],
        *,
        expand: Optional[List[str]] = None,
    ) -> Optional[Dict[str, Any]]:
        """Asynchronously update a version."""
        spec = self._build_spec(
            VersionRequestOptions(version_id=version_id, expand=expand),
            "",
            "PUT",
            body=version,
        )
        return self._parse(await self.send_async(spec))

    def delete(
        self,
        version_id: Union[str, int],
        *,
        move_fix_issues_to: Optional[Union[str, int]] = None,
        move_affected_issues_to: Optional[Union[str, int]] = None,
    ) -> None:
        """Delete a version.

        Args:
            version_id (Union[str, int]): The id of the version to delete.
            move_fix_issues_to (Optional[Union[str, int]]): Version that issues
                fixed in the deleted version are moved to.
            move_affected_issues_to (Optional[Union[str, int]]): Version that
                issues affecting the deleted version are moved to.
        """
        spec = self._delete_spec(
            version_id,
            move_fix_issues_to=move_fix_issues_to,
            move_affected_issues_to=move_affected_issues_to,
        )
        self.send(spec)

    async def delete_async(
        self,
        version_id: Union[str, int],
        *,
        move_fix_issues_to: Optional[Union[str, int]] = None,
        move_affected_issues_to: Optional[Union[str, int]] = None,
    ) -> None:
        """Asynchronously delete a version."""
        spec = self._delete_spec(
            version_id,
            move_fix_issues_to=move_fix_issues_to,
            move_affected_issues_to=move_affected_issues_to,
        )
        await self.send_async(spec)

    def move(
        self,
        version_id: Union[str, int],
        *,
        after: Optional[str] = None,
        position: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Reorder a version within its project.

        Exactly one of ``after`` or ``position`` must be given.

        Args:
            version_id (Union[str, int]): The id of the version to move.
            after (Optional[str]): URL of the version to place this one after.
            position (Optional[str]): One of ``Earlier``, ``Later``, ``First``
                or ``Last``.

        Returns:
            Optional[Dict[str, Any]]: The moved version.

        Raises:
            ValueError: If both or neither of ``after`` and ``position`` are given.
        """
        spec = self._move_spec(version_id, after=after, position=position)
        return self._parse(self.send(spec))

    async def move_async(
        self,
        version_id: Union[str, int],
        *,
        after: Optional[str] = None,
        position: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Asynchronously reorder a version within its project."""
        spec = self._move_spec(version_id, after=after, position=position)
        return self._parse(await self.send_async(spec))

    def related_issue_counts(
        self, version_id: Union[str, int]
    ) -> Optional[Dict[str, Any]]:
        """Count the issues fixed in and affected by a version."""
        spec = self._build_spec(
            VersionRequestOptions(version_id=version_id), "/relatedIssueCounts", "GET"
        )
        return self._parse(self.send(spec))

    async def related_issue_counts_async(
        self, version_id: Union[str, int]
    ) -> Optional[Dict[str, Any]]:
        spec = self._build_spec(
            VersionRequestOptions(version_id=version_id), "/relatedIssueCounts", "GET"
        )
        return self._parse(await self.send_async(spec))

    def unresolved_issue_count(
        self, version_id: Union[str, int]
    ) -> Optional[Dict[str, Any]]:
        """Count the unresolved issues fixed in a version."""
        spec = self._build_spec(
            VersionRequestOptions(version_id=version_id),
            "/unresolvedIssueCount",
            "GET",
        )
        return self._parse(self.send(spec))

    async def unresolved_issue_count_async(
        self, version_id: Union[str, int]
    ) -> Optional[Dict[str, Any]]:
        spec = self._build_spec(
            VersionRequestOptions(version_id=version_id),
            "/unresolvedIssueCount",
            "GET",
        )
        return self._parse(await self.send_async(spec))

    @staticmethod
    def _parse(response: Response) -> Optional[Dict[str, Any]]:
        if not response.content:
            return None
        return response.json()

    def _create_spec(self, version: Dict[str, Any]) -> RequestSpec:
        return RequestSpec(
            method="POST",
            url=self.build_url(self._base_path),
            json=version,
        )

    def _delete_spec(
        self,
        version_id: Union[str, int],
        *,
        move_fix_issues_to: Optional[Union[str, int]],
        move_affected_issues_to: Optional[Union[str, int]],
    ) -> RequestSpec:
        params: Dict[str, str] = {}
        if move_fix_issues_to is not None:
            params["moveFixIssuesTo"] = str(move_fix_issues_to)
        if move_affected_issues_to is not None:
            params["moveAffectedIssuesTo"] = str(move_affected_issues_to)

        return self._build_spec(
            VersionRequestOptions(version_id=version_id),
            "",
            "DELETE",
            params=params,
        )

    def _move_spec(
        self,
        version_id: Union[str, int],
        *,
        after: Optional[str],
        position: Optional[str],
    ) -> RequestSpec:
        if (after is None) == (position is None):
            raise ValueError("Exactly one of after or position must be provided")

        body = {"after": after} if after is not None else {"position": position}
        return self._build_spec(
            VersionRequestOptions(version_id=version_id), "/move", "POST", body=body
        )

    def _build_spec(
        self,
        options: VersionRequestOptions,
        path: str,
        method: HttpMethod,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Mapping[str, str]] = None,
    ) -> RequestSpec:
        """Build the request for an endpoint under ``/version/{id}``.

        ``options.fields`` and ``options.expand`` are comma-joined into the
        query string on top of ``params``; an absent or empty list adds nothing.
        The caller's ``params`` mapping is copied, not modified.
        """
        query: Dict[str, str] = dict(params or {})

        if options.fields:
            query[QUERY_FIELDS] = ",".join(options.fields)
        if options.expand:
            query[QUERY_EXPAND] = ",".join(options.expand)

        return RequestSpec(
            method=method,
            url=self.build_url(f"{self._base_path}/{options.version_id}{path}"),
            params=query,
            json=body if body is not None else {},
        )
