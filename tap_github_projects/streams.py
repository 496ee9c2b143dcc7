"""Stream classes for tap-github-projects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from singer_sdk import Stream

from tap_github_projects.pagination import fetch_all_items
from tap_github_projects.schema_objects import project_item_schema

if TYPE_CHECKING:
    from collections.abc import Iterable

    from singer_sdk import Tap
    from singer_sdk.helpers.types import Context

    from tap_github_projects.client import GitHubProjectsClient
    from tap_github_projects.session import QuerySession


class ProjectItemsStream(Stream):
    """Normalized items of one GitHub project board.

    The schema has one property per custom field, so it is only known once
    the project's fields have been discovered.
    """

    name = "project_items"
    primary_keys: ClassVar[list[str]] = []
    replication_key = None

    def __init__(
        self,
        tap: Tap,
        project_client: GitHubProjectsClient,
        query_session: QuerySession,
    ) -> None:
        self.project_client = project_client
        self.query_session = query_session
        super().__init__(
            tap=tap,
            name=self.name,
            schema=project_item_schema(query_session.custom_fields),
        )

    def get_records(self, context: Context | None) -> Iterable[dict[str, Any]]:
        """Fetch every page before emitting, so a failed page emits nothing."""
        result = fetch_all_items(self.project_client, self.query_session)
        yield from result.items
