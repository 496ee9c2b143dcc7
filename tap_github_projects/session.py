"""Entry points: run a project query and export its result."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from tap_github_projects.client import GitHubProjectsClient
from tap_github_projects.csv_encoder import encode_csv, to_data_uri
from tap_github_projects.discovery import discover_custom_fields
from tap_github_projects.errors import ProjectExportError
from tap_github_projects.pagination import fetch_all_items
from tap_github_projects.utils.validation import parse_project_url, require_inputs

if TYPE_CHECKING:
    from tap_github_projects.models import ProjectRef, ResultSet
    from tap_github_projects.state import LastProjectStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuerySession:
    """Everything one query needs, passed explicitly to each stage."""

    project: ProjectRef
    custom_fields: tuple[str, ...] = ()
    strict_option_lookup: bool = True


@dataclass
class QueryResult:
    session: QuerySession
    result_set: ResultSet
    custom_fields: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return self.result_set.to_dict()


def start_query(
    project_url: str,
    token: str,
    *,
    client: GitHubProjectsClient | None = None,
    store: LastProjectStore | None = None,
    api_url_base: str | None = None,
    timeout: float | None = None,
    strict_option_lookup: bool = True,
) -> QueryResult:
    """Query every item of the project at ``project_url``.

    Inputs are validated before any request is made. On success the URL is
    remembered in ``store`` (if given) and the full result returned; any
    failure raises a :class:`ProjectExportError` and returns nothing.
    """
    try:
        project_url, token = require_inputs(project_url, token)
        project = parse_project_url(project_url)
        if store is not None:
            store.save(project_url)

        client = client or GitHubProjectsClient(
            token, api_url_base=api_url_base, timeout=timeout
        )
        custom_fields = discover_custom_fields(client, project)
        session = QuerySession(
            project=project,
            custom_fields=tuple(custom_fields),
            strict_option_lookup=strict_option_lookup,
        )
        result_set = fetch_all_items(client, session)
    except ProjectExportError as exc:
        logger.error(exc.diagnostic_message)
        raise
    return QueryResult(session=session, result_set=result_set, custom_fields=custom_fields)


def export_json(result: QueryResult) -> str:
    """Pretty-printed JSON document of the result set."""
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


def export_csv(result: QueryResult, style: str = "strip", data_uri: bool = True) -> str:
    """CSV document of the result set, as a data URI unless ``data_uri`` is off."""
    csv_text = encode_csv(result.result_set.items, result.custom_fields, style=style)
    return to_data_uri(csv_text) if data_uri else csv_text
