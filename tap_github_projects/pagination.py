"""Cursor driven retrieval of every item of a project."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tap_github_projects.models import ResultSet, parse_items_response
from tap_github_projects.normalize import normalize_items

if TYPE_CHECKING:
    from tap_github_projects.client import GitHubProjectsClient
    from tap_github_projects.session import QuerySession

logger = logging.getLogger(__name__)


def fetch_all_items(client: GitHubProjectsClient, session: QuerySession) -> ResultSet:
    """Request pages until the API reports no next page.

    Pages are requested one after the other, each with the previous page's
    ``endCursor``. Any failure aborts the whole retrieval and nothing
    accumulated so far is returned.

    Raises:
        QueryFailed: If a request fails.
        ProjectNotFound: If a page comes back without the organization.
        OptionLookupFailed: If a select value cannot be resolved.
    """
    result = ResultSet()
    cursor: str | None = None
    page_number = 0
    while True:
        page_number += 1
        body = client.request_items_page(session.project, cursor)
        page = parse_items_response(body, session.project)
        logger.info(
            "Querying %s in %s, page %d (%d items)",
            page.project_title,
            session.project.org,
            page_number,
            len(page.items),
        )
        result.items.extend(
            normalize_items(
                page.items,
                session.custom_fields,
                strict=session.strict_option_lookup,
            )
        )
        if not page.page_info.has_next_page:
            break
        cursor = page.page_info.end_cursor

    logger.info("Fetched %d items from %s", len(result.items), session.project)
    return result
