"""Discovery of the custom fields configured on a project board."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tap_github_projects.models import parse_fields_response
from tap_github_projects.normalize import FIXED_COLUMNS

if TYPE_CHECKING:
    from tap_github_projects.client import GitHubProjectsClient
    from tap_github_projects.models import FieldSchema, ProjectRef

logger = logging.getLogger(__name__)

# Fields already carried by the item content, or not pulled by the items query.
FIXED_FIELDS = frozenset(
    {
        "Title",
        "Number",
        "State",
        "Assignees",
        "Labels",
        "Linked pull requests",
        "Reviewers",
        "Repository",
        "Milestone",
        "Tracks",
        "Iteration",
    }
)


def custom_field_names(fields: list[FieldSchema]) -> list[str]:
    """Names of the fields outside FIXED_FIELDS, in schema order.

    Fields named like one of the fixed output columns are skipped, since
    they would overwrite that column in every row.
    """
    names = []
    for f in fields:
        if f.name in FIXED_FIELDS:
            continue
        if f.name in FIXED_COLUMNS:
            logger.warning(
                "Skipping field '%s', it has the name of a fixed column", f.name
            )
            continue
        names.append(f.name)
    return names


def discover_custom_fields(client: GitHubProjectsClient, ref: ProjectRef) -> list[str]:
    """Fetch the field schema of ``ref`` and return its custom field names.

    The returned order is the CSV column order.

    Raises:
        QueryFailed: If the request fails.
        ProjectNotFound: If the organization or project is not in the response.
    """
    fields = parse_fields_response(client.request_fields(ref), ref)
    names = custom_field_names(fields)
    logger.info("Discovered %d custom fields on %s: %s", len(names), ref, names)
    return names
