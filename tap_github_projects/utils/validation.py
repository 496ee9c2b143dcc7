"""Validation of user supplied inputs for tap-github-projects."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from tap_github_projects.errors import MalformedURL, MissingInput
from tap_github_projects.models import ProjectRef

ORG_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9]([a-zA-Z0-9-])*[a-zA-Z0-9]$|^[a-zA-Z0-9]$")
PROJECT_NUMBER_PATTERN = re.compile(r"[0-9]+")


def require_inputs(project_url: str | None, token: str | None) -> tuple[str, str]:
    """Strip both inputs and make sure neither is empty.

    Args:
        project_url: URL of the project board.
        token: GitHub access token.

    Returns:
        The stripped URL and token.

    Raises:
        MissingInput: If either value is empty or whitespace.
    """
    project_url = (project_url or "").strip()
    token = (token or "").strip()
    if not project_url:
        raise MissingInput("No URL given :P", "Project URL input was empty.")
    if not token:
        raise MissingInput("No access token given :P", "Access token input was empty.")
    return project_url, token


def parse_project_url(project_url: str) -> ProjectRef:
    """Extract the organization and project number from a project URL.

    The URL must be absolute and its path must read
    ``/orgs/<org>/projects/<number>``; anything after the number
    (``/views/1`` for example) is ignored.

    Args:
        project_url: URL as copied from the browser.

    Returns:
        The referenced project.

    Raises:
        MalformedURL: If the URL or its path segments cannot be parsed.
    """
    parsed = urlparse(project_url)
    if not parsed.scheme or not parsed.netloc:
        raise MalformedURL("Bad URL :(", f"Not an absolute URL: {project_url!r}")

    segments = [segment for segment in parsed.path.split("/") if segment]
    if len(segments) < 4 or segments[0] != "orgs" or segments[2] != "projects":
        raise MalformedURL(
            "Bad URL :(",
            f"Expected a path like /orgs/<org>/projects/<number>, got {parsed.path!r}",
        )

    org, number = segments[1], segments[3]
    if not ORG_NAME_PATTERN.match(org):
        raise MalformedURL(
            "Bad URL :(",
            f"Invalid organization name '{org}'. Must contain only alphanumeric "
            "characters and hyphens, cannot start or end with hyphen.",
        )
    if not PROJECT_NUMBER_PATTERN.fullmatch(number) or int(number) == 0:
        raise MalformedURL(
            "Bad URL :(", f"Project number must be a positive integer, got {number!r}"
        )
    return ProjectRef(org=org, project_number=int(number))
