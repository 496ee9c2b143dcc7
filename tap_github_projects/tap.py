"""GitHub projects tap class."""

from __future__ import annotations

import logging
import os

from singer_sdk import Stream, Tap
from singer_sdk import typing as th  # JSON schema typing helpers
from singer_sdk.helpers._classproperty import classproperty

from tap_github_projects.client import (
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT,
    GitHubProjectsClient,
)
from tap_github_projects.discovery import discover_custom_fields
from tap_github_projects.session import QuerySession
from tap_github_projects.streams import ProjectItemsStream
from tap_github_projects.utils.validation import parse_project_url, require_inputs


class TapGitHubProjects(Tap):
    """Singer tap for the items of a GitHub project board."""

    name = "tap-github-projects"
    package_name = "tap-github-projects"

    @classproperty
    def logger(cls) -> logging.Logger:  # noqa: N805
        """Get logger.

        Returns:
            Logger with local LOGLEVEL. LOGLEVEL from env takes priority.
        """

        LOGLEVEL = os.environ.get("LOGLEVEL", "INFO").upper()  # noqa: N806
        assert LOGLEVEL in logging._levelToName.values(), (
            f"Invalid LOGLEVEL configuration: {LOGLEVEL}"
        )
        logger = logging.getLogger(cls.name)
        logger.setLevel(LOGLEVEL)
        return logger

    config_jsonschema = th.PropertiesList(
        th.Property(
            "auth_token",
            th.StringType,
            required=True,
            secret=True,
            description="GitHub token to authenticate with.",
        ),
        th.Property(
            "project_url",
            th.StringType,
            required=True,
            description=(
                "URL of the project board, "
                "e.g. https://github.com/orgs/octo-org/projects/5"
            ),
        ),
        th.Property(
            "api_url_base",
            th.StringType,
            default=DEFAULT_API_BASE_URL,
            description="Base URL of the GitHub API, for GitHub Enterprise instances.",
        ),
        th.Property(
            "user_agent",
            th.StringType,
            description="User agent to use for API requests.",
        ),
        th.Property(
            "request_timeout",
            th.IntegerType,
            default=DEFAULT_REQUEST_TIMEOUT,
            description="Seconds to wait for each GraphQL response before failing.",
        ),
        th.Property(
            "strict_option_lookup",
            th.BooleanType,
            default=True,
            description=(
                "Fail when an item references a select option missing from its "
                "field settings. When false the cell is left empty."
            ),
        ),
    ).to_dict()

    def discover_streams(self) -> list[Stream]:
        if not self.config:
            return []

        project_url, token = require_inputs(
            self.config.get("project_url"), self.config.get("auth_token")
        )
        project = parse_project_url(project_url)
        client = GitHubProjectsClient(
            token,
            api_url_base=self.config.get("api_url_base"),
            timeout=self.config.get("request_timeout"),
            user_agent=self.config.get("user_agent"),
            logger=self.logger,
        )
        session = QuerySession(
            project=project,
            custom_fields=tuple(discover_custom_fields(client, project)),
            strict_option_lookup=self.config.get("strict_option_lookup", True),
        )
        return [
            ProjectItemsStream(tap=self, project_client=client, query_session=session)
        ]


# CLI Execution:

cli = TapGitHubProjects.cli
