"""Error types raised while querying and exporting a GitHub project."""

from __future__ import annotations

from singer_sdk.exceptions import FatalAPIError


class ProjectExportError(Exception):
    """Base class for every failure that aborts a project query.

    Each error carries a short message meant for the person running the
    export and a longer one meant for the logs.
    """

    def __init__(self, user_message: str, diagnostic_message: str | None = None) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.diagnostic_message = diagnostic_message or user_message


class MissingInput(ProjectExportError):
    """The project URL or the access token was empty."""


class MalformedURL(ProjectExportError):
    """The project URL does not look like .../orgs/<org>/projects/<number>."""


class QueryFailed(ProjectExportError, FatalAPIError):
    """The GraphQL request failed at the HTTP or network level."""


class ProjectNotFound(ProjectExportError):
    """The API answered but the organization or project could not be resolved."""


class OptionLookupFailed(ProjectExportError):
    """A field value references a select option absent from the field settings."""
